"""Exception hierarchy for results."""

from __future__ import annotations

from typing import Any


class ResultsError(RuntimeError):
    """Base exception for all results errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(ResultsError):
    """An accessor was called on the variant that does not support it.

    Raised by ``expect``, ``expect_err`` and ``unwrap``. The payload of the
    Result the accessor was called on is kept on ``value`` so callers can
    inspect it without parsing the message.
    """

    def __init__(
        self, message: str, *, value: Any = None, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.value = value


class ConfigurationError(ResultsError):
    """Configuration validation or resolution failed."""
