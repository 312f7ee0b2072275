"""Result type for explicit error handling.

A ``Result`` is either ``Ok`` (holding a success value) or ``Err`` (holding a
failure value). Both variants expose the same accessors, so callers can
either branch on the ``ok``/``err`` discriminants or ask for the value and
let misuse fail fast with :class:`~results.errors.UnwrapError`.

``wrap`` and ``wrap_async`` bridge code that raises into code that returns
Results: the first exception raised is captured verbatim as the ``Err``
payload.

There is no ``Result`` namespace object: the ``results`` package itself
plays that role (``results.Ok``, ``results.Err``, ``results.wrap``,
``results.wrap_async``), and ``Result`` is the type alias of the union.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
import dataclasses
import logging
from typing import Literal, Never

from typing_extensions import TypeIs

from results._utils import stringify
from results.errors import UnwrapError

logger = logging.getLogger(__name__)

UNWRAP_ERR_PREFIX = "unwrap() called on Error: "


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """The success branch of a Result."""

    value: T

    @property
    def ok(self) -> Literal[True]:
        return True

    @property
    def err(self) -> Literal[False]:
        return False

    def expect(self, message: str) -> T:
        """Return the value."""
        del message
        return self.value

    def expect_err(self, message: str) -> Never:
        """Raise ``UnwrapError(message)``; an Ok holds no error."""
        raise UnwrapError(message, value=self.value)

    def unwrap(self) -> T:
        """Return the value."""
        return self.value

    def unwrap_or[D](self, default: D) -> T:
        """Return the value, ignoring ``default``."""
        del default
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """The failure branch of a Result."""

    value: E

    @property
    def ok(self) -> Literal[False]:
        return False

    @property
    def err(self) -> Literal[True]:
        return True

    def expect(self, message: str) -> Never:
        """Raise ``UnwrapError(message)``; an Err holds no success value."""
        raise UnwrapError(message, value=self.value)

    def expect_err(self, message: str) -> E:
        """Return the error value."""
        del message
        return self.value

    def unwrap(self) -> Never:
        """Raise ``UnwrapError`` describing the held error.

        The message is ``"unwrap() called on Error: "`` followed by
        ``stringify(value)``.
        """
        raise UnwrapError(
            UNWRAP_ERR_PREFIX + stringify(self.value), value=self.value
        )

    def unwrap_or[D](self, default: D) -> D:
        """Return ``default`` unchanged."""
        return default


type Result[T, E] = Ok[T] | Err[E]
"""Either ``Ok[T]`` or ``Err[E]``.

Narrow with ``isinstance``, ``match`` or :func:`is_ok` / :func:`is_err`.
"""


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Return True if ``result`` is an Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    """Return True if ``result`` is an Err."""
    return isinstance(result, Err)


def wrap[T](operation: Callable[[], T]) -> Result[T, Exception]:
    """Call ``operation`` and capture its outcome as a Result.

    A normal return becomes ``Ok``; any ``Exception`` becomes ``Err`` holding
    the exception object itself. Only the first level is captured: a
    returned Result is not flattened.
    """
    try:
        return Ok(operation())
    except Exception as exc:
        logger.debug("wrap() captured %s", type(exc).__name__)
        return Err(exc)


async def wrap_async[T](
    operation: Callable[[], Awaitable[T]],
) -> Result[T, Exception]:
    """Await ``operation()`` and capture its outcome as a Result.

    Exceptions raised while creating the awaitable and exceptions raised by
    it are both returned as ``Err``; the coroutine itself does not raise.
    Cancellation is not an ``Exception`` and propagates.
    """
    try:
        return Ok(await operation())
    except Exception as exc:
        logger.debug("wrap_async() captured %s", type(exc).__name__)
        return Err(exc)
