"""Configuration: a frozen Config, optionally resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import find_dotenv, load_dotenv

from results.errors import ConfigurationError

logger = logging.getLogger(__name__)

STRICT_STRINGIFY_ENV = "RESULTS_STRICT_STRINGIFY"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})

_current: Config | None = None


@dataclass(frozen=True)
class Config:
    """Immutable process-wide settings.

    Example:
        set_config(Config(strict_stringify=True))
        # unwrap() on an Err holding a circular structure now raises the
        # serialization error instead of falling back to repr().
    """

    #: Propagate serialization failures from ``stringify`` instead of
    #: falling back to ``repr()``.
    strict_stringify: bool = False

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from environment variables and a ``.env`` file.

        The ``.env`` file is searched from the working directory upwards;
        variables already present in the environment win over it.
        """
        load_dotenv(find_dotenv(usecwd=True), override=False)
        config = cls(
            strict_stringify=_parse_flag(
                STRICT_STRINGIFY_ENV, os.environ.get(STRICT_STRINGIFY_ENV)
            ),
        )
        logger.debug("Resolved config from environment: %s", config)
        return config


_DEFAULT = Config()


def _parse_flag(name: str, raw: str | None) -> bool:
    if raw is None:
        return False
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {name}: {raw!r}",
        hint="Use one of 1/true/yes/on or 0/false/no/off.",
    )


def get_config() -> Config:
    """Return the installed Config, or the defaults when none is installed.

    The environment is never consulted here; applications opt in with
    ``set_config(Config.from_env())``.
    """
    if _current is None:
        return _DEFAULT
    return _current


def set_config(config: Config | None) -> Config | None:
    """Replace the active Config and return the previous one.

    Passing ``None`` restores the defaults.
    """
    global _current
    previous = _current
    _current = config
    return previous
