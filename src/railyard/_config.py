"""Library configuration: Config and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from railyard._logging import configure_logging

__all__ = [
    "Config",
    "get_config",
    "init",
]

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Configuration for railyard.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render log events as JSON rather than console output.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: Config | None = None


def _env_log_level() -> str | None:
    """Read RAILYARD_LOG_LEVEL, ignoring unknown values."""
    raw = os.environ.get("RAILYARD_LOG_LEVEL", "").strip().upper()
    if not raw:
        return None
    if raw not in _LEVELS:
        logging.warning("Unknown RAILYARD_LOG_LEVEL value '%s', logging disabled", raw)
        return None
    return raw


def _env_json_logs() -> bool:
    """Read RAILYARD_LOG_JSON; anything but 0/false/no means JSON."""
    raw = os.environ.get("RAILYARD_LOG_JSON", "").strip().lower()
    return raw not in ("0", "false", "no")


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> Config:
    """Initialize railyard with the specified configuration.

    Unspecified values come from the environment (``RAILYARD_LOG_LEVEL``,
    ``RAILYARD_LOG_JSON``).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON logs (True) or console logs (False).

    Returns:
        The Config that was set.

    Example:
        ```python
        import railyard

        railyard.init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = Config(
        log_level=log_level.upper() if log_level is not None else _env_log_level(),
        json_logs=json_logs if json_logs is not None else _env_json_logs(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> Config:
    """Get the current configuration.

    Falls back to a Config read from the environment when init() has not
    been called; logging is not configured in that case.
    """
    if _config is None:
        return Config(log_level=_env_log_level(), json_logs=_env_json_logs())
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
