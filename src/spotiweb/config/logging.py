"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging

from .env import ConfigurationError, optional_env_var

LOG_LEVEL_ENV_VAR = "SPOTIWEB_LOG_LEVEL"

# Loggers that echo every request URL at INFO.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def resolve_log_level(default: int = logging.INFO) -> int:
    name = optional_env_var(LOG_LEVEL_ENV_VAR)
    if name is None:
        return default
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV_VAR}: {name!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger with a terse CLI format.

    ``level`` falls back to ``SPOTIWEB_LOG_LEVEL`` and then INFO. Transport loggers
    stay at WARNING unless DEBUG is requested. Pass ``force=True`` to reconfigure
    during tests.
    """

    effective = level if level is not None else resolve_log_level()
    logging.basicConfig(
        level=effective,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    transport_level = logging.DEBUG if effective <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
