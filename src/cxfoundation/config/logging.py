"""Logging setup for the cxfoundation command line."""

from __future__ import annotations

import logging

from .env import read_env_vars
from .errors import InvalidConfigurationError

LOG_LEVEL_VAR = "CXFOUNDATION_LOG_LEVEL"


def get_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``CXFOUNDATION_LOG_LEVEL`` (e.g. ``DEBUG``), or ``default``."""

    raw = read_env_vars((LOG_LEVEL_VAR,)).get(LOG_LEVEL_VAR)
    if raw is None:
        return default
    level = logging.getLevelNamesMapping().get(raw.upper())
    if level is None:
        raise InvalidConfigurationError(f"{LOG_LEVEL_VAR} is not a logging level: {raw!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once.

    Without an explicit ``level`` the environment decides, falling back to INFO. The
    domain modules only log at DEBUG, so the default keeps library use quiet.
    """

    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
