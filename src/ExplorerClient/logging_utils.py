# ============================================================================
# ExplorerClient - Logging Utilities
#
# Purpose: Package logger access and opt-in logging setup for host processes
# Inputs: Log level / format, or the LoggingConfig section of ClientConfig
# Outputs: Logger instances under the "ExplorerClient" namespace
# Dependencies: logging (stdlib)
# Usage: logger = get_logger(__name__)
#
# Changelog:
#   2026-10-02: Initial logging setup
#   2026-10-19: Package logger gets a NullHandler; setup_logging_from_config()
# ============================================================================

import logging
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from ExplorerClient.config import LoggingConfig

PACKAGE_LOGGER = "ExplorerClient"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(threadName)s - %(message)s"

# Delivery failures are logged from worker threads; without a handler on the
# host side they must not fall through to logging.lastResort on stderr.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_configured_level: Optional[int] = None


def _to_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(level: Union[str, int] = "INFO", format_string: Optional[str] = None) -> None:
    """
    Attach a stream handler to the root logger for applications that have none.

    Only the first call installs a handler; later calls just adjust the
    ExplorerClient logger level. The tracker never calls this itself.

    Args:
        level: Level name (DEBUG, INFO, ...) or numeric level
        format_string: Optional custom format string
    """
    global _configured_level

    numeric = _to_level(level)
    if _configured_level is None:
        logging.basicConfig(
            level=numeric,
            format=format_string or DEFAULT_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric)
    _configured_level = numeric


def setup_logging_from_config(config: "LoggingConfig") -> None:
    """Apply the ``logging`` section of a ClientConfig."""
    setup_logging(config.level, config.format)


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, always nested under the package logger.

    Args:
        name: Module name (typically __name__)
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
