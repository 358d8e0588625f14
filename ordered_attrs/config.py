# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   Only ambient settings live here (logging, CLI defaults).
#   Nothing in here changes the encoded format or the
#   serializer a field uses by default.
#
# CLASSES:
# --------
# - LoggingConfig (dataclass)
#     level: str         (default "WARNING")
#     format: str        (default "%(asctime)s %(levelname)s %(name)s: %(message)s")
#
# - CliConfig (dataclass)
#     serializer: str    (default "input_order")
#
# - AppConfig (dataclass)
#     logging: LoggingConfig
#     cli: CliConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same instance on repeated calls.
#
# - reset_config() -> None
#     Drop the cached instance (used by tests).
#
# - configure_logging(level=None) -> None
#     Attach a stream handler to the package logger.
#
# USAGE:
# ------
#   from ordered_attrs.config import get_config
#   config = get_config()
#   print(config.logging.level)
#
# ==============================================

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class CliConfig:
    """Defaults for the command line tool."""
    serializer: str = "input_order"


@dataclass
class AppConfig:
    """Main application configuration."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    cli: CliConfig = field(default_factory=CliConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _parse_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level {value!r}; expected one of {', '.join(LOG_LEVELS)}"
        )
    return level


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ConfigurationError: If an environment value is invalid
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # .env is looked up from the working directory upwards
    load_dotenv(dotenv_path=find_dotenv(usecwd=True))

    logging_config = LoggingConfig(
        level=_parse_level(os.getenv("ORDERED_ATTRS_LOG_LEVEL", "WARNING")),
        format=os.getenv("ORDERED_ATTRS_LOG_FORMAT", DEFAULT_LOG_FORMAT)
    )

    cli_config = CliConfig(
        serializer=os.getenv("ORDERED_ATTRS_SERIALIZER", "input_order").strip()
    )

    _config_instance = AppConfig(logging=logging_config, cli=cli_config)

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None


def configure_logging(level: Optional[str] = None) -> None:
    """
    Send the package's log records to stderr.

    Args:
        level: Overrides the configured level when given
    """
    config = get_config().logging
    resolved = _parse_level(level) if level else config.level

    logger = logging.getLogger("ordered_attrs")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(handler)
    logger.setLevel(resolved)
