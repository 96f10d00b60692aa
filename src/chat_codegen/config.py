"""
Runtime configuration for the chat-codegen tool.

The generator itself is configured by the options JSON passed on the command
line.  This module covers how the *tool* runs, which today means logging.
Settings come from three sources, highest priority first:

    1. Command-line flags (``--log-level``), applied by the CLI
    2. Environment variables
    3. Built-in defaults

Environment Variable Mapping:
    CHAT_CODEGEN_LOG_LEVEL   -> logging.level
    CHAT_CODEGEN_LOG_FORMAT  -> logging.format
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Literal

# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================

LOG_FORMATS: dict[str, str] = {
    "simple": "%(levelname)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
}


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "WARNING"
    format: Literal["simple", "detailed"] = "simple"


@dataclass
class CodegenConfig:
    """
    Complete tool configuration.

    Aggregates all settings sections.  Built by `load_config()` at CLI start-up.
    """

    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _apply_env_overrides(cfg: CodegenConfig) -> None:
    """Apply environment variable overrides to configuration."""
    if env_level := os.getenv("CHAT_CODEGEN_LOG_LEVEL"):
        cfg.logging.level = env_level.upper()
    if env_format := os.getenv("CHAT_CODEGEN_LOG_FORMAT"):
        val = env_format.lower()
        if val in LOG_FORMATS:
            cfg.logging.format = val  # type: ignore[assignment]


def load_config() -> CodegenConfig:
    """
    Load configuration from defaults and the environment.

    Returns:
        CodegenConfig: Fully populated configuration object.
    """
    cfg = CodegenConfig()
    _apply_env_overrides(cfg)
    return cfg


def configure_logging(settings: LoggingSettings) -> None:
    """
    Configure the root logger from `settings`.

    Unknown level names fall back to WARNING rather than failing the run.
    """
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMATS[settings.format], force=True)
