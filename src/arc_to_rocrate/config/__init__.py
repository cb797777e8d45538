"""Configuration of the arc-to-rocrate converter."""

from .config_base import CONFIG_PATH_ENV, ENV_PREFIX, Config, LogLevel, OtelConfig

__all__ = ["CONFIG_PATH_ENV", "ENV_PREFIX", "Config", "LogLevel", "OtelConfig"]
