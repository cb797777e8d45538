"""arc-to-rocrate configuration module."""

import logging
import os
from pathlib import Path
from typing import Annotated, Any, Literal, Self, cast

from pydantic import BaseModel, Field, field_validator

from .config_wrapper import ConfigWrapper

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]

ENV_PREFIX = "ARC_TO_ROCRATE"
CONFIG_PATH_ENV = f"{ENV_PREFIX}_CONFIG"


class OtelConfig(BaseModel):
    """OpenTelemetry tracing configuration."""

    endpoint: Annotated[
        str | None,
        Field(
            description="OpenTelemetry collector endpoint URL",
            examples=["http://signoz:4318"],
        ),
    ] = None
    log_console_spans: Annotated[
        bool,
        Field(description="Log OpenTelemetry spans to console"),
    ] = False


class Config(BaseModel):
    """Configuration of the arc-to-rocrate converter."""

    log_level: Annotated[LogLevel, Field(description="Logging level for console/stderr logging")] = "INFO"
    otel: Annotated[
        OtelConfig,
        Field(default_factory=OtelConfig, description="OpenTelemetry configuration"),
    ]

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept log levels in any case, e.g. from environment variables."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("otel", mode="before")
    @classmethod
    def validate_otel(cls, v: Any) -> Any:
        """Allow None for otel and convert to empty dict for default factory."""
        if v is None:
            return {}
        return v

    @classmethod
    def from_config_wrapper(cls, wrapper: ConfigWrapper) -> Self:
        """Create Config from ConfigWrapper.

        Args:
            wrapper (ConfigWrapper): Wrapped configuration data.

        Returns:
            Self: Configuration instance.

        """
        unwrapped = wrapper.unwrap()
        # Cast to satisfy MyPy's warn_return_any=true setting
        return cast(Self, cls.model_validate(unwrapped))

    @classmethod
    def from_data(cls, data: dict, prefix: str = ENV_PREFIX) -> Self:
        """Create Config from raw data dictionary.

        Environment variables below ``prefix`` override the data.

        Args:
            data (dict): Raw configuration data.
            prefix (str): Environment variable prefix.

        Returns:
            Self: Configuration instance.

        """
        data = dict(data)
        data.setdefault("otel", {})
        wrapper = ConfigWrapper.from_data(data, prefix)
        return cls.from_config_wrapper(wrapper)

    @classmethod
    def from_yaml_file(cls, path: Path, prefix: str = ENV_PREFIX) -> Self:
        """Create Config from a YAML file.

        Args:
            path (Path): Path to the YAML config file.
            prefix (str): Environment variable prefix.

        Returns:
            Config: Configuration instance.

        Raises:
            RuntimeError: If the config file is not found.

        """
        if path.is_file():
            wrapper = ConfigWrapper.from_yaml_file(path)
            data = wrapper.unwrap()
            if not isinstance(data, dict):
                msg = f"Config file {path} must contain a mapping."
                logging.error(msg)
                raise RuntimeError(msg)
            return cls.from_data(data, prefix)
        msg = f"Config file {path} not found."
        logging.error(msg)
        raise RuntimeError(msg)

    @classmethod
    def from_environment(cls) -> Self:
        """Load the configuration named by ``ARC_TO_ROCRATE_CONFIG`` or from env vars alone."""
        config_path = os.environ.get(CONFIG_PATH_ENV)
        if config_path:
            return cls.from_yaml_file(Path(config_path))
        return cls.from_data({})
