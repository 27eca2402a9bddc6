# ============================================================================
# ExplorerClient - Configuration Management
#
# Purpose: Load and validate client configuration from dicts, YAML and env vars
# Inputs: Mappings, YAML files, environment variables
# Outputs: ClientConfig model with all settings
# Dependencies: pyyaml, pydantic, pathlib
# Usage: config = load_config({"explorerUri": "http://collector.local"})
#
# Changelog:
#   2026-10-02: Initial configuration system
#   2026-10-06: Accept camelCase explorerUri alias for configs shared with the
#               collector service
#   2026-10-09: Added timeout and max_workers for delivery
# ============================================================================

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ExplorerClient.errors import ConfigurationError

ENV_PREFIX = "EXPLORER_CLIENT_"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ClientConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Collector base URI; the tracker refuses to start without one
    explorer_uri: str = Field(default="", alias="explorerUri")
    service: str = ""
    # Seconds per delivery call; None disables the timeout
    timeout: Optional[float] = Field(default=None, gt=0)
    max_workers: int = Field(default=4, ge=1)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "ClientConfig":
        """
        Load configuration from a YAML file with environment variable overrides.

        Args:
            path: Path to YAML configuration file

        Returns:
            ClientConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}

        data = cls._apply_env_overrides(data)

        return cls(**data)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build configuration purely from EXPLORER_CLIENT_* environment variables."""
        return cls(**cls._apply_env_overrides({}))

    @classmethod
    def _apply_env_overrides(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables follow the pattern EXPLORER_CLIENT_<FIELD>, or
        EXPLORER_CLIENT_<SECTION>_<KEY> for nested sections. Field names contain
        underscores, so matching is done against known field names rather than
        by splitting on ``_``.

        Examples:
            EXPLORER_CLIENT_EXPLORER_URI=http://x  → data["explorer_uri"]
            EXPLORER_CLIENT_LOGGING_LEVEL=DEBUG    → data["logging"]["level"]

        Args:
            data: Configuration dictionary

        Returns:
            Updated configuration dictionary
        """
        data = dict(data)
        # Overrides target field names, so fold the camelCase alias in first
        if "explorerUri" in data and "explorer_uri" not in data:
            data["explorer_uri"] = data.pop("explorerUri")

        field_names = sorted(cls.model_fields.keys(), key=len, reverse=True)

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue

            remainder = env_key[len(ENV_PREFIX) :].lower()

            for name in field_names:
                if remainder == name:
                    # URIs and service names stay strings even if numeric-looking
                    if name in ("explorer_uri", "service"):
                        data[name] = env_value
                    else:
                        data[name] = cls._parse_env_value(env_value)
                    break
                section_prefix = name + "_"
                if remainder.startswith(section_prefix) and name == "logging":
                    section = dict(data.get(name) or {})
                    section[remainder[len(section_prefix) :]] = env_value
                    data[name] = section
                    break

        return data

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """
        Parse environment variable value to appropriate type.

        Args:
            value: String value from environment

        Returns:
            Parsed value (str, int, float, or bool)
        """
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        if value.lower() in ("none", "null", ""):
            return None

        return value


def load_config(config: Union[ClientConfig, Mapping[str, Any], None]) -> ClientConfig:
    """
    Turn caller-supplied configuration into a validated ClientConfig.

    Caller values are layered over the defaults. An empty explorer URI is
    rejected even though it is the declared default: a tracker needs a real
    endpoint.

    Args:
        config: ClientConfig instance or mapping of settings

    Returns:
        ClientConfig instance

    Raises:
        ConfigurationError: If config is not a mapping/ClientConfig, fails field
            validation, or has no explorer URI
    """
    if isinstance(config, ClientConfig):
        resolved = config
    elif isinstance(config, Mapping):
        try:
            resolved = ClientConfig.model_validate(dict(config))
        except ValidationError as e:
            raise ConfigurationError("Invalid client configuration", details=str(e)) from e
    else:
        raise ConfigurationError(
            "Wrong Explorer URI provided for client",
            details=f"expected a mapping or ClientConfig, got {type(config).__name__}",
        )

    if not resolved.explorer_uri or not resolved.explorer_uri.strip():
        raise ConfigurationError("Wrong Explorer URI provided for client")

    return resolved
