"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

from facesviews.errors import ConfigError, ConfigNotFoundError

__all__ = [
    "Config",
    "ViewsSettings",
    "csv_to_list",
    "ENABLED_PARAM_NAME",
    "SCAN_PATHS_PARAM_NAME",
    "SCANNED_VIEWS_EXTENSIONLESS_PARAM_NAME",
]

# Master switch for view scanning, consulted at startup.
ENABLED_PARAM_NAME = "facesviews.enabled"

# Comma separated list of extra root paths to scan.
SCAN_PATHS_PARAM_NAME = "facesviews.scan_paths"

# When true, scanned views are always rendered extensionless regardless of
# whether the request URI used an extension.
SCANNED_VIEWS_EXTENSIONLESS_PARAM_NAME = "facesviews.scanned_views_always_extensionless"


def csv_to_list(value: str | None) -> list[str]:
    """Split a comma separated string into stripped, non-blank entries."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Configuration accessor with dot-path key support.

    Usage::

        config = Config({"facesviews": {"scan_paths": "/views/, /*.jsp"}})
        config.get("facesviews.scan_paths")
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML or not a mapping.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigNotFoundError(config_path=str(path))

        content = path.read_text(encoding="utf-8")
        try:
            parsed = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in configuration file: {path}", cause=e) from e

        if parsed is None:
            return cls()
        if not isinstance(parsed, dict):
            raise ConfigError(message=f"Configuration file must be a YAML mapping: {path}")
        return cls(parsed)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def get_init_parameter(self, name: str) -> Any:
        """Return the raw value of a named parameter, or None when absent."""
        return self.get(name)


class ViewsSettings(BaseModel):
    """Validated view scanning parameters."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    scan_paths: tuple[str, ...] = ()
    scanned_views_always_extensionless: bool = False

    @field_validator("scan_paths", mode="before")
    @classmethod
    def split_scan_paths(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(csv_to_list(value))
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(str(item).strip() for item in value if item is not None and str(item).strip())
        return value

    @field_validator("enabled", "scanned_views_always_extensionless", mode="before")
    @classmethod
    def default_when_blank(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        if isinstance(value, str):
            return value.strip()
        return value

    @classmethod
    def from_config(cls, config: Config) -> ViewsSettings:
        """Read and validate the view scanning parameters from ``config``.

        Raises:
            ConfigError: If a parameter has an invalid value.
        """
        raw = {
            "enabled": config.get_init_parameter(ENABLED_PARAM_NAME),
            "scan_paths": config.get_init_parameter(SCAN_PATHS_PARAM_NAME),
            "scanned_views_always_extensionless": config.get_init_parameter(SCANNED_VIEWS_EXTENSIONLESS_PARAM_NAME),
        }
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise ConfigError(
                message=f"Invalid view scanning configuration: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
                cause=e,
            ) from e
