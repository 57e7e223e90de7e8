"""Error hierarchy for the facesviews package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "FacesViewsError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidRootPathError",
    "ErrorCodes",
]


class FacesViewsError(Exception):
    """Base error for all facesviews errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(FacesViewsError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(FacesViewsError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidRootPathError(FacesViewsError):
    """Raised when a configured root path carries more than one '*' delimiter."""

    def __init__(self, root_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="ROOT_PATH_INVALID",
            message=f"Invalid root path '{root_path}': at most one '*' extension delimiter is allowed",
            details={"root_path": root_path},
            **kwargs,
        )

    @property
    def root_path(self) -> str:
        """The offending root path as configured."""
        return self.details["root_path"]


class ErrorCodes:
    """All facesviews error codes as constants.

    Example:
        if error.code == ErrorCodes.ROOT_PATH_INVALID:
            report_bad_config()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    ROOT_PATH_INVALID = "ROOT_PATH_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
