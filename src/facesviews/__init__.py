"""facesviews - Extensionless view discovery for resource trees."""

from __future__ import annotations

# Core
from facesviews.context import ApplicationContext
from facesviews.startup import initialize_views
from facesviews.views import (
    WEB_INF_VIEWS,
    get_mapped_path,
    get_root_paths,
    is_scanned_views_always_extensionless,
    scan_and_store_views,
    scan_views,
    scan_views_from_root_paths,
    strip_faces_views_prefix,
    try_scan_and_store_views,
)

# Resources
from facesviews.resources import (
    DirectoryResourceLister,
    InMemoryResourceLister,
    ResourceLister,
    RootPath,
    ScanResult,
    scan_root,
)

# Dispatch
from facesviews.dispatch import DispatcherRegistration, RouteRegistration, map_faces_dispatcher

# Config
from facesviews.config import Config, ViewsSettings

# Errors
from facesviews.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    FacesViewsError,
    InvalidRootPathError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ApplicationContext",
    "initialize_views",
    "WEB_INF_VIEWS",
    "get_mapped_path",
    "get_root_paths",
    "is_scanned_views_always_extensionless",
    "scan_and_store_views",
    "scan_views",
    "scan_views_from_root_paths",
    "strip_faces_views_prefix",
    "try_scan_and_store_views",
    # Resources
    "DirectoryResourceLister",
    "InMemoryResourceLister",
    "ResourceLister",
    "RootPath",
    "ScanResult",
    "scan_root",
    # Dispatch
    "DispatcherRegistration",
    "RouteRegistration",
    "map_faces_dispatcher",
    # Config
    "Config",
    "ViewsSettings",
    # Errors
    "ErrorCodes",
    "FacesViewsError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidRootPathError",
]
