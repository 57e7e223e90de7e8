"""Resource tree listing, path helpers and the view scanner.

Usage::

    from facesviews.resources import InMemoryResourceLister, RootPath, scan_root

    lister = InMemoryResourceLister(["/views/home.xhtml"])
    result = scan_root(RootPath.parse("/views/"), lister)
"""

from __future__ import annotations

from facesviews.resources.listing import DirectoryResourceLister, InMemoryResourceLister, ResourceLister
from facesviews.resources.paths import (
    get_extension,
    is_directory,
    starts_with_one_of,
    strip_extension,
    strip_prefix_path,
)
from facesviews.resources.scanner import can_scan_directory, can_scan_resource, scan_root, scan_views
from facesviews.resources.types import RootPath, ScanResult

__all__ = [
    "DirectoryResourceLister",
    "InMemoryResourceLister",
    "ResourceLister",
    "RootPath",
    "ScanResult",
    "can_scan_directory",
    "can_scan_resource",
    "get_extension",
    "is_directory",
    "scan_root",
    "scan_views",
    "starts_with_one_of",
    "strip_extension",
    "strip_prefix_path",
]
