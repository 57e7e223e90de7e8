"""Resource scanner for discovering views under a root path."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, MutableMapping

from facesviews.resources.listing import ResourceLister
from facesviews.resources.paths import (
    get_extension,
    is_directory,
    starts_with_one_of,
    strip_extension,
    strip_prefix_path,
)
from facesviews.resources.types import RootPath, ScanResult

logger = logging.getLogger(__name__)

__all__ = ["scan_views", "scan_root", "can_scan_directory", "can_scan_resource"]

TREE_ROOT = "/"

# Never exposed as views when scanning from the tree root
_RESERVED_DIR_PREFIXES = ("/WEB-INF/", "/META-INF/")


def can_scan_directory(root_path: str, directory: str) -> bool:
    """Return True if ``directory`` may be entered while scanning ``root_path``.

    Every subdirectory of an explicitly configured root is scanned; only the
    tree root skips the reserved ``/WEB-INF/`` and ``/META-INF/`` areas.
    """
    if root_path != TREE_ROOT:
        return True
    return not starts_with_one_of(directory, *_RESERVED_DIR_PREFIXES)


def can_scan_resource(resource: str, extension_to_scan: str | None) -> bool:
    """Return True if ``resource`` passes the (optional) extension filter."""
    if extension_to_scan is None:
        return True
    return resource.endswith(extension_to_scan)


def scan_views(
    root_path: str,
    resource_paths: Iterable[str] | None,
    lister: ResourceLister,
    collected_views: MutableMapping[str, str],
    extension_to_scan: str | None = None,
    collected_extensions: set[str] | None = None,
) -> None:
    """Scan views below ``root_path`` into the given accumulators.

    Args:
        root_path: The root the scan started from, e.g. ``/WEB-INF/faces-views/``.
            Stripped from every resource path to form its lookup key.
        resource_paths: Immediate children of ``root_path``, files and directories.
        lister: Supplies a fresh listing for every subdirectory entered.
        collected_views: Receives ``key -> resource path`` entries, e.g.
            ``"foo" -> "/WEB-INF/faces-views/foo.xhtml"``. Later entries overwrite
            earlier ones with the same key.
        extension_to_scan: Only resources ending with this (e.g. ``".xhtml"``)
            are scanned. None scans everything.
        collected_extensions: Receives every distinct extension as ``"*.ext"``.
            Files without an extension add nothing. None disables extension collection.
    """
    if not resource_paths:
        return

    pending: deque[Iterable[str]] = deque([resource_paths])
    while pending:
        for resource_path in sorted(pending.popleft()):
            if is_directory(resource_path):
                if not can_scan_directory(root_path, resource_path):
                    logger.debug("Skipping reserved directory %s", resource_path)
                    continue
                children = lister.list_children(resource_path)
                if children:
                    pending.append(children)
            elif can_scan_resource(resource_path, extension_to_scan):
                resource = strip_prefix_path(root_path, resource_path)

                # Resources under the tree root already resolve with their extension
                if root_path != TREE_ROOT:
                    collected_views[resource] = resource_path
                collected_views[strip_extension(resource)] = resource_path

                if collected_extensions is not None:
                    extension = get_extension(resource_path)
                    if extension:
                        collected_extensions.add("*" + extension)
                    else:
                        logger.debug("No extension to map for %s", resource_path)


def scan_root(root: RootPath, lister: ResourceLister, collect_extensions: bool = True) -> ScanResult:
    """Scan a single root into a fresh ScanResult."""
    result = ScanResult()
    scan_views(
        root.path,
        lister.list_children(root.path),
        lister,
        result.views,
        extension_to_scan=root.extension,
        collected_extensions=result.extensions if collect_extensions else None,
    )
    logger.debug(
        "Scanned root %s (extension=%s): %d views",
        root.path,
        root.extension,
        len(result.views),
    )
    return result
