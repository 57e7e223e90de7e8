"""View index: scanning configured root paths and resolving mapped view paths."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, MutableMapping

from facesviews.resources.paths import strip_prefix_path
from facesviews.resources.scanner import scan_root
from facesviews.resources.types import RootPath

if TYPE_CHECKING:
    from facesviews.context import ApplicationContext

logger = logging.getLogger(__name__)

__all__ = [
    "WEB_INF_VIEWS",
    "get_root_paths",
    "is_scanned_views_always_extensionless",
    "scan_views_from_root_paths",
    "scan_views",
    "try_scan_and_store_views",
    "scan_and_store_views",
    "strip_faces_views_prefix",
    "get_mapped_path",
]

# Well-known directory that is always scanned, no configuration needed.
WEB_INF_VIEWS = "/WEB-INF/faces-views/"


def get_root_paths(app: ApplicationContext) -> frozenset[str]:
    """Return the root paths to scan, computing and caching them on first use.

    The configured ``facesviews.scan_paths`` entries are combined with
    :data:`WEB_INF_VIEWS`.

    Raises:
        InvalidRootPathError: If a configured root has more than one ``*``.
        ConfigError: If the configuration is otherwise invalid.
    """
    if app.root_paths is None:
        root_paths = set(app.settings.scan_paths)
        for root_path in root_paths:
            RootPath.parse(root_path)
        root_paths.add(WEB_INF_VIEWS)
        app.root_paths = frozenset(root_paths)
    return app.root_paths


def is_scanned_views_always_extensionless(app: ApplicationContext) -> bool:
    """Return whether scanned views are always rendered without an extension."""
    if app.scanned_views_extensionless is None:
        app.scanned_views_extensionless = app.settings.scanned_views_always_extensionless
    return app.scanned_views_extensionless


def scan_views_from_root_paths(
    app: ApplicationContext,
    collected_views: MutableMapping[str, str],
    collected_extensions: set[str] | None = None,
) -> None:
    """Scan every root path into the given accumulators.

    Roots are scanned in sorted order, so when two roots produce the same key
    the root sorting last wins.
    """
    for raw_root in sorted(get_root_paths(app)):
        result = scan_root(
            RootPath.parse(raw_root),
            app.lister,
            collect_extensions=collected_extensions is not None,
        )
        collected_views.update(result.views)
        if collected_extensions is not None:
            collected_extensions.update(result.extensions)


def scan_views(app: ApplicationContext) -> dict[str, str]:
    """Scan all root paths and return a flat ``key -> resource path`` mapping."""
    collected_views: dict[str, str] = {}
    scan_views_from_root_paths(app, collected_views)
    return collected_views


def try_scan_and_store_views(app: ApplicationContext) -> None:
    """Scan and store views unless a view index is already stored."""
    if app.views is None:
        scan_and_store_views(app)


def scan_and_store_views(
    app: ApplicationContext,
    collected_extensions: set[str] | None = None,
) -> Mapping[str, str]:
    """Scan all root paths and store the result on ``app.views``.

    An empty result is returned but not stored, so that a scan that ran before
    any views existed can be repeated later.

    Returns:
        The views found, or an empty mapping if none were encountered.
    """
    collected_views: dict[str, str] = {}
    scan_views_from_root_paths(app, collected_views, collected_extensions)
    views = MappingProxyType(collected_views)
    if views:
        app.views = views
        logger.info("Stored %d view keys from %d root paths", len(views), len(get_root_paths(app)))
    else:
        logger.info("No views found under %s", ", ".join(sorted(get_root_paths(app))))
    return views


def strip_faces_views_prefix(resource: str) -> str:
    """Strip :data:`WEB_INF_VIEWS` from the start of ``resource``, if present."""
    return strip_prefix_path(WEB_INF_VIEWS, resource)


def get_mapped_path(app: ApplicationContext, path: str) -> str:
    """Return the resource path stored for ``path``, or ``path`` itself if unmapped."""
    views = app.views
    if views is not None and path in views:
        return views[path]
    return path
