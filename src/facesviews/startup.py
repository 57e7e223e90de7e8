"""Startup hook that scans views and maps the dispatcher to their extensions."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from facesviews.dispatch import map_faces_dispatcher
from facesviews.views import get_root_paths, scan_and_store_views

if TYPE_CHECKING:
    from facesviews.context import ApplicationContext

logger = logging.getLogger(__name__)

__all__ = ["initialize_views"]


def initialize_views(app: ApplicationContext) -> Mapping[str, str]:
    """Scan and store views, then map the dispatcher to every extension found.

    Does nothing when ``facesviews.enabled`` is false.

    Returns:
        The stored views, or an empty mapping when disabled or nothing was found.

    Raises:
        ConfigError: If the configuration is invalid.
        InvalidRootPathError: If a configured root path is malformed.
    """
    if not app.settings.enabled:
        logger.info("View scanning disabled by configuration")
        return MappingProxyType({})

    root_paths = get_root_paths(app)

    extensions: set[str] = set()
    views = scan_and_store_views(app, collected_extensions=extensions)
    map_faces_dispatcher(app, extensions)

    logger.info(
        "Initialized %d view keys with extensions [%s] from %d root paths",
        len(views),
        ", ".join(sorted(extensions)),
        len(root_paths),
    )
    return views
