"""String helpers for resource paths.

Resource paths are ``/``-separated and absolute from the tree root. Directory
paths, as returned by a :class:`~facesviews.resources.listing.ResourceLister`,
always end with a trailing ``/``.
"""

from __future__ import annotations

__all__ = [
    "is_directory",
    "strip_prefix_path",
    "strip_extension",
    "get_extension",
    "starts_with_one_of",
]


def is_directory(path: str) -> bool:
    """Return True if the path denotes a directory (trailing separator)."""
    return path.endswith("/")


def strip_prefix_path(prefix: str, path: str) -> str:
    """Remove ``prefix`` from the start of ``path``, or return ``path`` as-is.

    Example: ``strip_prefix_path("/WEB-INF/faces-views/", "/WEB-INF/faces-views/foo.xhtml")``
    gives ``"foo.xhtml"``.
    """
    if prefix and path.startswith(prefix):
        return path[len(prefix):]
    return path


def _extension_index(path: str) -> int:
    # Only a dot inside the last segment, and not leading it, starts an extension.
    segment_start = path.rfind("/") + 1
    dot = path.rfind(".")
    if dot > segment_start:
        return dot
    return -1


def strip_extension(path: str) -> str:
    """Remove the trailing ``.ext`` from the last path segment, if any."""
    index = _extension_index(path)
    if index == -1:
        return path
    return path[:index]


def get_extension(path: str) -> str:
    """Return the trailing ``.ext`` of the last path segment including the dot, or ``""``."""
    index = _extension_index(path)
    if index == -1:
        return ""
    return path[index:]


def starts_with_one_of(string: str, *prefixes: str) -> bool:
    """Return True if ``string`` starts with any of the given prefixes."""
    return any(string.startswith(prefix) for prefix in prefixes)
