"""Resource types: RootPath, ScanResult."""

from __future__ import annotations

from dataclasses import dataclass, field

from facesviews.errors import InvalidRootPathError

__all__ = [
    "EXTENSION_DELIMITER",
    "RootPath",
    "ScanResult",
]

EXTENSION_DELIMITER = "*"


@dataclass(frozen=True)
class RootPath:
    """A directory to scan, optionally restricted to a single extension."""

    path: str
    extension: str | None = None

    @classmethod
    def parse(cls, raw: str) -> RootPath:
        """Split a configured root such as ``/templates/*.xhtml`` into path and extension.

        Raises:
            InvalidRootPathError: If the delimiter occurs more than once.
        """
        if raw.count(EXTENSION_DELIMITER) > 1:
            raise InvalidRootPathError(root_path=raw)
        if EXTENSION_DELIMITER not in raw:
            return cls(path=raw)
        path, extension = raw.split(EXTENSION_DELIMITER, 1)
        return cls(path=path, extension=extension)

    @property
    def is_tree_root(self) -> bool:
        return self.path == "/"


@dataclass
class ScanResult:
    """Views and extensions collected from one or more scanned roots."""

    views: dict[str, str] = field(default_factory=dict)
    extensions: set[str] = field(default_factory=set)
