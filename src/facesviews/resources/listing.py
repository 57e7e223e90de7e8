"""Resource listers: the directory-listing primitive the scanner walks with."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable

from facesviews.resources.paths import is_directory

logger = logging.getLogger(__name__)

__all__ = ["ResourceLister", "DirectoryResourceLister", "InMemoryResourceLister"]


@runtime_checkable
class ResourceLister(Protocol):
    """Lists the immediate children of a directory in the resource tree.

    Child paths are absolute from the tree root. Directories end with ``/``.
    Returns None when ``path`` is not a listable directory.
    """

    def list_children(self, path: str) -> set[str] | None: ...


class DirectoryResourceLister:
    """Serves a resource tree rooted at a real directory on disk."""

    def __init__(self, base_dir: str | Path, follow_symlinks: bool = False) -> None:
        self._base_dir = Path(base_dir).resolve()
        self._follow_symlinks = follow_symlinks

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def list_children(self, path: str) -> set[str] | None:
        if not path.startswith("/"):
            return None
        directory = Path(os.path.normpath(self._base_dir / path.strip("/")))
        if directory != self._base_dir and self._base_dir not in directory.parents:
            logger.warning("Refusing to list %s outside of %s", path, self._base_dir)
            return None
        if not directory.is_dir():
            return None

        try:
            entries = list(os.scandir(directory))
        except PermissionError as e:
            logger.warning("Permission denied listing %s: %s", directory, e)
            return None
        except OSError as e:
            logger.error("OS error listing %s: %s", directory, e)
            return None

        parent = path if is_directory(path) else path + "/"
        entered: set[Path] | None = None
        children: set[str] = set()
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=self._follow_symlinks):
                    if entry.is_symlink():
                        if entered is None:
                            entered = self._entered_real_paths(directory)
                        if self._is_cycle(directory, entered, Path(entry.path)):
                            continue
                    children.add(f"{parent}{entry.name}/")
                elif entry.is_file(follow_symlinks=self._follow_symlinks):
                    children.add(f"{parent}{entry.name}")
            except OSError as e:
                logger.error("OS error accessing %s: %s", entry.path, e)
        return children

    def _entered_real_paths(self, directory: Path) -> set[Path]:
        # Real paths of every directory passed through from base_dir down to directory
        entered = {self._base_dir}
        current = self._base_dir
        for part in directory.relative_to(self._base_dir).parts:
            current = current / part
            entered.add(current.resolve())
        return entered

    def _is_cycle(self, directory: Path, entered: set[Path], link: Path) -> bool:
        real = link.resolve()
        if real in entered or real in directory.resolve().parents:
            logger.warning("Symlink cycle detected at %s -> %s, skipping", link, real)
            return True
        return False


class InMemoryResourceLister:
    """Serves a resource tree built from a flat collection of file paths.

    Usage::

        lister = InMemoryResourceLister(["/views/home.xhtml", "/views/admin/list.xhtml"])
        lister.list_children("/views/")  # {"/views/home.xhtml", "/views/admin/"}
    """

    def __init__(self, resources: Iterable[str] = ()) -> None:
        self._tree: dict[str, set[str]] = {"/": set()}
        for resource in resources:
            self.add(resource)

    def add(self, resource: str) -> None:
        """Add a file (or, with a trailing ``/``, an empty directory) and its parents."""
        if not resource.startswith("/") or resource == "/":
            return
        child = resource
        if is_directory(child):
            self._tree.setdefault(child, set())
        while child != "/":
            parent = child.rstrip("/").rsplit("/", 1)[0] + "/"
            self._tree.setdefault(parent, set()).add(child)
            child = parent

    def list_children(self, path: str) -> set[str] | None:
        if not is_directory(path):
            path += "/"
        children = self._tree.get(path)
        if children is None:
            return None
        return set(children)
