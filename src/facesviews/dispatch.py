"""Registration of discovered view extensions with the request dispatcher."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Collection, Iterable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from facesviews.context import ApplicationContext

logger = logging.getLogger(__name__)

__all__ = ["DispatcherRegistration", "RouteRegistration", "map_faces_dispatcher"]


@runtime_checkable
class DispatcherRegistration(Protocol):
    """The dispatcher's route registration as seen by view scanning."""

    @property
    def mappings(self) -> Collection[str]: ...

    def add_mapping(self, *patterns: str) -> None: ...


class RouteRegistration:
    """In-process dispatcher registration recording URL patterns in insertion order."""

    def __init__(self, name: str, mappings: Iterable[str] = ()) -> None:
        self.name = name
        self._mappings: list[str] = []
        self.add_mapping(*mappings)

    @property
    def mappings(self) -> tuple[str, ...]:
        return tuple(self._mappings)

    def add_mapping(self, *patterns: str) -> None:
        for pattern in patterns:
            if pattern not in self._mappings:
                self._mappings.append(pattern)

    def __repr__(self) -> str:
        return f"RouteRegistration(name={self.name!r}, mappings={self._mappings!r})"


def map_faces_dispatcher(app: ApplicationContext, extensions: Iterable[str]) -> list[str]:
    """Map the dispatcher to each extension it is not mapped to yet.

    Args:
        app: Application context; nothing happens when it has no dispatcher.
        extensions: Patterns such as ``"*.xhtml"``, typically collected while scanning.

    Returns:
        The patterns that were newly added, in sorted order.
    """
    registration = app.dispatcher
    if registration is None:
        logger.debug("No dispatcher registered, skipping extension mapping")
        return []

    added: list[str] = []
    mappings = set(registration.mappings)
    for extension in sorted(extensions):
        if extension not in mappings:
            registration.add_mapping(extension)
            mappings.add(extension)
            added.append(extension)

    if added:
        logger.info("Mapped dispatcher to %s", ", ".join(added))
    return added
