"""Application context holding state shared for the application's lifetime."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping

from facesviews.config import Config, ViewsSettings

if TYPE_CHECKING:
    from facesviews.dispatch import DispatcherRegistration
    from facesviews.resources.listing import ResourceLister

__all__ = ["ApplicationContext"]


@dataclass
class ApplicationContext:
    """Application-wide state for view scanning.

    ``root_paths``, ``scanned_views_extensionless`` and ``views`` start out as
    None and are each filled in at most once by :mod:`facesviews.views`. Stored
    values are immutable, so they can be read from any number of threads.
    """

    lister: ResourceLister
    config: Config = field(default_factory=Config)
    dispatcher: DispatcherRegistration | None = None
    root_paths: frozenset[str] | None = None
    scanned_views_extensionless: bool | None = None
    views: Mapping[str, str] | None = None
    _settings: ViewsSettings | None = field(default=None, init=False, repr=False)

    @property
    def settings(self) -> ViewsSettings:
        """Validated parameters, parsed from ``config`` on first access.

        Raises:
            ConfigError: If a parameter has an invalid value.
        """
        if self._settings is None:
            self._settings = ViewsSettings.from_config(self.config)
        return self._settings
