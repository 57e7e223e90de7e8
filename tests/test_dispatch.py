"""Tests for dispatcher extension mapping."""

from __future__ import annotations

from typing import Callable
from unittest.mock import MagicMock

from facesviews.context import ApplicationContext
from facesviews.dispatch import DispatcherRegistration, RouteRegistration, map_faces_dispatcher

AppFactory = Callable[..., ApplicationContext]


class TestRouteRegistration:
    def test_initial_mappings(self) -> None:
        """Initial mappings are kept in order."""
        reg = RouteRegistration("FacesServlet", ["/faces/*", "*.xhtml"])
        assert reg.mappings == ("/faces/*", "*.xhtml")

    def test_duplicates_ignored(self) -> None:
        """Adding an existing pattern does nothing."""
        reg = RouteRegistration("FacesServlet", ["*.xhtml"])
        reg.add_mapping("*.xhtml", "*.jsp")
        assert reg.mappings == ("*.xhtml", "*.jsp")

    def test_satisfies_protocol(self, registration: RouteRegistration) -> None:
        """RouteRegistration is a DispatcherRegistration."""
        assert isinstance(registration, DispatcherRegistration)


class TestMapFacesDispatcher:
    def test_new_extensions_added(self, make_app: AppFactory, registration: RouteRegistration) -> None:
        """Unmapped extensions are registered."""
        app = make_app(dispatcher=registration)
        added = map_faces_dispatcher(app, {"*.xhtml", "*.jsp"})
        assert added == ["*.jsp", "*.xhtml"]
        assert set(registration.mappings) == {"/faces/*", "*.xhtml", "*.jsp"}

    def test_existing_extensions_skipped(self, make_app: AppFactory) -> None:
        """Already mapped extensions are not added again."""
        dispatcher = MagicMock()
        dispatcher.mappings = ["*.xhtml"]
        app = make_app(dispatcher=dispatcher)
        assert map_faces_dispatcher(app, {"*.xhtml", "*.jsp"}) == ["*.jsp"]
        dispatcher.add_mapping.assert_called_once_with("*.jsp")

    def test_idempotent(self, make_app: AppFactory, registration: RouteRegistration) -> None:
        """Overlapping repeated calls only add what is missing."""
        app = make_app(dispatcher=registration)
        map_faces_dispatcher(app, {"*.xhtml"})
        assert map_faces_dispatcher(app, {"*.xhtml", "*.jsp"}) == ["*.jsp"]
        assert map_faces_dispatcher(app, {"*.xhtml", "*.jsp"}) == []
        assert registration.mappings.count("*.xhtml") == 1

    def test_no_dispatcher(self, make_app: AppFactory) -> None:
        """Without a dispatcher nothing is mapped."""
        assert map_faces_dispatcher(make_app(), {"*.xhtml"}) == []

    def test_empty_extensions(self, make_app: AppFactory, registration: RouteRegistration) -> None:
        """No extensions means no changes."""
        app = make_app(dispatcher=registration)
        assert map_faces_dispatcher(app, set()) == []
        assert registration.mappings == ("/faces/*",)
