"""Tests for initialize_views()."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest

from facesviews.config import Config
from facesviews.context import ApplicationContext
from facesviews.dispatch import RouteRegistration
from facesviews.errors import InvalidRootPathError
from facesviews.resources.listing import DirectoryResourceLister, InMemoryResourceLister
from facesviews.startup import initialize_views
from facesviews.views import get_mapped_path

AppFactory = Callable[..., ApplicationContext]


class TestInitializeViews:
    def test_scans_stores_and_maps(self, make_app: AppFactory, registration: RouteRegistration) -> None:
        """Views are stored and their extensions mapped on the dispatcher."""
        app = make_app({"facesviews.scan_paths": "/"}, dispatcher=registration)
        views = initialize_views(app)
        assert app.views is views
        assert views["about"] == "/about.jsp"
        assert set(registration.mappings) == {"/faces/*", "*.xhtml", "*.jsp"}

    def test_disabled(self, make_app: AppFactory, registration: RouteRegistration) -> None:
        """Disabled scanning stores and maps nothing."""
        app = make_app({"facesviews.enabled": "false"}, dispatcher=registration)
        assert dict(initialize_views(app)) == {}
        assert app.views is None
        assert app.root_paths is None
        assert registration.mappings == ("/faces/*",)

    def test_disabled_logged(self, make_app: AppFactory, caplog: pytest.LogCaptureFixture) -> None:
        """Disabling is reported at info level."""
        with caplog.at_level(logging.INFO, logger="facesviews"):
            initialize_views(make_app({"facesviews.enabled": False}))
        assert "disabled" in caplog.text

    def test_malformed_root_reported_at_startup(self, make_app: AppFactory) -> None:
        """A malformed root path fails startup."""
        app = make_app({"facesviews.scan_paths": "/a*.b*.c"})
        with pytest.raises(InvalidRootPathError):
            initialize_views(app)
        assert app.views is None

    def test_extensionless_file_not_mapped(self, make_app: AppFactory, registration: RouteRegistration) -> None:
        """A file without extension never maps the dispatcher to a bare '*'."""
        lister = InMemoryResourceLister(["/WEB-INF/faces-views/README", "/WEB-INF/faces-views/home.xhtml"])
        app = make_app(lister=lister, dispatcher=registration)
        views = initialize_views(app)
        assert views["README"] == "/WEB-INF/faces-views/README"
        assert registration.mappings == ("/faces/*", "*.xhtml")

    def test_without_dispatcher(self, make_app: AppFactory) -> None:
        """Views are still stored when there is no dispatcher."""
        app = make_app()
        views = initialize_views(app)
        assert views["index"] == "/WEB-INF/faces-views/index.xhtml"

    def test_yaml_and_directory_end_to_end(self, webapp_dir: Path, tmp_path: Path) -> None:
        """YAML config plus an on-disk tree resolve extensionless names."""
        config_path = tmp_path / "facesviews.yaml"
        config_path.write_text("facesviews:\n  scan_paths:\n    - /views/*.xhtml\n")
        registration = RouteRegistration("FacesServlet")
        app = ApplicationContext(
            lister=DirectoryResourceLister(webapp_dir),
            config=Config.from_yaml(config_path),
            dispatcher=registration,
        )
        initialize_views(app)
        assert get_mapped_path(app, "admin/list") == "/views/admin/list.xhtml"
        assert get_mapped_path(app, "account/profile") == "/WEB-INF/faces-views/account/profile.xhtml"
        assert get_mapped_path(app, "unknown") == "unknown"
        assert registration.mappings == ("*.xhtml",)
