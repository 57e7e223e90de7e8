"""Shared pytest fixtures for the facesviews test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from facesviews.config import Config
from facesviews.context import ApplicationContext
from facesviews.dispatch import RouteRegistration
from facesviews.resources.listing import InMemoryResourceLister


# ---------------------------------------------------------------------------
# Sample resource tree
# ---------------------------------------------------------------------------

SAMPLE_RESOURCES = [
    "/index.xhtml",
    "/about.jsp",
    "/views/home.xhtml",
    "/views/admin/list.xhtml",
    "/WEB-INF/web.xml",
    "/WEB-INF/faces-views/index.xhtml",
    "/WEB-INF/faces-views/account/profile.xhtml",
    "/META-INF/MANIFEST.MF",
]


@pytest.fixture
def sample_lister() -> InMemoryResourceLister:
    """Return an in-memory lister over SAMPLE_RESOURCES."""
    return InMemoryResourceLister(SAMPLE_RESOURCES)


@pytest.fixture
def make_app(sample_lister: InMemoryResourceLister) -> Callable[..., ApplicationContext]:
    """Factory building an ApplicationContext from a flat parameter dict."""

    def _make(
        params: dict[str, Any] | None = None,
        lister: Any = None,
        dispatcher: Any = None,
    ) -> ApplicationContext:
        data: dict[str, Any] = {}
        for key, value in (params or {}).items():
            section, name = key.split(".", 1)
            data.setdefault(section, {})[name] = value
        return ApplicationContext(
            lister=lister if lister is not None else sample_lister,
            config=Config(data),
            dispatcher=dispatcher,
        )

    return _make


@pytest.fixture
def registration() -> RouteRegistration:
    """Return a dispatcher registration already mapped to '/faces/*'."""
    return RouteRegistration("FacesServlet", ["/faces/*"])


@pytest.fixture
def webapp_dir(tmp_path: Path) -> Path:
    """Create an on-disk web application tree matching SAMPLE_RESOURCES."""
    root = tmp_path / "webapp"
    for resource in SAMPLE_RESOURCES:
        target = root / resource.lstrip("/")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("")
    return root
