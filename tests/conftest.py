"""Shared fixtures for bladerunner tests."""

from __future__ import annotations

import pytest

from bladerunner.container import Container
from bladerunner.support.env_helper import EnvHelper
from bladerunner.support.facades import Facade


@pytest.fixture(autouse=True)
def _isolate_globals(monkeypatch, tmp_path):
    """Fresh global container, no facade root and no stray .env for every test."""
    monkeypatch.delenv("VIEW_PATHS", raising=False)
    monkeypatch.delenv("VIEW_COMPILED_PATH", raising=False)
    EnvHelper.reset()
    EnvHelper.load(tmp_path / "missing.env")
    Container.set_instance(None)
    Facade.set_app(None)
    yield
    Container.set_instance(None)
    Facade.set_app(None)
    EnvHelper.reset()


@pytest.fixture
def views_dir(tmp_path):
    d = tmp_path / "views"
    d.mkdir()
    return d


@pytest.fixture
def compiled_dir(tmp_path):
    return tmp_path / "compiled"


@pytest.fixture
def make_view(views_dir):
    """Write a template under the views directory and return its path."""
    def _make(relative, text):
        path = views_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path
    return _make
