"""Tests for bladerunner.console."""

from __future__ import annotations

import asyncio

import pytest

from bladerunner.console import Console, main
from bladerunner.container import Container
from bladerunner.providers import BladeProvider


@pytest.fixture
def app(views_dir, compiled_dir):
    container = Container()
    BladeProvider(container, {"view.paths": [str(views_dir)], "view.compiled": str(compiled_dir)}).register()
    return container


def run(app, *argv):
    return asyncio.run(Console(app).run(list(argv)))


def test_view_clear_removes_compiled_files(app, make_view, compiled_dir, capsys):
    make_view("a.blade.html", "a")
    make_view("b.blade.html", "b")
    app["view"].make("a").render()
    app["view"].make("b").render()
    (compiled_dir / "keep.txt").write_text("not compiled")
    assert len(list(compiled_dir.glob("*.py"))) == 2

    assert run(app, "view:clear") == 0

    assert list(compiled_dir.glob("*.py")) == []
    assert (compiled_dir / "keep.txt").exists()
    assert "Compiled views cleared (2 files)." in capsys.readouterr().out


def test_view_clear_without_directory(app, capsys):
    assert run(app, "view:clear") == 1
    assert "View path not found." in capsys.readouterr().out


def test_container_list(app, capsys):
    app["view"]

    assert run(app, "container:list") == 0

    out = capsys.readouterr().out
    assert "Singletons:" in out
    assert "view.finder" in out
    assert "instantiated" in out


def test_container_check(app, capsys):
    assert run(app, "container:check", "view") == 0
    assert "Binding 'view' exists" in capsys.readouterr().out

    assert run(app, "container:check", "missing") == 1
    assert run(app, "container:check") == 1


def test_help_and_unknown_command(app, capsys):
    assert run(app) == 0
    assert run(app, "nope") == 1

    out = capsys.readouterr().out
    assert "view:clear" in out
    assert "container:check {binding}" in out
    assert "Command 'nope' not found" in out


def test_main_bootstraps_from_working_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert main(["container:check", "view"]) == 0
    assert Container.get_instance()["config"]["view.compiled"] == str(tmp_path / "storage/views")
