"""Tests for bladerunner.view.finder."""

from __future__ import annotations

import os

import pytest

from bladerunner.exceptions import ViewNotFoundException
from bladerunner.filesystem import Filesystem
from bladerunner.view.finder import FileViewFinder


def make_finder(*paths, extensions=None):
    return FileViewFinder(Filesystem(), [str(p) for p in paths], extensions)


def test_dot_notation_maps_to_directories(views_dir, make_view):
    expected = make_view("pages/home.blade.html", "home")
    finder = make_finder(views_dir)
    assert finder.find("pages.home") == str(expected)


def test_extension_order(views_dir, make_view):
    make_view("page.html", "plain")
    blade = make_view("page.blade.html", "blade")
    finder = make_finder(views_dir)
    assert finder.find("page") == str(blade)


def test_paths_searched_in_order(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    (second / "welcome.html").parent.mkdir(parents=True)
    (second / "welcome.html").write_text("second")
    first.mkdir()

    finder = make_finder(first, second)
    assert finder.find("welcome") == os.path.join(str(second), "welcome.html")

    (first / "welcome.html").write_text("first")
    finder.flush()
    assert finder.find("welcome") == os.path.join(str(first), "welcome.html")


def test_results_are_cached(views_dir, make_view):
    path = make_view("cached.html", "x")
    finder = make_finder(views_dir)
    assert finder.find("cached") == str(path)

    path.unlink()
    assert finder.find("cached") == str(path)
    assert finder.get_views() == {"cached": str(path)}


def test_missing_view(views_dir):
    with pytest.raises(ViewNotFoundException, match=r"View \[nope\] not found."):
        make_finder(views_dir).find("nope")


def test_namespaces(tmp_path):
    mail = tmp_path / "mail"
    (mail / "welcome.blade.html").parent.mkdir(parents=True)
    (mail / "welcome.blade.html").write_text("hi")

    finder = make_finder(tmp_path / "views")
    finder.add_namespace("mail", str(mail))

    assert finder.find("mail::welcome") == os.path.join(str(mail), "welcome.blade.html")
    assert finder.get_hints() == {"mail": [str(mail)]}


def test_namespace_errors(views_dir):
    finder = make_finder(views_dir)

    with pytest.raises(ViewNotFoundException, match=r"No hint path defined for \[mail\]."):
        finder.find("mail::welcome")

    finder.add_namespace("mail", str(views_dir))
    with pytest.raises(ViewNotFoundException, match="has an invalid name"):
        finder.find("mail::")
    with pytest.raises(ViewNotFoundException, match="has an invalid name"):
        finder.find("a::b::c")


def test_namespace_hint_management():
    finder = make_finder()
    finder.add_namespace("ns", "a")
    finder.add_namespace("ns", ["b"])
    finder.prepend_namespace("ns", "z")
    assert finder.get_hints()["ns"] == ["z", "a", "b"]

    finder.replace_namespace("ns", ["only"])
    assert finder.get_hints()["ns"] == ["only"]


def test_locations_and_extensions(tmp_path):
    finder = make_finder(tmp_path / "a")
    finder.add_location(tmp_path / "b")
    finder.prepend_location(tmp_path / "c")
    assert finder.get_paths() == [str(tmp_path / "c"), str(tmp_path / "a"), str(tmp_path / "b")]

    finder.add_extension("txt")
    finder.add_extension("html")
    assert finder.get_extensions()[:2] == ["html", "txt"]
    assert finder.get_extensions().count("html") == 1

    finder.set_paths([tmp_path])
    assert finder.get_paths() == [str(tmp_path)]


def test_custom_extensions(views_dir, make_view):
    path = make_view("note.txt", "x")
    finder = make_finder(views_dir, extensions=["txt"])
    assert finder.find("note") == str(path)
    assert finder.has_hint_information("a::b")
    assert not finder.has_hint_information("a.b")
    assert isinstance(finder.get_filesystem(), Filesystem)
