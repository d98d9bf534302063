"""Tests for bladerunner.filesystem."""

from __future__ import annotations

import hashlib

import pytest

from bladerunner.exceptions import FileNotFoundException
from bladerunner.filesystem import Filesystem


def test_put_creates_parents_and_get_reads(tmp_path):
    files = Filesystem()
    target = tmp_path / "a" / "b" / "file.txt"

    files.put(target, "hello")

    assert files.exists(target)
    assert files.is_file(target)
    assert files.is_directory(tmp_path / "a")
    assert files.get(target) == "hello"


def test_replace_swaps_contents_without_leftovers(tmp_path):
    files = Filesystem()
    target = tmp_path / "compiled" / "view.py"

    files.replace(target, "one")
    files.replace(target, "two")

    assert files.get(target) == "two"
    assert files.files(tmp_path / "compiled") == [target]


def test_get_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundException):
        Filesystem().get(tmp_path / "missing.txt")


def test_missing_file_is_also_builtin_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        Filesystem().get(tmp_path / "missing.txt")


def test_delete_reports_failures(tmp_path):
    files = Filesystem()
    one = tmp_path / "one.txt"
    files.put(one, "1")
    two = tmp_path / "two.txt"
    two.write_text("2")

    assert files.delete([one, two]) is True
    assert not one.exists() and not two.exists()
    assert files.delete(tmp_path / "gone.txt") is False


def test_files_lists_only_direct_files(tmp_path):
    files = Filesystem()
    (tmp_path / "b.txt").write_text("")
    (tmp_path / "a.txt").write_text("")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "c.txt").write_text("")

    assert [p.name for p in files.files(tmp_path)] == ["a.txt", "b.txt"]
    assert files.files(tmp_path / "nope") == []


def test_glob_absolute_pattern(tmp_path):
    files = Filesystem()
    (tmp_path / "x.py").write_text("")
    (tmp_path / "y.txt").write_text("")

    assert files.glob(str(tmp_path / "*.py")) == [tmp_path / "x.py"]


def test_hash_extension_and_mtime(tmp_path):
    files = Filesystem()
    path = tmp_path / "view.html"
    path.write_text("content")

    assert files.hash(path) == hashlib.sha1(b"content").hexdigest()
    assert files.extension(path) == "html"
    assert files.last_modified(path) == path.stat().st_mtime


def test_make_directory(tmp_path):
    made = Filesystem().make_directory(tmp_path / "x" / "y")
    assert made.is_dir()
