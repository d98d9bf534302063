"""Tests for bladerunner.view.compilers."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, TemplateSyntaxError

from bladerunner.filesystem import Filesystem
from bladerunner.view.compilers import BladeCompiler, FinderLoader
from bladerunner.view.finder import FileViewFinder


def test_cache_path_required():
    with pytest.raises(ValueError, match="Please provide a valid cache path."):
        BladeCompiler(Filesystem(), "")
    with pytest.raises(ValueError):
        BladeCompiler(Filesystem(), None)


def test_compiled_path_is_sha1_of_source_path(compiled_dir):
    compiler = BladeCompiler(Filesystem(), str(compiled_dir))
    digest = hashlib.sha1(b"/views/home.blade.html").hexdigest()
    assert compiler.get_compiled_path("/views/home.blade.html") == os.path.join(
        str(compiled_dir), digest + ".py"
    )


def test_is_expired_until_compiled(make_view, compiled_dir):
    source = make_view("home.blade.html", "Hello {{ name }}")
    compiler = BladeCompiler(Filesystem(), str(compiled_dir))

    assert compiler.is_expired(str(source))

    compiler.compile(str(source))
    compiled = compiler.get_compiled_path(str(source))
    assert os.path.exists(compiled)
    assert compiler.get_path() == str(source)

    # Push the compiled file into the future, then the source past it
    mtime = os.path.getmtime(source)
    os.utime(compiled, (mtime + 10, mtime + 10))
    assert not compiler.is_expired(str(source))

    os.utime(source, (mtime + 20, mtime + 20))
    assert compiler.is_expired(str(source))


def test_compiled_file_is_python_source(make_view, compiled_dir):
    source = make_view("home.blade.html", "Hello {{ name }}")
    compiler = BladeCompiler(Filesystem(), str(compiled_dir))
    compiler.compile(str(source))

    contents = Path(compiler.get_compiled_path(str(source))).read_text()
    assert "def root(" in contents
    assert f"# PATH {source} ENDPATH" in contents


def test_load_renders_compiled_template(make_view, compiled_dir):
    source = make_view("home.blade.html", "Hello {{ name }}")
    compiler = BladeCompiler(Filesystem(), str(compiled_dir))
    compiler.compile(str(source))

    compiled = compiler.get_compiled_path(str(source))
    template = compiler.load(compiled, str(source))

    assert template.render(name="<World>") == "Hello &lt;World&gt;"
    assert compiler.load(compiled, str(source)) is template


def test_compile_without_path_is_noop(compiled_dir):
    compiler = BladeCompiler(Filesystem(), str(compiled_dir))
    compiler.compile()
    assert not compiled_dir.exists()


def test_syntax_errors_propagate(make_view, compiled_dir):
    source = make_view("broken.blade.html", "{% if %}")
    compiler = BladeCompiler(Filesystem(), str(compiled_dir))
    with pytest.raises(TemplateSyntaxError):
        compiler.compile(str(source))


def test_directives_and_filters(make_view, compiled_dir):
    source = make_view("money.blade.html", "{{ money(total) }} {{ name|shout }}")
    compiler = BladeCompiler(Filesystem(), str(compiled_dir))
    compiler.directive("money", lambda amount: f"${amount:,.2f}")
    compiler.filter("shout", str.upper)

    compiler.compile(str(source))
    template = compiler.load(compiler.get_compiled_path(str(source)))

    assert template.render(total=1234.5, name="bob") == "$1,234.50 BOB"
    assert list(compiler.get_custom_directives()) == ["money"]


def test_invalid_directive_name(compiled_dir):
    compiler = BladeCompiler(Filesystem(), str(compiled_dir))
    with pytest.raises(ValueError, match="not valid"):
        compiler.directive("bad-name", lambda: "")


def test_compile_string():
    compiler = BladeCompiler(Filesystem(), "cache")
    assert "def root(" in compiler.compile_string("{{ x }}")


def test_finder_loader_resolves_view_names(views_dir, make_view, compiled_dir):
    make_view("layouts/app.blade.html", "<main>{% block content %}{% endblock %}</main>")
    page = make_view("page.blade.html", '{% extends "layouts.app" %}{% block content %}Hi{% endblock %}')

    finder = FileViewFinder(Filesystem(), [str(views_dir)])
    compiler = BladeCompiler(Filesystem(), str(compiled_dir))
    compiler.set_loader(FinderLoader(finder))
    compiler.compile(str(page))

    template = compiler.load(compiler.get_compiled_path(str(page)), str(page))
    assert template.render() == "<main>Hi</main>"


def test_finder_loader_missing_template(views_dir):
    loader = FinderLoader(FileViewFinder(Filesystem(), [str(views_dir)]))
    with pytest.raises(TemplateNotFound):
        loader.get_source(None, "missing")
