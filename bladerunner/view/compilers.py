"""
View Compilers
Compile template files into Python source stored under the compiled views path
"""
import hashlib
import os
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple

from jinja2 import BaseLoader, Environment, Template, TemplateNotFound

from bladerunner.defaults import DEFAULT_COMPILED_EXTENSION
from bladerunner.exceptions import ViewNotFoundException
from bladerunner.filesystem import Filesystem
from bladerunner.logging import getLogger

logger = getLogger(__name__)


class Compiler(ABC):
    """
    Base compiler

    Knows where compiled output lives and whether it is stale; subclasses
    implement the actual compile step.
    """

    def __init__(self, files: Filesystem, cache_path: Optional[str]):
        if not cache_path:
            raise ValueError("Please provide a valid cache path.")

        self.files = files
        self.cache_path = os.fspath(cache_path)

    def get_compiled_path(self, path: str) -> str:
        """Get the path to the compiled version of a view"""
        digest = hashlib.sha1(os.fspath(path).encode('utf-8')).hexdigest()
        return os.path.join(self.cache_path, digest + DEFAULT_COMPILED_EXTENSION)

    def is_expired(self, path: str) -> bool:
        """
        Determine if the view at the given path is expired

        A view is expired when it has never been compiled or when the source
        was modified at or after the compiled file.
        """
        compiled = self.get_compiled_path(path)

        if not self.files.exists(compiled):
            return True

        return self.files.last_modified(path) >= self.files.last_modified(compiled)

    @abstractmethod
    def compile(self, path: Optional[str] = None):
        """Compile the view at the given path"""


class BladeCompiler(Compiler):
    """
    Jinja2-backed template compiler

    compile() turns a template into the Python module source Jinja2 generates
    and writes it to the compiled path; load() turns that file back into a
    renderable Template.

    Example:
        compiler = BladeCompiler(Filesystem(), 'storage/views')
        compiler.directive('money', lambda amount: f"${amount:,.2f}")
        compiler.compile('resources/views/invoice.blade.html')
    """

    def __init__(self, files: Filesystem, cache_path: Optional[str], environment: Optional[Environment] = None):
        super().__init__(files, cache_path)
        self.environment = environment or Environment(autoescape=True)
        self.path: Optional[str] = None
        self.custom_directives: Dict[str, Callable] = {}
        self._loaded: Dict[str, Tuple[float, Template]] = {}
        self._lock = threading.RLock()

    def compile(self, path: Optional[str] = None):
        """Compile the view at the given path (or the last compiled path)"""
        path = os.fspath(path) if path else self.path

        if path is None:
            return

        contents = self.compile_string(self.files.get(path), path)
        contents += f"\n# PATH {path} ENDPATH\n"

        compiled = self.get_compiled_path(path)
        with self._lock:
            self.path = path
            self.files.replace(compiled, contents)
            self._loaded.pop(compiled, None)

        logger.info("Compiled view %s", path, extra={'compiled': compiled})

    def compile_string(self, value: str, name: Optional[str] = None) -> str:
        """
        Compile template source into Python source

        Raises:
            jinja2.TemplateSyntaxError: If the template is malformed
        """
        return self.environment.compile(value, name=name, filename=name, raw=True)

    def load(self, compiled_path: str, source_path: Optional[str] = None) -> Template:
        """Build a Template from a compiled file, reusing it while the file is unchanged"""
        with self._lock:
            mtime = self.files.last_modified(compiled_path)
            cached = self._loaded.get(compiled_path)
            if cached and cached[0] == mtime:
                return cached[1]

            code = compile(self.files.get(compiled_path), source_path or compiled_path, 'exec')
            template = self.environment.template_class.from_code(
                self.environment, code, self.environment.make_globals(None)
            )
            self._loaded[compiled_path] = (mtime, template)
            return template

    def directive(self, name: str, handler: Callable):
        """
        Register a callable available to every template

        Example:
            compiler.directive('datetime', lambda value: value.strftime('%m/%d/%Y %H:%M'))
            # {{ datetime(post.created_at) }}
        """
        if not name.isidentifier():
            raise ValueError(
                f"The directive name [{name}] is not valid. Directive names must be valid identifiers."
            )

        self.custom_directives[name] = handler
        self.environment.globals[name] = handler

    def get_custom_directives(self) -> Dict[str, Callable]:
        return self.custom_directives

    def filter(self, name: str, func: Callable):
        """Register a template filter ({{ value|name }})"""
        self.environment.filters[name] = func

    def share(self, key: str, value: Any):
        """Make a value global to every compiled template"""
        self.environment.globals[key] = value

    def set_loader(self, loader: BaseLoader):
        """Loader used for {% extends %}, {% include %} and {% import %}"""
        self.environment.loader = loader
        return self

    def get_path(self) -> Optional[str]:
        return self.path

    def set_path(self, path: str):
        self.path = os.fspath(path)


class FinderLoader(BaseLoader):
    """
    Jinja2 loader that resolves template names through the view finder

    Lets templates refer to each other by view name:

        {% extends "layouts.app" %}
        {% include "mail::partials.footer" %}
    """

    def __init__(self, finder):
        self.finder = finder

    def get_source(self, environment: Environment, template: str):
        try:
            path = self.finder.find(template)
        except ViewNotFoundException:
            raise TemplateNotFound(template)

        files = self.finder.get_filesystem()
        source = files.get(path)
        mtime = files.last_modified(path)
        return source, path, lambda: files.exists(path) and files.last_modified(path) == mtime
