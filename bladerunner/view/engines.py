"""
View Engines
Turn a located view file plus data into rendered output
"""
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from bladerunner.exceptions import EngineNotFoundException, ViewException
from bladerunner.filesystem import Filesystem
from bladerunner.logging import getLogger
from bladerunner.view.compilers import Compiler

logger = getLogger(__name__)


class Engine(ABC):
    """Base view engine"""

    @abstractmethod
    def get(self, path: str, data: Optional[Dict[str, Any]] = None) -> str:
        """Get the evaluated contents of the view"""


class FileEngine(Engine):
    """Return the file contents untouched (plain HTML, CSS, ...)"""

    def __init__(self, files: Filesystem):
        self.files = files

    def get(self, path: str, data: Optional[Dict[str, Any]] = None) -> str:
        return self.files.get(path)


class CompilerEngine(Engine):
    """
    Engine that compiles a view before evaluating it

    Views are recompiled only when the compiler reports them expired. The
    engine is shared across threads; each thread keeps its own stack of
    views being rendered.
    """

    def __init__(self, compiler: Compiler, files: Optional[Filesystem] = None):
        self.compiler = compiler
        self.files = files or compiler.files
        self._local = threading.local()

    @property
    def last_compiled(self) -> List[str]:
        """Views currently being rendered by this thread, innermost last"""
        if not hasattr(self._local, 'stack'):
            self._local.stack = []
        return self._local.stack

    def get(self, path: str, data: Optional[Dict[str, Any]] = None) -> str:
        """
        Get the evaluated contents of the view

        Raises:
            ViewException: If loading or evaluating the compiled view fails
        """
        self.last_compiled.append(path)

        try:
            if self.compiler.is_expired(path):
                self.compiler.compile(path)

            return self.evaluate_path(self.compiler.get_compiled_path(path), data or {}, path)
        finally:
            self.last_compiled.pop()

    def evaluate_path(self, compiled_path: str, data: Dict[str, Any], path: Optional[str] = None) -> str:
        try:
            template = self.compiler.load(compiled_path, path)
            return template.render(data)
        except Exception as e:
            self.handle_view_exception(e, path)

    def handle_view_exception(self, e: Exception, path: Optional[str]):
        logger.error("Error rendering view %s: %s", path, e)
        raise ViewException(f"{e} (View: {path})", path=path) from e

    def get_compiler(self) -> Compiler:
        return self.compiler


class EngineResolver:
    """
    Registry of named engines, built lazily

    Example:
        resolver = EngineResolver()
        resolver.register('file', lambda: FileEngine(files))
        engine = resolver.resolve('file')
    """

    def __init__(self):
        self.resolvers: Dict[str, Callable[[], Engine]] = {}
        self.resolved: Dict[str, Engine] = {}

    def register(self, engine: str, resolver: Callable[[], Engine]):
        """Register a new engine resolver, replacing any resolved instance"""
        self.resolved.pop(engine, None)
        self.resolvers[engine] = resolver

    def resolve(self, engine: str) -> Engine:
        """
        Resolve an engine instance by name

        Raises:
            EngineNotFoundException: If no resolver is registered under the name
        """
        if engine in self.resolved:
            return self.resolved[engine]

        if engine in self.resolvers:
            self.resolved[engine] = self.resolvers[engine]()
            return self.resolved[engine]

        raise EngineNotFoundException(f"Engine [{engine}] not found.")

    def forget(self, engine: str):
        self.resolved.pop(engine, None)
