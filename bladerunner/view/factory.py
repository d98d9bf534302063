"""
View Factory
Creates views, holds shared data and wires composers/creators to events
"""
import os
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from bladerunner.events import Dispatcher
from bladerunner.exceptions import ViewNotFoundException
from bladerunner.defaults import DEFAULT_VIEW_ENGINE_EXTENSIONS
from bladerunner.logging import getLogger
from bladerunner.view.engines import Engine, EngineResolver
from bladerunner.view.finder import FileViewFinder
from bladerunner.view.view import View

logger = getLogger(__name__)


class Factory:
    """
    View factory

    Example:
        view = factory.make('pages.home', {'title': 'Home'})
        factory.share('site_name', 'Acme')
        factory.composer('pages.*', lambda view: view.with_('menu', load_menu()))
        html = view.render()
    """

    def __init__(self, engines: EngineResolver, finder: FileViewFinder, events: Dispatcher):
        self.engines = engines
        self.finder = finder
        self.events = events
        self.container = None
        self.shared_data: Dict[str, Any] = {'__env': self}
        self.extensions: Dict[str, str] = dict(DEFAULT_VIEW_ENGINE_EXTENSIONS)

    def file(self, path: str, data: Optional[Dict[str, Any]] = None, merge_data: Optional[Dict[str, Any]] = None) -> View:
        """Get a view instance for a file path, bypassing the finder"""
        data = {**(merge_data or {}), **(data or {})}

        view = self._view_instance(os.fspath(path), os.fspath(path), data)
        self.call_creator(view)
        return view

    def make(self, view: str, data: Optional[Dict[str, Any]] = None, merge_data: Optional[Dict[str, Any]] = None) -> View:
        """
        Get a view instance

        Raises:
            ViewNotFoundException: If the view cannot be located
        """
        view = self.normalize_name(view)
        path = self.finder.find(view)

        data = {**(merge_data or {}), **(data or {})}

        instance = self._view_instance(view, path, data)
        self.call_creator(instance)
        return instance

    def first(self, views: Iterable[str], data: Optional[Dict[str, Any]] = None, merge_data: Optional[Dict[str, Any]] = None) -> View:
        """Get the first view that actually exists"""
        for view in views:
            if self.exists(view):
                return self.make(view, data, merge_data)

        raise ViewNotFoundException("None of the views in the given array exist.")

    def render_when(self, condition: bool, view: str, data: Optional[Dict[str, Any]] = None, merge_data: Optional[Dict[str, Any]] = None) -> str:
        if not condition:
            return ''

        return self.make(view, data, merge_data).render()

    def render_each(self, view: str, items: Iterable[Any], iterator: str, empty: str = 'raw|') -> str:
        """
        Render a view once per item

        Args:
            view: View name rendered for every item
            items: Items to iterate
            iterator: Data key holding the current item
            empty: View rendered when there are no items, or 'raw|text' for literal text
        """
        items = list(items)
        rendered = []

        for key, value in enumerate(items):
            rendered.append(self.make(view, {'key': key, iterator: value}).render())

        if items:
            return ''.join(rendered)

        if empty.startswith('raw|'):
            return empty[4:]

        return self.make(empty).render()

    def normalize_name(self, name: str) -> str:
        """Use dot notation for the view segment, keeping any namespace prefix"""
        delimiter = FileViewFinder.HINT_PATH_DELIMITER

        if delimiter not in name:
            return name.replace('/', '.')

        namespace, _, view = name.partition(delimiter)
        return namespace + delimiter + view.replace('/', '.')

    def _view_instance(self, view: str, path: str, data: Dict[str, Any]) -> View:
        return View(self, self.get_engine_from_path(path), view, path, data)

    def exists(self, view: str) -> bool:
        try:
            self.finder.find(self.normalize_name(view))
        except ViewNotFoundException:
            return False

        return True

    def get_engine_from_path(self, path: str) -> Engine:
        """
        Get the engine for a view path from its extension

        Raises:
            ValueError: If no engine is mapped to the extension
        """
        extension = self.get_extension(path)
        if extension is None:
            raise ValueError(f"Unrecognized extension in file: {path}")

        return self.engines.resolve(self.extensions[extension])

    def get_extension(self, path: str) -> Optional[str]:
        """Longest registered extension the path ends with"""
        for extension in sorted(self.extensions, key=len, reverse=True):
            if path.endswith('.' + extension):
                return extension

        return None

    def share(self, key: Union[str, Dict[str, Any]], value: Any = None) -> Any:
        """Add a piece of shared data (or a dict of them) to every view"""
        keys = key if isinstance(key, dict) else {key: value}

        self.shared_data.update(keys)

        return value

    def shared(self, key: str, default: Any = None) -> Any:
        return self.shared_data.get(key, default)

    def get_shared(self) -> Dict[str, Any]:
        return self.shared_data

    def creator(self, views: Union[str, List[str]], callback) -> List[Callable]:
        """Register a callback run when a view is created"""
        return self._register_callbacks('creating', 'create', views, callback)

    def composer(self, views: Union[str, List[str]], callback) -> List[Callable]:
        """Register a callback run right before a view is rendered"""
        return self._register_callbacks('composing', 'compose', views, callback)

    def composers(self, composers: Dict[Any, Union[str, List[str]]]) -> List[Callable]:
        """Register many composers at once: {callback: views}"""
        registered = []

        for callback, views in composers.items():
            registered.extend(self.composer(views, callback))

        return registered

    def _register_callbacks(self, prefix: str, method: str, views, callback) -> List[Callable]:
        if isinstance(views, str):
            views = [views]

        registered = []
        for view in views:
            listener = self._build_listener(callback, method, wildcard='*' in view)
            self.events.listen(f"{prefix}: {self.normalize_name(view)}", listener)
            registered.append(listener)

        logger.debug("Registered %s callback for %s", prefix, views)
        return registered

    def _build_listener(self, callback, method: str, wildcard: bool) -> Callable:
        # Strings are container keys for objects exposing compose()/create()
        if isinstance(callback, str):
            def resolve(view):
                return getattr(self.container.make(callback), method)(view)
            target = resolve
        elif not callable(callback) and hasattr(callback, method):
            target = getattr(callback, method)
        else:
            target = callback

        if wildcard:
            return lambda event, payload: target(payload[0])
        return target

    def call_composer(self, view: View):
        if self.events.has_listeners(f"composing: {view.name()}"):
            self.events.dispatch(f"composing: {view.name()}", [view])

    def call_creator(self, view: View):
        if self.events.has_listeners(f"creating: {view.name()}"):
            self.events.dispatch(f"creating: {view.name()}", [view])

    def add_location(self, location: str):
        self.finder.add_location(location)

    def prepend_location(self, location: str):
        self.finder.prepend_location(location)

    def add_namespace(self, namespace: str, hints: Union[str, List[str]]):
        self.finder.add_namespace(namespace, hints)
        return self

    def prepend_namespace(self, namespace: str, hints: Union[str, List[str]]):
        self.finder.prepend_namespace(namespace, hints)
        return self

    def replace_namespace(self, namespace: str, hints: Union[str, List[str]]):
        self.finder.replace_namespace(namespace, hints)
        return self

    def add_extension(self, extension: str, engine: str, resolver: Optional[Callable[[], Engine]] = None):
        """
        Register a valid view extension and its engine

        The extension is tried before the ones already registered.
        """
        self.finder.add_extension(extension)

        if resolver is not None:
            self.engines.register(engine, resolver)

        self.extensions.pop(extension, None)
        self.extensions = {extension: engine, **self.extensions}

    def get_extensions(self) -> Dict[str, str]:
        return self.extensions

    def flush_finder_cache(self):
        self.finder.flush()

    def get_engine_resolver(self) -> EngineResolver:
        return self.engines

    def get_finder(self) -> FileViewFinder:
        return self.finder

    def set_finder(self, finder: FileViewFinder):
        self.finder = finder

    def get_dispatcher(self) -> Dispatcher:
        return self.events

    def set_dispatcher(self, events: Dispatcher):
        self.events = events

    def get_container(self):
        return self.container

    def set_container(self, container):
        self.container = container
