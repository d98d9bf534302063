"""
View
A located view bound to its engine and data
"""
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from markupsafe import Markup

if TYPE_CHECKING:
    from bladerunner.view.engines import Engine
    from bladerunner.view.factory import Factory


class View:
    """
    Renderable view

    Example:
        view = factory.make('pages.home', {'title': 'Home'})
        view.with_('user', user).with_({'year': 2026})
        html = view.render()
    """

    def __init__(
        self,
        factory: 'Factory',
        engine: 'Engine',
        view: str,
        path: str,
        data: Optional[Dict[str, Any]] = None
    ):
        self.factory = factory
        self.engine = engine
        self.view = view
        self.path = path
        self.data: Dict[str, Any] = dict(data or {})

    def render(self, callback: Optional[Callable[['View', str], Optional[str]]] = None) -> str:
        """
        Get the string contents of the view

        Args:
            callback: Optional callable(view, contents); a non-None return replaces the contents
        """
        contents = self.render_contents()

        if callback is not None:
            response = callback(self, contents)
            if response is not None:
                return response

        return contents

    def render_contents(self) -> str:
        # Composers run right before rendering so they see the final view data
        self.factory.call_composer(self)

        return self.engine.get(self.path, self.gather_data())

    def gather_data(self) -> Dict[str, Any]:
        """Shared data overlaid with view data; nested views are rendered first and marked safe"""
        data = dict(self.factory.get_shared())
        data.update(self.data)

        for key, value in data.items():
            if isinstance(value, View):
                data[key] = Markup(value.render())

        return data

    def with_(self, key, value: Any = None) -> 'View':
        """
        Add a piece of data to the view

        Args:
            key: Data key, or a dict of key/value pairs
            value: Value when key is a string
        """
        if isinstance(key, dict):
            self.data.update(key)
        else:
            self.data[key] = value

        return self

    def nest(self, key: str, view: str, data: Optional[Dict[str, Any]] = None) -> 'View':
        """Add a view instance to the view data"""
        return self.with_(key, self.factory.make(view, data))

    def name(self) -> str:
        return self.get_name()

    def get_name(self) -> str:
        return self.view

    def get_data(self) -> Dict[str, Any]:
        return self.data

    def get_path(self) -> str:
        return self.path

    def set_path(self, path: str):
        self.path = path

    def get_factory(self) -> 'Factory':
        return self.factory

    def get_engine(self) -> 'Engine':
        return self.engine

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any):
        self.with_(key, value)

    def __delitem__(self, key: str):
        del self.data[key]

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"View({self.view!r}, path={self.path!r})"
