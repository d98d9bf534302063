"""
Facade System
Static-style access to services bound in the container
"""
from typing import Any, Dict, Optional

_app_instance: Optional[Any] = None

# Resolved roots, keyed by accessor; cleared whenever the container changes
_resolved_instances: Dict[str, Any] = {}


class FacadeMeta(type):
    """Forward unknown class attributes to the service behind the facade"""

    def __getattr__(cls, name: str) -> Any:
        return getattr(cls.get_facade_root(), name)


class Facade(metaclass=FacadeMeta):
    """
    Base Facade class

    A facade names a container binding through get_facade_accessor(); class
    attribute access is then forwarded to the resolved service:

        class View(Facade):
            @classmethod
            def get_facade_accessor(cls):
                return 'view'

        View.make('pages.home').render()
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        raise NotImplementedError(
            f"Facade {cls.__name__} does not implement get_facade_accessor()"
        )

    @classmethod
    def get_facade_root(cls) -> Any:
        """
        Resolve the service behind the facade (cached until the container changes)

        Raises:
            RuntimeError: If no application container is set
        """
        accessor = cls.get_facade_accessor()

        if accessor in _resolved_instances:
            return _resolved_instances[accessor]

        app = cls.get_app()
        if not app:
            raise RuntimeError(
                f"Facade {cls.__name__} cannot access application. "
                "Make sure to call Facade.set_app(app) during bootstrap."
            )

        root = app.make(accessor)
        if app.resolved(accessor):
            _resolved_instances[accessor] = root
        return root

    @classmethod
    def clear_resolved_instances(cls):
        _resolved_instances.clear()

    @classmethod
    def get_app(cls):
        return _app_instance

    @classmethod
    def set_app(cls, app):
        """Point every facade at a container (None to detach)"""
        global _app_instance
        _app_instance = app
        _resolved_instances.clear()
