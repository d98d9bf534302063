"""
Framework Helper Functions
User-facing shortcuts over the container and facades
"""
from typing import Any, Dict, Optional, Union


def bootstrap(config: Union[Dict[str, Any], None] = None, container=None):
    """
    Register the view services and point the facades at the container

    Args:
        config: View configuration ('view.paths', 'view.compiled', 'view.namespaces')
        container: Container to register into (the global container by default)

    Returns:
        The container

    Example:
        app = bootstrap({'view.paths': ['resources/views']})
        html = view('pages.home', {'title': 'Home'}).render()
    """
    from bladerunner.providers import BladeProvider
    from bladerunner.support.facades import Facade

    provider = BladeProvider(container, config).register()
    provider.boot()
    Facade.set_app(provider.app)

    return provider.app


def view(name: Optional[str] = None, data: Optional[Dict[str, Any]] = None, merge_data: Optional[Dict[str, Any]] = None):
    """
    Get the view factory, or a view instance when a name is given

    Example:
        view('pages.home', {'title': 'Home'}).render()
        view().share('site_name', 'Acme')
    """
    from bladerunner.support.facades import View

    if name is None:
        return View.get_facade_root()

    return View.make(name, data, merge_data)
