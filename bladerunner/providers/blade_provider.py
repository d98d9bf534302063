"""
Blade Provider
Registers the whole view stack into an existing (or the global) container
"""
from typing import Any, Dict, Optional, Union

from bladerunner.config import Repository, view_defaults
from bladerunner.container import Container
from bladerunner.events import Dispatcher
from bladerunner.filesystem import Filesystem
from bladerunner.logging import getLogger
from bladerunner.providers.view_service_provider import ViewServiceProvider
from bladerunner.view import FileViewFinder

logger = getLogger(__name__)


class BladeProvider(ViewServiceProvider):
    """
    Standalone view service provider

    Services already bound in the container ('config', 'files', 'events',
    'view.finder') are kept, so the provider can be dropped into an
    application that supplies its own.

    Example:
        provider = BladeProvider(config={
            'view.paths': ['resources/views'],
            'view.compiled': 'storage/views',
        }).register()
        html = provider.app['view'].make('pages.home', {'title': 'Home'}).render()
    """

    def __init__(self, container: Optional[Container] = None, config: Union[Dict[str, Any], Repository, None] = None):
        super().__init__(container or Container.get_instance())

        self.app.bind_if('config', lambda app: self.create_config(config), shared=True)

    def create_config(self, config: Union[Dict[str, Any], Repository, None]) -> Repository:
        """Wrap the given config in a repository, filling in missing view settings"""
        repository = config if isinstance(config, Repository) else Repository(config)

        for key, value in view_defaults().items():
            if repository.get(key) is None:
                repository.set(key, value)

        return repository

    def register(self):
        """Bind required instances for the service provider"""
        self.register_filesystem()
        self.register_events()
        self.register_engine_resolver()
        self.register_view_finder()
        self.register_factory()
        logger.debug("Registered view services")
        return self

    def register_filesystem(self):
        self.app.bind_if('files', Filesystem, shared=True)
        return self

    def register_events(self):
        """Register the events dispatcher"""
        self.app.bind_if('events', Dispatcher, shared=True)
        return self

    def register_engine_resolver(self):
        super().register_engine_resolver()

        # Available before the first view renders, so directives can be added early
        self.app.singleton_if('blade.compiler', self.create_compiler)
        return self

    def register_view_finder(self):
        """Register the view finder implementation"""
        def make_finder(app):
            config = app['config']
            finder = FileViewFinder(app['files'], config['view.paths'])

            for namespace, hints in (config['view.namespaces'] or {}).items():
                finder.add_namespace(namespace, hints)

            return finder

        self.app.bind_if('view.finder', make_finder, shared=True)
        return self
