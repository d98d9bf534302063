"""
View Service Provider
Registers the view factory, finder and engine resolver
"""
from bladerunner.service_provider import ServiceProvider
from bladerunner.logging import getLogger
from bladerunner.view import (
    BladeCompiler,
    CompilerEngine,
    EngineResolver,
    Factory,
    FileEngine,
    FileViewFinder,
    FinderLoader,
)

logger = getLogger(__name__)


class ViewServiceProvider(ServiceProvider):
    """Service provider for the view layer"""

    def register(self):
        """Register view services in the container"""
        self.register_factory()
        self.register_view_finder()
        self.register_engine_resolver()
        return self

    def register_factory(self):
        """Register the view factory as the 'view' singleton"""
        def make_factory(app):
            # The resolver is used by the factory to get each engine
            # implementation (file, blade) from a view's extension
            resolver = app['view.engine.resolver']

            finder = app['view.finder']

            factory = self.create_factory(resolver, finder, app['events'])

            # Composers may be container keys, so the factory needs the container
            factory.set_container(app)

            factory.share('app', app)

            return factory

        self.app.singleton('view', make_factory)
        return self

    def create_factory(self, resolver: EngineResolver, finder: FileViewFinder, events) -> Factory:
        return Factory(resolver, finder, events)

    def register_view_finder(self):
        """Register the view finder implementation"""
        self.app.bind(
            'view.finder',
            lambda app: FileViewFinder(app['files'], app['config']['view.paths']),
            shared=True
        )
        return self

    def register_engine_resolver(self):
        """Register the engine resolver with the file and blade engines"""
        def make_resolver(app):
            resolver = EngineResolver()

            # Engines are built lazily, the first time a view needs them
            self.register_file_engine(resolver)
            self.register_blade_engine(resolver)

            return resolver

        self.app.singleton('view.engine.resolver', make_resolver)
        return self

    def register_file_engine(self, resolver: EngineResolver):
        """Register the file engine implementation"""
        resolver.register('file', lambda: FileEngine(self.app['files']))

    def register_blade_engine(self, resolver: EngineResolver):
        """Register the Blade engine implementation"""
        # The compiler engine needs a compiler, so the Blade compiler is
        # registered first and the engine resolves it on demand
        self.app.singleton_if('blade.compiler', self.create_compiler)

        resolver.register('blade', lambda: CompilerEngine(self.app['blade.compiler'], self.app['files']))

    def create_compiler(self, app) -> BladeCompiler:
        compiler = BladeCompiler(app['files'], app['config']['view.compiled'])
        compiler.set_loader(FinderLoader(app['view.finder']))
        logger.debug("Created Blade compiler for %s", compiler.cache_path)
        return compiler
