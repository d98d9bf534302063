"""
App Facade
Provides static access to the application container
"""
from bladerunner.support.facades.facade import Facade


class App(Facade):
    """
    Application Facade

    Example:
        files = App.make('files')

        if App.bound('view'):
            factory = App.make('view')

        App.singleton('clock', Clock)
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'app'

    @classmethod
    def get_facade_root(cls):
        """Return the container itself instead of resolving from it"""
        return cls.get_app()
