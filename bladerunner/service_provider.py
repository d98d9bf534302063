"""
Service Provider Base Class
Laravel-style service providers for registering services in the container
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bladerunner.container import Container


class ServiceProvider(ABC):
    """
    Base Service Provider class

    Service providers are the central place for bootstrapping. They handle:
    - Registering services in the container
    - Bootstrapping them once every provider is registered
    """

    def __init__(self, app: 'Container'):
        self.app = app

    def register(self):
        """
        Register services in the container
        Called when the provider is registered (before booting)

        Example:
            self.app.singleton('files', Filesystem)
            self.app.bind('clock', lambda app: Clock(app['config']))
        """
        pass

    def boot(self):
        """
        Bootstrap services (after all providers are registered)
        """
        pass
