"""
Service Providers
"""
from bladerunner.providers.view_service_provider import ViewServiceProvider
from bladerunner.providers.blade_provider import BladeProvider

__all__ = [
    'ViewServiceProvider',
    'BladeProvider',
]
