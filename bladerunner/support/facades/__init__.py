"""
Facades Package
Laravel-style facades for static access to services
"""
from bladerunner.support.facades.facade import Facade
from bladerunner.support.facades.app import App
from bladerunner.support.facades.view import View
from bladerunner.support.facades.blade import Blade

__all__ = [
    'Facade',
    'App',
    'View',
    'Blade',
]
