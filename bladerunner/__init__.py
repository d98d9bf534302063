"""
bladerunner
Laravel-style view services for Python applications

Export commonly used classes and helpers for easy import
"""
from bladerunner.container import Container
from bladerunner.config import Repository
from bladerunner.providers import BladeProvider, ViewServiceProvider
from bladerunner.helpers import bootstrap

__version__ = '1.0.0'

__all__ = [
    'Container',
    'Repository',
    'BladeProvider',
    'ViewServiceProvider',
    'bootstrap',
]
