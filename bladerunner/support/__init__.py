"""
Support Classes
"""
from bladerunner.support.env_helper import EnvHelper

__all__ = [
    'EnvHelper',
]
