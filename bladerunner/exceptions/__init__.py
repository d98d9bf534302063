"""
Exceptions Package
"""
from bladerunner.exceptions.custom import (
    BladerunnerException,
    BindingResolutionException,
    ViewNotFoundException,
    EngineNotFoundException,
    FileNotFoundException,
    ViewException,
)

__all__ = [
    'BladerunnerException',
    'BindingResolutionException',
    'ViewNotFoundException',
    'EngineNotFoundException',
    'FileNotFoundException',
    'ViewException',
]
