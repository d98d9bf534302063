"""
View Package
Finder, compilers, engines and the factory behind the 'view' binding
"""
from bladerunner.view.finder import FileViewFinder
from bladerunner.view.compilers import Compiler, BladeCompiler, FinderLoader
from bladerunner.view.engines import Engine, FileEngine, CompilerEngine, EngineResolver
from bladerunner.view.view import View
from bladerunner.view.factory import Factory

__all__ = [
    # Lookup
    'FileViewFinder',

    # Compilation
    'Compiler',
    'BladeCompiler',
    'FinderLoader',

    # Engines
    'Engine',
    'FileEngine',
    'CompilerEngine',
    'EngineResolver',

    # Core
    'View',
    'Factory',
]
