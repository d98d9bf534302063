"""
Console Package
"""
from bladerunner.console.command import Command
from bladerunner.console.console import Console, main

__all__ = [
    'Command',
    'Console',
    'main',
]
