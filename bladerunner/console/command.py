"""
Base Command Class
Laravel-style commands for the bladerunner CLI
"""
import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO, Union


class Command(ABC):
    """
    A named console command

    Subclasses set `name` and `description` and implement the async handle(),
    returning the process exit code. A list `signature` registers one command
    per entry, each dispatched to handle(action=<suffix after ':'>).
    """

    name: str = ""
    description: str = ""
    signature: Optional[Union[str, List[dict]]] = None

    def __init__(self, app=None, stream: Optional[TextIO] = None):
        self.app = app
        self.stream = stream
        if not self.signature:
            self.signature = self.name

    @abstractmethod
    async def handle(self, *args, **kwargs) -> int:
        """Run the command and return its exit code"""

    def info(self, message: str):
        self._write("ℹ", message)

    def success(self, message: str):
        self._write("✅", message)

    def error(self, message: str):
        self._write("❌", message)

    def warning(self, message: str):
        self._write("⚠", message)

    def line(self, message: str = ""):
        self._write(None, message)

    def _write(self, symbol: Optional[str], message: str):
        # Resolved per call so redirected/captured stdout is honoured
        stream = self.stream or sys.stdout
        stream.write(f"{symbol} {message}\n" if symbol else f"{message}\n")
