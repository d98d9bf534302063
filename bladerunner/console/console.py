"""
Console
Dispatches `bladerunner <command>` to registered commands
"""
import asyncio
import sys
from typing import Dict, List, Optional

from bladerunner.console.command import Command
from bladerunner.console.commands import ContainerCommand, ViewClearCommand


class Console:
    """Command registry and runner"""

    COMMANDS = [ViewClearCommand, ContainerCommand]

    def __init__(self, app):
        self.app = app
        self.commands: Dict[str, Command] = {}

        for command_class in self.COMMANDS:
            self.add(command_class(app))

    def add(self, command: Command):
        """Register a command (multi-commands register each subcommand)"""
        if isinstance(command.signature, list):
            for sig in command.signature:
                self.commands[sig['command']] = command
        else:
            self.commands[command.name] = command

    def show_help(self):
        print("Usage: bladerunner <command> [arguments]")
        print()

        shown = set()
        for name in sorted(self.commands):
            command = self.commands[name]
            if isinstance(command.signature, list):
                if id(command) in shown:
                    continue
                shown.add(id(command))
                for sig in command.signature:
                    print(f"  {sig['command'] + ' ' + sig.get('args', ''):<35} {sig['description']}")
            else:
                print(f"  {command.signature:<35} {command.description}")

    async def run(self, argv: List[str]) -> int:
        """Run a command from argv (without the program name)"""
        if not argv or argv[0] in ('help', '-h', '--help'):
            self.show_help()
            return 0

        name, args = argv[0], argv[1:]

        if name not in self.commands:
            print(f"❌ Command '{name}' not found")
            self.show_help()
            return 1

        command = self.commands[name]

        if isinstance(command.signature, list):
            action = name.split(':')[-1]
            return await command.handle(action=action, binding=args[0] if args else None)

        return await command.handle()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the `bladerunner` console script"""
    from bladerunner.config import load_environment
    from bladerunner.helpers import bootstrap

    load_environment()
    app = bootstrap()

    return asyncio.run(Console(app).run(sys.argv[1:] if argv is None else argv))
