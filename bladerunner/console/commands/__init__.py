from bladerunner.console.commands.view_clear_command import ViewClearCommand
from bladerunner.console.commands.container_command import ContainerCommand

__all__ = [
    'ViewClearCommand',
    'ContainerCommand',
]
