"""
Container Commands
Commands for inspecting the service container
"""
from bladerunner.console.command import Command


class ContainerCommand(Command):
    """Container inspection commands"""

    name = "container"
    description = "Container inspection operations"

    signature = [
        {"command": "container:list", "description": "List all registered container bindings"},
        {"command": "container:check", "args": "{binding}", "description": "Check if a specific binding exists"},
    ]

    async def handle(self, action: str = None, binding: str = None, **kwargs):
        """Route to the handler for the requested action"""
        if action == 'list':
            return await self.handle_list()
        elif action == 'check':
            return await self.handle_check(binding=binding)
        else:
            self.error(f"Unknown action: {action}")
            return 1

    async def handle_list(self, **kwargs):
        bindings = self.app.get_bindings()

        if not bindings:
            self.error("No bindings registered in container")
            return 1

        singletons = sum(1 for info in bindings.values() if info['type'] == 'singleton')
        factories = len(bindings) - singletons

        self.success(f"Found {len(bindings)} bindings ({singletons} singletons, {factories} factories)")
        self.line()
        self.line(self.app.list_bindings())
        return 0

    async def handle_check(self, binding: str = None, **kwargs):
        if not binding:
            self.error("Please provide a binding name")
            self.line()
            self.line("Usage: bladerunner container:check {binding_name}")
            return 1

        if not self.app.has(binding):
            self.error(f"Binding '{binding}' not found in container")
            return 1

        info = self.app.get_bindings()[binding]

        self.success(f"Binding '{binding}' exists")
        self.line(f"  Type: {info['type']}")

        if info['type'] == 'singleton':
            status = 'instantiated' if info['instantiated'] else 'lazy (not yet created)'
            self.line(f"  Status: {status}")
        else:
            self.line("  Behavior: Creates new instance on each make() call")

        return 0
