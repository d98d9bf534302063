"""
View Clear Command
Removes every compiled view file
"""
from bladerunner.console.command import Command
from bladerunner.defaults import DEFAULT_COMPILED_EXTENSION


class ViewClearCommand(Command):
    """Clear all compiled view files"""

    name = "view:clear"
    description = "Clear all compiled view files"

    async def handle(self, **kwargs):
        path = self.app['config']['view.compiled']
        files = self.app['files']

        if not path or not files.is_directory(path):
            self.error("View path not found.")
            return 1

        compiled = [file for file in files.files(path) if file.suffix == DEFAULT_COMPILED_EXTENSION]

        if not files.delete(compiled):
            self.error(f"Failed to clear compiled views in {path}")
            return 1

        self.success(f"Compiled views cleared ({len(compiled)} files).")
        return 0
