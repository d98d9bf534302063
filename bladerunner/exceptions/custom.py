"""
Custom Exception Classes
View-layer exceptions raised by the container, finder, engines and filesystem
"""
from typing import Optional


class BladerunnerException(Exception):
    """Base exception for all bladerunner exceptions"""
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.__class__.message
        super().__init__(self.message)


class BindingResolutionException(BladerunnerException):
    """
    Container resolution exception

    Raised when a key is not bound or its bindings resolve in a cycle

    Example:
        raise BindingResolutionException("Target [view] is not bound.")
    """
    message = "Unable to resolve binding"


class ViewNotFoundException(BladerunnerException, ValueError):
    """
    View lookup exception

    Raised when the finder cannot locate a view or the view name is malformed

    Example:
        raise ViewNotFoundException("View [pages.home] not found.")
    """
    message = "View not found"


class EngineNotFoundException(BladerunnerException, ValueError):
    """
    Raised when no engine is registered under the requested name
    """
    message = "Engine not found"


class FileNotFoundException(BladerunnerException, FileNotFoundError):
    """
    Raised by the filesystem when reading a file that does not exist
    """
    message = "File does not exist"


class ViewException(BladerunnerException):
    """
    View rendering exception

    Wraps any error raised while evaluating a compiled view. The original
    exception is available as __cause__.

    Example:
        raise ViewException("division by zero (View: /app/views/home.blade.html)") from e
    """
    message = "Error rendering view"

    def __init__(self, message: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
