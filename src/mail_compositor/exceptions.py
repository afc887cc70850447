"""Custom exceptions for the composition engine."""


class CompositorError(Exception):
    """Base exception for all composition and split errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ParseError(CompositorError):
    """Raised when source bytes are not a valid page document."""

    def __init__(self, message: str, source: str | None = None, *args, **kwargs):
        self.source = source
        super().__init__(message, *args, **kwargs)


class ValidationError(CompositorError):
    """Raised when a manifest or filename fails structural rules."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class NotFoundError(CompositorError):
    """Raised when a referenced composite or source path does not exist."""

    def __init__(self, message: str = "Resource not found", path: str | None = None):
        self.path = path
        super().__init__(message)


class PersistenceError(CompositorError):
    """Raised when writing merged or split output fails."""

    def __init__(self, message: str, path: str | None = None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)
