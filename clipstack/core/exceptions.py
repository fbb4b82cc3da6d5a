"""Custom exceptions for the clipboard history manager."""


class ClipstackError(Exception):
    """Base exception class for the clipboard history manager."""

    def __init__(self, message, original_error=None):
        super().__init__(message)
        self.original_error = original_error

    def __str__(self):
        base_msg = super().__str__()
        if self.original_error:
            return f"{base_msg} (Caused by: {type(self.original_error).__name__}: {str(self.original_error)})"
        return base_msg


class PlatformError(ClipstackError):
    """Base class for operating system clipboard failures."""
    pass


class ClipboardReadError(PlatformError):
    """Clipboard could not be read or holds no text."""
    pass


class ClipboardWriteError(PlatformError):
    """Clipboard rejected a write."""
    pass


class ConfigurationError(ClipstackError):
    """Error in application configuration."""
    pass
