"""Core exceptions for precheck."""


class PrecheckError(Exception):
    """Base exception for all precheck errors."""

    def __init__(self, message: str, details: dict = None):
        """Initialize the exception."""
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class TraversalError(PrecheckError):
    """Raised when the scan root cannot be walked at all."""

    pass


class FileReadError(PrecheckError):
    """Raised when a single file cannot be read."""

    pass


class EncodingError(PrecheckError):
    """Raised when file content cannot be decoded as text."""

    pass


class PatternCompilationError(PrecheckError):
    """Raised when a built-in signature fails to compile."""

    pass


class ConfigurationError(PrecheckError):
    """Raised when configuration is invalid."""

    pass
