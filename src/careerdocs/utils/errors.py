"""Typed exceptions for content validation, templates and I/O formats."""


class CareerDocsError(Exception):
    """Base class for package specific errors."""


class ContentError(CareerDocsError, ValueError):
    """Raised when structured content does not match the expected schema."""


class TemplateNotFoundError(CareerDocsError, KeyError):
    """Raised when a style template name is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
