"""Exception hierarchy shared by the slidetree modules."""

from typing import Optional


class SlideTreeError(Exception):
    """Base exception for all slidetree errors"""

    def __init__(
        self,
        message: str,
        context: str = "",
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.original_error = original_error

    def __str__(self):
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class DocumentError(SlideTreeError):
    """Snapshot data does not describe a valid presentation"""
    pass


class SerializationError(SlideTreeError):
    """Model could not be converted into a generic value tree"""
    pass


class ComparisonError(SlideTreeError):
    """Comparer was configured incorrectly"""
    pass


class FormattingError(SlideTreeError):
    """Diff report could not be produced"""
    pass


class RenderError(SlideTreeError):
    """SVG conversion cannot proceed"""
    pass


class MissingAncestorError(SlideTreeError):
    """Placeholder parent reference does not resolve"""
    pass
