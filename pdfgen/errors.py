"""
Custom exceptions for the markdown-to-PDF pipeline.
"""


class PdfgenError(Exception):
    """Base exception for pdfgen errors."""

    exit_code = 1


class UsageError(PdfgenError):
    """Raised when the tool is invoked or configured incorrectly."""

    exit_code = 2


class DocumentIOError(PdfgenError):
    """Raised when the input or a temporary file cannot be read or written."""

    pass


class ConventionError(PdfgenError):
    """Raised when the post does not follow the required source conventions."""

    pass


class RendererError(PdfgenError):
    """Raised when the external renderer fails. The message is its raw output."""

    pass
