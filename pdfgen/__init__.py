"""pdfgen: convert a research blog post (markdown) into a typeset PDF."""

from pdfgen.errors import ConventionError, DocumentIOError, PdfgenError, RendererError, UsageError
from pdfgen.pipeline import convert_post, prepare_article

__version__ = "0.1.0"

__all__ = [
    "ConventionError",
    "DocumentIOError",
    "PdfgenError",
    "RendererError",
    "UsageError",
    "convert_post",
    "prepare_article",
]
