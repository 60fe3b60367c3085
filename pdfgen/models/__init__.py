"""Model exports for stage boundaries."""

from pdfgen.models.config import MarkdownDialect, PdfgenConfig, RendererConfig
from pdfgen.models.document import ArticleSections, Author, PreparedArticle, SourceDocument

__all__ = [
    "ArticleSections",
    "Author",
    "MarkdownDialect",
    "PdfgenConfig",
    "PreparedArticle",
    "RendererConfig",
    "SourceDocument",
]
