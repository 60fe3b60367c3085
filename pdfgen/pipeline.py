"""
Post-to-PDF pipeline.

Load -> metadata -> sections -> citations -> assemble -> render -> cleanup.
Every stage raises a PdfgenError on failure; nothing here catches them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from pdfgen.errors import UsageError
from pdfgen.export.assembler import assemble_article
from pdfgen.export.citations import build_bibliography, rewrite_citations
from pdfgen.export.pandoc_converter import PandocRenderer, derive_output_path, staged_files
from pdfgen.extraction.loader import load_document
from pdfgen.extraction.metadata import extract_metadata
from pdfgen.extraction.sections import extract_sections
from pdfgen.models.config import PdfgenConfig
from pdfgen.models.document import PreparedArticle, SourceDocument

logger = logging.getLogger(__name__)


def prepare_article(document: SourceDocument) -> PreparedArticle:
    """Run every text transformation; no files are touched."""
    metadata = extract_metadata(document)
    sections = extract_sections(document)

    metadata["abstract"] = rewrite_citations(sections.abstract)
    body = rewrite_citations(sections.body)

    return PreparedArticle(
        metadata=metadata,
        article=assemble_article(metadata, body),
        bibliography=build_bibliography(sections.references),
    )


def convert_post(
    path: Union[str, Path],
    config: Optional[PdfgenConfig] = None,
    renderer: Optional[PandocRenderer] = None,
) -> Path:
    """
    Convert one markdown post into a PDF.

    The composite article and bibliography are written next to the post
    (the renderer resolves relative paths from there) and removed again once
    the renderer returns, successfully or not.

    Args:
        path: Markdown post, e.g. ``content/posts/bench-time.md``
        config: Tool configuration (defaults when omitted)
        renderer: Renderer to use (built from ``config`` when omitted)

    Returns:
        Path of the rendered PDF
    """
    config = config or PdfgenConfig()
    renderer = renderer or PandocRenderer(config.renderer, config.markdown)

    document = load_document(path)
    workdir = document.path.parent
    article_path = workdir / config.article_name
    bibliography_path = workdir / config.bibliography_name
    if document.path.resolve() in (article_path.resolve(), bibliography_path.resolve()):
        raise UsageError(
            f"input file must not be named {document.path.name}, it is used as a temporary file."
        )

    prepared = prepare_article(document)
    output_path = derive_output_path(document.path, config.posts_dir)
    logger.debug("Rendering %s to %s", document.path, output_path)

    with staged_files(
        [
            (bibliography_path, prepared.bibliography),
            (article_path, prepared.article),
        ]
    ):
        return renderer.render(article_path, bibliography_path, output_path, resource_dir=workdir)
