"""Export package: citation rewriting, article assembly, Pandoc rendering."""

from pdfgen.export.assembler import assemble_article, dump_metadata
from pdfgen.export.citations import (
    build_bibliography,
    rewrite_citations,
    wrap_urls,
)
from pdfgen.export.pandoc_converter import PandocRenderer, derive_output_path, staged_files

__all__ = [
    "assemble_article",
    "build_bibliography",
    "derive_output_path",
    "dump_metadata",
    "PandocRenderer",
    "rewrite_citations",
    "staged_files",
    "wrap_urls",
]
