"""Extraction stages: load a post, read its metadata, split its sections."""

from pdfgen.extraction.loader import load_document
from pdfgen.extraction.metadata import (
    convert_date,
    extract_metadata,
    parse_author_entry,
    parse_authors,
    parse_front_matter,
)
from pdfgen.extraction.sections import (
    extract_sections,
    parse_abstract,
    parse_body,
    parse_references,
)

__all__ = [
    "convert_date",
    "extract_metadata",
    "extract_sections",
    "load_document",
    "parse_abstract",
    "parse_author_entry",
    "parse_authors",
    "parse_body",
    "parse_front_matter",
    "parse_references",
]
