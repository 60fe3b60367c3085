"""Read a markdown post from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from pdfgen.errors import DocumentIOError, UsageError
from pdfgen.models.document import SourceDocument

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def load_document(path: Union[str, Path]) -> SourceDocument:
    """Load the whole post into memory.

    Line endings are normalized to ``\\n`` so the section delimiters match
    posts saved with CRLF endings.
    """
    path = Path(path)
    if path.suffix != MARKDOWN_SUFFIX:
        raise UsageError("input file must be a markdown file.")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentIOError(f"failed to load the given markdown file: {e}") from e

    logger.debug("Loaded %s (%d characters)", path, len(text))
    return SourceDocument(path=path, text=text)
