"""
Front matter and author extraction.

A post carries its metadata in two places: a YAML front matter block at the
top of the file, and an author line in the body::

    ---
    date: 2020-09-30T09:02:20+01:00
    title: Conduct Reliable Benchmarking in Go
    ---

    Author(s): [Changkun Ou](mailto:research[at]changkun.de)

The helpers here turn both into the metadata mapping the renderer reads.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

import yaml

from pdfgen.errors import ConventionError
from pdfgen.models.document import Author, SourceDocument

logger = logging.getLogger(__name__)

DATE_INPUT_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
DATE_FRACTION_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
DATE_OUTPUT_FORMAT = "%B %d, %Y"

AUTHOR_PREFIX = "Author(s): "
AUTHOR_SEPARATOR = ", "

AUTHOR_CONVENTION = """cannot find authors, make sure the markdown uses the correct convention:

Author(s): [FirstName LastName](mailto:email), [FirstName LastName](mailto:email)"""

HEADER_INCLUDES = r"""\usepackage{fancyhdr}
\pagestyle{fancy}
\fancyhead[LE,RO]{\rightmark}
\fancyhead[RE,LO]{The golang.design Research}
\fancyfoot{}
\fancyfoot[C]{\thepage}"""

_FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\n(?P<yaml>.*?)^(?:---|\.\.\.)[ \t]*$",
    re.DOTALL | re.MULTILINE,
)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _FrontMatterLoader(yaml.SafeLoader):
    """Safe loader that leaves timestamps as plain strings."""


_FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_front_matter(text: str) -> Dict[str, Any]:
    """Return the front matter mapping, or ``{}`` when the post has none."""
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}

    try:
        data = yaml.load(match.group("yaml"), Loader=_FrontMatterLoader)
    except yaml.YAMLError as e:
        raise ConventionError(f"cannot parse front matter: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConventionError("front matter must be a mapping of keys to values.")
    return data


def convert_date(metadata: Dict[str, Any]) -> None:
    """Rewrite ``metadata["date"]`` from RFC 3339 into ``Month DD, YYYY``."""
    if "date" not in metadata:
        raise ConventionError("metadata missing date information.")

    raw = metadata["date"]
    if not isinstance(raw, str):
        raise ConventionError("metadata contains invalid date format.")

    raw = raw.strip()
    # RFC 3339 allows fractional seconds
    fmt = DATE_FRACTION_FORMAT if "." in raw else DATE_INPUT_FORMAT
    try:
        parsed = datetime.strptime(raw, fmt)
    except ValueError as e:
        raise ConventionError(f"cannot parse date: {e}") from e

    metadata["date"] = parsed.strftime(DATE_OUTPUT_FORMAT)


def parse_author_entry(entry: str) -> Optional[Author]:
    """Decompose ``[Name](mailto:address)``; ``None`` if the entry is not a link."""
    before, sep, after = entry.strip().partition("](")
    if not sep:
        return None

    name = before.removeprefix("[")
    email = after.removesuffix(")").removeprefix("mailto:")
    email = email.replace("[at]", "@")
    return Author(name=name, email=email)


def parse_authors(text: str) -> List[Author]:
    """Collect authors from every ``Author(s): `` line, in order."""
    authors: List[Author] = []
    for line in text.splitlines():
        if not line.startswith(AUTHOR_PREFIX):
            continue
        for entry in line[len(AUTHOR_PREFIX):].split(AUTHOR_SEPARATOR):
            author = parse_author_entry(entry)
            if author is not None:
                authors.append(author)

    if not authors:
        raise ConventionError(AUTHOR_CONVENTION)
    return authors


def extract_metadata(document: SourceDocument) -> Dict[str, Any]:
    """Front matter plus the derived fields: date, author and header-includes.

    The abstract is added later, once its citations have been rewritten.
    """
    metadata = parse_front_matter(document.text)
    convert_date(metadata)

    authors = parse_authors(document.text)
    metadata["author"] = [author.citation() for author in authors]
    metadata["header-includes"] = HEADER_INCLUDES

    logger.debug("Metadata: date=%s authors=%d", metadata["date"], len(authors))
    return metadata
