"""Split a post into abstract, body and references.

Each extractor is an independent pass over the full text; none of them
depends on the others having run.
"""

from __future__ import annotations

from pdfgen.errors import ConventionError
from pdfgen.models.document import ArticleSections, SourceDocument

ABSTRACT_OPEN = "<!--abstract-->\n"
ABSTRACT_CLOSE = "\n<!--more-->"
BODY_OPEN = "\n<!--more-->"
REFERENCES_HEADING = "## References"

ABSTRACT_CONVENTION = """cannot find abstract, make sure the markdown uses the correct convention:

    <!--abstract-->
    abstract content goes here...
    <!--more-->
"""

BODY_CONVENTION = """cannot find body, make sure the markdown uses the correct convention:

    <!--more-->

    content body...

    ## References
"""

REFERENCES_CONVENTION = """cannot find references, make sure the markdown uses the correct convention:

    ## References

    [^ou2022bench]: Changkun Ou. 2020. Conduct Reliable Benchmarking in Go. TalkGo Meetup. Virtual Event. March 26. https://golang.design/s/gobench
"""


def parse_abstract(text: str) -> str:
    _, found, rest = text.partition(ABSTRACT_OPEN)
    if not found:
        raise ConventionError(ABSTRACT_CONVENTION)
    abstract, found, _ = rest.partition(ABSTRACT_CLOSE)
    if not found:
        raise ConventionError(ABSTRACT_CONVENTION)
    return abstract


def parse_body(text: str) -> str:
    _, found, rest = text.partition(BODY_OPEN)
    if not found:
        raise ConventionError(BODY_CONVENTION)
    body, found, _ = rest.partition(REFERENCES_HEADING)
    if not found:
        raise ConventionError(BODY_CONVENTION)
    return body


def parse_references(text: str) -> str:
    _, found, references = text.partition(REFERENCES_HEADING + "\n")
    if not found:
        raise ConventionError(REFERENCES_CONVENTION)
    return references


def extract_sections(document: SourceDocument) -> ArticleSections:
    return ArticleSections(
        abstract=parse_abstract(document.text),
        body=parse_body(document.text),
        references=parse_references(document.text),
    )
