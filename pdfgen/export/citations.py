"""Rewrite footnote-style citations into LaTeX ``\\cite`` / ``\\bibitem`` form."""

from __future__ import annotations

import re

# Non-greedy so that [^a][^b] yields two keys rather than "a][^b"
CITATION_RE = re.compile(r"\[\^(.*?)\]")

BIBITEM_OPEN = "[^"
BIBITEM_CLOSE = "]:"

BIBLIOGRAPHY_BEGIN = "\\begin{thebibliography}{99}"
BIBLIOGRAPHY_END = "\\end{thebibliography}"

# Characters that never occur inside a URL in a reference list. Braces and
# brackets are excluded so \bibitem{key} and markdown links stay intact. The
# scheme is capped at 32 characters so long dotted runs fail fast.
_URL_CHAR = r"[^\s<>\"'`{}\[\]()\\|^]"
STRICT_URL_RE = re.compile(
    r"\b[A-Za-z][A-Za-z0-9+.\-]{0,31}://"
    rf"(?:{_URL_CHAR}|\({_URL_CHAR}*\))+"
    r"(?<![.,;:!?])"
)


def rewrite_citations(text: str) -> str:
    """Replace every ``[^key]`` with ``\\cite{key}``."""
    return CITATION_RE.sub(lambda m: f"\\cite{{{m.group(1)}}}", text)


def wrap_urls(text: str) -> str:
    """Wrap each strict URL in ``\\url{...}``.

    A single substitution pass, so a URL that is a prefix of another one is
    never wrapped inside it, and repeated URLs are wrapped once each.
    """
    return STRICT_URL_RE.sub(lambda m: f"\\url{{{m.group(0)}}}", text)


def build_bibliography(references: str) -> str:
    """Turn the ``## References`` list into a ``thebibliography`` environment."""
    # Order matters: openers before closers
    content = references.replace(BIBITEM_OPEN, "\\bibitem{")
    content = content.replace(BIBITEM_CLOSE, "}")
    content = wrap_urls(content)
    return BIBLIOGRAPHY_BEGIN + content + BIBLIOGRAPHY_END
