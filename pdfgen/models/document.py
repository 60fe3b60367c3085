"""In-memory values passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel


class Author(BaseModel):
    name: str
    email: str

    def citation(self) -> str:
        """Author name with the email attached as an inline footnote."""
        return f"{self.name}^[Email: {self.email}]"

    def __str__(self) -> str:
        return self.citation()


@dataclass(frozen=True)
class SourceDocument:
    """A markdown post read from disk."""

    path: Path
    text: str


@dataclass(frozen=True)
class ArticleSections:
    abstract: str
    body: str
    references: str


@dataclass(frozen=True)
class PreparedArticle:
    """Everything the renderer needs: composite markdown and bibliography."""

    metadata: Dict[str, Any]
    article: str
    bibliography: str
