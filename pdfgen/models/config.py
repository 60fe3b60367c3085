"""Configuration models loaded from YAML."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class MarkdownDialect(BaseModel):
    """Markdown flavour the renderer reads the composite article as."""

    base: str = "markdown"
    extensions: List[str] = Field(
        default_factory=lambda: [
            "pipe_tables",
            "yaml_metadata_block",
            "auto_identifiers",
        ]
    )

    @property
    def from_format(self) -> str:
        """Pandoc ``--from`` value, e.g. ``markdown+pipe_tables+yaml_metadata_block``."""
        return "".join([self.base, *(f"+{ext}" for ext in self.extensions)])


class RendererConfig(BaseModel):
    executable: str = "pandoc"
    pdf_engine: str = "xelatex"
    link_color: str = "blue"
    extra_args: List[str] = Field(default_factory=list)


class PdfgenConfig(BaseModel):
    renderer: RendererConfig = Field(default_factory=RendererConfig)
    markdown: MarkdownDialect = Field(default_factory=MarkdownDialect)
    article_name: str = Field(default="article.md", min_length=1)
    bibliography_name: str = Field(default="ref.tex", min_length=1)
    posts_dir: str = Field(
        default="posts",
        min_length=1,
        description="Directory component the PDF is moved out of.",
    )
