"""
Pandoc Converter

Renders the composite article and its bibliography to PDF with Pandoc.
The renderer is run as a subprocess; its own output is the error detail
when it fails.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

import pypandoc

from pdfgen.errors import DocumentIOError, RendererError
from pdfgen.models.config import MarkdownDialect, RendererConfig

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"


def derive_output_path(input_path: Path, posts_dir: str = "posts") -> Path:
    """
    Compute where the PDF goes for a given post.

    The ``.md`` suffix becomes ``.pdf`` and the ``posts`` directory nearest to
    the file is dropped, so ``content/posts/bench-time.md`` renders to
    ``content/bench-time.pdf``. Posts outside a ``posts`` directory render next
    to the source file.

    Args:
        input_path: Path of the markdown post
        posts_dir: Directory name to move the PDF out of

    Returns:
        Output PDF path
    """
    input_path = Path(input_path)
    pdf_name = input_path.with_suffix(PDF_SUFFIX).name
    parts = list(input_path.parent.parts)

    for index in range(len(parts) - 1, -1, -1):
        if parts[index] == posts_dir:
            del parts[index]
            break

    return Path(*parts, pdf_name) if parts else Path(pdf_name)


@contextmanager
def staged_files(files: Sequence[Tuple[Path, str]]) -> Iterator[List[Path]]:
    """
    Write temporary files for the renderer and remove them on exit.

    Every file that was written is removed when the block exits, whether it
    exits normally, through an exception raised inside it, or because a later
    write failed.

    Args:
        files: ``(path, content)`` pairs, written in order

    Yields:
        The written paths
    """
    written: List[Path] = []
    try:
        for path, content in files:
            try:
                path.write_text(content, encoding="utf-8")
            except OSError as e:
                raise DocumentIOError(f"cannot create temporary file: {e}") from e
            written.append(path)
            logger.debug("Wrote temporary file %s", path)
        yield written
    finally:
        for path in reversed(written):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning(f"Could not remove temporary file {path}: {e}")


class PandocRenderer:
    """Invoke Pandoc on the composite article and bibliography."""

    def __init__(
        self,
        config: Optional[RendererConfig] = None,
        dialect: Optional[MarkdownDialect] = None,
    ):
        """
        Initialize the renderer.

        Args:
            config: Renderer settings (executable, PDF engine, link color)
            dialect: Markdown dialect the article is written in
        """
        self.config = config or RendererConfig()
        self.dialect = dialect or MarkdownDialect()

    def resolve_executable(self) -> Optional[str]:
        """
        Locate the renderer executable.

        The default ``pandoc`` is looked up through pypandoc, which also finds
        pandoc installed by ``pypandoc_binary`` or under ``~/.pandoc``. Other
        executables are looked up on PATH.

        Returns:
            Full path to the executable, or None if it cannot be found
        """
        if self.config.executable == "pandoc":
            try:
                path = pypandoc.get_pandoc_path()
            except OSError:
                return None
            logger.debug(f"Pandoc found at: {path}")
            return str(path)
        return shutil.which(self.config.executable)

    def check_available(self) -> bool:
        """
        Check if the renderer executable can be found.

        Returns:
            True if the executable is available, False otherwise
        """
        return self.resolve_executable() is not None

    def build_command(
        self,
        article_path: Path,
        bibliography_path: Path,
        output_path: Path,
        resource_dir: Optional[Path] = None,
    ) -> List[str]:
        """Command line for one render."""
        cmd = [
            self.resolve_executable() or self.config.executable,
            str(article_path),
            str(bibliography_path),
            "--from",
            self.dialect.from_format,
            "-V",
            f"linkcolor:{self.config.link_color}",
            f"--pdf-engine={self.config.pdf_engine}",
        ]

        # Let relative image paths in the post resolve against its directory
        if resource_dir is not None:
            cmd.extend(["--resource-path", f"{resource_dir}{os.pathsep}."])

        cmd.extend(self.config.extra_args)
        cmd.extend(["-o", str(output_path)])
        return cmd

    def render(
        self,
        article_path: Path,
        bibliography_path: Path,
        output_path: Path,
        resource_dir: Optional[Path] = None,
    ) -> Path:
        """
        Run the renderer and wait for it to finish.

        Args:
            article_path: Composite markdown file
            bibliography_path: LaTeX bibliography file
            output_path: PDF to produce
            resource_dir: Directory relative resources are looked up in

        Returns:
            Path to generated PDF file

        Raises:
            RendererError: If the renderer is missing or exits non-zero
        """
        cmd = self.build_command(article_path, bibliography_path, output_path, resource_dir)
        logger.info(shlex.join(cmd))

        try:
            completed = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            raise RendererError(f"cannot run {self.config.executable}: {e}") from e

        if completed.returncode != 0:
            logger.debug(f"Renderer exited with status {completed.returncode}")
            raise RendererError(
                completed.stdout
                or f"{self.config.executable} exited with status {completed.returncode}"
            )

        logger.info(f"Rendered PDF: {output_path}")
        return output_path
