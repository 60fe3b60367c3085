"""CLI entry point."""

from __future__ import annotations

import argparse
import os
from typing import Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from pdfgen.config.config_loader import ConfigLoader
from pdfgen.errors import PdfgenError
from pdfgen.pipeline import convert_post
from pdfgen.utils.logging_config import resolve_log_level, setup_logging

DESCRIPTION = "pdfgen converts a golang.design research markdown file to a pdf."
USAGE = "pdfgen content/posts/bench-time.md"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdfgen", usage=USAGE, description=DESCRIPTION)
    parser.add_argument("path", help="markdown post to convert, e.g. content/posts/bench-time.md")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    console = Console(stderr=True)
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()
    log_file = os.getenv("PDFGEN_LOG_FILE")
    setup_logging(
        level=resolve_log_level(os.getenv("PDFGEN_LOG_LEVEL")),
        log_to_file=bool(log_file),
        log_file=log_file,
    )

    try:
        config = ConfigLoader().get_config()
        output = convert_post(args.path, config=config)
    except PdfgenError as e:
        # Text, not markup: renderer output is printed exactly as received
        console.print(Text.assemble(("Error:", "red"), " ", str(e)), soft_wrap=True)
        return e.exit_code

    console.print(f"[green]PDF written:[/] {escape(str(output))}", highlight=False, soft_wrap=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
