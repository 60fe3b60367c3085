"""
Pytest configuration and fixtures.
"""

import logging
from pathlib import Path

import pytest

from pdfgen.models.document import SourceDocument

SAMPLE_POST = """---
date: 2020-09-30T09:02:20+01:00
title: "Conduct Reliable Benchmarking in Go"
tags:
  - Go
  - Benchmark
---

Author(s): [Changkun Ou](mailto:research[at]changkun.de), [A B](mailto:a[at]b.com)

Permalink: https://golang.design/research/bench-time

<!--abstract-->
Benchmarking is hard [^ou2020bench].
<!--more-->

## Introduction

Timers are unreliable[^x], and so are clocks [^a][^b].

## References

[^ou2020bench]: Changkun Ou. 2020. Conduct Reliable Benchmarking in Go. https://golang.design/s/gobench
[^x]: Some Source. https://example.org
[^a]: A. https://example.com/a.
[^b]: B. See https://example.com/a. Also https://example.com/a
"""


@pytest.fixture
def sample_post_text() -> str:
    """A well-formed post with every convention the pipeline needs."""
    return SAMPLE_POST


@pytest.fixture
def sample_document(sample_post_text) -> SourceDocument:
    return SourceDocument(path=Path("content/posts/bench-time.md"), text=sample_post_text)


@pytest.fixture
def posts_dir(tmp_path) -> Path:
    """``content/posts`` directory inside a temporary site root."""
    directory = tmp_path / "content" / "posts"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def sample_post_path(posts_dir, sample_post_text) -> Path:
    path = posts_dir / "bench-time.md"
    path.write_text(sample_post_text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep user configuration out of the tests."""
    for name in ("PDFGEN_CONFIG", "PDFGEN_LOG_LEVEL", "PDFGEN_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_pdfgen_logger():
    """Drop handlers bound to streams captured by an earlier test."""
    yield
    logger = logging.getLogger("pdfgen")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
