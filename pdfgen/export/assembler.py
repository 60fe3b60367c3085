"""Serialize metadata and assemble the composite article the renderer reads."""

from __future__ import annotations

from typing import Any, Dict

import yaml

FRONT_MATTER_DELIMITER = "---"


class _ArticleDumper(yaml.SafeDumper):
    """Safe dumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_ArticleDumper.add_representer(str, _represent_str)


def dump_metadata(metadata: Dict[str, Any]) -> str:
    """YAML for the front matter block, keys sorted so output is reproducible."""
    return yaml.dump(
        metadata,
        Dumper=_ArticleDumper,
        sort_keys=True,
        allow_unicode=True,
        default_flow_style=False,
        width=10_000,
    )


def assemble_article(metadata: Dict[str, Any], body: str) -> str:
    """Front matter block followed by the transformed body."""
    head = dump_metadata(metadata)
    return f"{FRONT_MATTER_DELIMITER}\n{head}\n{FRONT_MATTER_DELIMITER}\n{body}\n"
