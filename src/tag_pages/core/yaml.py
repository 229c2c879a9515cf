from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import yaml

from tag_pages.errors import InvalidFrontmatter

@dataclass(frozen=True)
class Frontmatter:
    data: Dict[str, Any]
    body: str

def split_frontmatter(md: str) -> Tuple[str, str]:
    if not md.startswith("---"):
        return "", md

    lines = md.splitlines(keepends=True)
    if not lines or lines[0].strip() != "---":
        return "", md

    end_idx = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end_idx = i
            break
    if end_idx is None:
        raise InvalidFrontmatter("Malformed YAML frontmatter: missing closing '---'")

    yaml_text = "".join(lines[1:end_idx])
    body = "".join(lines[end_idx + 1 :])
    return yaml_text, body

def parse_frontmatter(md: str) -> Frontmatter:
    yaml_text, body = split_frontmatter(md)
    if not yaml_text.strip():
        return Frontmatter(data={}, body=body)
    try:
        data = yaml.safe_load(yaml_text)
    except Exception as e:
        # constructors raise plain ValueError too, e.g. "date: 2024-13-45"
        raise InvalidFrontmatter(f"Malformed YAML frontmatter: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidFrontmatter("Malformed YAML frontmatter: top-level must be a mapping")
    return Frontmatter(data=data, body=body)

def body_of(md: str) -> str:
    """Text after a frontmatter block that parses; the whole text otherwise."""
    try:
        return parse_frontmatter(md).body
    except InvalidFrontmatter:
        return md
