from __future__ import annotations

from pathlib import Path
from typing import Iterable

def iter_md_files(root: Path) -> Iterable[Path]:
    # hidden folders (.obsidian, .trash, .git) are not notes
    for p in sorted(root.rglob("*.md")):
        rel = p.relative_to(root)
        if any(part.startswith(".") for part in rel.parts[:-1]):
            continue
        if p.is_file():
            yield p

def relpath_under(root: Path, p: Path) -> Path:
    return p.resolve().relative_to(root.resolve())

def read_text_utf8(p: Path) -> str:
    data = p.read_bytes()
    return data.decode("utf-8")

def write_text_utf8(p: Path, s: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(s, encoding="utf-8", newline="\n")
