from __future__ import annotations

from pathlib import PurePosixPath
from urllib.parse import quote
import re

# Characters a wiki link target cannot carry.
_WIKI_UNSAFE = re.compile(r"[\[\]|#^\r\n]")

def file_link(path: str) -> str:
    """
    Link to a vault document:
      "Projects/Alpha.md" -> "[[Projects/Alpha]]"
    Paths a wiki link cannot express fall back to a markdown link with a
    percent-encoded target:
      "Notes/a|b.md" -> "[a|b](Notes/a%7Cb.md)"
    """
    p = PurePosixPath(path.replace("\\", "/"))
    target = p.with_suffix("").as_posix() if p.suffix == ".md" else p.as_posix()
    if not _WIKI_UNSAFE.search(path):
        return f"[[{target}]]"

    label = re.sub(r"\s+", " ", p.stem if p.suffix == ".md" else p.name)
    label = re.sub(r"([\[\]\\])", r"\\\1", label)
    return f"[{label}]({quote(p.as_posix())})"
