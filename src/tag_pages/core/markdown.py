from __future__ import annotations

import re
from typing import List

# Line starts that markdown would read as a block of its own inside a list
# item: bullets, quotes, headings, ordered-list numbers.
_RE_BLOCK_START = re.compile(r"^(?:[-*+>]|#{1,6}(?=\s|$)|\d{1,9}(?=[.)]))")

def split_lines(md: str) -> List[str]:
    md = md.replace("\r\n", "\n").replace("\r", "\n")
    return md.split("\n")

def escape_list_text(s: str) -> str:
    """
    Make arbitrary text safe as the content of a single list line:
    one line, no surrounding whitespace, no leading block marker.
    """
    s = re.sub(r"\s*[\r\n]+\s*", " ", s or "").strip()
    m = _RE_BLOCK_START.match(s)
    if m and m.group(0).isdigit():
        # "1. x" -> "1\. x"
        s = f"{m.group(0)}\\{s[m.end():]}"
    elif m:
        s = "\\" + s
    return s
