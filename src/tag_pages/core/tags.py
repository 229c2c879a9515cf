from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable, List
import re

from tag_pages.errors import InvalidTagInput

# Characters that may continue a tag: letters, digits, underscore, hyphen, and
# '/' for nested tags. A match must not be glued to any of them.
_TAG_CHARS = r"[\w\-/]"

def normalize_tag(s: str) -> str:
    """
    Canonical tag form used everywhere:
    - strip surrounding whitespace and quotes
    - exactly one leading '#'

    Raises InvalidTagInput for empty input, input that is only '#' marks,
    and anything containing whitespace (a tag is a single token).
    """
    s = (s or "").strip()

    # remove surrounding quotes
    if len(s) >= 2 and ((s.startswith('"') and s.endswith('"')) or (s.startswith("'") and s.endswith("'"))):
        s = s[1:-1].strip()

    name = s.lstrip("#")
    if not name:
        raise InvalidTagInput(f"tag is empty: {s!r}")
    if re.search(r"\s", name):
        raise InvalidTagInput(f"tag must be a single token: {s!r}")
    return f"#{name}"

def same_tag(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()

@lru_cache(maxsize=64)
def tag_regex(tag: str) -> re.Pattern:
    """
    Whole-token matcher for an already normalized tag:
    - case-insensitive
    - not preceded by a tag character or another '#'
    - not followed by a tag character ("#work" never matches "#working")
    """
    return re.compile(
        rf"(?<!{_TAG_CHARS})(?<!#){re.escape(tag)}(?!{_TAG_CHARS})",
        flags=re.IGNORECASE,
    )

def matching_lines(lines: Iterable[str], tag: str) -> List[str]:
    """Every line holding the tag as a whole token, once per line, in order."""
    rx = tag_regex(tag)
    return [ln for ln in lines if rx.search(ln)]

def frontmatter_value_matches(value: Any, tag: str) -> bool:
    """
    Frontmatter query rule: the value equals the tag once normalized the same
    way. A list matches when any element does.
    """
    if value is None:
        return False
    if isinstance(value, (list, tuple)):
        return any(frontmatter_value_matches(v, tag) for v in value)
    if isinstance(value, (dict, bool)):
        return False
    try:
        return same_tag(normalize_tag(str(value)), tag)
    except InvalidTagInput:
        return False
