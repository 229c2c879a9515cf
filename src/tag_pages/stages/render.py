from __future__ import annotations

from typing import List, Sequence

from tag_pages.config import TagPageConfig
from tag_pages.core.markdown import escape_list_text
from tag_pages.core.tags import normalize_tag
from tag_pages.stages.indexer import TagInfo

def render(cfg: TagPageConfig, tag_infos: Sequence[TagInfo], tag_of_interest: str) -> str:
    """
    Markdown for a tag page:

        # #tag

        - [[Note]]
          - line mentioning #tag

    Entries keep the order they are given in. Same inputs, same bytes.
    """
    tag = normalize_tag(tag_of_interest)

    lines: List[str] = [f"# {tag}", ""]
    if not tag_infos:
        lines.append(f"_No notes reference {tag}._")
        return "\n".join(lines) + "\n"

    sub_prefix = "  - " if cfg.bulleted_sub_items else "  "
    for info in tag_infos:
        lines.append(f"- {escape_list_text(info.file_link)}")
        if not cfg.include_lines:
            continue
        for match in info.tag_matches:
            lines.append(sub_prefix + escape_list_text(match))

    return "\n".join(lines) + "\n"
