from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from tag_pages.config import TagPageConfig
from tag_pages.core.links import file_link
from tag_pages.core.markdown import split_lines
from tag_pages.core.tags import frontmatter_value_matches, matching_lines, normalize_tag
from tag_pages.core.yaml import body_of
from tag_pages.stages.ingest import Document

FRONTMATTER_MATCH_NOTE = "matched via frontmatter query"

@dataclass(frozen=True)
class TagInfo:
    path: str
    file_link: str
    tag_matches: List[str]

def _frontmatter_matches(doc: Document, tag: str, cfg: TagPageConfig) -> bool:
    prop = cfg.frontmatter_query_property
    if not prop or prop not in doc.frontmatter:
        return False
    return frontmatter_value_matches(doc.frontmatter[prop], tag)

def index(documents: Iterable[Document], tag_of_interest: str, cfg: TagPageConfig) -> List[TagInfo]:
    """
    One TagInfo per document that mentions the tag, sorted by path.

    A document matches when a body line holds the tag as a whole token
    (every such line becomes evidence) or when its frontmatter query property
    names the tag (one synthetic evidence entry, after the lines). Documents
    inside the tag page directory are never scanned.

    Raises InvalidTagInput before looking at any document.
    """
    tag = normalize_tag(tag_of_interest)

    found = {}
    for doc in documents:
        if cfg.contains(doc.path) or doc.path in found:
            continue

        body = doc.body if doc.body is not None else body_of(doc.content)
        evidence = matching_lines(split_lines(body), tag)
        if _frontmatter_matches(doc, tag, cfg):
            evidence.append(FRONTMATTER_MATCH_NOTE)
        if not evidence:
            continue

        found[doc.path] = TagInfo(path=doc.path, file_link=file_link(doc.path), tag_matches=evidence)

    return [found[p] for p in sorted(found)]
