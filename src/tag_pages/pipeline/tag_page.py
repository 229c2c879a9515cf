from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import List, Optional

from tag_pages.config import TagPageConfig
from tag_pages.core.tags import normalize_tag
from tag_pages.errors import InvalidTagInput
from tag_pages.io.workspace import DocumentStore, Workspace
from tag_pages.logging import get_logger
from tag_pages.stages.indexer import TagInfo, index
from tag_pages.stages.ingest import load_documents
from tag_pages.stages.render import render

log = get_logger()

@dataclass(frozen=True)
class TagPageResult:
    tag: str
    content: str
    tag_infos: List[TagInfo]
    skipped: int   # documents that could not be read

@dataclass(frozen=True)
class CreateResult:
    path: str
    created: bool

@dataclass(frozen=True)
class RefreshResult:
    path: Optional[str]
    tag: Optional[str]
    refreshed: bool   # True when the page was inside tag_page_dir and regenerated
    changed: bool     # True when new content was written

def tag_page_path(tag: str, cfg: TagPageConfig) -> str:
    return f"{cfg.tag_page_dir}/{normalize_tag(tag)}.md"

def tag_from_page_path(path: str, cfg: TagPageConfig) -> Optional[str]:
    """
    "Tags/#work.md" -> "#work", "Tags/#area/home.md" -> "#area/home".
    None for pages outside tag_page_dir.
    """
    path = path.replace("\\", "/").lstrip("/")
    if not cfg.contains(path) or not path.endswith(".md"):
        return None
    rel = PurePosixPath(path).relative_to(cfg.tag_page_dir)
    try:
        return normalize_tag(rel.with_suffix("").as_posix())
    except InvalidTagInput:
        return None

def build_tag_page(store: DocumentStore, tag: str, cfg: TagPageConfig) -> TagPageResult:
    # validate before any I/O
    tag = normalize_tag(tag)

    loaded = load_documents(store)
    if loaded.failures:
        log.warning(f"{len(loaded.failures)} document(s) could not be read and were skipped")

    tag_infos = index(loaded.documents, tag, cfg)
    return TagPageResult(
        tag=tag,
        content=render(cfg, tag_infos, tag),
        tag_infos=tag_infos,
        skipped=len(loaded.failures),
    )

def create_tag_page(workspace: Workspace, tag: str, cfg: TagPageConfig) -> CreateResult:
    """
    Open the tag page for `tag`, generating it first if it does not exist yet.
    An existing page is opened as is; refreshing it is a separate step.
    """
    path = tag_page_path(tag, cfg)

    if workspace.exists(path):
        log.info(f"tag page exists: {path}")
        workspace.open_document(path)
        return CreateResult(path=path, created=False)

    result = build_tag_page(workspace, tag, cfg)
    workspace.create_document(path, result.content)
    log.info(f"created tag page {path}: {len(result.tag_infos)} note(s)")
    workspace.open_document(path)
    return CreateResult(path=path, created=True)

def refresh_tag_page(workspace: Workspace, cfg: TagPageConfig) -> RefreshResult:
    """
    Regenerate the active document if it is a tag page. Anything outside
    tag_page_dir is left alone, and an unchanged page is not rewritten.
    """
    path = workspace.active_document()
    tag = tag_from_page_path(path, cfg) if path else None
    if tag is None:
        log.info(f"not a tag page, nothing to refresh: {path}")
        return RefreshResult(path=path, tag=None, refreshed=False, changed=False)

    result = build_tag_page(workspace, tag, cfg)
    current = workspace.read_document(path) if workspace.exists(path) else None
    if current == result.content:
        log.info(f"tag page up to date: {path}")
        return RefreshResult(path=path, tag=tag, refreshed=True, changed=False)

    workspace.write_document(path, result.content)
    log.info(f"refreshed tag page {path}: {len(result.tag_infos)} note(s)")
    return RefreshResult(path=path, tag=tag, refreshed=True, changed=True)
