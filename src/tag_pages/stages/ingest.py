from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tag_pages.core.yaml import parse_frontmatter
from tag_pages.errors import DocumentReadError, InvalidFrontmatter
from tag_pages.io.workspace import DocumentStore
from tag_pages.logging import get_logger

log = get_logger()

DEFAULT_READ_WORKERS = 8

@dataclass(frozen=True)
class Document:
    path: str
    content: str
    frontmatter: Dict[str, Any] = field(default_factory=dict)
    body: Optional[str] = None   # None => derived from content

@dataclass(frozen=True)
class LoadResult:
    documents: List[Document]
    failures: List[DocumentReadError]

def to_document(path: str, content: str) -> Document:
    try:
        fm = parse_frontmatter(content)
    except InvalidFrontmatter as e:
        # no frontmatter: the whole text is body
        log.warning(f"ignoring frontmatter of {path}: {e}")
        return Document(path=path, content=content, frontmatter={}, body=content)
    return Document(path=path, content=content, frontmatter=fm.data, body=fm.body)

def load_documents(store: DocumentStore, *, max_workers: int = DEFAULT_READ_WORKERS) -> LoadResult:
    """
    Snapshot the store: read every document concurrently and wait for all
    reads to settle. Unreadable documents are reported in `failures`, the rest
    come back sorted by path whatever order the reads finished in.
    """
    paths = store.list_paths()
    loaded: Dict[str, Document] = {}
    failures: List[DocumentReadError] = []

    if paths:
        with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(paths)))) as pool:
            futures = {pool.submit(store.read_document, p): p for p in paths}
            for fut in as_completed(futures):
                path = futures[fut]
                try:
                    content = fut.result()
                except DocumentReadError as e:
                    log.warning(f"skipped unreadable document: {e}")
                    failures.append(e)
                    continue
                except (OSError, UnicodeDecodeError) as e:
                    log.warning(f"skipped unreadable document: {path}: {e}")
                    failures.append(DocumentReadError(path, str(e)))
                    continue
                loaded[path] = to_document(path, content)

    failures.sort(key=lambda e: e.path)
    return LoadResult(documents=[loaded[p] for p in sorted(loaded)], failures=failures)
