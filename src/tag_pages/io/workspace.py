from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Protocol

from tag_pages.errors import DocumentReadError
from tag_pages.io.fs import iter_md_files, read_text_utf8, relpath_under, write_text_utf8
from tag_pages.logging import get_logger

log = get_logger()

class DocumentStore(Protocol):
    def list_paths(self) -> List[str]: ...

    def read_document(self, path: str) -> str: ...

class Workspace(DocumentStore, Protocol):
    """
    What the tag page flows need from a host: the document store plus
    "which document is active", "create" and "open".
    Paths are vault-relative POSIX strings.
    """

    def exists(self, path: str) -> bool: ...

    def create_document(self, path: str, text: str) -> None: ...

    def write_document(self, path: str, text: str) -> None: ...

    def open_document(self, path: str) -> None: ...

    def active_document(self) -> Optional[str]: ...

class VaultWorkspace:
    """Workspace over a vault directory on disk."""

    def __init__(self, root: Path, *, active: Optional[str] = None) -> None:
        self.root = Path(root).expanduser().resolve()
        self._active = active

    def _abs(self, path: str) -> Path:
        p = (self.root / path).resolve()
        # refuses "../" escapes
        relpath_under(self.root, p)
        return p

    def list_paths(self) -> List[str]:
        return [p.relative_to(self.root).as_posix() for p in iter_md_files(self.root)]

    def read_document(self, path: str) -> str:
        try:
            return read_text_utf8(self._abs(path))
        except UnicodeDecodeError:
            raise DocumentReadError(path, "not valid UTF-8") from None
        except (OSError, ValueError) as e:
            raise DocumentReadError(path, str(e)) from e

    def exists(self, path: str) -> bool:
        return self._abs(path).is_file()

    def create_document(self, path: str, text: str) -> None:
        p = self._abs(path)
        if p.exists():
            raise FileExistsError(f"already exists: {path}")
        write_text_utf8(p, text)

    def write_document(self, path: str, text: str) -> None:
        write_text_utf8(self._abs(path), text)

    def open_document(self, path: str) -> None:
        self._active = path
        log.info(f"open: {self._abs(path)}")

    def active_document(self) -> Optional[str]:
        return self._active
