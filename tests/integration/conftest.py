from pathlib import Path

import pytest

def _write(root: Path, rel: str, text: str) -> None:
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")

@pytest.fixture
def vault(tmp_path) -> Path:
    root = tmp_path / "vault"
    _write(root, "A.md", "See #proj today\nnothing\n")
    _write(root, "B.md", "#projects kickoff\n")
    _write(root, "C.md", '---\ntage-page-query: "#proj"\n---\nunrelated\n')
    _write(root, "Daily/2024-01-02.md", "- [ ] ship it #proj\n")
    _write(root, ".obsidian/workspace.md", "#proj in app state\n")
    (root / "Broken.md").write_bytes(b"\xff\xfe #proj")
    return root
