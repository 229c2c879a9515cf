import itertools

import pytest

from tag_pages.config import TagPageConfig
from tag_pages.errors import InvalidTagInput
from tag_pages.stages.indexer import FRONTMATTER_MATCH_NOTE, index
from tag_pages.stages.ingest import Document, to_document

CFG = TagPageConfig(frontmatter_query_property="query")

def _docs():
    return [
        Document(path="A.md", content="See #proj today"),
        Document(path="B.md", content="#projects kickoff"),
        Document(path="C.md", content="unrelated", frontmatter={"query": "#proj"}),
    ]

def test_example_vault() -> None:
    infos = index(_docs(), "proj", CFG)
    assert [i.path for i in infos] == ["A.md", "C.md"]
    assert infos[0].file_link == "[[A]]"
    assert infos[0].tag_matches == ["See #proj today"]
    assert infos[1].tag_matches == [FRONTMATTER_MATCH_NOTE]

def test_tag_with_and_without_marker_are_identical() -> None:
    assert index(_docs(), "proj", CFG) == index(_docs(), "#proj", CFG)

def test_order_independent_of_input_order() -> None:
    docs = _docs() + [Document(path="0 first.md", content="#proj"), Document(path="Z/deep.md", content="x #proj")]
    expected = index(docs, "#proj", CFG)
    assert [i.path for i in expected] == ["0 first.md", "A.md", "C.md", "Z/deep.md"]
    for perm in itertools.permutations(docs):
        assert index(list(perm), "#proj", CFG) == expected

def test_longer_tag_is_not_a_match() -> None:
    assert index([Document(path="x.md", content="#tagging only")], "#tag", CFG) == []

def test_frontmatter_only_match_has_one_synthetic_entry() -> None:
    doc = to_document("fm.md", '---\nquery: "#tag"\n---\nnothing here\n')
    [info] = index([doc], "tag", CFG)
    assert info.tag_matches == [FRONTMATTER_MATCH_NOTE]

def test_inline_and_frontmatter_merge_inline_first() -> None:
    doc = to_document("both.md", '---\nquery: "#tag"\n---\nfirst #tag\nplain\nsecond #tag #tag\n')
    [info] = index([doc], "#tag", CFG)
    assert info.tag_matches == ["first #tag", "second #tag #tag", FRONTMATTER_MATCH_NOTE]

def test_frontmatter_query_uses_configured_property() -> None:
    doc = Document(path="d.md", content="", frontmatter={"tage-page-query": "#tag"})
    assert index([doc], "#tag", CFG) == []
    assert len(index([doc], "#tag", TagPageConfig())) == 1

def test_malformed_frontmatter_still_matches_inline() -> None:
    doc = to_document("bad.md", "---\ntitle: [unclosed\n---\nbody #tag\n")
    assert doc.frontmatter == {}
    [info] = index([doc], "#tag", CFG)
    assert info.tag_matches == ["body #tag"]

def test_tag_page_dir_is_not_scanned() -> None:
    docs = [
        Document(path="Tags/#tag.md", content="# #tag\n\n- [[n]]\n  - n #tag\n"),
        Document(path="Tagsmith.md", content="#tag"),
    ]
    assert [i.path for i in index(docs, "#tag", CFG)] == ["Tagsmith.md"]

def test_no_matches_and_empty_store() -> None:
    assert index([Document(path="a.md", content="nothing")], "#tag", CFG) == []
    assert index([], "#tag", CFG) == []

def test_invalid_tag_fails_before_scanning() -> None:
    def exploding():
        raise AssertionError("documents must not be touched")
        yield

    with pytest.raises(InvalidTagInput):
        index(exploding(), "#", CFG)

def test_thematic_breaks_are_not_frontmatter() -> None:
    doc = to_document("n.md", "---\nMeeting notes #proj\n---\n")
    [info] = index([doc], "proj", CFG)
    assert info.tag_matches == ["Meeting notes #proj"]

def test_document_without_body_uses_parsed_frontmatter() -> None:
    doc = Document(path="n.md", content='---\nq: "#proj"\n---\nline #proj\n')
    [info] = index([doc], "#proj", CFG)
    assert info.tag_matches == ["line #proj"]
