from tag_pages.core.links import file_link
from tag_pages.core.markdown import escape_list_text, split_lines

def test_split_lines_normalizes_newlines() -> None:
    assert split_lines("a\r\nb\rc\n") == ["a", "b", "c", ""]

def test_escape_list_text_plain_text_unchanged() -> None:
    assert escape_list_text("See #proj today") == "See #proj today"
    assert escape_list_text("#proj at the start") == "#proj at the start"

def test_escape_list_text_strips_and_escapes_block_markers() -> None:
    assert escape_list_text("    - [ ] task #proj") == "\\- [ ] task #proj"
    assert escape_list_text("* star #proj") == "\\* star #proj"
    assert escape_list_text("> quoted #proj") == "\\> quoted #proj"
    assert escape_list_text("## Heading #proj") == "\\## Heading #proj"
    assert escape_list_text("12. step #proj") == "12\\. step #proj"

def test_escape_list_text_joins_embedded_newlines() -> None:
    assert escape_list_text("one\n  two") == "one two"

def test_file_link_wiki_style() -> None:
    assert file_link("Alpha.md") == "[[Alpha]]"
    assert file_link("Projects/Alpha Beta.md") == "[[Projects/Alpha Beta]]"
    assert file_link("Data/table.csv") == "[[Data/table.csv]]"

def test_file_link_falls_back_for_unsafe_paths() -> None:
    assert file_link("Notes/a|b.md") == "[a|b](Notes/a%7Cb.md)"
    assert file_link("Notes/[draft] x.md") == "[\\[draft\\] x](Notes/%5Bdraft%5D%20x.md)"
    assert file_link("C#.md") == "[C#](C%23.md)"
