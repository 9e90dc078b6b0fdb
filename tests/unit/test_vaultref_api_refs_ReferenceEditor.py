"""Unit tests for vaultref.api.refs.ReferenceEditor."""

import pytest

from tests.unit.conftest import make_corpus, run
from vaultref.api.refs import ReferenceEditor

NOTE = (
    "intro\n"
    "![[photo.png|Old|100x50]] text\n"
    "![alt](photo.png)\n"
    '<img src="photo.png" alt="x" width="10">\n'
    "[[photo.png]]\n"
)


@pytest.fixture
def corpus():
    return make_corpus({"n.md": NOTE}, files=["photo.png"])


def _line(corpus, number):
    return corpus.documents["n.md"].split("\n")[number - 1]


def test_wiki_display_text(corpus):
    editor = ReferenceEditor(corpus)
    assert run(editor.edit("n.md", 2, _line(corpus, 2), "photo.png", "New")) is True
    assert _line(corpus, 2) == "![[photo.png|New|100x50]] text"


def test_wiki_size(corpus):
    editor = ReferenceEditor(corpus)
    run(editor.edit("n.md", 2, _line(corpus, 2), "photo.png", "Old", width=300))
    assert _line(corpus, 2) == "![[photo.png|Old|300x50]] text"


def test_bare_wiki_link_stays_bare(corpus):
    editor = ReferenceEditor(corpus)
    run(editor.edit("n.md", 5, _line(corpus, 5), "photo.png", "cap"))
    assert _line(corpus, 5) == "[[photo.png|cap]]"


def test_markdown_alt_escaped(corpus):
    editor = ReferenceEditor(corpus)
    run(editor.edit("n.md", 3, _line(corpus, 3), "photo.png", "a]b(c"))
    assert _line(corpus, 3) == "![a\\]b\\(c](photo.png)"


def test_markdown_empty_alt_uses_file_name(corpus):
    editor = ReferenceEditor(corpus)
    run(editor.edit("n.md", 3, _line(corpus, 3), "photo.png", ""))
    assert _line(corpus, 3) == "![photo.png](photo.png)"


def test_html_rebuilt_with_escaped_alt(corpus):
    editor = ReferenceEditor(corpus)
    run(editor.edit("n.md", 4, _line(corpus, 4), "photo.png", 'Tom & "Jerry"', width=20))
    assert _line(corpus, 4) == '<img src="photo.png" alt="Tom &amp; &quot;Jerry&quot;" width="20">'


@pytest.mark.parametrize("line_number", [0, 7, 99])
def test_line_out_of_range(corpus, line_number):
    with pytest.raises(ValueError, match="out of range"):
        run(ReferenceEditor(corpus).edit("n.md", line_number, "", "photo.png", "x"))


def test_stale_line_uses_current_content(corpus):
    logged = []
    editor = ReferenceEditor(corpus, log=lambda level, msg: logged.append(level))
    assert run(editor.edit("n.md", 2, "something older", "photo.png", "New")) is True
    assert _line(corpus, 2) == "![[photo.png|New|100x50]] text"
    assert "WARN" in logged


def test_no_reference_on_line(corpus):
    assert run(ReferenceEditor(corpus).edit("n.md", 1, "intro", "photo.png", "x")) is False
    assert corpus.writes == []


def test_unchanged_text_not_written(corpus):
    editor = ReferenceEditor(corpus)
    assert run(editor.edit("n.md", 2, _line(corpus, 2), "photo.png", "Old")) is False
    assert corpus.writes == []
