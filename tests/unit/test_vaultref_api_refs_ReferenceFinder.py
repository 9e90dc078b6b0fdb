"""Unit tests for vaultref.api.refs.ReferenceFinder."""

import pytest

from tests.unit.conftest import make_corpus, run
from vaultref.api.code import MarkdownHintProvider, NullHintProvider
from vaultref.api.corpus._memory._Backend import _Backend as MemoryBackend
from vaultref.api.refs import DocumentReference, ReferenceFinder

NOTE = (
    "![[photo.png|Summer Trip|800x600]]\n"
    "```\n"
    "![[photo.png]]\n"
    "```\n"
    "`![[photo.png]]`\n"
    '![p](photo.png) <img src="photo.png">\n'
    "[[photo.png]]\n"
)


@pytest.fixture(params=[MarkdownHintProvider, NullHintProvider], ids=["markdown", "none"])
def hint_provider(request):
    return request.param()


def test_find_all_formats_outside_code(hint_provider):
    corpus = make_corpus({"note.md": NOTE}, files=["photo.png"])
    occurrences = run(ReferenceFinder(corpus, hint_provider).find("photo.png"))

    assert [(o.line, o.format) for o in occurrences] == [
        (0, "wiki"),
        (5, "markdown"),
        (5, "html"),
        (6, "wiki_bare"),
    ]
    first = occurrences[0]
    assert first.display_text == "Summer Trip"
    assert (first.width, first.height) == (800, 600)
    assert first.raw_match == "![[photo.png|Summer Trip|800x600]]"
    assert first.resolved_path == "photo.png"
    assert occurrences[1].display_text == "p"
    assert (occurrences[1].start_col, occurrences[1].end_col) == (0, 15)
    assert occurrences[2].start_col == 16


def test_find_never_duplicates_positions(hint_provider):
    corpus = make_corpus(
        {
            "a.md": "![[photo.png]] ![[photo.png]] [[photo.png]]\n![[photo.png]]",
            "b.md": "![x](photo.png)![y](./photo.png)",
        },
        files=["photo.png"],
    )
    occurrences = run(ReferenceFinder(corpus, hint_provider).find("photo.png"))
    keys = [o.position_key for o in occurrences]
    assert len(keys) == len(set(keys))
    assert len(occurrences) == 6


def test_find_resolves_spellings():
    corpus = make_corpus(
        {"notes/day.md": "![[img/a.png]] ![x](../img/a.png) ![[a.png]] ![[other.png]]"},
        files=["img/a.png", "other.png"],
    )
    occurrences = run(ReferenceFinder(corpus).find("img/a.png"))
    assert [o.target_raw for o in occurrences] == ["img/a.png", "../img/a.png", "a.png"]


def test_find_skips_unreadable_document():
    class FlakyBackend(MemoryBackend):
        async def read(self, doc_id):
            if doc_id == "bad.md":
                raise OSError("permission denied")
            return await super().read(doc_id)

    logged = []
    corpus = FlakyBackend(documents={"bad.md": "", "good.md": "![[a.png]]"}, files=["a.png"])
    finder = ReferenceFinder(corpus, log=lambda level, msg: logged.append((level, msg)))
    occurrences = run(finder.find("a.png"))

    assert [o.file for o in occurrences] == ["good.md"]
    assert logged[0][0] == "ERROR"
    assert "bad.md" in logged[0][1]


def test_find_cache_and_invalidate():
    corpus = make_corpus({"n.md": "![[a.png]]"}, files=["a.png"])
    finder = ReferenceFinder(corpus)
    assert len(run(finder.find("a.png"))) == 1

    corpus.documents["n.md"] = "![[a.png]] ![[a.png]]"
    assert len(run(finder.find("a.png"))) == 1
    assert len(run(finder.find("a.png", use_cache=False))) == 2

    corpus.documents["n.md"] = "nothing"
    finder.invalidate()
    assert run(finder.find("a.png")) == []


def test_find_documents_reports_image_index():
    corpus = make_corpus(
        {
            "a.md": "![[other.png]]\n![x](img/b.png)\n[[notes.md]]\n![[photo.png]]\n",
            "b.md": "no images",
            "c.md": "![[photo.png]] ![[photo.png]]",
        },
        files=["photo.png", "other.png", "img/b.png", "notes.md"],
    )
    documents = run(ReferenceFinder(corpus).find_documents("photo.png"))
    assert documents == [DocumentReference("a.md", 2), DocumentReference("c.md", 0)]


def test_is_code_excluded_alias(hint_provider):
    corpus = make_corpus({"note.md": NOTE}, files=["photo.png"])
    finder = ReferenceFinder(corpus, hint_provider)
    assert run(finder.is_code_excluded("note.md", 2, "![[photo.png]]")) is True
    assert run(finder.is_code_excluded("note.md", 0, "![[photo.png|Summer Trip|800x600]]")) is False
    assert run(finder.is_code_excluded("missing.md", 0, "`![[photo.png]]`")) is True


def test_find_ignores_case():
    corpus = make_corpus({"n.md": "![[Photo.PNG]] ![x](PHOTO.png)"}, files=["photo.png"])
    occurrences = run(ReferenceFinder(corpus).find("photo.png"))
    assert [o.target_raw for o in occurrences] == ["Photo.PNG", "PHOTO.png"]
    assert {o.resolved_path for o in occurrences} == {"photo.png"}
