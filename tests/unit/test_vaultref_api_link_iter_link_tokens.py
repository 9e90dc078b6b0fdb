"""Unit tests for vaultref.api.link.iter_link_tokens and LinkToken."""

from vaultref.api.link import FORMAT_HTML, FORMAT_MARKDOWN, FORMAT_WIKI, FORMAT_WIKI_BARE, iter_link_tokens

LINE = '![[a.png]] and [[b.png]] ![c](c.png?v=2) <img src="d%20e.png">'


def test_yields_each_format_in_order():
    tokens = list(iter_link_tokens(LINE))
    assert [t.format for t in tokens] == [FORMAT_WIKI, FORMAT_WIKI_BARE, FORMAT_MARKDOWN, FORMAT_HTML]
    assert tokens[0].start == 0
    assert tokens[0].end == 10
    assert tokens[0].text == "![[a.png]]"
    assert LINE[tokens[1].start : tokens[1].end] == "[[b.png]]"


def test_restricted_formats():
    tokens = list(iter_link_tokens(LINE, formats=(FORMAT_MARKDOWN,)))
    assert len(tokens) == 1
    assert tokens[0].format == FORMAT_MARKDOWN


def test_parts_strip_suffix_and_decode():
    tokens = {t.format: t for t in iter_link_tokens(LINE)}
    assert tokens[FORMAT_MARKDOWN].parts().path == "c.png"
    assert tokens[FORMAT_MARKDOWN].raw_target() == "c.png?v=2"
    assert tokens[FORMAT_HTML].parts().path == "d e.png"
    assert tokens[FORMAT_WIKI_BARE].parts().path == "b.png"


def test_embed_is_not_a_bare_link():
    tokens = list(iter_link_tokens("![[a.png]]", formats=(FORMAT_WIKI_BARE,)))
    assert tokens == []
