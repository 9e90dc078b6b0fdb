"""Unit tests for vaultref.api.link.parse_wiki_link and build_wiki_link."""

import pytest

from vaultref.api.link import LinkParts, build_wiki_link, parse_wiki_link


def test_parse_path_display_and_size():
    parts = parse_wiki_link("![[photo.png|Summer Trip|800x600]]")
    assert parts == LinkParts(path="photo.png", display_text="Summer Trip", width=800, height=600)


def test_parse_width_only():
    parts = parse_wiki_link("![[photo.png|300]]")
    assert parts.width == 300
    assert parts.height is None
    assert parts.display_text == ""


def test_parse_bare_link():
    parts = parse_wiki_link("[[img/photo.png|caption]]")
    assert parts.path == "img/photo.png"
    assert parts.display_text == "caption"
    assert parts.width is None


def test_parse_numeric_caption_is_read_as_width():
    """An all-numeric caption cannot be told apart from a width."""
    parts = parse_wiki_link("![[photo.png|2024]]")
    assert parts.width == 2024
    assert parts.display_text == ""


def test_parse_second_size_becomes_display_text():
    parts = parse_wiki_link("![[photo.png|100|200]]")
    assert parts.width == 100
    assert parts.display_text == "200"


def test_parse_extra_segments_dropped():
    parts = parse_wiki_link("![[photo.png|one|two|10x20|three]]")
    assert parts == LinkParts(path="photo.png", display_text="one", width=10, height=20)


def test_parse_escaped_table_pipe():
    parts = parse_wiki_link("![[photo.png\\|cap\\|10x20]]")
    assert parts == LinkParts(path="photo.png", display_text="cap", width=10, height=20)


def test_parse_non_link_is_empty():
    assert parse_wiki_link("just text") == LinkParts()


def test_build_canonical_order():
    parts = LinkParts(path="a.png", display_text="cap", width=100, height=None)
    assert build_wiki_link(parts) == "![[a.png|cap|100]]"
    assert build_wiki_link(parts, embed=False) == "[[a.png|cap|100]]"


def test_build_escaped_pipe():
    parts = LinkParts(path="a.png", display_text="cap", width=10, height=20)
    assert build_wiki_link(parts, escaped_pipe=True) == "![[a.png\\|cap\\|10x20]]"


def test_build_path_only():
    assert build_wiki_link(LinkParts(path="a.png")) == "![[a.png]]"


@pytest.mark.parametrize(
    "token",
    [
        "![[photo.png]]",
        "![[photo.png|Summer Trip|800x600]]",
        "![[dir/photo.png|300]]",
        "![[photo.png|caption]]",
        "![[photo.png|100|cap]]",
    ],
)
def test_build_then_parse_keeps_fields(token):
    parts = parse_wiki_link(token)
    assert parse_wiki_link(build_wiki_link(parts)) == parts
