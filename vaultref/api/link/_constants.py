"""Link format names and compiled patterns (private)."""

import re

FORMAT_WIKI = "wiki"
FORMAT_WIKI_BARE = "wiki_bare"
FORMAT_MARKDOWN = "markdown"
FORMAT_HTML = "html"

# Order matters: rewrite and scan passes try formats in this order
ALL_FORMATS = (FORMAT_WIKI, FORMAT_WIKI_BARE, FORMAT_MARKDOWN, FORMAT_HTML)

WIKI_LINK_PATTERN = re.compile(r"(!)?\[\[([^\]]+)\]\]")
WIKI_EMBED_PATTERN = re.compile(r"!\[\[([^\]]+)\]\]")
WIKI_BARE_PATTERN = re.compile(r"(?<!!)\[\[([^\]]+)\]\]")
# An angle-bracket target may contain ")"
MARKDOWN_IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\((\s*<[^<>]*>[^)]*|[^)]+)\)")
# A quoted attribute value may contain ">"
HTML_IMG_PATTERN = re.compile(r"""<img\b(?:[^>"']|"[^"]*"|'[^']*')*>""", re.IGNORECASE)

# "100" or "100x200"
SIZE_PATTERN = re.compile(r"^(\d+)(?:x(\d+))?$")

FORMAT_PATTERNS = {
    FORMAT_WIKI: WIKI_EMBED_PATTERN,
    FORMAT_WIKI_BARE: WIKI_BARE_PATTERN,
    FORMAT_MARKDOWN: MARKDOWN_IMAGE_PATTERN,
    FORMAT_HTML: HTML_IMG_PATTERN,
}
