"""Manual fenced code block detection (private)."""

import re

_FENCE_PATTERN = re.compile(r"^(`{3,}|~{3,})(.*)$")


def _is_in_fence(line_index: int, all_lines: list[str]) -> bool:
    """Scan lines ``0..line_index`` and report whether ``line_index`` is fenced.

    A fence opens on a line starting with three or more backticks or
    tildes. It closes on a line holding only a run of three or more of the
    same character. The opening fence line counts as inside the block.
    """
    if line_index < 0 or line_index >= len(all_lines):
        return False

    in_fence = False
    fence_char = ""
    for i in range(line_index + 1):
        match = _FENCE_PATTERN.match(all_lines[i].strip())
        if not match:
            continue
        marker = match.group(1)
        if not in_fence:
            in_fence = True
            fence_char = marker[0]
        elif marker[0] == fence_char and not match.group(2).strip():
            in_fence = False
            fence_char = ""
    return in_fence
