"""Code span exclusion check (UNO: single function)."""

from ._inline_code_spans import _is_inline_code
from ._is_in_fence import _is_in_fence
from .StructuralHints import HintsPresent, StructuralHints


def is_code_excluded(
    line_index: int,
    line_content: str,
    hints: StructuralHints,
    all_lines: list[str] | None = None,
    span: tuple[int, int] | None = None,
) -> bool:
    """Decide whether a link on ``line_index`` lies in code and must be ignored.

    1. Inline code is checked first and never consults hints. With ``span``
       the token itself must sit inside a backtick span; without it any
       backtick-wrapped link on the line counts.
    2. With ``HintsPresent`` the code sections decide, and nothing else runs.
    3. With ``HintsAbsent`` and ``all_lines`` the fences are scanned by hand.
    4. Otherwise the line is not excluded.

    Args:
        line_index: 0-based line number
        line_content: Text of that line
        hints: Structural hints for the document
        all_lines: Every line of the document, for the manual fallback
        span: Column span of the candidate token on the line
    """
    if _is_inline_code(line_content, span):
        return True

    if isinstance(hints, HintsPresent):
        return hints.in_code_section(line_index)

    if all_lines:
        return _is_in_fence(line_index, all_lines)

    return False
