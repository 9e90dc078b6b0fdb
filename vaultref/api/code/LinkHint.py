"""Link hint model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkHint:
    """A wiki link reported by a structural hint provider.

    ``link`` is the raw target path; ``start_col``/``end_col`` span the whole
    token on ``line`` (including the ``!`` of an embed), end exclusive.
    """

    link: str
    line: int
    start_col: int
    end_col: int
    is_embed: bool
    display_text: str = ""
