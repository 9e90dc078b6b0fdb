"""Separate a URL-ish target from its query string or fragment."""


def split_target_suffix(target: str) -> tuple[str, str]:
    """Split ``img.png?v=2#x`` into ``("img.png", "?v=2#x")``."""
    cut = len(target)
    for marker in ("?", "#"):
        idx = target.find(marker)
        if idx != -1:
            cut = min(cut, idx)
    return target[:cut], target[cut:]
