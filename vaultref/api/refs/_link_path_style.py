"""Rewrite a link path to a new identity in the style it was written (private)."""

import posixpath

from ..corpus.LinkResolver import LinkResolver


def _link_path_style(written: str, doc_id: str, old_identity: str, new_identity: str, after: LinkResolver) -> str:
    """Return the path to write in place of ``written`` once the asset moved.

    Bare names stay bare for a rename within one folder as long as the new
    name resolves uniquely; a bare name whose asset changed folder is
    written as the full path. Paths starting with ``./`` or ``../`` are
    recomputed from the document folder. Rooted paths stay rooted; anything
    else becomes the full vault path.

    Args:
        written: Decoded path as it appears in the link
        doc_id: Identity of the document holding the link
        old_identity: Identity the link resolved to
        new_identity: Identity it must point at now
        after: Resolver describing the vault after the move
    """
    written = written.strip()
    if written.startswith("/"):
        return "/" + new_identity

    if written.startswith(("./", "../")):
        relative = LinkResolver.relative_path(doc_id, new_identity)
        if written.startswith("./") and not relative.startswith("../"):
            relative = "./" + relative
        return relative

    if "/" not in written:
        new_name = posixpath.basename(new_identity)
        same_folder = posixpath.dirname(old_identity) == posixpath.dirname(new_identity)
        if same_folder and after.resolve(new_name, doc_id) == new_identity:
            return new_name
        return new_identity

    doc_dir = posixpath.dirname(doc_id)
    if doc_dir and written != old_identity and posixpath.normpath(posixpath.join(doc_dir, written)) == old_identity:
        return LinkResolver.relative_path(doc_id, new_identity)
    return new_identity
