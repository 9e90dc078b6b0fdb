"""Refs rewrite API command.

CLI: vaultref refs rewrite <old> <new>
"""

import asyncio
from collections.abc import Iterator

from .._output_schemas.refs import RefsRewriteOutput
from ..StageResult import StageResult


def cmd_rewrite(old: str, new: str) -> StageResult:
    """Point every reference to ``old`` at ``new``.

    The asset itself is not moved; run this after (or instead of) the
    host's own rename so the notes follow.
    """

    def _fail(result_obj: StageResult, message: str) -> None:
        result_obj.output = RefsRewriteOutput(
            errors=[message],
            old=old,
            new=new,
            admitted=False,
            updated_file_count=0,
            touched_files=[],
            referenced_files=[],
            changes=[],
            success=False,
        ).model_dump(mode="python")
        result_obj.result = f"Refs rewrite failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VaultrefConfig import VaultrefConfig
        from ..corpus.Corpus import Corpus
        from ._Components import _Components

        yield (0.1, "Loading configuration...")
        try:
            config = VaultrefConfig.load()
        except Exception as e:
            _fail(result_obj, f"Failed to load config: {e}")
            return

        yield (0.3, "Rewriting references...")
        try:
            with Corpus(config.vault) as corpus:
                components = _Components.from_config(config, corpus)
                old_identity = components.identity(old)
                new_identity = components.identity(new)
                rewrite = asyncio.run(components.service.handle_rename(old_identity, new_identity))
        except Exception as e:
            _fail(result_obj, str(e))
            return

        yield (1.0, "Complete")
        if rewrite is None:
            result_obj.output = RefsRewriteOutput(
                warnings=["Rename already processed"],
                old=old_identity,
                new=new_identity,
                admitted=False,
                updated_file_count=0,
                touched_files=[],
                referenced_files=[],
                changes=[],
                success=True,
            ).model_dump(mode="python")
            result_obj.result = "Rename already processed"
            result_obj.success = True
            return

        data = rewrite.to_dict()
        result_obj.output = RefsRewriteOutput(
            errors=data["errors"],
            old=old_identity,
            new=new_identity,
            admitted=True,
            updated_file_count=data["updated_file_count"],
            touched_files=data["touched_files"],
            referenced_files=data["referenced_files"],
            changes=data["changes"],
            success=not data["errors"],
        ).model_dump(mode="python")
        result_obj.result = f"Updated {rewrite.updated_file_count} document(s)"
        result_obj.success = not data["errors"]

    return StageResult(
        announce=f"Rewriting references {old} -> {new}...",
        progress_callback=do_work,
    )
