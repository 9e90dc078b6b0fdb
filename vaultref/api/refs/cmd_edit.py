"""Refs edit API command.

CLI: vaultref refs edit <doc> <line> <asset> --text T [--width W] [--height H]
"""

import asyncio
from collections.abc import Iterator

from .._output_schemas.refs import RefsEditOutput
from ..StageResult import StageResult


def cmd_edit(
    doc: str,
    line: int,
    asset: str,
    display_text: str,
    width: int | None = None,
    height: int | None = None,
) -> StageResult:
    """Change the caption or size of the reference to ``asset`` on one line.

    Args:
        doc: Document holding the reference
        line: 1-based line number
        asset: Asset the reference points at
        display_text: New caption
        width: New width (optional)
        height: New height (optional)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VaultrefConfig import VaultrefConfig
        from ..corpus.Corpus import Corpus
        from ._Components import _Components

        yield (0.1, "Loading configuration...")
        try:
            config = VaultrefConfig.load()
            yield (0.4, "Editing reference...")
            with Corpus(config.vault) as corpus:
                components = _Components.from_config(config, corpus)
                doc_id = components.identity(doc)
                identity = components.identity(asset)

                async def _edit() -> bool:
                    text = await corpus.read(doc_id)
                    lines = text.split("\n")
                    current = lines[line - 1] if 1 <= line <= len(lines) else ""
                    return await components.editor.edit(
                        doc_id, line, current, identity, display_text, width=width, height=height
                    )

                changed = asyncio.run(_edit())
        except Exception as e:
            result_obj.output = RefsEditOutput(
                errors=[str(e)],
                document=doc,
                line=line,
                asset=asset,
                changed=False,
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Refs edit failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = RefsEditOutput(
            warnings=[] if changed else [f"No change made to {identity} on line {line}"],
            document=doc_id,
            line=line,
            asset=identity,
            changed=changed,
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Updated {doc_id}:{line}" if changed else "Nothing to update"
        result_obj.success = True

    return StageResult(
        announce=f"Editing reference to {asset} in {doc}:{line}...",
        progress_callback=do_work,
    )
