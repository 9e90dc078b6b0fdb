"""Refs docs API command.

CLI: vaultref refs docs <asset>
"""

import asyncio
from collections.abc import Iterator

from .._output_schemas.refs import RefsDocsOutput
from ..StageResult import StageResult


def cmd_docs(asset: str) -> StageResult:
    """List documents referencing an asset, with the asset's image index in each."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VaultrefConfig import VaultrefConfig
        from ..corpus.Corpus import Corpus
        from ._Components import _Components

        yield (0.1, "Loading configuration...")
        try:
            config = VaultrefConfig.load()
            yield (0.3, "Scanning documents...")
            with Corpus(config.vault) as corpus:
                components = _Components.from_config(config, corpus)
                identity = components.identity(asset)
                documents = asyncio.run(components.finder.find_documents(identity))
        except Exception as e:
            result_obj.output = RefsDocsOutput(
                errors=[str(e)],
                asset=asset,
                documents=[],
                count=0,
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Refs docs failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = RefsDocsOutput(
            asset=identity,
            documents=[{"doc_id": d.doc_id, "index": d.index} for d in documents],
            count=len(documents),
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"{len(documents)} document(s) reference {identity}"
        result_obj.success = True

    return StageResult(
        announce=f"Listing documents referencing {asset}...",
        progress_callback=do_work,
    )
