"""Refs find API command.

CLI: vaultref refs find <asset>
"""

import asyncio
from collections.abc import Iterator

from .._output_schemas.refs import RefsFindOutput
from ..StageResult import StageResult


def cmd_find(asset: str) -> StageResult:
    """List every reference to an asset across the vault.

    Args:
        asset: Vault-relative (or absolute) path of the asset
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VaultrefConfig import VaultrefConfig
        from ..corpus.Corpus import Corpus
        from ._Components import _Components

        yield (0.1, "Loading configuration...")
        try:
            config = VaultrefConfig.load()
        except Exception as e:
            result_obj.output = RefsFindOutput(
                errors=[f"Failed to load config: {e}"],
                asset=asset,
                occurrences=[],
                count=0,
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Refs find failed: {e}"
            result_obj.success = False
            return

        yield (0.3, "Scanning documents...")
        try:
            with Corpus(config.vault) as corpus:
                components = _Components.from_config(config, corpus)
                identity = components.identity(asset)
                occurrences = asyncio.run(components.finder.find(identity))
        except Exception as e:
            result_obj.output = RefsFindOutput(
                errors=[f"Scan failed: {e}"],
                asset=asset,
                occurrences=[],
                count=0,
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Refs find failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = RefsFindOutput(
            asset=identity,
            occurrences=[o.to_dict() for o in occurrences],
            count=len(occurrences),
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(occurrences)} reference(s) to {identity}"
        result_obj.success = True

    return StageResult(
        announce=f"Finding references to {asset}...",
        progress_callback=do_work,
    )
