"""Refs watch API command.

CLI: vaultref refs watch
"""

import asyncio
from collections.abc import Iterator

from .._output_schemas.refs import RefsWatchOutput
from ..StageResult import StageResult


def cmd_watch() -> StageResult:
    """Rewrite references whenever an image is moved inside the vault.

    Runs until interrupted (Ctrl-C).
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VaultrefConfig import VaultrefConfig
        from ..corpus.Corpus import Corpus
        from ..log.make_log_sink import make_log_sink
        from ..watch.RenameWatcher import RenameWatcher
        from ._Components import _Components

        yield (0.1, "Loading configuration...")
        try:
            config = VaultrefConfig.load()
        except Exception as e:
            result_obj.output = RefsWatchOutput(
                errors=[f"Failed to load config: {e}"],
                vault="",
                renames_seen=0,
                renames_processed=0,
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Refs watch failed: {e}"
            result_obj.success = False
            return

        yield (0.2, f"Watching {config.vault.base_dir} (Ctrl-C to stop)...")
        watcher = None
        try:
            with Corpus(config.vault) as corpus:
                components = _Components.from_config(config, corpus)
                watcher = RenameWatcher(
                    corpus.vault_path,
                    corpus,
                    components.service,
                    watch_config=config.watch,
                    log=make_log_sink(config, "watch"),
                )
                try:
                    asyncio.run(watcher.run())
                except KeyboardInterrupt:
                    pass
        except Exception as e:
            result_obj.output = RefsWatchOutput(
                errors=[str(e)],
                vault=config.vault.base_dir,
                renames_seen=watcher.renames_seen if watcher else 0,
                renames_processed=watcher.renames_processed if watcher else 0,
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Refs watch failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Stopped")
        result_obj.output = RefsWatchOutput(
            vault=config.vault.base_dir,
            renames_seen=watcher.renames_seen,
            renames_processed=watcher.renames_processed,
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Processed {watcher.renames_processed} rename(s)"
        result_obj.success = True

    return StageResult(
        announce="Starting rename watcher...",
        progress_callback=do_work,
    )
