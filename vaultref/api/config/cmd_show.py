"""Show configuration command.

CLI: vaultref config show [section]
"""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .VaultrefConfig import VaultrefConfig


def cmd_show(section: str = "") -> StageResult:
    """Show the loaded configuration, or one section of it.

    Args:
        section: Section name. Empty string shows the whole configuration.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(VaultrefConfig.get_config_path())
        yield (0.3, "Loading configuration...")
        try:
            config = VaultrefConfig.load()
        except ValueError as e:
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                config_path=config_path,
                content={},
                success=False,
            ).model_dump(mode="python")
            result_obj.result = "Failed to load configuration"
            result_obj.success = False
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        if section and section not in config_dict:
            yield (1.0, "Complete")
            result_obj.output = ConfigShowOutput(
                errors=[f"Unknown section: {section}"],
                config_path=config_path,
                content={},
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Section '{section}' not found"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        content = {section: config_dict[section]} if section else config_dict
        result_obj.output = ConfigShowOutput(
            config_path=config_path,
            content=content,
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Retrieved configuration for '{section}'" if section else "Loaded configuration"
        result_obj.success = True

    announce = f"Showing configuration for section '{section}'..." if section else "Showing configuration..."
    return StageResult(announce=announce, progress_callback=do_work)
