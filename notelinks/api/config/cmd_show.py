"""Config show API command.

CLI: notelinks config show
"""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult


def cmd_show() -> StageResult:
    """Show the effective configuration."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from .NotelinksConfig import NotelinksConfig

        config_path = NotelinksConfig.get_config_path()
        yield (0.5, "Loading configuration...")
        try:
            config = NotelinksConfig.load()
        except ValueError as e:
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                config_path=str(config_path),
                exists=config_path.exists(),
                content={},
            ).model_dump(mode="python")
            result_obj.result = f"Failed to load config: {e}"
            result_obj.success = False
            return

        exists = config_path.exists()
        result_obj.output = ConfigShowOutput(
            warnings=[] if exists else [f"No config file at {config_path}; showing defaults"],
            config_path=str(config_path),
            exists=exists,
            content=config.to_dict(),
        ).model_dump(mode="python")
        result_obj.result = f"Configuration from {config_path}" if exists else "Default configuration"
        result_obj.success = True

    return StageResult(
        announce="Showing configuration...",
        progress_callback=do_work,
    )
