"""Config show API command."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult


def cmd_show() -> StageResult:
    """Show the effective configuration (file contents merged over defaults)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from .SymlinkerConfig import SymlinkerConfig

        yield (0.3, "Loading configuration...")
        path = SymlinkerConfig.get_config_path()
        try:
            config = SymlinkerConfig.load()
        except ValueError as e:
            result_obj.output = ConfigShowOutput(
                errors=[str(e)], config_path=str(path), exists=path.exists(), content={}
            ).model_dump(mode="python")
            result_obj.result = f"Invalid configuration: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        exists = path.exists()
        result_obj.output = ConfigShowOutput(
            warnings=[] if exists else [f"No config file at {path}; showing defaults"],
            config_path=str(path),
            exists=exists,
            content=config.to_dict(),
        ).model_dump(mode="python")
        result_obj.result = f"Configuration from {path}" if exists else "Default configuration"
        result_obj.success = True

    return StageResult(announce="Loading configuration...", progress_callback=do_work)
