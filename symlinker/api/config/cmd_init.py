"""Config init API command."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigInitOutput
from ..StageResult import StageResult


def cmd_init(force: bool = False) -> StageResult:
    """Write a default config file; an existing file is kept unless ``force``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from .SymlinkerConfig import SymlinkerConfig

        path = SymlinkerConfig.get_config_path()
        yield (0.3, "Checking for existing configuration...")
        if path.exists() and not force:
            result_obj.output = ConfigInitOutput(
                warnings=[f"Config file already exists at {path}; use --force to overwrite"],
                config_path=str(path),
                written=False,
            ).model_dump(mode="python")
            result_obj.result = f"Kept existing configuration at {path}"
            result_obj.success = True
            return

        yield (0.6, "Writing default configuration...")
        try:
            SymlinkerConfig().save()
        except RuntimeError as e:
            result_obj.output = ConfigInitOutput(
                errors=[str(e)], config_path=str(path), written=False
            ).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = ConfigInitOutput(config_path=str(path), written=True).model_dump(mode="python")
        result_obj.result = f"Wrote default configuration to {path}"
        result_obj.success = True

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)
