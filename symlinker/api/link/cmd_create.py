"""Link create API command.

Plan links for a batch of sources and execute the plan.
Matches CLI: symlinkc link create <sources...> --dest <destination>
"""

from collections.abc import Iterator

from ..executor.execute_plan import execute_plan
from ..executor.ExecutorFailure import ExecutorFailure
from ..executor.get_artifact_dir import get_artifact_dir
from ..executor.get_executor import get_executor
from ..StageResult import StageResult
from . import LinkCreateOutput
from ._normalize_inputs import _normalize_inputs
from ._plan_warnings import _plan_warnings
from .DestinationNotFound import DestinationNotFound
from .LinkPlanBuilder import LinkPlanBuilder


def cmd_create(
    sources: list[str],
    destination: str,
    use_relative_path: bool | None = None,
    retain_log: bool | None = None,
    replicate: bool | None = None,
    overwrite: bool | None = None,
    executor: str | None = None,
) -> StageResult:
    """Create symlinks for ``sources`` in ``destination``.

    Args:
        sources: Source files/folders to link
        destination: Existing destination directory
        use_relative_path: Link by relative path when roots match
        retain_log: Keep the generated script/log artifact
        replicate: Link into every configured replica subfolder
        overwrite: Replace entries already at a link path
        executor: auto, script or direct (overrides configuration)

    Options left as None fall back to the configured link defaults.

    Returns:
        StageResult with the executed plan
    """

    def _fail(result_obj: StageResult, message: str, errors: list[str], **fields) -> None:
        values = {
            "destination": destination,
            "directories": [],
            "operations": [],
            "counts": {},
            "executor": "",
            "exit_status": -1,
            "artifact_path": "",
        }
        values.update(fields)
        result_obj.output = LinkCreateOutput(errors=errors, **values).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.SymlinkerConfig import SymlinkerConfig

        yield (0.1, "Loading configuration...")
        try:
            config = SymlinkerConfig.load()
        except ValueError as e:
            _fail(result_obj, f"Invalid configuration: {e}", [str(e)])
            return

        options = config.link.options(
            use_relative_path=use_relative_path,
            retain_operation_log=retain_log,
            replicate_to_fixed_subfolders=replicate,
            overwrite_existing=overwrite,
        )

        yield (0.2, "Resolving paths...")
        source_paths, destination_path = _normalize_inputs(sources, destination)

        yield (0.3, "Building link plan...")
        builder = LinkPlanBuilder(source_paths, destination_path, options, config.link.replica_subfolders)
        try:
            plan = builder.build()
        except DestinationNotFound as e:
            _fail(result_obj, f"Destination not found: {e.path}", [str(e)], destination=e.path)
            return
        except OSError as e:
            _fail(result_obj, f"Could not prepare destination directories: {e}", [str(e)])
            return

        warnings = _plan_warnings(plan)
        if not plan.executable_operations:
            yield (1.0, "Complete")
            result_obj.output = LinkCreateOutput(
                warnings=warnings,
                executor="",
                exit_status=0,
                artifact_path="",
                **plan.to_dict(),
            ).model_dump(mode="python")
            result_obj.result = f"Nothing to link: {len(plan.skipped_operations)} links already exist"
            result_obj.success = True
            return

        yield (0.5, "Executing link plan...")
        try:
            runner = get_executor(
                plan,
                config.link,
                options.retain_operation_log,
                get_artifact_dir(config.link),
                name=executor,
            )
        except ValueError as e:
            _fail(result_obj, str(e), [str(e)], **plan.to_dict())
            return

        try:
            exit_status = execute_plan(runner)
        except ExecutorFailure as e:
            artifact = str(runner.artifact_path) if runner.artifact_path else ""
            errors = [line for line in e.error_text.splitlines() if line.strip()] or [str(e)]
            _fail(
                result_obj,
                f"Symlink executor exited with status {e.exit_status}",
                errors,
                executor=runner.name,
                exit_status=e.exit_status,
                artifact_path=artifact,
                **plan.to_dict(),
            )
            return
        except OSError as e:
            _fail(
                result_obj,
                f"Symlink executor could not run: {e}",
                [str(e)],
                executor=runner.name,
                **plan.to_dict(),
            )
            return

        yield (1.0, "Complete")
        counts = plan.counts()
        result_obj.output = LinkCreateOutput(
            warnings=warnings,
            executor=runner.name,
            exit_status=exit_status,
            artifact_path=str(runner.artifact_path) if runner.artifact_path else "",
            **plan.to_dict(),
        ).model_dump(mode="python")
        result_obj.result = (
            f"Linked {counts['create'] + counts['replace_then_create']} entries "
            f"into {len(plan.directories)} directories ({counts['skip']} skipped)"
        )
        result_obj.success = True

    return StageResult(
        announce=f"Creating links in {destination}...",
        progress_callback=do_work,
    )
