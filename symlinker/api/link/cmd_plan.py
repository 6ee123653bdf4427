"""Link plan API command.

Dry run: report what `link create` would do without touching the filesystem.
Matches CLI: symlinkc link plan <sources...> --dest <destination>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import LinkPlanOutput
from ._normalize_inputs import _normalize_inputs
from ._plan_warnings import _plan_warnings
from .DestinationNotFound import DestinationNotFound
from .LinkPlanBuilder import LinkPlanBuilder


def cmd_plan(
    sources: list[str],
    destination: str,
    use_relative_path: bool | None = None,
    replicate: bool | None = None,
    overwrite: bool | None = None,
) -> StageResult:
    """Plan links for ``sources`` in ``destination``.

    Options left as None fall back to the configured link defaults.
    Destination directories are not created, so replica subfolders that do
    not exist yet report every link as a plain create.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.SymlinkerConfig import SymlinkerConfig

        yield (0.1, "Loading configuration...")
        try:
            config = SymlinkerConfig.load()
        except ValueError as e:
            result_obj.output = LinkPlanOutput(
                errors=[str(e)], destination=destination, directories=[], operations=[], counts={}
            ).model_dump(mode="python")
            result_obj.result = f"Invalid configuration: {e}"
            result_obj.success = False
            return

        options = config.link.options(
            use_relative_path=use_relative_path,
            replicate_to_fixed_subfolders=replicate,
            overwrite_existing=overwrite,
        )

        yield (0.3, "Resolving paths...")
        source_paths, destination_path = _normalize_inputs(sources, destination)

        yield (0.5, "Building link plan...")
        builder = LinkPlanBuilder(
            source_paths,
            destination_path,
            options,
            config.link.replica_subfolders,
            ensure_directories=False,
        )
        try:
            plan = builder.build()
        except DestinationNotFound as e:
            result_obj.output = LinkPlanOutput(
                errors=[str(e)], destination=e.path, directories=[], operations=[], counts={}
            ).model_dump(mode="python")
            result_obj.result = f"Destination not found: {e.path}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        counts = plan.counts()
        result_obj.output = LinkPlanOutput(
            warnings=_plan_warnings(plan),
            **plan.to_dict(),
        ).model_dump(mode="python")
        result_obj.result = (
            f"Planned {len(plan.operations)} links in {len(plan.directories)} directories "
            f"({counts['create']} create, {counts['replace_then_create']} replace, {counts['skip']} skip)"
        )
        result_obj.success = True

    return StageResult(
        announce=f"Planning links into {destination}...",
        progress_callback=do_work,
    )
