"""Create symlinks for a batch of sources in one call."""

from collections.abc import Iterable
from pathlib import Path

from ..executor.execute_plan import execute_plan
from ..executor.get_artifact_dir import get_artifact_dir
from ..executor.get_executor import get_executor
from .LinkConfig import LinkConfig
from .LinkOptions import LinkOptions
from .LinkPlanBuilder import LinkPlanBuilder
from .Plan import Plan


def create_symlinks(
    sources: Iterable[str],
    destination: str,
    use_relative_path: bool = True,
    retain_operation_log: bool = False,
    replicate_to_fixed_subfolders: bool = False,
    overwrite_existing: bool = False,
    *,
    link_config: LinkConfig | None = None,
    executor: str | None = None,
    artifact_dir: Path | None = None,
) -> Plan:
    """Build the link plan and execute it.

    Args:
        sources: Absolute source file/folder paths
        destination: Existing destination directory
        use_relative_path: Link by relative path when roots match
        retain_operation_log: Keep the script/log artifact
        replicate_to_fixed_subfolders: Link into every replica subfolder
        overwrite_existing: Replace entries already at a link path
        link_config: Replica subfolders and executor settings (defaults if None)
        executor: Executor name overriding ``link_config.executor``
        artifact_dir: Artifact directory overriding the configured one

    Returns:
        The executed Plan

    Raises:
        DestinationNotFound: If destination is not an existing directory
        ExecutorFailure: If the executor reports a non-zero exit status
        OSError: If a destination directory cannot be created or the
            executor cannot be started
    """
    link_config = link_config or LinkConfig()
    options = LinkOptions(
        use_relative_path=use_relative_path,
        retain_operation_log=retain_operation_log,
        replicate_to_fixed_subfolders=replicate_to_fixed_subfolders,
        overwrite_existing=overwrite_existing,
    )
    plan = LinkPlanBuilder(sources, destination, options, link_config.replica_subfolders).build()
    runner = get_executor(
        plan,
        link_config,
        options.retain_operation_log,
        artifact_dir or get_artifact_dir(link_config),
        name=executor,
    )
    execute_plan(runner)
    return plan
