"""Build the ordered link plan for a batch of sources."""

import os
from collections.abc import Iterable, Sequence

from ...constants import AGENT_REPLICA_SUBFOLDERS
from ...utils.logger import get_logger
from .DestinationGroup import DestinationGroup
from .DestinationNotFound import DestinationNotFound
from .EntryKind import EntryKind
from .FilesystemProbe import FilesystemProbe
from .join_path import join_path
from .LinkAction import LinkAction
from .LinkOperation import LinkOperation
from .LinkOptions import LinkOptions
from .LinkSpec import LinkSpec
from .LocalFilesystemProbe import LocalFilesystemProbe
from .normalize_destination_root import normalize_destination_root
from .Plan import Plan
from .relative_path import relative_path
from .resolve_destination_directories import resolve_destination_directories
from .split_path import split_path
from .strip_trailing_separator import strip_trailing_separator

logger = get_logger("link.plan")


class LinkPlanBuilder:
    """Turn (sources, destination root, options) into a Plan.

    A destination that is not an existing directory raises
    DestinationNotFound before anything is created. Collisions with
    existing entries are encoded as Skip or ReplaceThenCreate operations.
    Errors from the filesystem probe itself (a replica path blocked by a
    file, say) propagate as OSError.

    Args:
        sources: Absolute source paths, in the order links should be made;
            one trailing separator is dropped from each
        destination: Existing destination root directory
        options: LinkOptions for this build
        replica_subfolders: Subfolders used when replicating
        filesystem: Probe used for existence checks and directory creation
        separator: Path separator used to split and join path strings
        ensure_directories: Create destination directories before the
            existence checks (disable for dry runs)
    """

    def __init__(
        self,
        sources: Iterable[str],
        destination: str,
        options: LinkOptions | None = None,
        replica_subfolders: Sequence[str] = AGENT_REPLICA_SUBFOLDERS,
        filesystem: FilesystemProbe | None = None,
        separator: str = os.sep,
        ensure_directories: bool = True,
    ):
        self.separator = separator
        self.sources = [strip_trailing_separator(source, separator) for source in sources]
        self.destination = destination
        self.options = options or LinkOptions()
        self.replica_subfolders = tuple(replica_subfolders)
        self.filesystem = filesystem or LocalFilesystemProbe()
        self.ensure_directories = ensure_directories

    def build(self) -> Plan:
        if not self.filesystem.is_directory(self.destination):
            raise DestinationNotFound(self.destination)

        root = normalize_destination_root(self.destination, self.separator)
        directories = resolve_destination_directories(
            root,
            self.options.replicate_to_fixed_subfolders,
            self.replica_subfolders,
            self.separator,
        )

        if self.ensure_directories:
            for directory in directories:
                self.filesystem.make_directories(directory)

        specs = tuple(self._capture(source) for source in self.sources)
        groups = tuple(
            DestinationGroup(directory, tuple(self._plan_operation(directory, spec) for spec in specs))
            for directory in directories
        )
        plan = Plan(root=root, sources=specs, groups=groups)
        logger.info("Planned %d operations into %d directories", len(plan.operations), len(groups))
        return plan

    def _capture(self, source: str) -> LinkSpec:
        exists = self.filesystem.exists(source) is not EntryKind.NONE
        if not exists:
            logger.warning("Source does not exist: %s", source)
        return LinkSpec(source=source, is_directory=self.filesystem.is_directory(source), exists=exists)

    def _link_target(self, destination_parts: list[str], source: str) -> str:
        source_parts = split_path(source, self.separator)
        if not self.options.use_relative_path or source_parts[0] != destination_parts[0]:
            return source
        return relative_path(destination_parts, source_parts, self.separator)

    def _plan_operation(self, directory: str, spec: LinkSpec) -> LinkOperation:
        destination_parts = split_path(directory, self.separator)
        target = self._link_target(destination_parts, spec.source)
        link_name = split_path(spec.source, self.separator)[-1]
        link_path = join_path(directory, link_name, separator=self.separator)

        existing = self.filesystem.exists(link_path)
        if existing is EntryKind.NONE:
            action = LinkAction.CREATE
        elif self.options.overwrite_existing:
            action = LinkAction.REPLACE_THEN_CREATE
        else:
            action = LinkAction.SKIP

        logger.debug("%s %s -> %s (%s)", action.value, link_path, target, existing.value)
        return LinkOperation(
            destination=directory,
            link_name=link_name,
            link_path=link_path,
            target=target,
            source=spec.source,
            is_directory=spec.is_directory,
            action=action,
            existing=existing,
        )
