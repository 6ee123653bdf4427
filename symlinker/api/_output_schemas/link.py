"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkPlanOutput(BaseOutputSchema):
    """Output schema for link plan command (dry run).

    Output structure:
    - errors / warnings: list[str]
    - destination: str - normalized destination root, as supplied if validation failed
    - directories: list[str] - destination directories in resolved order
    - operations: list[dict] - one entry per (destination, source) pair
    - counts: dict[str, int] - number of operations per action
    """

    destination: str = Field(..., description="Normalized destination root")
    directories: list[str] = Field(..., description="Destination directories in resolved order")
    operations: list[dict[str, Any]] = Field(..., description="Planned link operations")
    counts: dict[str, int] = Field(..., description="Operation count per action")


class LinkCreateOutput(LinkPlanOutput):
    """Output schema for link create command."""

    executor: str = Field(..., description="Executor that ran the plan, empty string if none ran")
    exit_status: int = Field(..., description="Executor exit status, -1 if it never ran")
    artifact_path: str = Field(..., description="Retained script/log artifact, empty string if deleted")


register_output_schema("link", "plan", LinkPlanOutput)
register_output_schema("link", "create", LinkCreateOutput)
