"""Link API domain: plan and create symlinks."""

from .._output_schemas.link import LinkCreateOutput, LinkPlanOutput

__all__ = [
    "LinkCreateOutput",
    "LinkPlanOutput",
]
