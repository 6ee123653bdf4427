"""Link configuration for SymlinkerConfig."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import AGENT_REPLICA_SUBFOLDERS
from .LinkOptions import LinkOptions


class LinkConfig(BaseModel):
    """Link section of symlinker configuration."""

    model_config = ConfigDict(extra="forbid")

    replica_subfolders: list[str] = Field(
        default_factory=lambda: list(AGENT_REPLICA_SUBFOLDERS),
        description="Relative subfolders used by replicate mode, '/' or '\\' separated",
    )
    use_relative_path: bool = True
    retain_operation_log: bool = False
    replicate_to_fixed_subfolders: bool = False
    overwrite_existing: bool = False
    executor: Literal["auto", "script", "direct"] = Field("auto", description="How plans are executed")
    elevate: bool = Field(False, description="Run generated scripts with administrator rights")
    artifact_dir: str | None = Field(None, description="Where script/log artifacts go (default: <home>/scripts)")

    @field_validator("replica_subfolders")
    @classmethod
    def _relative_only(cls, v: list[str]) -> list[str]:
        for subfolder in v:
            stripped = subfolder.strip("/\\")
            if not stripped or subfolder.startswith(("/", "\\")) or ":" in subfolder:
                raise ValueError(f"replica subfolder must be a non-empty relative path: {subfolder!r}")
        return v

    def options(self, **overrides: bool | None) -> LinkOptions:
        """Build LinkOptions from the configured defaults.

        Overrides whose value is None keep the configured default.
        """
        values = {
            "use_relative_path": self.use_relative_path,
            "retain_operation_log": self.retain_operation_log,
            "replicate_to_fixed_subfolders": self.replicate_to_fixed_subfolders,
            "overwrite_existing": self.overwrite_existing,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return LinkOptions(**values)
