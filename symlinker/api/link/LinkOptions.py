"""Options for one plan build."""

from pydantic import BaseModel, ConfigDict, Field


class LinkOptions(BaseModel):
    """Immutable options controlling how links are planned and executed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    use_relative_path: bool = Field(True, description="Link to a relative path when source and destination share a root")
    retain_operation_log: bool = Field(False, description="Keep the generated script/log artifact after execution")
    replicate_to_fixed_subfolders: bool = Field(False, description="Fan out into every replica subfolder")
    overwrite_existing: bool = Field(False, description="Replace entries already occupying a link path")
