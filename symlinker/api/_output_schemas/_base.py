"""Shared fields for command output schemas."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Every command output carries errors and warnings, possibly empty.

    Unknown keys are rejected so a command cannot silently grow its output.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Error messages")
    warnings: list[str] = Field(default_factory=list, description="Warning messages")
