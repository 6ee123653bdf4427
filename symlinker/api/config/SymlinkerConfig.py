"""Top-level symlinker configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..link.LinkConfig import LinkConfig
from .get_config_path import get_config_path
from .LogConfig import LogConfig


class SymlinkerConfig(BaseModel):
    """Top-level configuration for symlinker."""

    model_config = ConfigDict(extra="forbid")

    link: LinkConfig = Field(default_factory=LinkConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on SYMLINKER_HOME or default to ~/.symlinker."""
        return get_config_path()

    @classmethod
    def load(cls) -> "SymlinkerConfig":
        """Load and validate config from file.

        A missing config file yields the defaults of every section.

        Raises:
            ValueError: If invalid JSON or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert SymlinkerConfig instance to a dictionary for serialization."""
        return {
            "link": self.link.model_dump(mode="json"),
            "log": self.log.model_dump(mode="json"),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
