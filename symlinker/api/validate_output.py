"""Validate a command's output dict against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def validate_output(func: Callable[..., Any], output: dict) -> dict:
    """Validate output against the schema registered for ``func``.

    The schema key is derived from the function's module path:
    ``symlinker.api.<domain>.cmd_<name>``. Functions outside that layout
    (or without a registered schema) pass through unchanged.

    Raises:
        ValueError: If the output does not match the schema
    """
    parts = getattr(func, "__module__", "").split(".")
    if len(parts) < 4 or parts[1] != "api" or not parts[-1].startswith("cmd_"):
        return output

    domain = parts[2]
    command_name = parts[-1][len("cmd_") :]
    schema = get_output_schema(domain, command_name)
    if schema is None:
        return output

    try:
        return schema.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"{domain}.{command_name}: {e}") from e
