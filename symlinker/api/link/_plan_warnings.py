"""Warnings worth surfacing for a built plan."""

from .Plan import Plan


def _plan_warnings(plan: Plan) -> list[str]:
    warnings = [f"Source does not exist: {spec.source}" for spec in plan.sources if not spec.exists]

    seen: set[str] = set()
    for directory in plan.directories:
        if directory in seen:
            warnings.append(f"Destination directory listed more than once: {directory}")
        seen.add(directory)

    warnings.extend(
        f"Skipped {op.link_path}: {op.existing.value} already exists" for op in plan.skipped_operations
    )
    return warnings
