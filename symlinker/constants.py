"""Shared constants for symlinker dot-directories and replica folders."""

SYMLINKER_HOME_EXT = ".symlinker"  # user-level state/config directory suffix

# Agent skill folder conventions used by replicate mode, in declared order
AGENT_REPLICA_SUBFOLDERS = (
    ".agent/skills",
    ".agents/skills",
    ".claude/skills",
)

# Prefix for generated script and operation-log artifacts
ARTIFACT_PREFIX = "symlinker"
