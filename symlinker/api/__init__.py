"""symlinker API layer: one domain package per command group."""
