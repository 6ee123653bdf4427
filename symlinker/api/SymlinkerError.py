"""Base class for symlinker errors."""


class SymlinkerError(Exception):
    """Root of every error symlinker raises on purpose."""
