"""symlinker utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule (logger.py is the exception, pairing
configure_logging with get_logger).
"""

from .get_package_version import get_package_version
from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "get_package_version",
]
