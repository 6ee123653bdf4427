import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified symlinker logging.

    Args:
        home: Path to symlinker home directory. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR (LogConfig.level)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from symlinker.api.config.get_home_dir import get_home_dir

        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "symlinker.log"

    root_logger = logging.getLogger("symlinker")
    root_logger.setLevel(_LEVELS.get(level, logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are attached lazily by configure_logging at application entry;
    until then records propagate to the root logger.
    """
    return logging.getLogger(f"symlinker.{name}")
