"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    from symlinker.api.config.SymlinkerConfig import SymlinkerConfig
    from symlinker.utils.logger import configure_logging

    try:
        level = SymlinkerConfig.load().log.level
    except ValueError:
        # Invalid config is reported by the command that loads it
        level = "INFO"
    configure_logging(level=level)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from symlinker.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        from symlinker.utils.get_package_version import get_package_version

        print(f"symlinkc {get_package_version()}")
        return 0

    _configure_logging()

    app = _create_app()
    try:
        # Typer reports usage errors itself (exit 2) and always ends in SystemExit
        app(argv, prog_name="symlinkc")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
