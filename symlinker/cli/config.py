"""Config Typer app factory."""

import typer

from symlinker.api.config.cmd_init import cmd_init
from symlinker.api.config.cmd_show import cmd_show
from symlinker.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Inspect and initialize configuration",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(ctx: typer.Context) -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_show, ctx)()

    @app.command(name="init")
    def init_cmd(
        ctx: typer.Context,
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
    ) -> None:
        """Write a default configuration file."""
        _handle_stage_result(cmd_init, ctx)(force=force)

    return app
