"""Link Typer app factory."""

from typing import Annotated

import typer

from symlinker.api.link.cmd_create import cmd_create
from symlinker.api.link.cmd_plan import cmd_plan
from symlinker.cli._handle_stage_result import _handle_stage_result

SourcesArg = Annotated[list[str], typer.Argument(help="Source files or folders to link")]
DestOpt = Annotated[str, typer.Option("--dest", "-t", help="Existing destination directory")]
RelativeOpt = Annotated[
    bool | None,
    typer.Option("--relative/--absolute", help="Link by relative path when possible (default from config)"),
]
ReplicateOpt = Annotated[
    bool | None,
    typer.Option("--replicate/--no-replicate", help="Link into every replica subfolder of the destination"),
]
OverwriteOpt = Annotated[
    bool | None,
    typer.Option("--overwrite/--no-overwrite", help="Replace entries that already exist at a link path"),
]


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Plan and create symbolic links",
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

    @app.command(name="plan")
    def plan_cmd(
        ctx: typer.Context,
        sources: SourcesArg,
        dest: DestOpt,
        relative: RelativeOpt = None,
        replicate: ReplicateOpt = None,
        overwrite: OverwriteOpt = None,
    ) -> None:
        """Show the links that would be created, without touching the filesystem."""
        _handle_stage_result(cmd_plan, ctx)(
            sources=sources,
            destination=dest,
            use_relative_path=relative,
            replicate=replicate,
            overwrite=overwrite,
        )

    @app.command(name="create")
    def create_cmd(
        ctx: typer.Context,
        sources: SourcesArg,
        dest: DestOpt,
        relative: RelativeOpt = None,
        replicate: ReplicateOpt = None,
        overwrite: OverwriteOpt = None,
        retain_log: Annotated[
            bool | None,
            typer.Option("--retain-log/--no-retain-log", help="Keep the generated script/log artifact"),
        ] = None,
        executor: Annotated[
            str | None,
            typer.Option("--executor", "-e", help="Executor: auto, script or direct (default from config)"),
        ] = None,
    ) -> None:
        """Create symbolic links for SOURCES in the destination directory."""
        _handle_stage_result(cmd_create, ctx)(
            sources=sources,
            destination=dest,
            use_relative_path=relative,
            retain_log=retain_log,
            replicate=replicate,
            overwrite=overwrite,
            executor=executor,
        )

    return app
