"""CLI entry point for tuneprompt.

Uses Typer for command routing with lazy loading for performance.
"""

import typer

from tuneprompt.utils.constants import DEFAULT_PIECE

__all__ = ["app", "main"]

app = typer.Typer(
    name="tuneprompt",
    help="Play a music piece live or render it to WAV, interactively",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Start an interactive session if no command given."""
    if ctx.invoked_subcommand is None:
        from tuneprompt.cli.commands import cmd_start

        raise typer.Exit(cmd_start(DEFAULT_PIECE))


@app.command()
def start(
    piece: str = typer.Argument(DEFAULT_PIECE, help="Label of the piece to play."),
) -> None:
    """Start an interactive session."""
    from tuneprompt.cli.commands import cmd_start

    raise typer.Exit(cmd_start(piece))


@app.command()
def status() -> None:
    """Show current settings."""
    from tuneprompt.cli.commands import cmd_status

    cmd_status()


@app.command("menu-style")
def menu_style(
    style: str = typer.Argument(
        ..., help="'line' to type answers, 'arrow' for a cursor menu."
    ),
) -> None:
    """Set how options are chosen."""
    from tuneprompt.cli.commands import cmd_menu_style

    raise typer.Exit(cmd_menu_style(style))


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from tuneprompt.cli.commands import cmd_debug_on

    cmd_debug_on()


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from tuneprompt.cli.commands import cmd_debug_off

    cmd_debug_off()


# Env subcommand group
env_app = typer.Typer(help="Manage env var overrides")
app.add_typer(env_app, name="env")


@env_app.command("list")
def env_list() -> None:
    """List env var overrides."""
    from tuneprompt.cli.commands import cmd_env_list

    cmd_env_list()


@env_app.command("set")
def env_set(key: str, value: str) -> None:
    """Set an env var override."""
    from tuneprompt.cli.commands import cmd_env_set

    cmd_env_set(key, value)


@env_app.command("unset")
def env_unset(key: str) -> None:
    """Remove an env var override."""
    from tuneprompt.cli.commands import cmd_env_unset

    cmd_env_unset(key)


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
