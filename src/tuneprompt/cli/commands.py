"""CLI command handlers."""

from rich.markup import escape

from tuneprompt.cli.helpers import build_console_handlers, build_prompter
from tuneprompt.cli.ui import console, err_console, print_header
from tuneprompt.core import InteractiveSession
from tuneprompt.core.handlers import HandlerRegistry
from tuneprompt.utils.config import Config, get_tuneprompt_dir
from tuneprompt.utils.constants import EXIT_INTERRUPTED
from tuneprompt.utils.debug import log_error, reload_config
from tuneprompt.utils.exceptions import ConfigurationError, InputStreamError


def cmd_start(piece: str) -> int:
    """Run the interactive session. Returns the process exit code."""
    config = Config(get_tuneprompt_dir())
    try:
        config.validate()
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    handlers = build_console_handlers(config)
    print_header(piece, [mode.info.name for mode in handlers], config.menu_style)

    session = InteractiveSession(handlers, build_prompter(config))
    try:
        session.start(piece)
    except InputStreamError as e:
        log_error("cli", str(e), e, echo=False)
        err_console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1
    except KeyboardInterrupt:
        err_console.print("\nAborted.")
        return EXIT_INTERRUPTED
    return 0


def cmd_status():
    """Show current status."""
    tuneprompt_dir = get_tuneprompt_dir()
    config = Config(tuneprompt_dir)

    # Debug
    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )

    console.print(f"[bold]Menu style:[/bold] {escape(config.menu_style)}")
    console.print(f"[bold]BPM range:[/bold] {config.min_bpm}-{config.max_bpm}")

    modes = [mode.info.name for mode in HandlerRegistry.modes()]
    console.print(f"[bold]Modes:[/bold] {', '.join(modes) if modes else 'none'}")

    # Config dir
    console.print(f"[bold]Config:[/bold] [dim]{tuneprompt_dir}[/dim]")
    console.print(f"[bold]Debug log:[/bold] [dim]{config.debug_log_path}[/dim]")


def cmd_debug_on():
    """Enable debug logging."""
    config = Config(get_tuneprompt_dir())
    config.set_debug(True)
    reload_config()
    print("Debug mode enabled")


def cmd_debug_off():
    """Disable debug logging."""
    config = Config(get_tuneprompt_dir())
    config.set_debug(False)
    reload_config()
    print("Debug mode disabled")


def cmd_menu_style(style: str) -> int:
    """Choose between the line prompt and the arrow-key menu."""
    config = Config(get_tuneprompt_dir())
    try:
        config.set_menu_style(style)
    except ConfigurationError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    print(f"Menu style set to {style}")
    return 0


def cmd_env_list():
    """List all env var overrides."""
    config = Config(get_tuneprompt_dir())
    env_vars = config.list_env()

    if not env_vars:
        print("No env var overrides set.")
        return

    for key, value in sorted(env_vars.items()):
        print(f"{key}={value}")


def cmd_env_set(key: str, value: str):
    """Set an env var override."""
    config = Config(get_tuneprompt_dir())
    config.set_env(key, value)
    print(f"Set {key}={value}")


def cmd_env_unset(key: str):
    """Unset an env var override."""
    config = Config(get_tuneprompt_dir())
    if config.unset_env(key):
        print(f"Unset {key}")
    else:
        print(f"{key} not found")
