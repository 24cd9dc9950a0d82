"""Command-line interface."""

import logging
import sys
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar, cast

import click

from .commands import add_profile, delete_profile, show_current, show_profiles, switch_profile
from .exceptions import DuplicateAliasError, GitswapError, NotFoundError
from .git import GitConfigBackend, IdentityApplier
from .menu import run_menu
from .profile import ProfileStore
from .ui_common import console
from .version import __version__

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator to handle errors in CLI commands."""
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except DuplicateAliasError as e:
            console.print(f"\n[bold red]Error:[/bold red] {e._escape_markup(str(e))}")
            if e.details:
                console.print(f"[dim]{e._escape_markup(e.details)}[/dim]")
            console.print("\n[bold cyan]Options:[/bold cyan]")
            console.print("1. Use a different alias for the new profile")
            console.print(f"2. Delete the existing profile: [yellow]gitswap delete {e._escape_markup(e.alias)}[/yellow]")
            raise click.Abort()

        except NotFoundError as e:
            console.print(f"\n[bold red]Error:[/bold red] {e._escape_markup(str(e))}")
            console.print("See the stored profiles with: [yellow]gitswap list[/yellow]")
            raise click.Abort()

        except GitswapError as e:
            logger.info(f"{type(e).__name__}: {e} {e.details or ''}".rstrip())
            console.print(f"\n[bold red]Error:[/bold red] {e._escape_markup(str(e))}")
            if e.details:
                console.print(f"[dim]{e._escape_markup(e.details)}[/dim]")
            raise click.Abort()

        except (click.ClickException, click.Abort, click.exceptions.Exit):
            raise

        except Exception as e:
            logger.error(f"Unexpected error: {str(e)}", exc_info=True)
            console.print(f"\n[bold red]Unexpected error:[/bold red] {GitswapError._escape_markup(str(e))}")
            raise click.Abort()
    return cast(F, wrapper)


def get_store(ctx: click.Context) -> ProfileStore:
    """Load the profile store selected for this invocation."""
    return ProfileStore(ctx.obj.get("profiles_file")).load()


def get_applier(local: bool = False) -> IdentityApplier:
    """Create an applier for global or repository-local Git config."""
    return IdentityApplier(GitConfigBackend(scope="local" if local else "global"))


def enable_debug_logging() -> None:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in root.handlers:
        handler.setLevel(logging.DEBUG)
    logger.debug("Debug mode enabled")


@click.group(invoke_without_command=True)
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option(
    '--profiles-file',
    type=click.Path(dir_okay=False, path_type=Path),
    envvar='GITSWAP_PROFILES_FILE',
    help='Profiles file to use instead of ~/.gitswap/profiles.json',
)
@click.version_option(__version__, prog_name='gitswap')
@click.pass_context
@handle_errors
def cli(ctx: click.Context, debug: bool, profiles_file: Path | None) -> None:
    """Switch between multiple Git identities.

    Run without a command for an interactive menu.
    """
    if debug:
        enable_debug_logging()

    ctx.ensure_object(dict)
    ctx.obj["profiles_file"] = profiles_file
    logger.debug("Starting gitswap CLI")

    if ctx.invoked_subcommand is not None:
        return

    if sys.stdin.isatty():
        run_menu(get_store(ctx), get_applier())
    else:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("username")
@click.argument("email")
@click.argument("alias")
@click.pass_context
@handle_errors
def add(ctx: click.Context, username: str, email: str, alias: str) -> None:
    """Add a new profile."""
    add_profile(get_store(ctx), username, email, alias)


@cli.command()
@click.argument("alias")
@click.option("--local", is_flag=True, help="Set the identity for the current repository only")
@click.pass_context
@handle_errors
def switch(ctx: click.Context, alias: str, local: bool = False) -> None:
    """Switch Git to the identity of a profile."""
    switch_profile(
        get_store(ctx),
        get_applier(local),
        alias,
        scope="local" if local else "global",
    )


@cli.command()
@click.argument("alias")
@click.pass_context
@handle_errors
def delete(ctx: click.Context, alias: str) -> None:
    """Delete a profile."""
    delete_profile(get_store(ctx), alias)


@cli.command()
@click.option("--local", is_flag=True, help="Show the identity of the current repository")
@click.pass_context
@handle_errors
def current(ctx: click.Context, local: bool = False) -> None:
    """Show the current Git identity."""
    show_current(
        ProfileStore(ctx.obj.get("profiles_file")),
        get_applier(local),
        scope="local" if local else "global",
    )


@cli.command("list")
@click.pass_context
@handle_errors
def list_profiles(ctx: click.Context) -> None:
    """List all profiles."""
    show_profiles(get_store(ctx), get_applier())
