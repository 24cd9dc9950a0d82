"""UI module for gitswap."""

from collections.abc import Callable
from typing import Optional, Sequence

from rich import box
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from .exceptions import ValidationError
from .profile import Identity
from .ui_common import console, print_error, print_info


def print_profile_table(
    identities: Sequence[Identity],
    active: Optional[Identity] = None,
) -> None:
    """Print profiles in a table format.

    Args:
        identities: Stored profiles in display order
        active: Identity currently configured in Git, used to mark the
            matching row
    """
    table = Table(
        title="Git Profiles",
        box=box.ROUNDED,
        header_style="bold cyan",
        border_style="blue",
    )

    table.add_column("Alias", style="cyan")
    table.add_column("Username", style="blue")
    table.add_column("Email", style="green")
    table.add_column("Active", justify="center", style="bold green")

    for identity in identities:
        is_active = (
            active is not None
            and identity.username == active.username
            and identity.email == active.email
        )
        table.add_row(
            escape(identity.alias or ""),
            escape(identity.username),
            escape(identity.email),
            "✓" if is_active else "",
        )

    console.print(table)
    console.print()


def print_current_identity(identity: Optional[Identity], scope: str = "global") -> None:
    """Print the identity configured in Git."""
    if identity is None:
        print_info(f"No Git identity configured ({scope})")
        return

    username = escape(identity.username) if identity.username else "[dim](not set)[/dim]"
    email = escape(identity.email) if identity.email else "[dim](not set)[/dim]"
    line = f"[title]Current user:[/title] {username} <{email}>"
    if identity.alias:
        line += f" [highlight]({escape(identity.alias)})[/highlight]"
    console.print(line)


def prompt_until_valid(prompt: str, validate: Callable[[str], str]) -> str:
    """Prompt until the input passes validation.

    Args:
        prompt: Prompt text
        validate: Validator returning the cleaned value or raising
            ValidationError

    Returns:
        The validated value
    """
    while True:
        value = Prompt.ask(prompt, console=console)
        try:
            return validate(value)
        except ValidationError as e:
            print_error(escape(str(e)))


def prompt_choice(prompt: str, choices: list[str], default: Optional[str] = None) -> str:
    """Prompt for one of several choices."""
    if default is None:
        return Prompt.ask(prompt, choices=choices, console=console)
    return Prompt.ask(prompt, choices=choices, default=default, console=console)
