"""Interactive menu, run when gitswap is invoked without a command."""

from .commands import add_profile, delete_profile, show_current, show_profiles, switch_profile
from .exceptions import ValidationError
from .git import IdentityApplier
from .profile import ProfileStore
from .ui import prompt_choice, prompt_until_valid
from .ui_common import confirm_action, console, print_info
from .validation import BACK_OPTION, validate_alias, validate_email, validate_username

ACTIONS = ["switch", "add", "delete", "current", "list", "quit"]


def _select_alias(store: ProfileStore, prompt: str) -> str | None:
    """Ask for a stored alias, or None if the user goes back."""
    aliases = store.aliases()
    if not aliases:
        print_info("No profiles found")
        return None
    choice = prompt_choice(prompt, aliases + [BACK_OPTION], default=BACK_OPTION)
    return None if choice == BACK_OPTION else choice


def _validate_new_alias(store: ProfileStore, alias: str) -> str:
    alias = validate_alias(alias)
    if alias in store.aliases():
        raise ValidationError(f"Alias '{alias}' already exists")
    return alias


def menu_switch(store: ProfileStore, applier: IdentityApplier) -> None:
    alias = _select_alias(store, "[title]Select profile to switch to[/title]")
    if alias is not None:
        switch_profile(store, applier, alias)


def menu_add(store: ProfileStore) -> None:
    username = prompt_until_valid("[title]Git username[/title]", validate_username)
    email = prompt_until_valid("[title]Git email[/title]", validate_email)
    alias = prompt_until_valid(
        "[title]Alias[/title]", lambda value: _validate_new_alias(store, value)
    )
    add_profile(store, username, email, alias)


def menu_delete(store: ProfileStore) -> None:
    alias = _select_alias(store, "[title]Select profile to delete[/title]")
    if alias is None:
        return
    if confirm_action(f"Are you sure you want to delete profile '{alias}'?", default=False):
        delete_profile(store, alias)
    else:
        print_info("Operation cancelled")


def run_menu(store: ProfileStore, applier: IdentityApplier) -> None:
    """Run the interactive menu until the user quits.

    Errors other than invalid input end the menu and propagate to the
    caller.
    """
    while True:
        console.print()
        action = prompt_choice("[title]Select action[/title]", ACTIONS)

        if action == "switch":
            menu_switch(store, applier)
        elif action == "add":
            menu_add(store)
        elif action == "delete":
            menu_delete(store)
        elif action == "current":
            show_current(store, applier)
        elif action == "list":
            show_profiles(store, applier)
        elif action == "quit":
            console.print("[warning]Quitting[/warning]")
            return
