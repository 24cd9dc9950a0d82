"""Profile commands shared by the CLI and the interactive menu."""

import logging
from typing import Optional

from rich.markup import escape

from .exceptions import ApplyError, StorageError
from .git import IdentityApplier
from .profile import Identity, ProfileStore
from .ui import print_current_identity, print_profile_table
from .ui_common import print_info, print_success, print_warning

logger = logging.getLogger(__name__)


def add_profile(store: ProfileStore, username: str, email: str, alias: str) -> Identity:
    """Add a profile and report it."""
    identity = store.add(username, email, alias)
    print_success(f"Added profile '{escape(alias)}': {escape(str(identity))}")
    return identity


def switch_profile(
    store: ProfileStore,
    applier: IdentityApplier,
    alias: str,
    scope: str = "global",
) -> Identity:
    """Apply the identity stored under ``alias`` to Git configuration."""
    identity = store.find(alias)
    applier.apply(identity)
    print_success(f"Switched to profile '{escape(alias)}': {escape(str(identity))}")
    print_info(
        "Your Git configuration has been updated. You can verify it with: "
        f"git config --{scope} --list"
    )
    return identity


def delete_profile(store: ProfileStore, alias: str) -> Identity:
    """Delete a profile and report it."""
    identity = store.delete(alias)
    print_success(f"Deleted profile '{escape(alias)}'")
    return identity


def _label(store: ProfileStore, identity: Identity) -> Identity:
    """Attach the alias of a stored profile matching ``identity``."""
    try:
        stored = store.match(identity.username, identity.email)
    except StorageError as e:
        print_warning(f"Could not read profiles: {escape(str(e))}")
        return identity
    return stored if stored is not None else identity


def show_current(
    store: ProfileStore,
    applier: IdentityApplier,
    scope: str = "global",
) -> Optional[Identity]:
    """Print the identity configured in Git."""
    identity = applier.current()
    if identity is not None:
        identity = _label(store, identity)
    print_current_identity(identity, scope)
    return identity


def show_profiles(store: ProfileStore, applier: IdentityApplier) -> None:
    """Print all stored profiles, marking the active one."""
    identities = store.list()
    if not identities:
        print_info("No profiles found. Add one with: gitswap add USERNAME EMAIL ALIAS")
        return

    try:
        active = applier.current()
    except ApplyError as e:
        logger.warning(f"Could not read current Git identity: {e}")
        active = None
    print_profile_table(identities, active)
