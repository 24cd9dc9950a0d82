"""gitswap - Switch between multiple Git identities."""

from gitswap.git import ConfigBackend, GitConfigBackend, IdentityApplier
from gitswap.profile import Identity, ProfileStore
from gitswap.version import __version__

__all__ = [
    "ConfigBackend",
    "GitConfigBackend",
    "Identity",
    "IdentityApplier",
    "ProfileStore",
    "__version__",
]
