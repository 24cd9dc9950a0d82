"""Git identity configuration management."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Literal, Optional

from .exceptions import ApplyError
from .profile import Identity

logger = logging.getLogger(__name__)

Scope = Literal["global", "local"]

USER_NAME_KEY = "user.name"
USER_EMAIL_KEY = "user.email"


class ConfigBackend(ABC):
    """Reads and writes Git configuration values."""

    @abstractmethod
    def get_value(self, key: str) -> Optional[str]:
        """Get a configuration value.

        Args:
            key: Configuration key (e.g., "user.name")

        Returns:
            The configured value, or None if it is not set

        Raises:
            ApplyError: If the configuration cannot be read
        """
        ...

    @abstractmethod
    def set_value(self, key: str, value: str) -> None:
        """Set a configuration value.

        Raises:
            ApplyError: If the configuration cannot be written
        """
        ...


class GitConfigBackend(ConfigBackend):
    """Runs ``git config`` through GitPython."""

    def __init__(self, scope: Scope = "global", cwd: Optional[Path] = None) -> None:
        """Initialize the backend.

        Args:
            scope: "global" for the user's ~/.gitconfig, "local" for the
                repository containing ``cwd``
            cwd: Working directory for Git commands
        """
        if scope not in ("global", "local"):
            raise ValueError(f"Unsupported Git config scope: {scope}")
        self.scope = scope
        self.cwd = cwd

    def _git(self):
        try:
            import git
        except ImportError as e:
            raise ApplyError("Git is not available", details=str(e)) from e
        return git, git.Git(self.cwd)

    def get_value(self, key: str) -> Optional[str]:
        git, cmd = self._git()
        try:
            value = cmd.config(f"--{self.scope}", "--get", key)
        except git.exc.GitCommandError as e:
            # Exit status 1 means the key is not set
            if e.status == 1:
                return None
            raise ApplyError(
                f"Failed to read {key} from {self.scope} Git config",
                details=str(e.stderr).strip() or None,
            ) from e
        except git.exc.CommandError as e:
            raise ApplyError("Failed to run Git", details=str(e)) from e
        return value.strip() or None

    def set_value(self, key: str, value: str) -> None:
        git, cmd = self._git()
        try:
            cmd.config(f"--{self.scope}", key, value)
        except git.exc.GitCommandError as e:
            raise ApplyError(
                f"Failed to set {key} in {self.scope} Git config",
                details=str(e.stderr).strip() or None,
            ) from e
        except git.exc.CommandError as e:
            raise ApplyError("Failed to run Git", details=str(e)) from e


class IdentityApplier:
    """Applies identities to Git configuration."""

    def __init__(self, backend: Optional[ConfigBackend] = None) -> None:
        self.backend = backend if backend is not None else GitConfigBackend()

    def apply(self, identity: Identity) -> None:
        """Set ``user.name`` and ``user.email`` from an identity.

        Raises:
            ApplyError: If Git configuration cannot be written
        """
        self.backend.set_value(USER_NAME_KEY, identity.username)
        self.backend.set_value(USER_EMAIL_KEY, identity.email)
        logger.info(f"Applied identity {identity} ({identity.alias or 'unaliased'})")

    def current(self) -> Optional[Identity]:
        """Get the configured identity.

        Returns:
            An unaliased identity snapshot, or None if neither
            ``user.name`` nor ``user.email`` is set. A key that is not set
            is returned as an empty string.

        Raises:
            ApplyError: If Git configuration cannot be read
        """
        username = self.backend.get_value(USER_NAME_KEY)
        email = self.backend.get_value(USER_EMAIL_KEY)
        logger.debug(f"Current Git identity: name={username!r} email={email!r}")
        if username is None and email is None:
            return None
        return Identity(username=username or "", email=email or "")
