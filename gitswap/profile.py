"""Profile management module for gitswap."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from .config import get_profiles_file
from .exceptions import DuplicateAliasError, NotFoundError, StorageError
from .validation import validate_alias, validate_email, validate_username

logger = logging.getLogger(__name__)

RECORD_FIELDS = ("alias", "username", "email")


@dataclass(frozen=True)
class Identity:
    """Git author identity, optionally known under an alias."""
    username: str
    email: str
    alias: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert identity to dictionary for serialization."""
        return {
            "alias": self.alias,
            "username": self.username,
            "email": self.email,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Identity":
        """Create identity from dictionary."""
        return cls(
            username=data["username"],
            email=data["email"],
            alias=data["alias"],
        )

    def __str__(self) -> str:
        return f"{self.username} <{self.email}>"


def _parse_records(data: Any) -> List[Identity]:
    """Turn a decoded profiles document into identities.

    Raises:
        StorageError: If the document is not a list of profile records
    """
    if not isinstance(data, list):
        raise StorageError(
            "Invalid profiles file",
            details=f"expected a list of profiles, got {type(data).__name__}",
        )

    identities: List[Identity] = []
    seen: set[str] = set()
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise StorageError(
                "Invalid profiles file",
                details=f"entry {index} is not an object",
            )
        for field in RECORD_FIELDS:
            value = record.get(field)
            if not isinstance(value, str) or not value:
                raise StorageError(
                    "Invalid profiles file",
                    details=f"entry {index} has a missing or invalid '{field}'",
                )
        if record["alias"] in seen:
            raise StorageError(
                "Invalid profiles file",
                details=f"alias '{record['alias']}' appears more than once",
            )
        seen.add(record["alias"])
        identities.append(Identity.from_dict(record))
    return identities


class ProfileStore:
    """Ordered collection of identities persisted as a JSON file.

    The whole file is read into memory, changed there and rewritten on
    every add or delete. There is no locking: concurrent invocations can
    overwrite each other's changes.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        """Initialize the store.

        Args:
            path: Location of the profiles file. Defaults to the configured
                profiles file in the user's home directory.
        """
        self.path = Path(path) if path is not None else get_profiles_file()
        self._identities: List[Identity] = []
        self._loaded = False

    def load(self) -> "ProfileStore":
        """Load profiles from disk.

        A missing or empty file gives an empty store.

        Returns:
            The store itself

        Raises:
            StorageError: If the file cannot be read or is not a valid
                profiles document
        """
        identities: List[Identity] = []
        if self.path.exists():
            try:
                raw = self.path.read_bytes()
            except OSError as e:
                raise StorageError(
                    f"Failed to read profiles from {self.path}", details=str(e)
                ) from e

            try:
                content = raw.decode("utf-8")
                data = json.loads(content) if content.strip() else []
            except (UnicodeDecodeError, json.JSONDecodeError) as e:
                raise StorageError(
                    f"Failed to parse profiles file {self.path}", details=str(e)
                ) from e
            identities = _parse_records(data)
        else:
            logger.debug(f"No profiles file at {self.path}, starting empty")

        self._identities = identities
        self._loaded = True
        logger.debug(f"Loaded {len(identities)} profile(s) from {self.path}")
        return self

    def save(self) -> None:
        """Save profiles to disk.

        Raises:
            StorageError: If the file cannot be written
        """
        data = [identity.to_dict() for identity in self._identities]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise StorageError(
                f"Failed to save profiles to {self.path}", details=str(e)
            ) from e
        logger.debug(f"Saved {len(data)} profile(s) to {self.path}")

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    def _index_of(self, alias: str) -> Optional[int]:
        for index, identity in enumerate(self._identities):
            if identity.alias == alias:
                return index
        return None

    def add(self, username: str, email: str, alias: str) -> Identity:
        """Add a new profile and persist the store.

        Args:
            username: Git username (``user.name``)
            email: Git email (``user.email``)
            alias: Unique name for the profile

        Returns:
            The stored identity

        Raises:
            ValidationError: If any field is invalid
            DuplicateAliasError: If the alias is already in use
            StorageError: If the store cannot be loaded or saved
        """
        self._ensure_loaded()
        username = validate_username(username)
        email = validate_email(email)
        alias = validate_alias(alias)

        index = self._index_of(alias)
        if index is not None:
            existing = self._identities[index]
            raise DuplicateAliasError(
                f"Profile '{alias}' already exists",
                alias=alias,
                details=f"Currently set to {existing}",
            )

        identity = Identity(username=username, email=email, alias=alias)
        self._identities.append(identity)
        try:
            self.save()
        except StorageError:
            self._identities.pop()
            raise

        logger.info(f"Added profile '{alias}' ({identity})")
        return identity

    def delete(self, alias: str) -> Identity:
        """Delete a profile and persist the store.

        Returns:
            The removed identity

        Raises:
            NotFoundError: If no profile has this alias
            StorageError: If the store cannot be loaded or saved
        """
        self._ensure_loaded()
        index = self._index_of(alias)
        if index is None:
            raise NotFoundError(f"Profile not found: {alias}", alias=alias)

        identity = self._identities.pop(index)
        try:
            self.save()
        except StorageError:
            self._identities.insert(index, identity)
            raise

        logger.info(f"Deleted profile '{alias}'")
        return identity

    def find(self, alias: str) -> Identity:
        """Get a profile by alias.

        Raises:
            NotFoundError: If no profile has this alias
        """
        self._ensure_loaded()
        index = self._index_of(alias)
        if index is None:
            raise NotFoundError(f"Profile not found: {alias}", alias=alias)
        return self._identities[index]

    def match(self, username: str, email: str) -> Optional[Identity]:
        """Find the first profile with this username and email."""
        self._ensure_loaded()
        for identity in self._identities:
            if identity.username == username and identity.email == email:
                return identity
        return None

    def aliases(self) -> List[str]:
        """Get all aliases in insertion order."""
        self._ensure_loaded()
        return [identity.alias for identity in self._identities]

    def list(self) -> List[Identity]:
        """Get all profiles in insertion order."""
        self._ensure_loaded()
        return list(self._identities)

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._identities)
