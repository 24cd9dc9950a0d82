"""Custom exceptions for gitswap."""


class GitswapError(Exception):
    """Base exception for gitswap."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    @staticmethod
    def _escape_markup(text: str) -> str:
        """Escape Rich markup in text."""
        return str(text).replace("[", "\\[").replace("]", "\\]")

    def __str__(self) -> str:
        return self.message


class StorageError(GitswapError):
    """The profiles file could not be read, parsed or written."""
    pass


class ProfileError(GitswapError):
    """Profile-related errors."""

    def __init__(
        self,
        message: str,
        alias: str | None = None,
        details: str | None = None,
    ) -> None:
        self.alias = alias
        super().__init__(message, details)


class DuplicateAliasError(ProfileError):
    """A profile with the same alias already exists."""
    pass


class NotFoundError(ProfileError):
    """No profile with the requested alias."""
    pass


class ValidationError(GitswapError):
    """Invalid username, email or alias input."""
    pass


class ApplyError(GitswapError):
    """Errors reading or writing the Git identity configuration."""
    pass
