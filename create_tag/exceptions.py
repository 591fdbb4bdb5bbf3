"""Custom exceptions for create-tag."""


class TaggerError(Exception):
    """Base class for all errors reported to the user."""


class UsageError(TaggerError):
    """Raised when the command line arguments are not accepted."""


class ValidationError(TaggerError):
    """Raised when a tag does not match the grammar required on the current branch."""

    def __init__(self, message: str, tag: str = None, hints: list = None):
        self.tag = tag
        self.hints = hints or []
        super().__init__(message)


class ConflictError(TaggerError):
    """Raised when the tag already exists locally or on the remote."""

    def __init__(self, message: str, tag: str = None, location: str = None):
        self.tag = tag
        self.location = location
        super().__init__(message)


class NotFoundError(TaggerError):
    """Raised when the target commit reference does not resolve."""


class ExternalCommandError(TaggerError):
    """Raised when a git command fails (network, permission or unexpected state)."""

    def __init__(self, message: str, command: str = None):
        self.command = command
        super().__init__(message)


class ConcurrentModificationError(TaggerError):
    """Raised when the current branch changed while the interactive session was running."""

    def __init__(self, message: str, initial_branch: str = None, current_branch: str = None):
        self.initial_branch = initial_branch
        self.current_branch = current_branch
        super().__init__(message)
