"""
Exception hierarchy for the pseudo-linux namespace.

Command errors are recoverable: their text is the status line shown to the
user. InvariantViolation means the tree itself is broken and is never caught
by the shell.
"""


class PseudoFSError(Exception):
    """Base exception for all pseudofs errors."""

    pass


class CommandError(PseudoFSError):
    """A command was rejected; the namespace is unchanged."""

    pass


class UsageError(CommandError):
    """A required argument was not supplied."""

    pass


class NotFoundError(CommandError):
    """A referenced file or directory does not exist."""

    pass


class ConflictError(CommandError):
    """A proposed name is already taken by a file or a directory."""

    pass


class CapacityError(CommandError):
    """A directory already holds the maximum number of files or subdirectories."""

    pass


class ResourceError(CommandError):
    """No free node slot was left to allocate a directory."""

    pass


class InvariantViolation(PseudoFSError):
    """The tree structure is corrupt (cycle, released node in use)."""

    pass


class ConfigurationError(PseudoFSError):
    """Raised when there are configuration issues."""

    pass
