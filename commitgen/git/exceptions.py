"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NotAGitRepositoryError: Raised outside a git working tree
- NoStagedChangesError: Raised when there are no staged changes
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotAGitRepositoryError(GitError):
    """Raised when the current directory is not inside a git repository."""

    pass


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    pass
