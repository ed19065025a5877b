"""Git access for commitgen.

This package collects the staged change set:
- exceptions: GitError, NotAGitRepositoryError, NoStagedChangesError
- runner: run_git_command, get_repo_root, get_hooks_dir, is_inside_work_tree
- diff: get_staged_files, get_staged_patch, get_staged_changes
"""

# Exceptions
from commitgen.git.exceptions import (
    GitError,
    NoStagedChangesError,
    NotAGitRepositoryError,
)

# Runner utilities
from commitgen.git.runner import (
    get_hooks_dir,
    get_repo_root,
    is_inside_work_tree,
    run_git_command,
)

# Staged changes
from commitgen.git.diff import (
    get_staged_changes,
    get_staged_files,
    get_staged_patch,
    truncate_to_bytes,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    "NotAGitRepositoryError",
    # Runner utilities
    "get_hooks_dir",
    "get_repo_root",
    "is_inside_work_tree",
    "run_git_command",
    # Staged changes
    "get_staged_changes",
    "get_staged_files",
    "get_staged_patch",
    "truncate_to_bytes",
]
