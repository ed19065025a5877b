"""Git command runner and repository utilities.

Contains:
- run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
- get_hooks_dir: Get the hooks directory of the current repository
- is_inside_work_tree: Check whether the current directory is in a repo
"""

import subprocess
from pathlib import Path
from typing import Optional

from commitgen.git.exceptions import GitError, NotAGitRepositoryError


def run_git_command(args: list[str], cwd: Optional[Path] = None, strip: bool = True) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run the command in. Defaults to the current one.
        strip: Whether to strip surrounding whitespace from the output.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails or git is not installed.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            cwd=cwd,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    return result.stdout.strip() if strip else result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        NotAGitRepositoryError: If not in a git repository.
    """
    try:
        root = run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd)
    except GitError:
        raise NotAGitRepositoryError(
            "Not in a git repository. Please run this command from within a git repo."
        )
    return Path(root)


def get_hooks_dir(cwd: Optional[Path] = None) -> Path:
    """Get the hooks directory, honoring core.hooksPath and worktrees.

    Raises:
        NotAGitRepositoryError: If not in a git repository.
    """
    get_repo_root(cwd)
    hooks = Path(run_git_command(["rev-parse", "--git-path", "hooks"], cwd=cwd))
    if not hooks.is_absolute():
        # Relative to the directory git ran in
        hooks = (cwd or Path.cwd()) / hooks
    return hooks


def is_inside_work_tree(cwd: Optional[Path] = None) -> bool:
    """Check whether the directory is inside a git working tree."""
    try:
        return run_git_command(["rev-parse", "--is-inside-work-tree"], cwd=cwd) == "true"
    except GitError:
        return False
