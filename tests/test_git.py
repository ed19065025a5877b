"""Tests for commitgen.git module."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from commitgen.git import (
    GitError,
    NoStagedChangesError,
    NotAGitRepositoryError,
    get_hooks_dir,
    get_repo_root,
    get_staged_changes,
    get_staged_files,
    get_staged_patch,
    is_inside_work_tree,
    run_git_command,
    truncate_to_bytes,
)


def _result(stdout):
    result = MagicMock()
    result.stdout = stdout
    result.returncode = 0
    return result


class TestRunGitCommand:
    """Tests for run_git_command function."""

    def test_successful_command(self, mock_git_commands):
        """Test successful git command execution."""
        mock_git_commands.return_value = _result("output\n")

        assert run_git_command(["status"]) == "output"
        args = mock_git_commands.call_args
        assert args.args[0] == ["git", "status"]
        assert args.kwargs["check"] is True

    def test_unstripped_output(self, mock_git_commands):
        """Test output can be returned verbatim."""
        mock_git_commands.return_value = _result(" diff\n")
        assert run_git_command(["diff"], strip=False) == " diff\n"

    def test_failed_command_raises_error(self, mock_git_commands):
        """Test that a failed command raises GitError."""
        mock_git_commands.side_effect = subprocess.CalledProcessError(1, "git", stderr="fatal: bad")

        with pytest.raises(GitError) as exc_info:
            run_git_command(["invalid"])

        assert "Git command failed" in str(exc_info.value)
        assert "fatal: bad" in str(exc_info.value)

    def test_git_not_found_raises_error(self, mock_git_commands):
        """Test that missing git raises GitError."""
        mock_git_commands.side_effect = FileNotFoundError()

        with pytest.raises(GitError) as exc_info:
            run_git_command(["status"])

        assert "not installed" in str(exc_info.value)


class TestRepository:
    """Tests for repository helpers."""

    def test_get_repo_root(self, mock_git_commands):
        """Test the repository root is returned as a Path."""
        mock_git_commands.return_value = _result("/home/user/project\n")
        assert get_repo_root() == Path("/home/user/project")

    def test_not_a_repo(self, mock_git_commands):
        """Test outside a repository."""
        mock_git_commands.side_effect = subprocess.CalledProcessError(128, "git", stderr="fatal")

        with pytest.raises(NotAGitRepositoryError):
            get_repo_root()

    def test_hooks_dir_relative(self, mock_git_commands, temp_dir):
        """Test a relative hooks path is resolved against the working directory."""
        mock_git_commands.side_effect = [_result(str(temp_dir)), _result(".git/hooks\n")]
        assert get_hooks_dir(cwd=temp_dir) == temp_dir / ".git" / "hooks"

    def test_hooks_dir_absolute(self, mock_git_commands):
        """Test an absolute hooks path (core.hooksPath) is kept."""
        mock_git_commands.side_effect = [_result("/repo"), _result("/shared/hooks")]
        assert get_hooks_dir() == Path("/shared/hooks")

    def test_is_inside_work_tree(self, mock_git_commands):
        """Test work tree detection."""
        mock_git_commands.return_value = _result("true\n")
        assert is_inside_work_tree() is True

        mock_git_commands.side_effect = subprocess.CalledProcessError(128, "git")
        assert is_inside_work_tree() is False


class TestStagedChanges:
    """Tests for staged change collection."""

    def test_staged_files(self, mock_git_commands):
        """Test files keep git's order."""
        mock_git_commands.return_value = _result("src/b.py\nsrc/a.py\n")
        assert get_staged_files() == ["src/b.py", "src/a.py"]

    def test_no_staged_files(self, mock_git_commands):
        """Test an empty listing."""
        mock_git_commands.return_value = _result("")
        assert get_staged_files() == []

    def test_patch_truncated(self, mock_git_commands):
        """Test the patch is truncated to the byte limit."""
        mock_git_commands.return_value = _result("+" * 100)
        assert get_staged_patch(10) == "+" * 10

    def test_staged_changes(self, mock_git_commands, sample_patch):
        """Test files and patch are returned together."""
        mock_git_commands.side_effect = [_result("src/app.py\nsrc/utils.py\n"), _result(sample_patch)]

        files, patch = get_staged_changes(100 * 1024)

        assert files == ["src/app.py", "src/utils.py"]
        assert patch == sample_patch

    def test_nothing_staged(self, mock_git_commands):
        """Test nothing staged raises NoStagedChangesError."""
        mock_git_commands.return_value = _result("\n")

        with pytest.raises(NoStagedChangesError):
            get_staged_changes(1024)


class TestTruncateToBytes:
    """Tests for truncate_to_bytes function."""

    def test_within_limit(self):
        """Test short text is unchanged."""
        assert truncate_to_bytes("abc", 10) == "abc"

    def test_split_character_dropped(self):
        """Test a character cut in half is dropped."""
        assert truncate_to_bytes("aé", 2) == "a"
