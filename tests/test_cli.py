"""Tests for commitgen.cli module."""

import logging

import pytest
from typer.testing import CliRunner

from commitgen import __version__
from commitgen.cache import load_latest_message, save_cached_message
from commitgen.cli import app
from commitgen.config import ConfigError, Settings
from commitgen.git import GitError, NoStagedChangesError
from commitgen.hook import HOOK_NAME
from commitgen.llm.exceptions import NetworkError


runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Detach the CLI log handler so it never outlives the runner's streams."""
    yield
    logger = logging.getLogger("commitgen")
    for handler in list(logger.handlers):
        if getattr(handler, "_commitgen_cli", False):
            logger.removeHandler(handler)


@pytest.fixture
def settings(temp_dir):
    """Settings with an isolated cache directory."""
    return Settings(cache_dir=temp_dir / "cache")


@pytest.fixture
def mock_settings(mocker, settings):
    """Make every command load the isolated settings."""
    mocker.patch("commitgen.cli.utils.load_settings", return_value=settings)
    return settings


class TestVersion:
    """Tests for the --version option."""

    def test_version(self):
        """Test the version is printed."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestSuggestCommand:
    """Tests for commitgen suggest command."""

    def test_heuristic_suggestion(self, mocker, mock_settings, sample_files, sample_patch):
        """Test a suggestion without AI."""
        mocker.patch(
            "commitgen.cli.main.get_staged_changes",
            return_value=(sample_files, sample_patch),
        )

        result = runner.invoke(app, ["suggest"])

        assert result.exit_code == 0
        assert "feat: update src/app.py, src/utils.py" in result.output
        assert "Analyzing 2 staged file(s)" in result.output

    def test_plain_output(self, mocker, mock_settings, sample_files, sample_patch):
        """Test plain mode prints only the message."""
        mocker.patch(
            "commitgen.cli.main.get_staged_changes",
            return_value=(sample_files, sample_patch),
        )

        result = runner.invoke(app, ["suggest", "--plain"])

        assert result.exit_code == 0
        assert result.output == "feat: update src/app.py, src/utils.py\n"

    def test_patch_bytes_option(self, mocker, mock_settings, sample_files, sample_patch):
        """Test --patch-bytes overrides the configured budget."""
        mock_changes = mocker.patch(
            "commitgen.cli.main.get_staged_changes",
            return_value=(sample_files, sample_patch),
        )

        runner.invoke(app, ["suggest", "--plain", "--patch-bytes", "512"])

        mock_changes.assert_called_once_with(512)

    def test_uses_cached_message(self, mocker, mock_settings, sample_files, sample_patch):
        """Test a cached message is reused."""
        save_cached_message(mock_settings.cache_dir, sample_files, sample_patch, "fix: cached", "openai")
        mocker.patch(
            "commitgen.cli.main.get_staged_changes",
            return_value=(sample_files, sample_patch),
        )

        result = runner.invoke(app, ["suggest"])

        assert result.exit_code == 0
        assert "fix: cached" in result.output
        assert "Using cached message (from openai)" in result.output

    def test_ai_failure_falls_back(self, mocker, mock_settings, sample_files, sample_patch):
        """Test a provider failure still prints a heuristic message."""
        mocker.patch(
            "commitgen.cli.main.get_staged_changes",
            return_value=(sample_files, sample_patch),
        )
        provider = mocker.MagicMock()
        provider.name = "openai"
        provider.generate.side_effect = NetworkError("unreachable", provider="openai")
        mocker.patch("commitgen.generator.get_provider", return_value=provider)

        result = runner.invoke(app, ["suggest", "--ai"])

        assert result.exit_code == 0
        assert "AI generation failed: provider openai: unreachable" in result.output
        assert "Help:" in result.output
        assert result.output.rstrip().splitlines()[-1] == "feat: update src/app.py, src/utils.py"

    def test_ai_success(self, mocker, mock_settings, sample_files, sample_patch):
        """Test an AI suggestion is printed and cached."""
        mocker.patch(
            "commitgen.cli.main.get_staged_changes",
            return_value=(sample_files, sample_patch),
        )
        provider = mocker.MagicMock()
        provider.name = "ollama"
        provider.generate.return_value = "feat: add helper"
        mocker.patch("commitgen.generator.get_provider", return_value=provider)

        result = runner.invoke(app, ["suggest", "--ai"])

        assert result.exit_code == 0
        assert "Generated by ollama" in result.output
        assert load_latest_message(mock_settings.cache_dir).message == "feat: add helper"

    def test_no_staged_changes(self, mocker, mock_settings):
        """Test exit code 1 when nothing is staged."""
        mocker.patch(
            "commitgen.cli.main.get_staged_changes",
            side_effect=NoStagedChangesError("No staged changes found."),
        )

        result = runner.invoke(app, ["suggest"])

        assert result.exit_code == 1
        assert "No staged changes" in result.output

    def test_no_staged_changes_plain_is_silent(self, mocker, mock_settings):
        """Test plain mode prints nothing when nothing is staged."""
        mocker.patch(
            "commitgen.cli.main.get_staged_changes",
            side_effect=NoStagedChangesError("No staged changes found."),
        )

        result = runner.invoke(app, ["suggest", "--plain"])

        assert result.exit_code == 1
        assert result.output == ""

    def test_git_error(self, mocker, mock_settings):
        """Test git failures exit with code 1."""
        mocker.patch("commitgen.cli.main.get_staged_changes", side_effect=GitError("not a repo"))

        result = runner.invoke(app, ["suggest"])

        assert result.exit_code == 1
        assert "error" in result.output.lower()

    def test_config_error(self, mocker):
        """Test a broken config file exits with code 1."""
        mocker.patch("commitgen.cli.utils.load_settings", side_effect=ConfigError("bad yaml"))

        result = runner.invoke(app, ["suggest"])

        assert result.exit_code == 1
        assert "bad yaml" in result.output


class TestCachedCommand:
    """Tests for commitgen cached command."""

    def test_prints_latest(self, mock_settings):
        """Test the latest message is printed."""
        save_cached_message(mock_settings.cache_dir, ["a.py"], "+x", "feat: cached one", "openai")

        result = runner.invoke(app, ["cached", "--plain"])

        assert result.exit_code == 0
        assert result.output == "feat: cached one\n"

    def test_empty_cache(self, mock_settings):
        """Test exit code 1 without a cached message."""
        result = runner.invoke(app, ["cached"])

        assert result.exit_code == 1
        assert "No cached commit message" in result.output


class TestCacheCommands:
    """Tests for commitgen cache subcommands."""

    def test_show(self, mock_settings):
        """Test showing the latest record."""
        save_cached_message(mock_settings.cache_dir, ["a.py", "b.py"], "+x", "feat: shown", "anthropic")

        result = runner.invoke(app, ["cache", "show"])

        assert result.exit_code == 0
        assert "feat: shown" in result.output
        assert "anthropic" in result.output
        assert "- b.py" in result.output

    def test_show_empty(self, mock_settings):
        """Test showing an empty cache."""
        result = runner.invoke(app, ["cache", "show"])

        assert result.exit_code == 0
        assert "No cached commit message" in result.output

    def test_clear(self, mock_settings):
        """Test clearing the cache."""
        save_cached_message(mock_settings.cache_dir, ["a.py"], "+x", "feat: gone", "openai")

        result = runner.invoke(app, ["cache", "clear"])

        assert result.exit_code == 0
        assert "Cache cleared" in result.output
        assert load_latest_message(mock_settings.cache_dir) is None

    def test_clear_failure(self, mocker, mock_settings):
        """Test a failed clear exits with code 1."""
        mocker.patch("commitgen.cli.cache.clear_cache", return_value=False)

        result = runner.invoke(app, ["cache", "clear"])

        assert result.exit_code == 1


class TestConfigShowCommand:
    """Tests for commitgen config show command."""

    def test_shows_settings(self, mocker, temp_dir):
        """Test the effective settings are displayed with a masked key."""
        settings = Settings(
            ai_enabled=True,
            provider="openai",
            api_key="sk-test-1234567890abcd",
            cache_dir=temp_dir,
        )
        mocker.patch("commitgen.cli.utils.load_settings", return_value=settings)

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "AI enabled: yes" in result.output
        assert "gpt-4o-mini" in result.output
        assert "OPENAI_API_KEY" in result.output
        assert "sk-test-1234567890abcd" not in result.output
        assert "abcd" in result.output


class TestInstallCommands:
    """Tests for hook and shell installation commands."""

    def test_install_hook(self, mocker, temp_dir):
        """Test installing the hook."""
        mocker.patch("commitgen.cli.install.get_hooks_dir", return_value=temp_dir)

        result = runner.invoke(app, ["install-hook"])

        assert result.exit_code == 0
        assert (temp_dir / HOOK_NAME).exists()

    def test_install_hook_exists(self, mocker, temp_dir):
        """Test an existing hook is not replaced without --force."""
        (temp_dir / HOOK_NAME).write_text("#!/bin/sh\n")
        mocker.patch("commitgen.cli.install.get_hooks_dir", return_value=temp_dir)

        result = runner.invoke(app, ["install-hook"])
        assert result.exit_code == 1
        assert "--force" in result.output

        result = runner.invoke(app, ["install-hook", "--force"])
        assert result.exit_code == 0

    def test_install_hook_outside_repo(self, mocker):
        """Test installing outside a repository fails."""
        mocker.patch("commitgen.cli.install.get_hooks_dir", side_effect=GitError("not a repo"))

        result = runner.invoke(app, ["install-hook"])
        assert result.exit_code == 1

    def test_shell_round_trip(self, mocker, temp_dir):
        """Test installing and removing the zsh integration."""
        mocker.patch("commitgen.shell.Path.home", return_value=temp_dir)

        result = runner.invoke(app, ["install-shell"])
        assert result.exit_code == 0
        assert (temp_dir / ".zshrc").exists()

        result = runner.invoke(app, ["uninstall-shell"])
        assert result.exit_code == 0
        assert "removed" in result.output

        result = runner.invoke(app, ["uninstall-shell"])
        assert "was not installed" in result.output


class TestDoctorCommand:
    """Tests for commitgen doctor command."""

    def test_fatal_outside_repo(self, mocker, mock_settings):
        """Test doctor exits with code 1 outside a repository."""
        mocker.patch("commitgen.doctor.is_inside_work_tree", return_value=False)

        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 1
        assert "✖ Git repo" in result.output

    def test_ok_inside_repo(self, mocker, mock_settings, temp_dir):
        """Test doctor passes inside a repository."""
        mocker.patch("commitgen.doctor.is_inside_work_tree", return_value=True)
        mocker.patch("commitgen.doctor.get_hooks_dir", return_value=temp_dir)
        mocker.patch("commitgen.doctor.get_staged_files", return_value=[])

        result = runner.invoke(app, ["doctor"])

        assert result.exit_code == 0
        assert "✔ Git repo" in result.output
