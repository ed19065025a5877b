"""Tests for commitgen.hook module."""

import os

import pytest

from commitgen.hook import (
    HOOK_MARKER,
    HOOK_NAME,
    HookExistsError,
    install_hook,
    is_commitgen_hook,
    render_hook,
)


class TestRenderHook:
    """Tests for render_hook function."""

    def test_runs_plain_suggest(self):
        """Test the hook calls suggest in plain mode."""
        script = render_hook()
        assert script.startswith("#!/bin/sh\n")
        assert "commitgen suggest --plain" in script
        assert HOOK_MARKER in script

    def test_custom_command(self):
        """Test the invoking command can be changed."""
        assert "/opt/bin/commitgen suggest --plain" in render_hook("/opt/bin/commitgen")

    def test_skips_merge_squash_rebase(self):
        """Test the hook leaves merge, squash and rebase messages alone."""
        assert "merge|squash|rebase)" in render_hook()

    def test_braces_rendered(self):
        """Test template escaping leaves a valid shell group."""
        script = render_hook()
        assert "{ printf '%s\\n' \"$OUTPUT\"; cat \"$MSG_FILE\"; }" in script


class TestInstallHook:
    """Tests for install_hook function."""

    def test_installs_executable_hook(self, temp_dir):
        """Test the hook is written and executable."""
        hooks_dir = temp_dir / "hooks"

        hook_path = install_hook(hooks_dir)

        assert hook_path == hooks_dir / HOOK_NAME
        assert hook_path.read_text() == render_hook()
        assert os.access(hook_path, os.X_OK)
        assert is_commitgen_hook(hook_path)

    def test_refuses_to_overwrite(self, temp_dir):
        """Test an existing hook is kept without force."""
        hooks_dir = temp_dir / "hooks"
        hooks_dir.mkdir()
        existing = hooks_dir / HOOK_NAME
        existing.write_text("#!/bin/sh\necho mine\n")

        with pytest.raises(HookExistsError):
            install_hook(hooks_dir)
        assert existing.read_text() == "#!/bin/sh\necho mine\n"
        assert not is_commitgen_hook(existing)

    def test_force_overwrites(self, temp_dir):
        """Test force replaces an existing hook."""
        hooks_dir = temp_dir / "hooks"
        hooks_dir.mkdir()
        (hooks_dir / HOOK_NAME).write_text("#!/bin/sh\necho mine\n")

        hook_path = install_hook(hooks_dir, force=True)
        assert is_commitgen_hook(hook_path)

    def test_missing_hook_is_not_ours(self, temp_dir):
        """Test a missing file is not reported as our hook."""
        assert is_commitgen_hook(temp_dir / HOOK_NAME) is False
