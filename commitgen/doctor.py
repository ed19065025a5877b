"""Environment checks behind `commitgen doctor`."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from commitgen.config import Settings
from commitgen.git import GitError, get_hooks_dir, get_staged_files, is_inside_work_tree
from commitgen.hook import HOOK_NAME, is_commitgen_hook
from commitgen.llm import LLMError, get_provider
from commitgen.llm.prompts import load_conventions
from commitgen.shell import GUARD_START, get_snippet_path, get_zshrc_path


@dataclass
class DoctorCheck:
    """Result of one check."""

    name: str
    ok: bool
    detail: str
    # A failed fatal check makes `doctor` exit non-zero
    fatal: bool = False

    def render(self) -> str:
        mark = "✔" if self.ok else "✖"
        return f"{mark} {self.name}: {self.detail}"


def check_git_repo(cwd: Optional[Path] = None) -> DoctorCheck:
    if is_inside_work_tree(cwd):
        return DoctorCheck("Git repo", True, "ok", fatal=True)
    return DoctorCheck("Git repo", False, "not inside a git repository", fatal=True)


def check_binary() -> DoctorCheck:
    path = shutil.which("commitgen")
    if path:
        return DoctorCheck("commitgen on PATH", True, path)
    return DoctorCheck("commitgen on PATH", False, "not found (install with: pip install commitgen)")


def check_hook(cwd: Optional[Path] = None) -> DoctorCheck:
    try:
        hook_path = get_hooks_dir(cwd) / HOOK_NAME
    except GitError as e:
        return DoctorCheck(f"{HOOK_NAME} hook", False, str(e))

    if not hook_path.exists():
        return DoctorCheck(f"{HOOK_NAME} hook", False, "not found (ok if not installed)")
    if not is_commitgen_hook(hook_path):
        return DoctorCheck(f"{HOOK_NAME} hook", False, f"{hook_path} was not installed by commitgen")
    return DoctorCheck(f"{HOOK_NAME} hook", True, str(hook_path))


def check_shell(home: Optional[Path] = None) -> list[DoctorCheck]:
    checks = []

    snippet_path = get_snippet_path(home)
    if snippet_path.exists():
        checks.append(DoctorCheck("zsh snippet", True, str(snippet_path)))
    else:
        checks.append(DoctorCheck(
            "zsh snippet", False, f"not found at {snippet_path} (ok if shell integration is not installed)"
        ))

    zshrc_path = get_zshrc_path(home)
    try:
        has_block = GUARD_START in zshrc_path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        has_block = False
    if has_block:
        checks.append(DoctorCheck(".zshrc", True, "contains commitgen guarded block"))
    else:
        checks.append(DoctorCheck(".zshrc", False, "does not contain commitgen guarded block"))

    return checks


def check_staged_files(cwd: Optional[Path] = None) -> DoctorCheck:
    try:
        files = get_staged_files(cwd)
    except GitError as e:
        return DoctorCheck("Staged files", False, str(e))
    if files:
        return DoctorCheck("Staged files", True, str(len(files)))
    return DoctorCheck("Staged files", False, "none (suggestions require staged changes)")


def check_provider(settings: Settings) -> DoctorCheck:
    if not settings.ai_enabled:
        return DoctorCheck("AI provider", True, "disabled (heuristics only)")

    config = settings.provider_config()
    try:
        provider = get_provider(config, conventions_file=settings.conventions_file)
    except LLMError as e:
        return DoctorCheck("AI provider", False, f"{e} ({e.help})")
    if not provider.is_configured():
        return DoctorCheck("AI provider", False, f"{provider.name} is not fully configured")
    return DoctorCheck("AI provider", True, f"{provider.name} ({provider.model})")


def check_conventions(settings: Settings) -> DoctorCheck:
    _, source = load_conventions(settings.conventions_file)
    return DoctorCheck("Conventions", source != "minimal", source)


def run_checks(
    settings: Settings,
    cwd: Optional[Path] = None,
    home: Optional[Path] = None,
) -> list[DoctorCheck]:
    """Run every check.

    Repository-specific checks are skipped outside a git repository.
    """
    git_check = check_git_repo(cwd)
    checks = [git_check, check_binary()]

    if git_check.ok:
        checks.append(check_hook(cwd))
    checks.extend(check_shell(home))
    if git_check.ok:
        checks.append(check_staged_files(cwd))
    checks.append(check_provider(settings))
    checks.append(check_conventions(settings))
    return checks


def has_fatal_failure(checks: list[DoctorCheck]) -> bool:
    """Return True if any fatal check failed."""
    return any(check.fatal and not check.ok for check in checks)
