"""zsh integration: ghost-text commit message suggestions.

install_shell() writes a zsh snippet to ~/.config/commitgen.zsh and adds a
guarded block to ~/.zshrc that sources it. uninstall_shell() removes both.
Both are idempotent.
"""

from pathlib import Path
from typing import Optional

SNIPPET_REL_PATH = Path(".config") / "commitgen.zsh"
GUARD_START = "# >>> commitgen >>> (managed)"
GUARD_END = "# <<< commitgen <<<"

ZSH_SNIPPET = r"""# commitgen zsh snippet (native ghost text)
typeset -g _CG_BIN_PATH=""
typeset -g _CG_PREVIEW_INIT=0

_cg_find_bin() {
  if [[ -n ${COMMITGEN_BIN-} && -x ${COMMITGEN_BIN} ]]; then
    _CG_BIN_PATH="${COMMITGEN_BIN}"
    return 0
  fi
  if [[ -n "$_CG_BIN_PATH" && -x "$_CG_BIN_PATH" ]]; then
    return 0
  fi
  if _cg_bin=$(command -v commitgen 2>/dev/null); then
    _CG_BIN_PATH="$_cg_bin"
    return 0
  fi
  return 1
}

_cg_fetch_suggestion() {
  _cg_find_bin || return 1
  local suggestion
  suggestion=$("$_CG_BIN_PATH" cached --plain 2>/dev/null) || true
  if [[ -z "$suggestion" ]]; then
    suggestion=$("$_CG_BIN_PATH" suggest --plain 2>/dev/null) || true
  fi
  [[ -n "$suggestion" ]] && print -r -- "$suggestion"
}

_cg_match_prefix() {
  case "$LBUFFER" in
    'git commit -m "'*) print -rn -- 'git commit -m "'; return 0 ;;
    'gc "'*) print -rn -- 'gc "'; return 0 ;;
    *) return 1 ;;
  esac
}

_cg_update_preview_widget() {
  local prefix
  prefix=$(_cg_match_prefix) || { POSTDISPLAY=; return; }

  local typed=${LBUFFER#${prefix}}
  if [[ "$typed" == *\"* ]]; then
    POSTDISPLAY=
    return
  fi

  local suggestion
  suggestion=$(_cg_fetch_suggestion)
  if [[ -z "$suggestion" || "$typed" == "$suggestion" || "$suggestion" != "$typed"* ]]; then
    POSTDISPLAY=
    return
  fi

  POSTDISPLAY="${suggestion#${typed}}\""
}

_cg_accept_preview_widget() {
  if [[ -z "$POSTDISPLAY" ]]; then
    _cg_update_preview_widget
  fi
  if [[ -n "$POSTDISPLAY" ]]; then
    LBUFFER+="$POSTDISPLAY"
    POSTDISPLAY=
  fi
  zle -R
}

if [[ $_CG_PREVIEW_INIT -eq 0 ]]; then
  typeset -ga zle_highlight
  if (( ${zle_highlight[(I)special:*]} == 0 )); then
    zle_highlight+=(special:fg=240)
  fi
  zle -N zle-line-pre-redraw _cg_update_preview_widget
  zle -N cg-accept-preview _cg_accept_preview_widget
  bindkey '^F' cg-accept-preview
  typeset -g _CG_PREVIEW_INIT=1
fi
"""


def get_snippet_path(home: Optional[Path] = None) -> Path:
    """Return path to the zsh snippet (~/.config/commitgen.zsh)."""
    return (home or Path.home()) / SNIPPET_REL_PATH


def get_zshrc_path(home: Optional[Path] = None) -> Path:
    """Return path to ~/.zshrc."""
    return (home or Path.home()) / ".zshrc"


def render_guarded_block(snippet_path: Path) -> str:
    return (
        f"{GUARD_START}\n"
        f'[[ -f "{snippet_path}" ]] && source "{snippet_path}"\n'
        f"{GUARD_END}\n"
    )


def contains_guarded_block(text: str) -> bool:
    """Check whether text contains a complete guarded block."""
    start = text.find(GUARD_START)
    return start >= 0 and text.find(GUARD_END, start) >= 0


def remove_guarded_block(text: str) -> tuple[str, bool]:
    """Remove the guarded block from text.

    The blank line added in front of the block on install is removed too.

    Returns:
        Tuple of (new text, whether anything was removed).
    """
    start = text.find(GUARD_START)
    if start < 0:
        return text, False
    end = text.find(GUARD_END, start)
    if end < 0:
        return text, False

    end += len(GUARD_END)
    if text.startswith("\n", end):
        end += 1
    before = text[:start]
    if before.endswith("\n\n"):
        before = before[:-1]
    return before + text[end:], True


def install_shell(home: Optional[Path] = None) -> Path:
    """Install the zsh snippet and source it from ~/.zshrc.

    The snippet is always rewritten. The guarded block is added only once.

    Returns:
        Path to the snippet.

    Raises:
        OSError: If a file cannot be written.
    """
    snippet_path = get_snippet_path(home)
    snippet_path.parent.mkdir(parents=True, exist_ok=True)
    snippet_path.write_text(ZSH_SNIPPET, encoding="utf-8")

    zshrc_path = get_zshrc_path(home)
    try:
        zshrc = zshrc_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        zshrc = ""

    if not contains_guarded_block(zshrc):
        with open(zshrc_path, "a", encoding="utf-8") as f:
            f.write("\n" + render_guarded_block(snippet_path))

    return snippet_path


def uninstall_shell(home: Optional[Path] = None) -> bool:
    """Remove the guarded block from ~/.zshrc and delete the snippet.

    Returns:
        True if anything was removed.

    Raises:
        OSError: If a file cannot be written or removed.
    """
    removed = False

    zshrc_path = get_zshrc_path(home)
    try:
        zshrc = zshrc_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        zshrc = None

    if zshrc is not None:
        updated, changed = remove_guarded_block(zshrc)
        if changed:
            zshrc_path.write_text(updated, encoding="utf-8")
            removed = True

    snippet_path = get_snippet_path(home)
    try:
        snippet_path.unlink()
        removed = True
    except FileNotFoundError:
        pass

    return removed
