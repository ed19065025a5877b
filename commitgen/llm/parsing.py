"""Response sanitation for LLM replies.

Contains functions that turn a raw model reply into a commit message:
- sanitize_message: Reduce a reply to one line of at most 72 characters
- truncate_subject: Shorten a long line at a word boundary

Sanitation is the same for every backend.
"""

MAX_SUBJECT_LENGTH = 72
HARD_TRUNCATE_LENGTH = 69
ELLIPSIS = "..."

FALLBACK_MESSAGE = "chore: update files"

QUOTE_CHARS = "\"'"
FENCE = "```"

# Words that leave a subject syntactically incomplete when they end it
DANGLING_CONNECTORS = frozenset({"and", "or", "but", "with", "for", "to"})


def _strip_quotes(text: str) -> str:
    """Strip one layer of matching surrounding quotes."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in QUOTE_CHARS:
        return text[1:-1].strip()
    return text


def _strip_fences(text: str) -> str:
    """Remove a leading fence line and a trailing fence line."""
    if not text.startswith(FENCE):
        return text

    lines = text.splitlines()
    # First line is ``` or ```lang
    lines = lines[1:]
    if lines and lines[-1].strip() == FENCE:
        lines = lines[:-1]
    elif lines and lines[-1].rstrip().endswith(FENCE):
        lines[-1] = lines[-1].rstrip()[: -len(FENCE)]
    return "\n".join(lines).strip()


def _first_line(text: str) -> str:
    # Any Unicode line boundary counts, not just \n
    for line in text.splitlines():
        line = line.strip()
        if line:
            return line
    return ""


def truncate_subject(line: str, limit: int = MAX_SUBJECT_LENGTH) -> str:
    """Shorten a line to at most ``limit`` characters.

    Cuts at the last word boundary that fits and drops a trailing connector
    word. A line with no usable boundary is hard-cut to 69 characters plus
    an ellipsis.

    Args:
        line: A single line of text.
        limit: Maximum length.

    Returns:
        The shortened line.
    """
    if len(line) <= limit:
        return line

    kept: list[str] = []
    length = 0
    for word in line.split():
        needed = len(word) if not kept else length + 1 + len(word)
        if needed > limit:
            break
        kept.append(word)
        length = needed

    if kept and kept[-1].lower() in DANGLING_CONNECTORS:
        kept.pop()

    if not kept:
        return line[:HARD_TRUNCATE_LENGTH] + ELLIPSIS
    return " ".join(kept)


def sanitize_message(raw_response: str) -> str:
    """Reduce a raw model reply to a single-line commit message.

    Steps:
    1. Trim whitespace and one layer of surrounding quotes.
    2. Strip a surrounding fenced code block.
    3. Keep the first non-empty line (unquoted), shortened to 72 characters.
    4. Substitute a generic message if nothing is left.

    Args:
        raw_response: The text returned by the model.

    Returns:
        A non-empty message without newlines.
    """
    text = (raw_response or "").strip()
    text = _strip_quotes(text)
    text = _strip_fences(text)

    line = truncate_subject(_strip_quotes(_first_line(text)))
    line = line.strip()
    return line or FALLBACK_MESSAGE
