"""LLM prompt templates for commit message generation.

This package contains the prompt pieces shared by every provider:
- conventions: The system instruction and how it is located
- user: The user prompt (file list and truncated patch)
"""

from commitgen.llm.prompts.conventions import (
    BUILTIN_CONVENTIONS,
    MINIMAL_CONVENTIONS,
    load_conventions,
)
from commitgen.llm.prompts.user import (
    MAX_PROMPT_FILES,
    MAX_PROMPT_PATCH_BYTES,
    build_completion_prompt,
    build_user_prompt,
    format_file_list,
    truncate_patch,
)


__all__ = [
    # System instruction
    "BUILTIN_CONVENTIONS",
    "MINIMAL_CONVENTIONS",
    "load_conventions",
    # User prompt
    "MAX_PROMPT_FILES",
    "MAX_PROMPT_PATCH_BYTES",
    "build_completion_prompt",
    "build_user_prompt",
    "format_file_list",
    "truncate_patch",
]
