"""CLI Utility Functions"""

import re
import shlex

_FENCE_RE = re.compile(r'^```[\w-]*\s*\n(.*?)\n?```$', re.DOTALL)


def clean_commit_message(text: str) -> str:
    """Trim the model's reply down to the commit message itself.

    Strips surrounding whitespace, a wrapping markdown code fence, and
    wrapping double quotes. Everything else is kept as written.
    """
    cleaned = (text or "").strip()

    match = _FENCE_RE.match(cleaned)
    if match:
        cleaned = match.group(1).strip()

    # Only a matched pair, so `revert: revert "feat: x"` keeps its closing quote
    if len(cleaned) >= 2 and cleaned[0] == cleaned[-1] == '"':
        cleaned = cleaned[1:-1].strip()

    return cleaned


def commit_command(message: str) -> str:
    """Shell command a user can paste to commit with `message`."""
    return f"git commit -m {shlex.quote(message)}"
