"""Pure functions for turning ``git diff -U0`` output into added line numbers."""

import re

from authorship_engine.core.domain.diff import AddedLineSet

_HUNK_HEADER_RE = re.compile(r"^@@ -\d+(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_DESTINATION_PREFIX = "b/"
_BODY_PREFIXES = ("-", "+", " ", "\\")


def parse_added_lines(diff_text: str) -> AddedLineSet:
    """Collect the new-side line numbers of every hunk, per destination path.

    Deleted files (``+++ /dev/null``) and binary files contribute nothing.
    """
    lines_by_path: dict[str, set[int]] = {}
    current_path: str | None = None
    old_remaining = new_remaining = 0

    # Only "\n" ends a diff line; body text may hold form feeds and other separators.
    for line in diff_text.split("\n"):
        if (old_remaining or new_remaining) and line.startswith(_BODY_PREFIXES):
            old_remaining, new_remaining = _consume_body_line(line, old_remaining, new_remaining)
            continue
        old_remaining = new_remaining = 0

        if line.startswith("diff --git ") or line.startswith("Binary files "):
            current_path = None
            continue

        if line.startswith("+++ "):
            current_path = _destination_path(line[4:])
            continue

        match = _HUNK_HEADER_RE.match(line)
        if match is None:
            continue
        old_remaining = _hunk_length(match.group(1))
        new_start = int(match.group(2))
        new_remaining = _hunk_length(match.group(3))
        if current_path is not None and new_remaining:
            lines_by_path.setdefault(current_path, set()).update(
                range(new_start, new_start + new_remaining)
            )

    return AddedLineSet.from_lines(lines_by_path)


def _hunk_length(raw: str | None) -> int:
    return 1 if raw is None else int(raw)


def _consume_body_line(line: str, old_remaining: int, new_remaining: int) -> tuple[int, int]:
    """Advance the hunk counters so body lines are never mistaken for headers."""
    if line.startswith("-"):
        return max(0, old_remaining - 1), new_remaining
    if line.startswith("+"):
        return old_remaining, max(0, new_remaining - 1)
    if line.startswith(" "):
        return max(0, old_remaining - 1), max(0, new_remaining - 1)
    return old_remaining, new_remaining


def _destination_path(raw: str) -> str | None:
    raw = raw.rstrip("\t")
    if raw == "/dev/null":
        return None
    if raw.startswith('"') and raw.endswith('"'):
        raw = _unquote_c_style(raw[1:-1])
    if raw.startswith(_DESTINATION_PREFIX):
        raw = raw[len(_DESTINATION_PREFIX):]
    return raw


def _unquote_c_style(quoted: str) -> str:
    """Undo git's C-style path quoting (``\\t``, ``\\"``, octal UTF-8 bytes)."""
    raw = quoted.encode("latin-1", errors="backslashreplace").decode("unicode_escape")
    return raw.encode("latin-1").decode("utf-8", errors="surrogateescape")
