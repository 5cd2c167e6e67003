"""Line-level edit scripts that agree with ``git diff``.

The matching comes from libgit2's copy of git's xdiff (via pygit2): Myers
diff followed by git's change compaction and indent heuristic, so hunks land
where a reviewer sees them in ``git diff``. Every line is re-terminated with
``\\n`` before diffing, which makes a missing final newline irrelevant.
"""

from __future__ import annotations

from typing import Union

import pygit2
from pygit2.enums import DiffOption

from authorship_engine.core.domain.diff import LineEditOp

Text = Union[str, bytes]

# git diff defaults: indent heuristic on; content is always compared as text.
_DIFF_FLAGS = DiffOption.INDENT_HEURISTIC | DiffOption.FORCE_TEXT


def split_lines(text: Text) -> list:
    """Split strictly on ``\\n``; a final unterminated line is kept as its own line.

    Lines are returned without their terminator, so a trailing newline does not
    produce an empty last line.
    """
    if not text:
        return []
    separator = b"\n" if isinstance(text, bytes) else "\n"
    lines = text.split(separator)
    if not lines[-1]:
        lines.pop()
    return lines


def line_count(text: Text) -> int:
    return len(split_lines(text))


def _as_bytes(text: Text) -> bytes:
    if isinstance(text, bytes):
        return text
    return text.encode("utf-8", errors="surrogateescape")


def _terminated(lines: list[bytes]) -> bytes:
    return b"".join(line + b"\n" for line in lines)


def _change_flags(old_lines: list[bytes], new_lines: list[bytes]) -> tuple[list[bool], list[bool]]:
    old_changed = [False] * len(old_lines)
    new_changed = [False] * len(new_lines)
    patch = pygit2.Patch.create_from(
        _terminated(old_lines),
        _terminated(new_lines),
        flag=_DIFF_FLAGS,
        context_lines=0,
        interhunk_lines=0,
    )
    # Without context every hunk is one contiguous change on each side.
    for hunk in patch.hunks:
        if hunk.old_lines:
            start = hunk.old_start - 1
            old_changed[start:start + hunk.old_lines] = [True] * hunk.old_lines
        if hunk.new_lines:
            start = hunk.new_start - 1
            new_changed[start:start + hunk.new_lines] = [True] * hunk.new_lines
    return old_changed, new_changed


def _emit_ops(old_changed: list[bool], new_changed: list[bool]) -> list[LineEditOp]:
    ops: list[LineEditOp] = []
    old_index = new_index = 0
    old_total, new_total = len(old_changed), len(new_changed)
    while old_index < old_total or new_index < new_total:
        if old_index < old_total and old_changed[old_index]:
            ops.append(LineEditOp.delete(old_index + 1))
            old_index += 1
        elif new_index < new_total and new_changed[new_index]:
            ops.append(LineEditOp.insert(new_index + 1))
            new_index += 1
        elif old_index < old_total and new_index < new_total:
            ops.append(LineEditOp.equal(old_index + 1, new_index + 1))
            old_index += 1
            new_index += 1
        else:
            raise RuntimeError("unchanged line counts differ between the two sides")
    return ops


def diff_lines(old_text: Text, new_text: Text) -> list[LineEditOp]:
    """Ordered edit script turning ``old_text`` into ``new_text``.

    Within one changed region deletions come before insertions, as in a unified diff.
    """
    old_lines = split_lines(_as_bytes(old_text))
    new_lines = split_lines(_as_bytes(new_text))
    old_changed, new_changed = _change_flags(old_lines, new_lines)
    return _emit_ops(old_changed, new_changed)
