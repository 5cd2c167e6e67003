"""Net-new lines between two revisions, computed from the diff oracle's edit script."""

import logging
from collections.abc import Mapping

from authorship_engine.core.application.services.diff_oracle import Text, diff_lines
from authorship_engine.core.domain.diff import AddedLineSet, EditTag

logger = logging.getLogger(__name__)


def added_lines(old_text: Text, new_text: Text) -> set[int]:
    """1-indexed lines of ``new_text`` that are not matched to any line of ``old_text``.

    Lines that merely moved because of edits elsewhere are not reported.
    """
    result: set[int] = set()
    cursor = 1
    for op in diff_lines(old_text, new_text):
        if op.tag is EditTag.DELETE:
            continue
        if op.tag is EditTag.INSERT:
            result.add(cursor)
        cursor += 1
    return result


def is_binary(content: Text) -> bool:
    if isinstance(content, bytes):
        return b"\0" in content
    return "\0" in content


def added_lines_for_files(
    old_files: Mapping[str, Text], new_files: Mapping[str, Text]
) -> AddedLineSet:
    """Added lines for every file of the new revision.

    A file missing from ``old_files`` is new and compared against an empty blob.
    Files removed in the new revision, files without additions and binary files
    are left out.
    """
    lines_by_path: dict[str, frozenset[int]] = {}
    for path, new_text in new_files.items():
        old_text = old_files.get(path, new_text[:0])
        if is_binary(old_text) or is_binary(new_text):
            logger.info("[AddedLines] Skipping binary file '%s'", path)
            continue
        lines = added_lines(old_text, new_text)
        if lines:
            lines_by_path[path] = frozenset(lines)
    return AddedLineSet(lines_by_path)
