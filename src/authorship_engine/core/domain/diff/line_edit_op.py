from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class EditTag(StrEnum):
    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class LineEditOp:
    """One line of an edit script. Positions are 1-indexed.

    ``old_line`` is set for EQUAL and DELETE, ``new_line`` for EQUAL and INSERT.
    """

    tag: EditTag
    old_line: int | None = None
    new_line: int | None = None

    @classmethod
    def equal(cls, old_line: int, new_line: int) -> LineEditOp:
        return cls(EditTag.EQUAL, old_line, new_line)

    @classmethod
    def insert(cls, new_line: int) -> LineEditOp:
        return cls(EditTag.INSERT, None, new_line)

    @classmethod
    def delete(cls, old_line: int) -> LineEditOp:
        return cls(EditTag.DELETE, old_line, None)
