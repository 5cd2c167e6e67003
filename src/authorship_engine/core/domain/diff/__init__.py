from authorship_engine.core.domain.diff.added_line_set import AddedLineSet
from authorship_engine.core.domain.diff.line_edit_op import EditTag, LineEditOp

__all__ = ["AddedLineSet", "EditTag", "LineEditOp"]
