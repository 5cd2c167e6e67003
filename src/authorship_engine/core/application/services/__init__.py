from authorship_engine.core.application.services.added_line_resolver import (
    added_lines,
    added_lines_for_files,
)
from authorship_engine.core.application.services.checkpoint_rewrite_driver import (
    CheckpointRewriteDriver,
)
from authorship_engine.core.application.services.ci_context_service import CiContextService
from authorship_engine.core.application.services.diff_oracle import diff_lines, line_count, split_lines

__all__ = [
    "CheckpointRewriteDriver",
    "CiContextService",
    "added_lines",
    "added_lines_for_files",
    "diff_lines",
    "line_count",
    "split_lines",
]
