from authorship_engine.core.domain.ci.ci_context import CiContext, CiEvent, CiEventKind, MergeEvent
from authorship_engine.core.domain.ci.merge_matching import (
    find_matching_record,
    resolve_effective_rewrite_sha,
)
from authorship_engine.core.domain.ci.merge_record import MergeRecord

__all__ = [
    "CiContext",
    "CiEvent",
    "CiEventKind",
    "MergeEvent",
    "MergeRecord",
    "find_matching_record",
    "resolve_effective_rewrite_sha",
]
