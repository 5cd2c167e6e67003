from authorship_engine.core.domain.attribution.checkpoint import (
    HUMAN_AUTHOR,
    AttributionResult,
    CheckpointSnapshot,
)

__all__ = ["HUMAN_AUTHOR", "AttributionResult", "CheckpointSnapshot"]
