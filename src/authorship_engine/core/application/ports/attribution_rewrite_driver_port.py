from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

from authorship_engine.core.domain.attribution import AttributionResult, CheckpointSnapshot
from authorship_engine.core.domain.ci import CiContext


class AttributionRewriteDriverPort(ABC):
    @abstractmethod
    def rewrite(
        self,
        context: CiContext | None,
        baseline: Mapping[str, str],
        checkpoints: Sequence[CheckpointSnapshot],
        final_files: Mapping[str, str],
    ) -> AttributionResult:
        """Attribute every line of ``final_files`` to exactly one author.

        Must be total (lines no checkpoint claims are human) and idempotent.
        """
        pass
