from abc import ABC, abstractmethod

from authorship_engine.core.domain.ci import CiContext
from authorship_engine.core.domain.ci.value_objects import CiProviderType


class CiContextResolverPort(ABC):
    """Provider adapter that turns the current CI job into a merge event."""

    provider: CiProviderType

    @abstractmethod
    def resolve(self) -> CiContext | None:
        """Return the merge context for the current commit, or None when the
        commit was not produced by a recently merged request."""
        pass
