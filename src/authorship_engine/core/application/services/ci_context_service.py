import logging
from collections.abc import Iterator
from contextlib import contextmanager

from authorship_engine.core.application.ports.ci_context_resolver_port import CiContextResolverPort
from authorship_engine.core.domain.ci import CiContext

logger = logging.getLogger(__name__)


class CiContextService:
    """Runs one provider adapter and owns the lifetime of the workspace it creates."""

    def __init__(self, resolver: CiContextResolverPort) -> None:
        self._resolver = resolver

    def resolve(self) -> CiContext | None:
        logger.info("[CiContext] Resolving merge context via %s", self._resolver.provider)
        context = self._resolver.resolve()
        if context is None:
            logger.info("[CiContext] Commit is not the result of a recent merge; nothing to rewrite")
            return None
        if not context.event.has_base_sha:
            logger.warning(
                "[CiContext] base_sha unavailable for %s; consumers must not rely on it",
                context.event.merge_commit_sha,
            )
        return context

    def release(self, context: CiContext) -> None:
        logger.info("[CiContext] Discarding workspace %s", context.repository.path)
        context.repository.discard()

    @contextmanager
    def resolved(self, keep_workspace: bool = False) -> Iterator[CiContext | None]:
        """Resolve, hand the context to the caller, then drop the workspace."""
        context = self.resolve()
        try:
            yield context
        finally:
            if context is not None and not keep_workspace:
                self.release(context)
