from authorship_engine.core.application.ports.attribution_rewrite_driver_port import (
    AttributionRewriteDriverPort,
)
from authorship_engine.core.application.ports.ci_context_resolver_port import CiContextResolverPort
from authorship_engine.core.application.ports.git_repository_port import GitRepositoryPort

__all__ = ["AttributionRewriteDriverPort", "CiContextResolverPort", "GitRepositoryPort"]
