from authorship_engine.infrastructure.resolution.ci_provider_resolver import (
    CiProviderResolver,
    detect_ci_provider,
)

__all__ = ["CiProviderResolver", "detect_ci_provider"]
