import os
from collections.abc import Mapping

from authorship_engine.core.application.ports import CiContextResolverPort
from authorship_engine.core.domain.ci.value_objects import CiProviderType
from authorship_engine.core.exceptions import ConfigurationError, ProviderNotSupportedError
from authorship_engine.infrastructure.configuration import EngineSettings
from authorship_engine.infrastructure.tools.ci.gitlab import GitLabCiContextResolver


def detect_ci_provider(environ: Mapping[str, str] | None = None) -> CiProviderType | None:
    """Pick the provider whose marker variable the current job exports."""
    environ = os.environ if environ is None else environ
    for provider in CiProviderType:
        if environ.get(provider.marker_variable, "").lower() == "true":
            return provider
    return None


class CiProviderResolver:
    """
    Factory responsible for instantiating the CI context adapter
    of the detected (or explicitly requested) provider.
    """

    def __init__(
        self,
        engine_settings: EngineSettings | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self.engine_settings = engine_settings or EngineSettings()
        self.environ = os.environ if environ is None else environ

    def resolve(self, provider: CiProviderType | str | None = None) -> CiContextResolverPort:
        if provider is None:
            provider = detect_ci_provider(self.environ)
            if provider is None:
                raise ConfigurationError(
                    "No supported CI provider detected (expected one of: "
                    + ", ".join(p.marker_variable for p in CiProviderType)
                    + ")"
                )

        try:
            provider = CiProviderType(provider)
        except ValueError as exc:
            raise ProviderNotSupportedError(provider=str(provider)) from exc

        if provider == CiProviderType.GITLAB:
            return GitLabCiContextResolver(engine_settings=self.engine_settings)

        raise ProviderNotSupportedError(provider=provider.value)
