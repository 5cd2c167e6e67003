from __future__ import annotations

from dataclasses import dataclass

from authorship_engine.core.exceptions.configuration_error import ConfigurationError


@dataclass
class ProviderNotSupportedError(ConfigurationError):
    """Raised when no supported CI provider environment is detected."""

    provider: str

    def __str__(self) -> str:
        return f"ProviderNotSupportedError: CI provider '{self.provider}' is not supported."
