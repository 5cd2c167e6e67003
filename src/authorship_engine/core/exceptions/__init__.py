from authorship_engine.core.exceptions.configuration_error import ConfigurationError
from authorship_engine.core.exceptions.domain_error import DomainError
from authorship_engine.core.exceptions.infra_error import InfraError
from authorship_engine.core.exceptions.network_error import NetworkError
from authorship_engine.core.exceptions.parse_error import ParseError
from authorship_engine.core.exceptions.provider_not_supported_error import (
    ProviderNotSupportedError,
)
from authorship_engine.core.exceptions.subprocess_error import SubprocessError

__all__ = [
    "ConfigurationError",
    "DomainError",
    "InfraError",
    "NetworkError",
    "ParseError",
    "ProviderNotSupportedError",
    "SubprocessError",
]
