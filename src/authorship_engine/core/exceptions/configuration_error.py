from authorship_engine.core.exceptions.domain_error import DomainError


class ConfigurationError(DomainError):
    """Raised when the CI environment is missing or invalid. The user must fix the CI setup."""
