from authorship_engine.core.exceptions.domain_error import DomainError


class InfraError(DomainError):
    """
    Base class for failures of an external collaborator
    (CI REST API, git subprocess, response decoding).
    """

    pass
