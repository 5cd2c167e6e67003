class DomainError(Exception):
    """
    Base class for all engine exceptions.
    Lets callers catch every attribution-engine failure with one clause.
    """

    pass
