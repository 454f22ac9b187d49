"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold logic that spans several entities or needs a
    repository or outbound collaborator.
    """

    pass
