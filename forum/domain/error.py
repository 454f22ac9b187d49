"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input was rejected before anything was written.

    Raised by use cases for a blank title, kind-specific content that does
    not fit the post kind, or an unusable tag title.
    """

    pass


class NotFoundError(DomainError):
    """A post or user referenced by ID does not exist."""

    def __init__(self, resource: str, identifier: int | str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
