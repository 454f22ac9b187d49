"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class TwitterPostError(ProviderError):
    """Publishing a tweet failed."""

    pass


class MailRelayError(ProviderError):
    """Handing a digest to the mail relay failed."""

    pass
