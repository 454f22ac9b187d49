"""Infrastructure providers: one mockable component per module.

Production implementations are imported here so that they are registered
as subclasses of their component before ``get_provider`` looks them up.
Mock implementations live in ``tests.di``.
"""

from .mailer import MailerProvider, ProdMailerProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider
from .twitter import ProdTwitterProvider, TwitterProvider

__all__ = [
    "MailerProvider",
    "PersistenceProvider",
    "ProdMailerProvider",
    "ProdPersistenceProvider",
    "ProdTwitterProvider",
    "TwitterProvider",
]
