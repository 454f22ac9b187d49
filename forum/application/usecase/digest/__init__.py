"""Digest use cases."""

from .send_digest import SendDigestResponse, SendDigestUseCase

__all__ = ["SendDigestResponse", "SendDigestUseCase"]
