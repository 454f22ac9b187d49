"""Digest mail adapter."""

from .client import DigestMailer, HttpRelayMailer, MockDigestMailer

__all__ = ["DigestMailer", "HttpRelayMailer", "MockDigestMailer"]
