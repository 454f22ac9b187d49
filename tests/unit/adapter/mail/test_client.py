"""Unit tests for the digest mailer."""

import json
from datetime import datetime

import httpx
import pytest

from forum.adapter.error import MailRelayError
from forum.adapter.mail.client import HttpRelayMailer, MockDigestMailer
from forum.domain.model import Digest, User
from forum.domain.value import DigestFrequency, Handle, UserId

DIGEST = Digest(
    recipient=User(id=UserId(1), handle=Handle("alice"), email="alice@example.com"),
    frequency=DigestFrequency.DAILY,
    since=datetime(2024, 5, 1),
    subject="Your daily digest",
    posts=[],
    html="<p>Nothing new since the last digest.</p>",
)


class TestHttpRelayMailer:
    """Tests for HttpRelayMailer against a mocked transport."""

    @pytest.mark.asyncio
    async def test_posts_digest_as_json(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(202)

        mailer = HttpRelayMailer(
            relay_url="http://relay.test/api/send",
            sender="digest@rbga.me",
            transport=httpx.MockTransport(handler),
        )

        await mailer.deliver(DIGEST)

        assert len(requests) == 1
        assert json.loads(requests[0].content) == {
            "from": "digest@rbga.me",
            "to": "alice@example.com",
            "subject": "Your daily digest",
            "html": "<p>Nothing new since the last digest.</p>",
        }

    @pytest.mark.asyncio
    async def test_relay_error_raises(self):
        mailer = HttpRelayMailer(
            relay_url="http://relay.test/api/send",
            sender="digest@rbga.me",
            transport=httpx.MockTransport(lambda request: httpx.Response(500)),
        )

        with pytest.raises(MailRelayError, match="500"):
            await mailer.deliver(DIGEST)


@pytest.mark.asyncio
async def test_mock_mailer_records_deliveries():
    mailer = MockDigestMailer()

    await mailer.deliver(DIGEST)

    assert mailer.delivered == [DIGEST]
