"""
Resend email adapter against a local HTTP server.
"""

import asyncio

import pytest
from aiohttp import test_utils, web

from clinicvoice.adapters.external.email_service_resend import ResendEmailService
from clinicvoice.core.config import EmailSettings
from clinicvoice.core.exceptions import ConfigurationError, EmailDeliveryError


def _send(handler, received=None):
    async def run():
        async def emails(request):
            if received is not None:
                received.append((request.headers.get("Authorization"), await request.json()))
            return await handler(request)

        app = web.Application()
        app.router.add_post("/emails", emails)
        async with test_utils.TestServer(app) as server:
            settings = EmailSettings(api_key="re_test", base_url=str(server.make_url("/")))
            return await ResendEmailService(settings).send_email(
                "kavitha.suresh@example.com", "Lab Results Follow-up", "Your results are ready."
            )

    return asyncio.run(run())


def test_send_email_returns_provider_id():
    async def handler(request):
        return web.json_response({"id": "re_123"})

    received = []
    assert _send(handler, received) == "re_123"
    auth, payload = received[0]
    assert auth == "Bearer re_test"
    assert payload["to"] == ["kavitha.suresh@example.com"]
    assert payload["subject"] == "Lab Results Follow-up"
    assert payload["text"] == "Your results are ready."


def test_send_email_accepts_non_json_reply():
    async def handler(request):
        return web.Response(status=202, text="OK", content_type="text/plain")

    assert _send(handler) == ""


def test_send_email_json_reply_without_id():
    async def handler(request):
        return web.json_response({"queued": True}, status=202)

    assert _send(handler) == ""


def test_send_email_upstream_error():
    async def handler(request):
        return web.Response(status=500, text="boom")

    with pytest.raises(EmailDeliveryError) as exc_info:
        _send(handler)
    assert exc_info.value.details == {"status": 500}


def test_send_email_without_api_key():
    service = ResendEmailService(EmailSettings(api_key=""))
    with pytest.raises(ConfigurationError):
        asyncio.run(service.send_email("a@example.com", "Subject", "Body"))
