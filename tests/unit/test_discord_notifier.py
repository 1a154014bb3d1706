"""
Unit tests for DiscordWebhookNotifier.
"""

import asyncio

import aiohttp
import pytest
from unittest.mock import MagicMock

from core.exceptions import NotificationException, WebhookException
from core.interfaces import IUpdateNotifier
from services.notification.discord import DiscordWebhookNotifier

WEBHOOK = "https://discord.com/api/webhooks/123/abc"


class TestDiscordWebhookNotifier:
    @pytest.fixture
    def notifier(self):
        return DiscordWebhookNotifier(WEBHOOK, header="**헤더**")

    def test_satisfies_interface(self, notifier):
        assert isinstance(notifier, IUpdateNotifier)

    def test_plain_payload(self, notifier, sample_candidate):
        payload = notifier.build_payload(sample_candidate)

        assert set(payload) == {"content"}
        assert payload["content"].startswith("**헤더**\n버전: 1.021.01.00\n")

    def test_embed_payload_with_username(self, sample_candidate):
        notifier = DiscordWebhookNotifier(WEBHOOK, username="Watcher", use_embed=True)

        payload = notifier.build_payload(sample_candidate)

        assert payload["username"] == "Watcher"
        assert payload["embeds"][0]["url"] == sample_candidate.url
        assert "content" not in payload

    @pytest.mark.asyncio
    async def test_send_posts_once(self, notifier, sample_candidate, mock_webhook_session):
        await notifier.send_update(mock_webhook_session, sample_candidate)

        mock_webhook_session.post.assert_called_once()
        args, kwargs = mock_webhook_session.post.call_args
        assert args[0] == WEBHOOK
        assert kwargs["json"] == notifier.build_payload(sample_candidate)

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self, notifier, sample_candidate, mock_webhook_session):
        response = mock_webhook_session.post.return_value.__aenter__.return_value
        response.status = 400
        response.text.return_value = '{"message": "Cannot send an empty message"}'

        with pytest.raises(WebhookException) as exc_info:
            await notifier.send_update(mock_webhook_session, sample_candidate)

        assert exc_info.value.details["status"] == 400
        assert isinstance(exc_info.value, NotificationException)
        mock_webhook_session.post.assert_called_once()

    @pytest.mark.asyncio
    async def test_client_error_raises(self, notifier, sample_candidate):
        session = MagicMock()
        session.post.side_effect = aiohttp.ClientConnectionError("refused")

        with pytest.raises(WebhookException):
            await notifier.send_update(session, sample_candidate)

    @pytest.mark.asyncio
    async def test_timeout_raises(self, notifier, sample_candidate):
        session = MagicMock()
        session.post.side_effect = asyncio.TimeoutError()

        with pytest.raises(WebhookException, match="Timeout"):
            await notifier.send_update(session, sample_candidate)
