"""
Discord webhook notification service.
"""
import asyncio
from typing import Any, Dict, Optional

import aiohttp

from core import constants
from core.config import settings
from core.exceptions import WebhookException
from core.logger import get_logger
from models.update import Candidate
from services.notification.formatters import (
    create_update_embed,
    format_update_message,
    truncate_text,
)

logger = get_logger(__name__)


class DiscordWebhookNotifier:
    """Posts update announcements to a Discord webhook."""

    def __init__(
        self,
        webhook_url: str,
        header: str = constants.DEFAULT_NOTIFY_HEADER,
        username: Optional[str] = None,
        use_embed: bool = False,
    ):
        self.webhook_url = webhook_url
        self.header = header
        self.username = username
        self.use_embed = use_embed

    @classmethod
    def from_settings(cls) -> "DiscordWebhookNotifier":
        return cls(
            webhook_url=settings.DISCORD_WEBHOOK_URL,
            header=settings.NOTIFY_HEADER,
            username=settings.DISCORD_USERNAME,
            use_embed=settings.DISCORD_USE_EMBED,
        )

    def build_payload(self, candidate: Candidate) -> Dict[str, Any]:
        if self.use_embed:
            payload = {"embeds": [create_update_embed(candidate, self.header)]}
        else:
            content = format_update_message(candidate, self.header)
            payload = {"content": truncate_text(content, constants.DISCORD_MAX_CONTENT_LENGTH)}

        if self.username:
            payload["username"] = self.username
        return payload

    async def send_update(self, session: aiohttp.ClientSession, candidate: Candidate) -> None:
        """
        Sends one notification. Not retried: a failure is left for the next run.

        Raises:
            WebhookException: On a non-success response or a transport error
        """
        payload = self.build_payload(candidate)
        logger.info(
            "[NOTIFIER] Sending Discord webhook",
            context={"url": candidate.url, "version": candidate.version},
        )

        try:
            async with session.post(self.webhook_url, json=payload) as resp:
                if not 200 <= resp.status < 300:
                    body = await resp.text()
                    raise WebhookException(
                        "Discord webhook rejected the message",
                        {"status": resp.status, "body": truncate_text(body, 200)},
                    )
        except WebhookException:
            raise
        except asyncio.TimeoutError:
            raise WebhookException("Timeout posting to Discord webhook")
        except aiohttp.ClientError as e:
            raise WebhookException("HTTP error posting to Discord webhook", {"error": str(e)})

        logger.info("[NOTIFIER] Discord notification sent")
