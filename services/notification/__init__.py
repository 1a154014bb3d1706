"""
Notification package: message formatting and the Discord webhook channel.
"""

from services.notification import formatters
from services.notification.discord import DiscordWebhookNotifier

__all__ = ["formatters", "DiscordWebhookNotifier"]
