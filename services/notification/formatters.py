"""
Message formatting utilities for update notifications.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from core import constants
from core.utils import get_utc_now
from models.update import Candidate


def format_update_message(
    candidate: Candidate, header: str = constants.DEFAULT_NOTIFY_HEADER
) -> str:
    """
    Builds the plain-text webhook message.

    Lines: header, "버전: X" when the version is known, label, URL.
    """
    lines = [header]
    if candidate.version and candidate.version.strip():
        lines.append(f"{constants.VERSION_LINE_PREFIX}{candidate.version}")
    lines.append(candidate.label)
    lines.append(candidate.url)
    return "\n".join(lines)


def truncate_text(text: str, limit: int, suffix: str = "...") -> str:
    if len(text) <= limit:
        return text
    return text[: limit - len(suffix)] + suffix


def strip_markdown(text: str) -> str:
    """Removes bold/italic markers so the header reads cleanly as an embed title."""
    return text.replace("**", "").replace("__", "").strip()


def create_update_embed(
    candidate: Candidate,
    header: str = constants.DEFAULT_NOTIFY_HEADER,
    timestamp: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Creates a Discord embed describing the update.
    """
    embed = {
        "title": truncate_text(strip_markdown(header), 256),
        "description": truncate_text(candidate.label, 4096),
        "url": candidate.url,
        "color": constants.DISCORD_EMBED_COLOR,
        "fields": [],
        "timestamp": (timestamp or get_utc_now()).isoformat(),
    }

    if candidate.version and candidate.version.strip():
        embed["fields"].append({"name": "버전", "value": candidate.version, "inline": True})

    return embed
