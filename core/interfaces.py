"""
Protocol-based interfaces for Dependency Injection.
These interfaces define the narrow collaborators the change-detection engine
relies on, so tests can swap in fakes and other parsers can be plugged in.
"""
from typing import Protocol, List, runtime_checkable
import aiohttp

from models.update import Anchor, Candidate


@runtime_checkable
class IAnchorParser(Protocol):
    """Turns markup into the ordered hyperlinks it contains."""

    def parse_anchors(self, html: str) -> List[Anchor]:
        """Returns every anchor with an href, in document order."""
        ...


@runtime_checkable
class IPageFetcher(Protocol):
    """Interface for fetching the watched page."""

    async def create_session(self) -> aiohttp.ClientSession:
        """Creates the HTTP session shared by the fetch and the notification."""
        ...

    async def fetch_url(self, session: aiohttp.ClientSession, url: str) -> str:
        """Returns the body of url. Raises NetworkException on failure."""
        ...


@runtime_checkable
class IUpdateNotifier(Protocol):
    """Interface for notification channels."""

    async def send_update(self, session: aiohttp.ClientSession, candidate: Candidate) -> None:
        """Delivers one notification. Raises NotificationException on failure."""
        ...
