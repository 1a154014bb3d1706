import os

# Keep test runs from writing a log file or picking up a real webhook
os.environ["LOG_FILE"] = ""
os.environ["DISCORD_WEBHOOK_URL"] = ""

import logging
import pytest
from datetime import datetime, timezone
from typing import List
from unittest.mock import AsyncMock, MagicMock

from models.update import Anchor, Candidate, SeenState

# =============================================================================
# Fakes - External Collaborators
# =============================================================================


class FakeFetcher:
    """Serves canned HTML instead of hitting the network."""

    def __init__(self, html: str = "", error: Exception = None):
        self.html = html
        self.error = error
        self.requested: List[str] = []
        self.sessions: List[AsyncMock] = []

    async def create_session(self):
        session = AsyncMock()
        self.sessions.append(session)
        return session

    async def fetch_url(self, session, url: str) -> str:
        self.requested.append(url)
        if self.error:
            raise self.error
        return self.html


class FakeNotifier:
    """Records every candidate it was asked to announce."""

    def __init__(self, error: Exception = None):
        self.error = error
        self.sent: List[Candidate] = []

    async def send_update(self, session, candidate: Candidate) -> None:
        if self.error:
            raise self.error
        self.sent.append(candidate)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(autouse=True)
def reset_watcher_logger():
    """Drops handlers that main() attaches so they do not outlive a test."""
    yield
    logger = logging.getLogger("watcher")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Mock Fixtures
# =============================================================================


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def fake_notifier():
    return FakeNotifier()


@pytest.fixture
def mock_webhook_session():
    """aiohttp-like session whose post() works as an async context manager."""
    session = MagicMock()

    response = MagicMock()
    response.status = 204
    response.text = AsyncMock(return_value="")

    session.post.return_value.__aenter__.return_value = response
    session.post.return_value.__aexit__.return_value = False
    return session


# =============================================================================
# Sample Data Fixtures
# =============================================================================

BASE_URL = "https://info.monsterhunter.com/wilds/update/ko-kr/"


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 4, 1, 3, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_candidate() -> Candidate:
    return Candidate(
        url=f"{BASE_URL}Ver.1.021.01.00/",
        version="1.021.01.00",
        label="Ver.1.021.01.00 업데이트 내용",
    )


@pytest.fixture
def sample_state(fixed_now) -> SeenState:
    return SeenState(
        last_url=f"{BASE_URL}Ver.1.020.00.00/",
        last_version="1.020.00.00",
        last_seen_at_utc=fixed_now,
    )


@pytest.fixture
def sample_anchors() -> List[Anchor]:
    return [
        Anchor(href="/update/verA", text="patch"),
        Anchor(href="/x?Ver.1.021.01.00", text="..."),
        Anchor(href="/y", text="no version here"),
    ]


def build_index_html(*entries) -> str:
    """Builds a patch-note index page from (href, text) pairs."""
    links = "\n".join(f'<li><a href="{href}">{text}</a></li>' for href, text in entries)
    return f"""
    <html>
    <head><title>업데이트 정보</title></head>
    <body>
        <nav><a href="/wilds/ko-kr/">홈</a></nav>
        <ul class="update-list">
            {links}
        </ul>
        <footer><a href="https://www.capcom.co.jp/">CAPCOM</a></footer>
    </body>
    </html>
    """


@pytest.fixture
def make_index_html():
    return build_index_html


@pytest.fixture
def index_html() -> str:
    return build_index_html(
        ("Ver.1.020.00.00/", "Ver.1.020.00.00 업데이트"),
        ("Ver.1.021.01.00/", "Ver.1.021.01.00 업데이트"),
        ("notice/", "공지사항"),
    )
