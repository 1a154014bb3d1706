import aiohttp
import asyncio
from core.config import settings
from core.logger import get_logger
from core.exceptions import NetworkException, ScraperException

logger = get_logger(__name__)


class PageFetcher:
    """
    Handles network operations for fetching the watched page.
    """

    def __init__(
        self,
        timeout: int = None,
        user_agent: str = None,
        accept_language: str = None,
    ):
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.REQUEST_TIMEOUT)
        self.headers = {
            "User-Agent": user_agent or settings.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": accept_language or settings.ACCEPT_LANGUAGE,
        }

    async def create_session(self) -> aiohttp.ClientSession:
        """Creates and returns a new aiohttp session."""
        return aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)

    async def fetch_url(self, session: aiohttp.ClientSession, url: str) -> str:
        """
        Fetches URL content with error handling. Redirects are followed.
        """
        logger.info(f"[FETCHER] GET {url}")
        try:
            async with session.get(url, allow_redirects=True) as resp:
                if resp.status >= 400:
                    raise NetworkException(
                        f"HTTP {resp.status} fetching {url}", {"url": url, "status": resp.status}
                    )
                return await resp.text()
        except NetworkException:
            raise
        except asyncio.TimeoutError:
            raise NetworkException(f"Timeout fetching {url}", {"url": url})
        except aiohttp.ClientError as e:
            raise NetworkException(f"HTTP error fetching {url}", {"url": url, "error": str(e)})
        except Exception as e:
            raise ScraperException(f"Unexpected error fetching {url}", {"url": url, "error": str(e)})
