"""
CandidateExtractor component for finding the latest version-tagged link.
"""
import re
import urllib.parse
from typing import Iterable, List, Optional, Pattern, Union

from core import constants
from core.logger import get_logger
from core.version import version_sort_key
from models.update import Anchor, Candidate

logger = get_logger(__name__)


class CandidateExtractor:
    """
    Picks update announcements out of a page's links.

    A link is a candidate when its href, or failing that its text, contains a
    version tag such as "Ver.1.021.01.00". The candidate with the highest
    version wins.
    """

    def __init__(
        self,
        base_url: str,
        version_pattern: Union[str, Pattern[str]] = constants.DEFAULT_VERSION_PATTERN,
    ):
        """
        Initialize CandidateExtractor.

        Args:
            base_url: Address the page was fetched from, used to resolve relative hrefs
            version_pattern: Regex whose first group captures the dotted version
        """
        self.base_url = base_url
        if isinstance(version_pattern, str):
            version_pattern = re.compile(version_pattern, re.IGNORECASE)
        self.version_pattern = version_pattern

    def extract(self, anchors: Iterable[Anchor]) -> List[Candidate]:
        """
        Builds a candidate for every version-tagged anchor, in encounter order.

        Args:
            anchors: Links of the page in document order

        Returns:
            List of candidates (possibly empty)
        """
        candidates = []

        for anchor in anchors:
            href = anchor.href
            if not href or not href.strip():
                continue

            url = urllib.parse.urljoin(self.base_url, href.strip())
            text = (anchor.text or "").strip()

            # The URL slug is a steadier signal than display text
            match = self.version_pattern.search(href) or self.version_pattern.search(text)
            if not match:
                continue

            candidates.append(Candidate(url=url, version=match.group(1), label=text or url))

        logger.debug(f"[EXTRACTOR] {len(candidates)} version-tagged links found")
        return candidates

    def select_latest(self, candidates: List[Candidate]) -> Optional[Candidate]:
        """
        Returns the highest-version candidate; ties go to the first encountered.
        """
        if not candidates:
            return None

        # sorted() is stable, and stays stable with reverse=True
        ranked = sorted(candidates, key=lambda c: version_sort_key(c.version), reverse=True)
        return ranked[0]

    def find_latest(self, anchors: Iterable[Anchor]) -> Optional[Candidate]:
        """
        Extracts candidates and selects the latest one.

        Returns:
            The latest candidate, or None when the page has no version-tagged link
        """
        latest = self.select_latest(self.extract(anchors))
        if latest is None:
            logger.info("[EXTRACTOR] No version-tagged link found")
        else:
            logger.info(
                f"[EXTRACTOR] Latest candidate: {latest.label}",
                context={"url": latest.url, "version": latest.version},
            )
        return latest
