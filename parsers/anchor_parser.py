from typing import List
from bs4 import BeautifulSoup
from models.update import Anchor
from core.exceptions import ParsingException
from core.logger import get_logger

logger = get_logger(__name__)


class HTMLAnchorParser:
    """
    Collects the hyperlinks of a page with BeautifulSoup.
    Hrefs are returned raw; resolving them is up to the caller.
    """

    def __init__(self, selector: str = "a[href]", features: str = "html.parser"):
        self.selector = selector
        self.features = features

    def parse_anchors(self, html: str) -> List[Anchor]:
        try:
            soup = BeautifulSoup(html, self.features)
        except Exception as e:
            raise ParsingException("Failed to parse page markup", {"error": str(e)})

        anchors = [
            Anchor(href=el.get("href"), text=el.get_text())
            for el in soup.select(self.selector)
        ]

        if not anchors:
            logger.warning(f"[PARSER] No anchors found with selector '{self.selector}'")
        else:
            logger.debug(f"[PARSER] Found {len(anchors)} anchors")
        return anchors
