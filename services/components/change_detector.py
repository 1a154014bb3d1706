"""
ChangeDetector component for deciding whether the latest candidate is news.
"""
from datetime import datetime
from typing import Callable, Optional

from core.logger import get_logger
from core.utils import get_utc_now
from models.update import Candidate, ChangeStatus, DetectionResult, SeenState

logger = get_logger(__name__)


class ChangeDetector:
    """
    Compares the latest candidate with the last notified update.

    Only the URL decides novelty: version text is best-effort, while each
    release gets its own announcement URL. A new URL with a lower (or missing)
    version therefore still counts as a new update.
    """

    def __init__(self, clock: Callable[[], datetime] = get_utc_now):
        """
        Initialize ChangeDetector.

        Args:
            clock: Returns the current UTC time stamped into new state
        """
        self.clock = clock

    def detect(self, candidate: Candidate, stored: Optional[SeenState]) -> DetectionResult:
        """
        Args:
            candidate: Latest candidate from the page
            stored: Previously saved state, None on first run or unreadable state

        Returns:
            NEW with the state to persist, or UNCHANGED
        """
        if stored is not None and stored.last_url == candidate.url:
            logger.info("[DETECTOR] No change", context={"url": candidate.url})
            return DetectionResult(status=ChangeStatus.UNCHANGED)

        if stored is None:
            logger.info("[DETECTOR] No previous state, treating as new")
        else:
            logger.info(
                "[DETECTOR] Announcement URL changed",
                context={"old": stored.last_url, "new": candidate.url},
            )

        update = SeenState(
            last_url=candidate.url,
            last_version=candidate.version,
            last_seen_at_utc=self.clock(),
        )
        return DetectionResult(status=ChangeStatus.NEW, update=update)
