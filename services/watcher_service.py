import time
from typing import Optional

from core.config import settings
from core.exceptions import (
    MissingConfigException,
    NotificationException,
    ScraperException,
    StateWriteException,
)
from core.interfaces import IAnchorParser, IPageFetcher, IUpdateNotifier
from core.logger import get_logger
from models.run_result import RunOutcome, RunResult
from models.update import Candidate
from parsers.anchor_parser import HTMLAnchorParser
from repositories.state_repo import StateStore
from services.components import CandidateExtractor, ChangeDetector
from services.notification.discord import DiscordWebhookNotifier
from services.scraper.fetcher import PageFetcher

logger = get_logger(__name__)


class UpdateWatcher:
    """
    One watch cycle: fetch the index page, find the latest announcement,
    notify when its URL differs from the saved one, then save it.

    run() never raises; every ending is reported as a RunResult.
    """

    def __init__(
        self,
        target_url: str,
        state_store: StateStore,
        notifier: Optional[IUpdateNotifier],
        fetcher: Optional[IPageFetcher] = None,
        parser: Optional[IAnchorParser] = None,
        extractor: Optional[CandidateExtractor] = None,
        detector: Optional[ChangeDetector] = None,
        init_mode: bool = False,
    ):
        self.target_url = target_url
        self.state_store = state_store
        self.notifier = notifier
        self.fetcher = fetcher or PageFetcher()
        self.parser = parser or HTMLAnchorParser()
        self.extractor = extractor or CandidateExtractor(target_url, settings.VERSION_PATTERN)
        self.detector = detector or ChangeDetector()
        self.init_mode = init_mode

    @classmethod
    def from_settings(
        cls,
        target_url: Optional[str] = None,
        state_file: Optional[str] = None,
        init_mode: bool = False,
    ) -> "UpdateWatcher":
        target_url = target_url or settings.TARGET_URL
        notifier = None
        if settings.DISCORD_WEBHOOK_URL:
            notifier = DiscordWebhookNotifier.from_settings()

        return cls(
            target_url=target_url,
            state_store=StateStore(state_file or settings.STATE_FILE),
            notifier=notifier,
            extractor=CandidateExtractor(target_url, settings.VERSION_PATTERN),
            init_mode=init_mode,
        )

    async def run(self) -> RunResult:
        start = time.monotonic()
        try:
            result = await self._run()
        except Exception as e:
            logger.critical(f"[WATCHER] Unexpected error: {e}", exc_info=True)
            result = RunResult(outcome=RunOutcome.UNEXPECTED_ERROR, error=str(e))

        logger.info(
            f"[WATCHER] Run finished: {result.outcome.value}",
            duration=time.monotonic() - start,
        )
        return result

    async def _run(self) -> RunResult:
        if not self.init_mode and self.notifier is None:
            error = MissingConfigException("DISCORD_WEBHOOK_URL is not set")
            logger.error(f"[WATCHER] {error}")
            return RunResult(outcome=RunOutcome.CONFIG_ERROR, error=str(error))

        session = await self.fetcher.create_session()
        try:
            try:
                candidate = await self._find_latest(session)
            except ScraperException as e:
                logger.error(f"[WATCHER] Fetch failed: {e}")
                return RunResult(outcome=RunOutcome.FETCH_ERROR, error=str(e))

            if candidate is None:
                logger.warning("[WATCHER] No update link found. The page layout may have changed.")
                return RunResult(outcome=RunOutcome.NO_CANDIDATE)

            detection = self.detector.detect(candidate, self.state_store.load())
            if not detection.is_new:
                return RunResult(outcome=RunOutcome.UNCHANGED, candidate=candidate)

            if self.init_mode:
                logger.info("[WATCHER] Init mode: saving state without notifying")
                outcome = RunOutcome.SEEDED
            else:
                try:
                    await self.notifier.send_update(session, candidate)
                except NotificationException as e:
                    logger.error(f"[WATCHER] Notification failed, state left untouched: {e}")
                    return RunResult(
                        outcome=RunOutcome.NOTIFY_ERROR, candidate=candidate, error=str(e)
                    )
                outcome = RunOutcome.NOTIFIED
        finally:
            await session.close()

        try:
            self.state_store.save(detection.update)
        except StateWriteException as e:
            # Any notification already went out and will repeat on the next run
            logger.error(f"[WATCHER] Could not save state: {e}")
            return RunResult(
                outcome=RunOutcome.STATE_WRITE_ERROR, candidate=candidate, error=str(e)
            )

        logger.info(
            f"[WATCHER] New update handled: {candidate.label}",
            context={"url": candidate.url, "version": candidate.version},
        )
        return RunResult(outcome=outcome, candidate=candidate, state=detection.update)

    async def _find_latest(self, session) -> Optional[Candidate]:
        html = await self.fetcher.fetch_url(session, self.target_url)
        anchors = self.parser.parse_anchors(html)
        return self.extractor.find_latest(anchors)
