import argparse
import asyncio
import sys

from core import constants
from core.config import settings
from core.logger import setup_logging, get_logger
from models.run_result import RunOutcome, RunResult
from services.watcher_service import UpdateWatcher

logger = get_logger(__name__)


def exit_code_for(result: RunResult) -> int:
    """Maps a run result to the process exit code."""
    if result.is_success:
        return constants.EXIT_OK
    if result.outcome == RunOutcome.CONFIG_ERROR:
        return constants.EXIT_CONFIG_ERROR
    return constants.EXIT_FAILURE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monster Hunter Wilds update watcher (single run)"
    )
    parser.add_argument("--url", type=str, help="Override the watched page (TARGET_URL)")
    parser.add_argument("--state-file", type=str, help="Override the state file path (STATE_FILE)")
    parser.add_argument(
        "--init",
        action="store_true",
        help="Record the current latest update without sending a notification",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_level="DEBUG" if args.verbose else None)

    logger.info("=" * 60)
    logger.info("MHWs Update Watcher")
    logger.info("=" * 60)
    logger.info(f"Target: {args.url or settings.TARGET_URL}")
    logger.info(f"State: {args.state_file or settings.STATE_FILE}")

    for msg in settings.validate_all():
        if args.init and "DISCORD_WEBHOOK_URL" in msg:
            continue
        if "❌" in msg:
            logger.error(msg)
        else:
            logger.warning(msg)

    if args.init:
        logger.info("🚀 Starting in INIT MODE (notifications disabled)")

    watcher = UpdateWatcher.from_settings(
        target_url=args.url,
        state_file=args.state_file,
        init_mode=args.init,
    )
    result = asyncio.run(watcher.run())

    if result.outcome == RunOutcome.NOTIFIED:
        logger.info(f"Notified new update: {result.candidate.url}")
    elif result.outcome == RunOutcome.UNCHANGED:
        logger.info("변경 없음.")
    elif result.outcome == RunOutcome.NO_CANDIDATE:
        logger.info("최신 항목을 찾지 못했습니다. 페이지 구조가 바뀌었을 수 있습니다.")
    elif not result.is_success:
        logger.error(f"오류: {result.error}")

    return exit_code_for(result)


if __name__ == "__main__":
    sys.exit(main())
