import logging
import sys
import re
import json
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional
import pytz
from core.config import settings

# KST Timezone
KST = pytz.timezone("Asia/Seoul")


class SensitiveDataFilter(logging.Filter):
    """Filter to mask sensitive data in logs"""

    PATTERNS = [
        (
            r"(DISCORD_WEBHOOK_URL=|https://(?:ptb\.|canary\.)?discord(?:app)?\.com/api/webhooks/)[0-9]+/[A-Za-z0-9_-]+",
            r"\1***MASKED***",
        ),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self._mask_sensitive(record.msg)

        if record.args:
            new_args = []
            for arg in record.args:
                if isinstance(arg, str):
                    new_args.append(self._mask_sensitive(arg))
                else:
                    new_args.append(arg)
            record.args = tuple(new_args)
        return True

    def _mask_sensitive(self, text: str) -> str:
        for pattern, replacement in self.PATTERNS:
            text = re.sub(pattern, replacement, text)
        return text


class KSTFormatter(logging.Formatter):
    """Formatter that uses KST timezone with structured context support"""

    def converter(self, timestamp):
        dt = datetime.fromtimestamp(timestamp, tz=pytz.utc)
        return dt.astimezone(KST)

    def formatTime(self, record, datefmt=None):
        dt = self.converter(record.created)
        if datefmt:
            return dt.strftime(datefmt)
        return dt.isoformat(timespec="milliseconds")

    def format(self, record):
        base_msg = super().format(record)

        if hasattr(record, "context") and record.context:
            context_str = " | ".join(f"{k}={v}" for k, v in record.context.items())
            return f"{base_msg} | {context_str}"

        return base_msg


class PerformanceFormatter(KSTFormatter):
    """Adds timing information to KST-formatted lines"""

    def format(self, record):
        base_msg = super().format(record)

        if hasattr(record, "duration"):
            return f"{base_msg} | ⏱️ {record.duration:.2f}s"

        return base_msg


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Adapter to add structured context to log messages"""

    def process(self, msg, kwargs):
        context = kwargs.pop("context", {})

        if "extra" not in kwargs:
            kwargs["extra"] = {}
        kwargs["extra"]["context"] = context

        if "duration" in kwargs:
            kwargs["extra"]["duration"] = kwargs.pop("duration")

        return msg, kwargs


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, tz=pytz.utc)
            .astimezone(KST)
            .isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
        }

        if hasattr(record, "context") and record.context:
            log_record["context"] = record.context

        if hasattr(record, "duration"):
            log_record["duration_seconds"] = record.duration

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, ensure_ascii=False, default=str)


ROOT_LOGGER_NAME = "watcher"


def get_logger(name: str) -> StructuredLoggerAdapter:
    """
    Get a structured logger nested under the "watcher" hierarchy.

    Handlers live on the "watcher" logger (see setup_logging), so every
    module logger follows the level and destinations chosen at startup.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return StructuredLoggerAdapter(logging.getLogger(name), {})


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure console and rotating file handlers on the "watcher" logger.

    Args:
        log_level: Overrides LOG_LEVEL from settings
        log_file: Overrides LOG_FILE from settings ("" disables the file handler)

    Returns:
        The configured "watcher" logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Clear existing handlers so repeated setup does not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_level is None:
        log_level = settings.LOG_LEVEL
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Console Formatter (Human-readable with KST)
    console_formatter = PerformanceFormatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if settings.LOG_FORMAT.lower() == "json":
        file_formatter = JSONFormatter()
    else:
        file_formatter = PerformanceFormatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_formatter)
    console_handler.addFilter(SensitiveDataFilter())
    logger.addHandler(console_handler)

    if log_file is None:
        log_file = settings.LOG_FILE

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)  # File gets all levels
        file_handler.setFormatter(file_formatter)
        file_handler.addFilter(SensitiveDataFilter())
        logger.addHandler(file_handler)

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False

    return logger
