from pydantic_settings import BaseSettings
from typing import List, Optional
from pydantic import Field, field_validator
import re
from core import constants


class Settings(BaseSettings):
    # --- Discord ---
    # Required for notifying; checked by UpdateWatcher before any network call
    DISCORD_WEBHOOK_URL: Optional[str] = Field(None, description="Discord Webhook URL")
    DISCORD_USERNAME: Optional[str] = Field(None, description="Override webhook display name")
    DISCORD_USE_EMBED: bool = Field(False, description="Send an embed instead of plain content")

    # --- Watcher ---
    TARGET_URL: str = Field(constants.DEFAULT_TARGET_URL, description="Patch note index to watch")
    STATE_FILE: str = Field(constants.DEFAULT_STATE_FILE, description="Path of the last-seen record")
    VERSION_PATTERN: str = Field(
        constants.DEFAULT_VERSION_PATTERN, description="Regex with one group capturing the version"
    )
    NOTIFY_HEADER: str = Field(constants.DEFAULT_NOTIFY_HEADER, description="First line of the message")

    # --- Network ---
    REQUEST_TIMEOUT: int = Field(constants.DEFAULT_REQUEST_TIMEOUT, description="Timeout in seconds")
    USER_AGENT: str = Field(constants.DEFAULT_USER_AGENT)
    ACCEPT_LANGUAGE: str = Field(constants.DEFAULT_ACCEPT_LANGUAGE)

    # --- Logging ---
    LOG_LEVEL: str = Field(constants.DEFAULT_LOG_LEVEL, description="Logging level")
    LOG_FILE: str = Field(constants.DEFAULT_LOG_FILE, description="Log file path (empty to disable)")
    LOG_FORMAT: str = Field(constants.DEFAULT_LOG_FORMAT, description="Log format (text/json)")
    LOG_MAX_BYTES: int = Field(constants.DEFAULT_LOG_MAX_BYTES, description="Max log file size")
    LOG_BACKUP_COUNT: int = Field(constants.DEFAULT_LOG_BACKUP_COUNT, description="Log backup count")

    @field_validator("DISCORD_WEBHOOK_URL", "DISCORD_USERNAME", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            # Handle accidental copy-paste of "KEY=VALUE"
            if v.startswith("DISCORD_WEBHOOK_URL="):
                v = v.split("=", 1)[1]
            v = v.strip("'").strip('"')
            return v or None
        return v

    @field_validator("VERSION_PATTERN")
    @classmethod
    def check_version_pattern(cls, v):
        try:
            compiled = re.compile(v, re.IGNORECASE)
        except re.error as e:
            raise ValueError(f"VERSION_PATTERN must be a valid regex: {e}")
        if compiled.groups < 1:
            raise ValueError("VERSION_PATTERN must capture the version in group 1")
        return v

    @field_validator("REQUEST_TIMEOUT")
    @classmethod
    def check_timeout(cls, v):
        if v <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    def validate_all(self) -> List[str]:
        """
        Validate all configuration settings.
        Returns a list of warning/error messages.
        """
        errors = []

        # Critical
        if not self.DISCORD_WEBHOOK_URL:
            errors.append("❌ DISCORD_WEBHOOK_URL is missing")
        elif not self.DISCORD_WEBHOOK_URL.startswith(("https://", "http://")):
            errors.append("❌ DISCORD_WEBHOOK_URL must be an http(s) URL")

        if not self.TARGET_URL.startswith(("https://", "http://")):
            errors.append("❌ TARGET_URL must be an http(s) URL")

        # Warnings
        if self.LOG_FORMAT.lower() not in ("text", "json"):
            errors.append(f"⚠️ Unknown LOG_FORMAT '{self.LOG_FORMAT}' - falling back to text")

        return errors


settings = Settings()
