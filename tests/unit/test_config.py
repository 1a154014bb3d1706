import pytest
from pydantic import ValidationError

from core import constants
from core.config import Settings


def make_settings(**overrides):
    return Settings(_env_file=None, **overrides)


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DISCORD_WEBHOOK_URL", raising=False)
        s = make_settings()

        assert s.DISCORD_WEBHOOK_URL is None
        assert s.TARGET_URL == constants.DEFAULT_TARGET_URL
        assert s.STATE_FILE == "last_seen.json"
        assert s.REQUEST_TIMEOUT == 15

    def test_webhook_from_env(self, monkeypatch):
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", " 'https://discord.com/api/webhooks/1/x' ")
        assert make_settings().DISCORD_WEBHOOK_URL == "https://discord.com/api/webhooks/1/x"

    def test_blank_webhook_is_none(self, monkeypatch):
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", "   ")
        assert make_settings().DISCORD_WEBHOOK_URL is None

    def test_pattern_needs_group(self):
        with pytest.raises(ValidationError):
            make_settings(VERSION_PATTERN=r"Ver\.\d+")

    def test_invalid_pattern(self):
        with pytest.raises(ValidationError):
            make_settings(VERSION_PATTERN=r"Ver\.(\d+")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            make_settings(REQUEST_TIMEOUT=0)

    def test_validate_all_flags_missing_webhook(self):
        errors = make_settings(DISCORD_WEBHOOK_URL=None).validate_all()
        assert any("DISCORD_WEBHOOK_URL" in e and "❌" in e for e in errors)

    def test_validate_all_clean(self):
        s = make_settings(DISCORD_WEBHOOK_URL="https://discord.com/api/webhooks/1/x")
        assert s.validate_all() == []
