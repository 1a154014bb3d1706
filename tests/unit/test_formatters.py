from datetime import datetime, timezone

from models.update import Candidate
from services.notification.formatters import (
    create_update_embed,
    format_update_message,
    strip_markdown,
    truncate_text,
)


class TestFormatUpdateMessage:
    def test_with_version(self, sample_candidate):
        message = format_update_message(sample_candidate, "**헤더**")

        assert message == (
            "**헤더**\n"
            "버전: 1.021.01.00\n"
            "Ver.1.021.01.00 업데이트 내용\n"
            "https://info.monsterhunter.com/wilds/update/ko-kr/Ver.1.021.01.00/"
        )

    def test_without_version(self):
        candidate = Candidate(url="https://example.com/a", version=None, label="라벨")
        assert format_update_message(candidate, "H") == "H\n라벨\nhttps://example.com/a"

    def test_blank_version_is_omitted(self):
        candidate = Candidate(url="https://example.com/a", version="  ", label="라벨")
        assert "버전" not in format_update_message(candidate, "H")

    def test_default_header(self, sample_candidate):
        first_line = format_update_message(sample_candidate).split("\n")[0]
        assert first_line == "**몬스터헌터 와일즈 업데이트 감지!**"


class TestCreateUpdateEmbed:
    def test_embed_fields(self, sample_candidate):
        ts = datetime(2025, 4, 1, tzinfo=timezone.utc)

        embed = create_update_embed(sample_candidate, "**헤더**", timestamp=ts)

        assert embed["title"] == "헤더"
        assert embed["description"] == sample_candidate.label
        assert embed["url"] == sample_candidate.url
        assert embed["fields"] == [{"name": "버전", "value": "1.021.01.00", "inline": True}]
        assert embed["timestamp"] == "2025-04-01T00:00:00+00:00"

    def test_embed_without_version(self):
        candidate = Candidate(url="https://example.com/a", label="a")
        assert create_update_embed(candidate)["fields"] == []


def test_truncate_text():
    assert truncate_text("abc", 5) == "abc"
    assert truncate_text("abcdefgh", 5) == "ab..."


def test_strip_markdown():
    assert strip_markdown("**굵게**") == "굵게"
