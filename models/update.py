import re
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from core.utils import ensure_utc

_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


class Anchor(BaseModel):
    """A hyperlink as found in the page: raw href plus visible text."""

    href: Optional[str] = None
    text: Optional[str] = ""


class Candidate(BaseModel):
    url: str  # Absolute URL
    version: Optional[str] = None  # e.g. "1.021.01.00"
    label: str  # Trimmed link text, or the URL when the text is empty


class SeenState(BaseModel):
    """The last update a notification was sent for."""

    model_config = ConfigDict(populate_by_name=True)

    # Older last_seen.json files use PascalCase keys
    last_url: str = Field(
        ...,
        validation_alias=AliasChoices("lastUrl", "LastUrl", "last_url"),
        serialization_alias="lastUrl",
    )
    last_version: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("lastVersion", "LastVersion", "last_version"),
        serialization_alias="lastVersion",
    )
    last_seen_at_utc: datetime = Field(
        ...,
        validation_alias=AliasChoices("lastSeenAtUtc", "LastSeenUtc", "last_seen_at_utc"),
        serialization_alias="lastSeenAtUtc",
    )

    @field_validator("last_seen_at_utc", mode="before")
    @classmethod
    def trim_fraction(cls, v):
        # Older files carry 7 fractional digits; datetime holds at most 6
        if isinstance(v, str):
            return _EXTRA_FRACTION.sub(r"\1", v)
        return v

    @field_validator("last_seen_at_utc")
    @classmethod
    def normalize_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class ChangeStatus(str, Enum):
    NEW = "new"
    UNCHANGED = "unchanged"


class DetectionResult(BaseModel):
    status: ChangeStatus
    update: Optional[SeenState] = None  # Set only when status is NEW

    @property
    def is_new(self) -> bool:
        return self.status == ChangeStatus.NEW
