from enum import Enum
from typing import Optional

from pydantic import BaseModel

from models.update import Candidate, SeenState


class RunOutcome(str, Enum):
    NO_CANDIDATE = "no_candidate"
    UNCHANGED = "unchanged"
    NOTIFIED = "notified"
    SEEDED = "seeded"  # --init: state saved without notifying
    CONFIG_ERROR = "config_error"
    FETCH_ERROR = "fetch_error"
    NOTIFY_ERROR = "notify_error"
    STATE_WRITE_ERROR = "state_write_error"
    UNEXPECTED_ERROR = "unexpected_error"


SUCCESS_OUTCOMES = frozenset(
    {
        RunOutcome.NO_CANDIDATE,
        RunOutcome.UNCHANGED,
        RunOutcome.NOTIFIED,
        RunOutcome.SEEDED,
    }
)


class RunResult(BaseModel):
    outcome: RunOutcome
    candidate: Optional[Candidate] = None
    state: Optional[SeenState] = None  # The record saved during this run
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.outcome in SUCCESS_OUTCOMES
