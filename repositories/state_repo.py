import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from core import constants
from core.exceptions import StateReadException, StateWriteException
from core.logger import get_logger
from models.update import SeenState

logger = get_logger(__name__)


class StateStore:
    """
    Repository for the single last-seen record, stored as a JSON file.
    """

    def __init__(self, path: Union[str, Path] = constants.DEFAULT_STATE_FILE):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> Optional[SeenState]:
        """
        Loads the saved state.

        A missing, unreadable or malformed file yields None so the next
        detection re-notifies instead of failing the run.
        """
        if not self.exists():
            logger.info(f"[STATE] No state file at {self._path}")
            return None

        try:
            return self._read()
        except StateReadException as e:
            logger.warning(f"[STATE] Ignoring unreadable state: {e}")
            return None

    def _read(self) -> SeenState:
        try:
            raw = self._path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise StateReadException("Failed to read state file", {"path": self._path, "error": e})

        try:
            state = SeenState.model_validate_json(raw)
        except ValidationError as e:
            raise StateReadException(
                "Malformed state file", {"path": self._path, "errors": e.error_count()}
            )

        logger.debug(
            "[STATE] Loaded state",
            context={"url": state.last_url, "version": state.last_version},
        )
        return state

    def save(self, state: SeenState) -> None:
        """
        Overwrites the state file.

        The record is written to a temporary file in the same directory and
        renamed over the target, so readers never see a partial file.

        Raises:
            StateWriteException: If the file cannot be written
        """
        payload = state.model_dump_json(by_alias=True, indent=2)
        directory = self._path.parent
        tmp_path = None

        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StateWriteException("Failed to write state file", {"path": self._path, "error": e})

        logger.info(f"[STATE] Saved state to {self._path}", context={"url": state.last_url})
