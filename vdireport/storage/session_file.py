"""Reader for the client's cached VDI session history file."""

import os
import json
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..models.session import SessionSnapshot

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_KEY = "sessionHistory"
SESSION_FILE_RELATIVE_PATH = Path(
    "Packages", "MSTeams_8wekyb3d8bbwe", "LocalCache", "Microsoft", "MSTeams",
    "vdi_session_history.json",
)


class SessionFileNotFoundError(FileNotFoundError):
    """The session history file does not exist."""


class SessionFileError(ValueError):
    """The session history file exists but holds no usable session record."""


@dataclass
class SessionHistory:
    """Parsed session history: the latest record plus bookkeeping."""
    path: Path
    record_count: int
    latest: SessionSnapshot


def default_session_file_path() -> Path:
    """Location the client writes its session history to."""
    local_app_data = os.environ.get("LOCALAPPDATA")
    if local_app_data:
        base = Path(local_app_data)
    else:
        base = Path.home() / "AppData" / "Local"
    return base / SESSION_FILE_RELATIVE_PATH


class SessionFileReader:
    """Loads the most recent session record from the history file."""

    def __init__(self, file_path: Optional[str] = None, history_key: str = DEFAULT_HISTORY_KEY):
        """Initialize reader.

        Args:
            file_path: Path to the history JSON; defaults to the client's cache location
            history_key: Top-level key holding the list of session records
        """
        self.file_path = Path(file_path) if file_path else default_session_file_path()
        self.history_key = history_key

    def exists(self) -> bool:
        return self.file_path.is_file()

    def load(self) -> SessionHistory:
        """Read and parse the history file.

        Returns:
            SessionHistory with the last record in file order

        Raises:
            SessionFileNotFoundError: If the file does not exist
            SessionFileError: If the file is not valid JSON or has no records
        """
        if not self.exists():
            raise SessionFileNotFoundError(f"Session file not found: {self.file_path}")

        try:
            with open(self.file_path, 'r', encoding='utf-8-sig') as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise SessionFileError(f"Session file is not valid JSON: {e}")
        except OSError as e:
            raise SessionFileError(f"Could not read session file: {e}")

        logger.info(f"Session file loaded: {self.file_path}")
        return self._parse(document)

    def _parse(self, document: Any) -> SessionHistory:
        if not isinstance(document, dict):
            raise SessionFileError("Session file must contain a JSON object")

        records = document.get(self.history_key)
        if not isinstance(records, list) or not records:
            raise SessionFileError(f"No session records under '{self.history_key}'")

        latest: Dict[str, Any] = records[-1]
        if not isinstance(latest, dict):
            raise SessionFileError("Latest session record is not a JSON object")

        try:
            snapshot = SessionSnapshot.model_validate(latest)
        except ValidationError as e:
            raise SessionFileError(f"Latest session record is malformed: {e}")

        logger.debug(f"Using session record {len(records)} of {len(records)}")
        return SessionHistory(path=self.file_path, record_count=len(records), latest=snapshot)
