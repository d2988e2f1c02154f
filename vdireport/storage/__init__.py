"""Session history file access."""

from .session_file import (
    SessionFileReader,
    SessionHistory,
    SessionFileNotFoundError,
    SessionFileError,
    default_session_file_path,
)

__all__ = [
    'SessionFileReader',
    'SessionHistory',
    'SessionFileNotFoundError',
    'SessionFileError',
    'default_session_file_path',
]
