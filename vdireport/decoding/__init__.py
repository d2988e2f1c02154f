"""Status code and OS build decoding."""

from .base import AbstractModeDecoder
from .vdi_mode import (
    PositionalModeDecoder,
    LegacyModeDecoder,
    AutoModeDecoder,
    create_decoder,
    detail_state,
)
from .os_version import UNKNOWN_WINDOWS_VERSION, resolve_os_version

__all__ = [
    'AbstractModeDecoder',
    'PositionalModeDecoder',
    'LegacyModeDecoder',
    'AutoModeDecoder',
    'create_decoder',
    'detail_state',
    'UNKNOWN_WINDOWS_VERSION',
    'resolve_os_version',
]
