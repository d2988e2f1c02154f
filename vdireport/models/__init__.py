"""Data models for the vdireport application."""

from .session import DeviceEntry, DeviceSelection, DeviceMap, VersionInfo, SessionSnapshot
from .os_info import OsDescriptor
from .vdi import (
    INVALID_CODE_LABEL,
    Platform,
    OptimizationLevel,
    ModeScheme,
    DetailState,
    DecodedMode,
)

__all__ = [
    "DeviceEntry",
    "DeviceSelection",
    "DeviceMap",
    "VersionInfo",
    "SessionSnapshot",
    "OsDescriptor",
    # VDI mode models
    "INVALID_CODE_LABEL",
    "Platform",
    "OptimizationLevel",
    "ModeScheme",
    "DetailState",
    "DecodedMode",
]
