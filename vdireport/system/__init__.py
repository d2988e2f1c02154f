"""Local operating system information sources."""

from .base import AbstractOsInfoProvider, StaticOsInfoProvider
from .windows_registry import WindowsRegistryOsInfoProvider

__all__ = [
    'AbstractOsInfoProvider',
    'StaticOsInfoProvider',
    'WindowsRegistryOsInfoProvider',
]
