"""Providers of the local OS descriptor."""

from abc import ABC, abstractmethod
from typing import Optional
import logging

from ..models.os_info import OsDescriptor

logger = logging.getLogger(__name__)


class AbstractOsInfoProvider(ABC):
    """Abstract base class for OS descriptor sources."""

    @abstractmethod
    def read(self) -> Optional[OsDescriptor]:
        """Read the OS descriptor.

        Returns:
            OsDescriptor, or None when the source cannot be read
        """
        pass


class StaticOsInfoProvider(AbstractOsInfoProvider):
    """Provider returning a fixed descriptor (or None)."""

    def __init__(self, descriptor: Optional[OsDescriptor] = None):
        self.descriptor = descriptor

    def read(self) -> Optional[OsDescriptor]:
        return self.descriptor
