"""Abstract base class for VDI mode decoders."""

from abc import ABC, abstractmethod
import logging

from ..models.vdi import DecodedMode, ModeScheme

logger = logging.getLogger(__name__)


class AbstractModeDecoder(ABC):
    """Abstract base class for vdiMode decoders.

    Implementations must be total: every input, including None and
    malformed strings, maps to a DecodedMode.
    """

    scheme: ModeScheme

    @abstractmethod
    def decode(self, code) -> DecodedMode:
        """Decode a raw vdiMode code.

        Args:
            code: Code as read from the session file (usually a string)

        Returns:
            DecodedMode, with unknown members for unrecognized input
        """
        pass

    def describe(self, code) -> str:
        """Decode and return the human readable description."""
        return self.decode(code).describe()
