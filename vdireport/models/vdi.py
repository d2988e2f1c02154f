"""VDI optimization mode data models."""

from dataclasses import dataclass
from enum import Enum

INVALID_CODE_LABEL = "Unknown (Invalid Code)"


class Platform(Enum):
    """Virtual desktop platform hosting the session."""
    CITRIX = "Citrix"
    AVD = "Azure Virtual Desktop / Windows 365"
    OMNISSA = "Omnissa Horizon"
    UNKNOWN = "Unknown Platform"


class OptimizationLevel(Enum):
    """How much media processing is offloaded to the local endpoint."""
    NONE = "Not Optimized"
    WEBRTC = "WebRTC Optimized"
    SLIMCORE = "SlimCore Optimized"
    UNKNOWN = "Unknown Optimization"

    @property
    def is_top_tier(self) -> bool:
        return self is OptimizationLevel.SLIMCORE


class ModeScheme(Enum):
    """Encoding of the vdiMode status code."""
    POSITIONAL = "positional"
    LEGACY = "legacy"
    AUTO = "auto"


class DetailState(Enum):
    """Whether the version/peripheral block belongs in the report."""
    NONE = "none"
    FULL = "full"
    WARNING = "warning"


@dataclass(frozen=True)
class DecodedMode:
    """Result of decoding a vdiMode code."""
    platform: Platform
    optimization: OptimizationLevel
    raw_code: str
    scheme: ModeScheme
    valid: bool = True

    def describe(self) -> str:
        if not self.valid:
            return INVALID_CODE_LABEL
        if self.scheme is ModeScheme.LEGACY and self.platform is Platform.UNKNOWN \
                and self.optimization is OptimizationLevel.UNKNOWN:
            return f"Unknown VDI Mode ({self.raw_code})"
        return f"{self.platform.value} - {self.optimization.value} ({self.raw_code})"
