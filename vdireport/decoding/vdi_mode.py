"""Decoders for the client's vdiMode status code.

Two encodings exist in the wild. The legacy one is a closed table of
four-digit codes. The revised one is positional: the first character names
the platform and the second the optimization tier, and the remaining
characters are not interpreted.
"""

import logging
from typing import Dict, Optional, Tuple, Union

from ..models.vdi import (
    DecodedMode,
    DetailState,
    ModeScheme,
    OptimizationLevel,
    Platform,
)
from .base import AbstractModeDecoder

logger = logging.getLogger(__name__)

MIN_CODE_LENGTH = 4
DEFAULT_SLIMCORE_STACK = "remote"

PLATFORM_CODES: Dict[str, Platform] = {
    "1": Platform.CITRIX,
    "2": Platform.CITRIX,
    "3": Platform.AVD,
    "5": Platform.OMNISSA,
}

OPTIMIZATION_CODES: Dict[str, OptimizationLevel] = {
    "0": OptimizationLevel.NONE,
    "1": OptimizationLevel.WEBRTC,
    "2": OptimizationLevel.SLIMCORE,
}

LEGACY_CODES: Dict[str, Tuple[Platform, OptimizationLevel]] = {
    "1000": (Platform.CITRIX, OptimizationLevel.NONE),
    "1100": (Platform.CITRIX, OptimizationLevel.WEBRTC),
    "1200": (Platform.CITRIX, OptimizationLevel.SLIMCORE),
    "2000": (Platform.CITRIX, OptimizationLevel.NONE),
    "2100": (Platform.CITRIX, OptimizationLevel.WEBRTC),
    "2200": (Platform.CITRIX, OptimizationLevel.SLIMCORE),
    "3000": (Platform.AVD, OptimizationLevel.NONE),
    "3100": (Platform.AVD, OptimizationLevel.WEBRTC),
    "3200": (Platform.AVD, OptimizationLevel.SLIMCORE),
    "5000": (Platform.OMNISSA, OptimizationLevel.NONE),
    "5100": (Platform.OMNISSA, OptimizationLevel.WEBRTC),
    "5200": (Platform.OMNISSA, OptimizationLevel.SLIMCORE),
}


def _normalize(code) -> str:
    # Characters are positional, so padding is kept and counts towards the length
    if code is None:
        return ""
    return str(code)


def platform_for(char: str) -> Platform:
    return PLATFORM_CODES.get(char, Platform.UNKNOWN)


def optimization_for(char: str) -> OptimizationLevel:
    return OPTIMIZATION_CODES.get(char, OptimizationLevel.UNKNOWN)


class PositionalModeDecoder(AbstractModeDecoder):
    """Decoder for the revised character-positional code."""

    scheme = ModeScheme.POSITIONAL

    def decode(self, code) -> DecodedMode:
        raw = _normalize(code)
        if len(raw) < MIN_CODE_LENGTH:
            logger.debug(f"vdiMode '{raw}' too short to decode")
            return DecodedMode(
                platform=Platform.UNKNOWN,
                optimization=OptimizationLevel.UNKNOWN,
                raw_code=raw,
                scheme=self.scheme,
                valid=False,
            )

        decoded = DecodedMode(
            platform=platform_for(raw[0]),
            optimization=optimization_for(raw[1]),
            raw_code=raw,
            scheme=self.scheme,
        )
        logger.debug(f"vdiMode '{raw}' decoded as {decoded.platform.name}/{decoded.optimization.name}")
        return decoded


class LegacyModeDecoder(AbstractModeDecoder):
    """Decoder for the legacy exact-match four-digit code."""

    scheme = ModeScheme.LEGACY

    def decode(self, code) -> DecodedMode:
        raw = _normalize(code)
        if not raw:
            return DecodedMode(
                platform=Platform.UNKNOWN,
                optimization=OptimizationLevel.UNKNOWN,
                raw_code=raw,
                scheme=self.scheme,
                valid=False,
            )

        platform, optimization = LEGACY_CODES.get(
            raw, (Platform.UNKNOWN, OptimizationLevel.UNKNOWN))
        if platform is Platform.UNKNOWN:
            logger.info(f"vdiMode '{raw}' is not a known legacy code")
        return DecodedMode(platform=platform, optimization=optimization,
                           raw_code=raw, scheme=self.scheme)


class AutoModeDecoder(AbstractModeDecoder):
    """Picks a scheme from the shape of the code.

    A four-digit numeric code listed in the legacy table is decoded as
    legacy; anything else goes through the positional decoder. A code such
    as "1210" is therefore positional even though it is numeric.
    """

    scheme = ModeScheme.AUTO

    def __init__(self):
        self.legacy = LegacyModeDecoder()
        self.positional = PositionalModeDecoder()

    def decode(self, code) -> DecodedMode:
        raw = _normalize(code)
        if len(raw) == MIN_CODE_LENGTH and raw.isdigit() and raw in LEGACY_CODES:
            return self.legacy.decode(raw)
        return self.positional.decode(raw)


DECODERS = {
    ModeScheme.POSITIONAL: PositionalModeDecoder,
    ModeScheme.LEGACY: LegacyModeDecoder,
    ModeScheme.AUTO: AutoModeDecoder,
}


def create_decoder(scheme: Union[str, ModeScheme, None] = None) -> AbstractModeDecoder:
    """Build the decoder for a scheme name.

    Raises:
        ValueError: If the scheme name is not one of positional, legacy, auto
    """
    if scheme is None:
        scheme = ModeScheme.POSITIONAL
    if not isinstance(scheme, ModeScheme):
        try:
            scheme = ModeScheme(str(scheme).lower())
        except ValueError:
            valid = ", ".join(s.value for s in ModeScheme)
            raise ValueError(f"Unknown vdiMode scheme '{scheme}' (expected one of: {valid})")
    return DECODERS[scheme]()


def detail_state(decoded: DecodedMode, connected_stack: Optional[str],
                 slimcore_stack: str = DEFAULT_SLIMCORE_STACK) -> DetailState:
    """Decide whether versions and peripherals are shown.

    The block is shown only for the SlimCore tier. Positional codes also
    require the client to report the SlimCore media stack as connected;
    otherwise a restart warning is shown instead.
    """
    if not decoded.valid or not decoded.optimization.is_top_tier:
        return DetailState.NONE
    if decoded.scheme is ModeScheme.LEGACY:
        return DetailState.FULL
    if connected_stack is not None and connected_stack == slimcore_stack:
        return DetailState.FULL
    logger.warning(f"SlimCore mode reported but connected stack is '{connected_stack}'")
    return DetailState.WARNING
