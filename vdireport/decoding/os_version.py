"""Friendly Windows version names from registry build numbers."""

import logging
from typing import Dict, Optional

from ..models.os_info import OsDescriptor

logger = logging.getLogger(__name__)

UNKNOWN_WINDOWS_VERSION = "Unknown Windows Version"

CLIENT_BUILDS: Dict[int, str] = {
    10240: "Windows 10 1507",
    10586: "Windows 10 1511",
    14393: "Windows 10 1607",
    15063: "Windows 10 1703",
    16299: "Windows 10 1709",
    17134: "Windows 10 1803",
    17763: "Windows 10 1809",
    18362: "Windows 10 1903",
    18363: "Windows 10 1909",
    19041: "Windows 10 2004",
    19042: "Windows 10 20H2",
    19043: "Windows 10 21H1",
    19044: "Windows 10 21H2",
    19045: "Windows 10 22H2",
    20348: "Windows Server 2022",
    22000: "Windows 11 21H2",
    22621: "Windows 11 22H2",
    22631: "Windows 11 23H2",
    26100: "Windows 11 24H2",
    26200: "Windows 11 25H2",
}

SERVER_BUILDS: Dict[int, str] = {
    14393: "Windows Server 2016",
    17763: "Windows Server 2019",
    20348: "Windows Server 2022",
    26100: "Windows Server 2025",
}

LTSC_BUILDS: Dict[int, str] = {
    14393: "Windows 10 Enterprise LTSB 2016",
    17763: "Windows 10 Enterprise LTSC 2019",
    19044: "Windows 10 Enterprise LTSC 2021",
    26100: "Windows 11 Enterprise LTSC 2024",
}

LTSC_EDITION_PREFIXES = ("EnterpriseS", "IoTEnterpriseS")


def family_name(descriptor: OsDescriptor) -> str:
    """Product family for a build, or the unknown sentinel."""
    build = descriptor.build_number
    if descriptor.is_server and build in SERVER_BUILDS:
        return SERVER_BUILDS[build]
    if descriptor.edition_id.startswith(LTSC_EDITION_PREFIXES) and build in LTSC_BUILDS:
        return LTSC_BUILDS[build]
    return CLIENT_BUILDS.get(build, UNKNOWN_WINDOWS_VERSION)


def resolve_os_version(descriptor: Optional[OsDescriptor]) -> str:
    """Describe the local OS, e.g. 'Windows 11 24H2 (Build 26100.2605, Enterprise)'.

    Never raises; a missing descriptor yields the unknown sentinel alone.
    """
    if descriptor is None:
        return UNKNOWN_WINDOWS_VERSION

    name = family_name(descriptor)
    if name == UNKNOWN_WINDOWS_VERSION:
        logger.info(f"Build {descriptor.build_number} not in the Windows version table")

    label = descriptor.edition_id or descriptor.product_name
    build = f"Build {descriptor.build_number}.{descriptor.update_revision}"
    if label:
        return f"{name} ({build}, {label})"
    return f"{name} ({build})"
