"""OS descriptor read from the Windows registry."""

import logging
from typing import Optional

from ..models.os_info import OsDescriptor
from .base import AbstractOsInfoProvider

logger = logging.getLogger(__name__)

CURRENT_VERSION_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion"


def _ensure_winreg():
    try:
        import winreg  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - only on non-Windows
        raise OSError("winreg is only available on Windows.") from exc
    return winreg


class WindowsRegistryOsInfoProvider(AbstractOsInfoProvider):
    """Reads build, revision, edition and product name from HKLM."""

    def __init__(self, key_path: str = CURRENT_VERSION_KEY):
        self.key_path = key_path

    def read(self) -> Optional[OsDescriptor]:
        try:
            winreg = _ensure_winreg()
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, self.key_path) as key:
                build, _ = winreg.QueryValueEx(key, "CurrentBuildNumber")
                revision = self._optional_value(winreg, key, "UBR", 0)
                edition = self._optional_value(winreg, key, "EditionID", "")
                product = self._optional_value(winreg, key, "ProductName", "")
            descriptor = OsDescriptor(
                build_number=int(build),
                update_revision=int(revision),
                edition_id=str(edition),
                product_name=str(product),
            )
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read Windows version from registry: {e}")
            return None

        logger.debug(f"Registry OS descriptor: {descriptor}")
        return descriptor

    @staticmethod
    def _optional_value(winreg, key, name: str, default):
        try:
            value, _ = winreg.QueryValueEx(key, name)
        except OSError:
            logger.debug(f"Registry value {name} not present")
            return default
        return value
