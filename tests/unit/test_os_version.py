"""Unit tests for the Windows version resolver."""

import pytest

from vdireport.decoding.os_version import (
    CLIENT_BUILDS,
    UNKNOWN_WINDOWS_VERSION,
    resolve_os_version,
)
from vdireport.models.os_info import OsDescriptor


@pytest.mark.unit
class TestResolveOsVersion:
    """Test cases for resolve_os_version."""

    def test_missing_descriptor(self):
        assert resolve_os_version(None) == UNKNOWN_WINDOWS_VERSION

    @pytest.mark.parametrize("build", [0, 1, 9200, 19000, 22635, 99999])
    def test_unknown_builds(self, build):
        assert build not in CLIENT_BUILDS
        result = resolve_os_version(OsDescriptor(build_number=build, edition_id="Professional"))

        assert UNKNOWN_WINDOWS_VERSION in result
        assert f"Build {build}.0" in result

    def test_client_build(self, client_os):
        result = resolve_os_version(client_os)

        assert result == "Windows 11 24H2 (Build 26100.2605, Enterprise)"

    def test_server_product_name_selects_server_label(self):
        descriptor = OsDescriptor(
            build_number=26100,
            update_revision=1742,
            edition_id="ServerDatacenter",
            product_name="Windows Server 2025 Datacenter",
        )

        result = resolve_os_version(descriptor)

        assert result.startswith("Windows Server 2025")
        assert "Windows 11" not in result

    def test_same_build_without_server_is_client(self):
        descriptor = OsDescriptor(build_number=26100, product_name="Windows 10 Pro")

        assert resolve_os_version(descriptor).startswith("Windows 11 24H2")

    def test_server_check_precedes_ltsc(self):
        descriptor = OsDescriptor(build_number=17763, edition_id="EnterpriseS",
                                  product_name="Windows Server 2019 Standard")

        assert resolve_os_version(descriptor).startswith("Windows Server 2019")

    @pytest.mark.parametrize("build,expected", [
        (17763, "Windows 10 Enterprise LTSC 2019"),
        (19044, "Windows 10 Enterprise LTSC 2021"),
        (26100, "Windows 11 Enterprise LTSC 2024"),
    ])
    def test_ltsc_editions(self, build, expected):
        descriptor = OsDescriptor(build_number=build, edition_id="EnterpriseS")

        assert resolve_os_version(descriptor).startswith(expected)

    def test_ltsc_edition_on_build_without_ltsc_release(self):
        descriptor = OsDescriptor(build_number=22631, edition_id="EnterpriseS")

        assert resolve_os_version(descriptor).startswith("Windows 11 23H2")

    def test_product_name_used_when_edition_missing(self):
        descriptor = OsDescriptor(build_number=19045, update_revision=4529,
                                  product_name="Windows 10 Pro")

        assert resolve_os_version(descriptor) == "Windows 10 22H2 (Build 19045.4529, Windows 10 Pro)"

    def test_no_label_available(self):
        descriptor = OsDescriptor(build_number=22000, update_revision=1)

        assert resolve_os_version(descriptor) == "Windows 11 21H2 (Build 22000.1)"
