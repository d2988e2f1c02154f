"""Assembly of the session report from decoded and pass-through fields."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from ..decoding.base import AbstractModeDecoder
from ..decoding.os_version import resolve_os_version
from ..decoding.vdi_mode import DEFAULT_SLIMCORE_STACK, PositionalModeDecoder, detail_state
from ..models.os_info import OsDescriptor
from ..models.session import DeviceEntry, DeviceSelection, SessionSnapshot
from ..models.vdi import DetailState
from ..storage.session_file import SessionHistory

logger = logging.getLogger(__name__)

DEFAULT_LABEL_WIDTH = 24
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SLIMCORE_RESTART_WARNING = "WARNING: SlimCore optimization failed to load, please restart the client."


@dataclass
class ReportRow:
    """One labeled line of the report. Warning rows carry no label."""
    label: str
    value: str = ""
    warning: bool = False


@dataclass
class Report:
    """Ordered report rows ready for rendering."""
    rows: List[ReportRow] = field(default_factory=list)
    detail: DetailState = DetailState.NONE

    def add(self, label: str, value: Optional[Any]) -> None:
        self.rows.append(ReportRow(label=label, value=_text(value)))

    def warn(self, message: str) -> None:
        self.rows.append(ReportRow(label="", value=message, warning=True))

    @property
    def warnings(self) -> List[str]:
        return [row.value for row in self.rows if row.warning]

    def value_of(self, label: str) -> Optional[str]:
        for row in self.rows:
            if not row.warning and row.label == label:
                return row.value
        return None

    def lines(self, label_width: int = DEFAULT_LABEL_WIDTH) -> List[str]:
        lines = []
        for row in self.rows:
            if row.warning:
                lines.append(row.value)
            else:
                lines.append(f"{row.label:<{label_width}} : {row.value}".rstrip())
        return lines

    def render(self, label_width: int = DEFAULT_LABEL_WIDTH) -> str:
        return "\n".join(self.lines(label_width))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fields": {row.label: row.value for row in self.rows if not row.warning},
            "warnings": self.warnings,
            "detail": self.detail.value,
        }


def _text(value: Optional[Any]) -> str:
    return "" if value is None else str(value)


def join_device_labels(entries: Optional[Iterable[DeviceEntry]]) -> str:
    """Comma-join device labels in source order; empty input gives ''."""
    if not entries:
        return ""
    return ", ".join(entry.label for entry in entries)


def format_timestamp(timestamp_ms: Optional[int]) -> str:
    """Render a millisecond Unix timestamp in local time, '' if unusable."""
    if timestamp_ms is None:
        return ""
    try:
        return datetime.fromtimestamp(timestamp_ms / 1000).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, OSError, ValueError):
        logger.warning(f"Session timestamp {timestamp_ms} is out of range")
        return ""


class ReportAssembler:
    """Builds the report for one session snapshot."""

    def __init__(self, decoder: Optional[AbstractModeDecoder] = None,
                 slimcore_stack: str = DEFAULT_SLIMCORE_STACK):
        """Initialize assembler.

        Args:
            decoder: vdiMode decoder; positional when omitted
            slimcore_stack: connectedStack value meaning SlimCore is loaded
        """
        self.decoder = decoder or PositionalModeDecoder()
        self.slimcore_stack = slimcore_stack

    def assemble(self, history: SessionHistory, os_descriptor: Optional[OsDescriptor],
                 now: Optional[datetime] = None) -> Report:
        snapshot = history.latest
        decoded = self.decoder.decode(snapshot.vdi_mode)
        state = detail_state(decoded, snapshot.connected_stack, self.slimcore_stack)

        report = Report(detail=state)
        report.add("Report Generated", (now or datetime.now()).strftime(TIMESTAMP_FORMAT))
        report.add("Session File", history.path)
        report.add("Sessions Recorded", history.record_count)
        report.add("Last Session", format_timestamp(snapshot.timestamp))
        report.add("Windows Version", resolve_os_version(os_descriptor))
        report.add("Connected Stack", snapshot.connected_stack)
        report.add("VDI Mode", decoded.describe())

        if state is DetailState.FULL:
            self._add_details(report, snapshot)
        elif state is DetailState.WARNING:
            report.warn(SLIMCORE_RESTART_WARNING)

        logger.info(f"Report assembled with {len(report.rows)} rows (detail: {state.value})")
        return report

    def _add_details(self, report: Report, snapshot: SessionSnapshot) -> None:
        version = snapshot.version
        report.add("Plugin Version", version.plugin)
        report.add("Bridge Version", version.bridge)
        report.add("SlimCore Version", version.slimcore)
        report.add("Client Version", version.client)
        for name, value in version.extra_versions.items():
            report.add(f"Version ({name})", value)

        device = snapshot.device
        self._add_devices(report, "Speakers", "Selected Speaker", device.speaker)
        self._add_devices(report, "Cameras", "Selected Camera", device.camera)
        self._add_devices(report, "Microphones", "Selected Microphone", device.microphone)
        report.add("Secondary Ringer", device.secondary_ringer)

    @staticmethod
    def _add_devices(report: Report, available_label: str, selected_label: str,
                     selection: DeviceSelection) -> None:
        report.add(available_label, join_device_labels(selection.available))
        report.add(selected_label, selection.selected)
