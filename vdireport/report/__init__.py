"""Report assembly and output."""

from .assembler import (
    Report,
    ReportRow,
    ReportAssembler,
    SLIMCORE_RESTART_WARNING,
    join_device_labels,
    format_timestamp,
)
from .console import ReportPrinter

__all__ = [
    'Report',
    'ReportRow',
    'ReportAssembler',
    'SLIMCORE_RESTART_WARNING',
    'join_device_labels',
    'format_timestamp',
    'ReportPrinter',
]
