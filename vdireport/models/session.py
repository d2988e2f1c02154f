"""Session-related data models.

These mirror the JSON written by the conferencing client, so field aliases
keep the producer's camelCase names. Every field is pass-through data for
the report: values of an unexpected type are coerced or dropped rather than
rejected, so a single odd field never makes the record unusable.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def scalar_text(value: Any) -> Optional[str]:
    """Text form of a JSON scalar; None for null, objects and arrays."""
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _section(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


class _ClientModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra='ignore',
    )


class DeviceEntry(_ClientModel):
    """A single peripheral as listed by the client."""
    label: str = ""

    @field_validator('label', mode='before')
    @classmethod
    def _coerce_label(cls, value: Any) -> str:
        return scalar_text(value) or ""


class DeviceSelection(_ClientModel):
    """Available peripherals of one kind plus the one currently selected."""
    available: List[DeviceEntry] = Field(default_factory=list)
    selected: Optional[str] = None

    @field_validator('available', mode='before')
    @classmethod
    def _wrap_plain_labels(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [item if isinstance(item, dict) else {'label': item} for item in value]

    @field_validator('selected', mode='before')
    @classmethod
    def _unwrap_selected(cls, value: Any) -> Optional[str]:
        # Some client builds store the whole entry instead of its label
        if isinstance(value, dict):
            value = value.get('label')
        return scalar_text(value)

    @property
    def labels(self) -> List[str]:
        return [entry.label for entry in self.available]


class DeviceMap(_ClientModel):
    """Audio/video peripherals attached to the session."""
    speaker: DeviceSelection = Field(default_factory=DeviceSelection)
    camera: DeviceSelection = Field(default_factory=DeviceSelection)
    microphone: DeviceSelection = Field(default_factory=DeviceSelection)
    secondary_ringer: Optional[str] = Field(default=None, alias='secondaryRinger')

    @field_validator('speaker', 'camera', 'microphone', mode='before')
    @classmethod
    def _default_selection(cls, value: Any) -> Dict[str, Any]:
        return _section(value)

    @field_validator('secondary_ringer', mode='before')
    @classmethod
    def _unwrap_ringer(cls, value: Any) -> Optional[str]:
        if isinstance(value, dict):
            value = value.get('label') or value.get('selected')
        return scalar_text(value)


class VersionInfo(_ClientModel):
    """Component versions reported by the client; unknown keys are kept."""
    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra='allow',
    )

    plugin: Optional[str] = None
    bridge: Optional[str] = None
    slimcore: Optional[str] = None
    client: Optional[str] = None

    @field_validator('plugin', 'bridge', 'slimcore', 'client', mode='before')
    @classmethod
    def _coerce_version(cls, value: Any) -> Optional[str]:
        return scalar_text(value)

    @property
    def extra_versions(self) -> Dict[str, str]:
        """Versions present in the file beyond the well-known components."""
        extras = {key: scalar_text(value) for key, value in (self.model_extra or {}).items()}
        return {key: value for key, value in extras.items() if value is not None}


class SessionSnapshot(_ClientModel):
    """The most recent VDI session record."""
    timestamp: Optional[int] = None  # Unix time in milliseconds
    connected_stack: Optional[str] = Field(default=None, alias='connectedStack')
    vdi_mode: Optional[str] = Field(default=None, alias='vdiMode')
    version: VersionInfo = Field(default_factory=VersionInfo)
    device: DeviceMap = Field(default_factory=DeviceMap)

    @field_validator('timestamp', mode='before')
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> Optional[int]:
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return None

    @field_validator('connected_stack', 'vdi_mode', mode='before')
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return scalar_text(value)

    @field_validator('version', 'device', mode='before')
    @classmethod
    def _default_section(cls, value: Any) -> Dict[str, Any]:
        return _section(value)
