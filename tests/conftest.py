"""Pytest configuration and fixtures for vdireport tests."""

import copy
import json
import logging
import tempfile
from pathlib import Path

import pytest

from vdireport.models.os_info import OsDescriptor


# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def sample_session_record():
    """A SlimCore-optimized session record as written by the client."""
    return {
        "timestamp": 1718000000000,
        "connectedStack": "remote",
        "vdiMode": "1200",
        "version": {
            "plugin": "2024.27.1.12",
            "bridge": "2.0.2407.18",
            "slimcore": "2024.27.01.14",
            "client": "24193.1805.3040.8975",
        },
        "device": {
            "speaker": {
                "available": [{"label": "Headset Earphone"}, {"label": "Speakers (Realtek)"}],
                "selected": "Headset Earphone",
            },
            "camera": {
                "available": [{"label": "Integrated Webcam"}],
                "selected": "Integrated Webcam",
            },
            "microphone": {
                "available": [],
                "selected": None,
            },
            "secondaryRinger": "Speakers (Realtek)",
        },
    }


@pytest.fixture
def session_document(sample_session_record):
    """History document with an older record followed by the sample one."""
    older = copy.deepcopy(sample_session_record)
    older["timestamp"] = 1717000000000
    older["vdiMode"] = "1000"
    older["connectedStack"] = "local"
    return {"sessionHistory": [older, sample_session_record]}


@pytest.fixture
def write_session_file(temp_data_dir):
    """Factory writing a session history document to disk."""
    def _write(document, filename="vdi_session_history.json"):
        path = Path(temp_data_dir) / filename
        with open(path, 'w', encoding='utf-8') as f:
            if isinstance(document, str):
                f.write(document)
            else:
                json.dump(document, f)
        return str(path)

    return _write


@pytest.fixture
def client_os():
    """Windows 11 24H2 Enterprise descriptor."""
    return OsDescriptor(
        build_number=26100,
        update_revision=2605,
        edition_id="Enterprise",
        product_name="Windows 10 Enterprise",
    )
