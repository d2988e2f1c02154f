"""Unit tests for ReportConfig."""

import os
from pathlib import Path

import pytest

from vdireport.config import DEFAULT_CONFIG_FILENAME, ReportConfig


def _write(directory, text, name="vdireport.yaml"):
    path = Path(directory) / name
    path.write_text(text, encoding='utf-8')
    return str(path)


@pytest.mark.unit
class TestReportConfig:
    """Test cases for ReportConfig."""

    def test_defaults_without_file(self, temp_data_dir, monkeypatch):
        monkeypatch.chdir(temp_data_dir)

        config = ReportConfig()

        assert config.config_file is None
        assert config.get('vdi.mode_scheme') == "positional"
        assert config.get('vdi.slimcore_stack') == "remote"
        assert config.get('session.history_key') == "sessionHistory"
        assert config.get('session.file_path') is None
        assert config.get('report.label_width') == 24

    def test_explicit_missing_file(self, temp_data_dir):
        with pytest.raises(FileNotFoundError):
            ReportConfig(str(Path(temp_data_dir) / "missing.yaml"))

    def test_file_overrides_defaults(self, temp_data_dir):
        path = _write(temp_data_dir, "vdi:\n  mode_scheme: legacy\n")

        config = ReportConfig(path)

        assert config.get('vdi.mode_scheme') == "legacy"
        assert config.get('vdi.slimcore_stack') == "remote"

    def test_picks_up_file_in_working_directory(self, temp_data_dir, monkeypatch):
        _write(temp_data_dir, "report:\n  label_width: 30\n", DEFAULT_CONFIG_FILENAME)
        monkeypatch.chdir(temp_data_dir)

        config = ReportConfig()

        assert config.get('report.label_width') == 30

    def test_relative_paths_resolved(self, temp_data_dir):
        path = _write(temp_data_dir, "session:\n  file_path: history.json\nlogging:\n  file_path: logs/run.log\n")

        config = ReportConfig(path)

        assert config.get('session.file_path') == str(Path(temp_data_dir) / "history.json")
        assert config.get('logging.file_path') == str(Path(temp_data_dir) / "logs" / "run.log")

    def test_absolute_paths_kept(self, temp_data_dir):
        absolute = os.path.abspath(os.path.join(temp_data_dir, "elsewhere.json"))
        path = _write(temp_data_dir, f"session:\n  file_path: '{absolute}'\n")

        assert ReportConfig(path).get('session.file_path') == absolute

    def test_empty_file_uses_defaults(self, temp_data_dir):
        path = _write(temp_data_dir, "")

        assert ReportConfig(path).get('vdi.mode_scheme') == "positional"

    @pytest.mark.parametrize("text", ["vdi: [unclosed", "- just\n- a list\n"])
    def test_invalid_yaml(self, temp_data_dir, text):
        path = _write(temp_data_dir, text)

        with pytest.raises(ValueError):
            ReportConfig(path)

    def test_get_and_set(self, temp_data_dir, monkeypatch):
        monkeypatch.chdir(temp_data_dir)
        config = ReportConfig()

        config.set('session.file_path', '/tmp/x.json')
        config.set('extra.nested.value', 5)

        assert config.get('session.file_path') == '/tmp/x.json'
        assert config.get('extra.nested.value') == 5
        assert config.get('does.not.exist', 'fallback') == 'fallback'
