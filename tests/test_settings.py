"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from warden.config.settings import (
    DEFAULT_DIAGNOSTIC_PREFIX,
    FaultSettings,
    Settings,
    get_settings,
    load_fault_settings,
)


class TestFaultSettings:
    def test_defaults(self):
        faults = FaultSettings()
        assert faults.is_faulty("faulty")
        assert faults.is_failing("failing")
        assert not faults.is_faulty("failing")
        assert not faults.is_failing("r1")

    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_fault_settings(tmp_path / "absent.yaml") == FaultSettings()

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "faults.yaml"
        path.write_text("", encoding="utf-8")
        assert load_fault_settings(path) == FaultSettings()

    def test_load_from_yaml(self, tmp_path):
        path = tmp_path / "faults.yaml"
        path.write_text("faulty_names: [broken]\nfailing_names: [stuck, jammed]\n", encoding="utf-8")
        faults = load_fault_settings(path)
        assert faults.faulty_names == ["broken"]
        assert faults.is_failing("jammed")

    def test_unknown_keys_rejected(self, tmp_path):
        path = tmp_path / "faults.yaml"
        path.write_text("flaky_names: [x]\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_fault_settings(path)


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("WARDEN_DIAGNOSTIC_PREFIX", raising=False)
        monkeypatch.delenv("WARDEN_NO_COLOR", raising=False)
        settings = Settings()
        assert settings.diagnostic_prefix == DEFAULT_DIAGNOSTIC_PREFIX
        assert settings.no_color is False
        assert settings.faults.is_faulty("faulty")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WARDEN_DIAGNOSTIC_PREFIX", "Teardown failed")
        monkeypatch.setenv("WARDEN_NO_COLOR", "true")
        settings = Settings()
        assert settings.diagnostic_prefix == "Teardown failed"
        assert settings.no_color is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
