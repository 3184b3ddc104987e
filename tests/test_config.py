"""
Tests for settings loading — meshcheck.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from meshcheck.core.config.loader import ConfigError, find_settings_file, load_settings
from meshcheck.core.models import Level, Settings, WorkloadFallback


@pytest.fixture
def valid_settings_yml(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        default_namespace: team-a
        fallback:
          selector:
            app: edge-gateway
          namespace: edge-system
        disabled_analyzers:
          - some.OtherAnalyzer
        suppress:
          - "IST0101=Gateway legacy/*"
        output_threshold: warning
        failure_threshold: warning
    """)
    path = tmp_path / "meshcheck.yml"
    path.write_text(content)
    return path


class TestLoadSettings:
    def test_load_valid(self, valid_settings_yml: Path):
        settings = load_settings(valid_settings_yml)
        assert settings.default_namespace == "team-a"
        assert settings.fallback == WorkloadFallback(
            selector={"app": "edge-gateway"}, namespace="edge-system",
        )
        assert settings.disabled_analyzers == ["some.OtherAnalyzer"]
        assert str(settings.suppress[0]) == "IST0101=Gateway legacy/*"
        assert settings.failure_threshold is Level.WARNING

    def test_empty_file_defaults(self, tmp_path: Path):
        path = tmp_path / "meshcheck.yml"
        path.write_text("")
        assert load_settings(path) == Settings()

    def test_fallback_disabled(self, tmp_path: Path):
        path = tmp_path / "meshcheck.yml"
        path.write_text("fallback: null\n")
        assert load_settings(path).fallback is None

    def test_no_file_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_settings() == Settings()

    def test_no_search(self, valid_settings_yml: Path, monkeypatch):
        monkeypatch.chdir(valid_settings_yml.parent)
        assert load_settings(search=False) == Settings()

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "meshcheck.yml"
        path.write_text(":: invalid: yaml: [")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "meshcheck.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_settings(path)

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "meshcheck.yml"
        path.write_text("namespaces: [a]\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path)

    def test_bad_suppression(self, tmp_path: Path):
        path = tmp_path / "meshcheck.yml"
        path.write_text("suppress: ['IST0101']\n")
        with pytest.raises(ConfigError, match="Invalid suppression"):
            load_settings(path)


class TestFindSettingsFile:
    def test_finds_in_current_dir(self, valid_settings_yml: Path):
        assert find_settings_file(valid_settings_yml.parent) == valid_settings_yml.resolve()

    def test_finds_in_parent(self, valid_settings_yml: Path):
        child = valid_settings_yml.parent / "a" / "b"
        child.mkdir(parents=True)
        assert find_settings_file(child) == valid_settings_yml.resolve()
