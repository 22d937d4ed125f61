"""Tests for codebase_analyzer.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from codebase_analyzer.config import (
    AnalyzerSettings,
    ConfigError,
    InsightConfig,
    ServiceConfig,
    load_config,
)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    settings = load_config(tmp_path)

    assert isinstance(settings, AnalyzerSettings)
    assert settings.insights == InsightConfig()
    assert settings.service == ServiceConfig()
    assert settings.service.max_payload_bytes == 50 * 1024 * 1024
    assert settings.scan.exclude_paths == []
    assert load_config(None) == AnalyzerSettings()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".codebase-analyzer.yml"
    config_file.write_text(
        """
insights:
  large_codebase_files: 50
  multi_language_threshold: 2
  large_average_file_bytes: "2048"
  complex_file_functions: 5
service:
  host: 127.0.0.1
  port: 8080
  max_payload_bytes: 1024
  cors_origins:
    - "https://example.com"
  require_auth: yes
scan:
  exclude_paths: ["dist/", "*.min.js"]
""",
        encoding="utf-8",
    )

    settings = load_config(tmp_path)

    assert settings.insights == InsightConfig(
        large_codebase_files=50,
        multi_language_threshold=2,
        large_average_file_bytes=2048,
        complex_file_functions=5,
    )
    assert settings.service.host == "127.0.0.1"
    assert settings.service.port == 8080
    assert settings.service.max_payload_bytes == 1024
    assert settings.service.cors_origins == ["https://example.com"]
    assert settings.service.require_auth is True
    assert settings.scan.exclude_paths == ["dist/", "*.min.js"]


def test_invalid_values_fall_back_to_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.yml"
    config_file.write_text(
        "insights:\n  large_codebase_files: lots\nservice:\n  port: [1]\n  require_auth: maybe\n",
        encoding="utf-8",
    )

    settings = load_config(config_file)

    assert settings.insights.large_codebase_files == 100
    assert settings.service.port == 5000
    assert settings.service.require_auth is False


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "empty.yml"
    config_file.write_text("\n", encoding="utf-8")
    assert load_config(config_file) == AnalyzerSettings()


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    config_file = tmp_path / "list.yml"
    config_file.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)


def test_malformed_yaml_is_rejected(tmp_path: Path) -> None:
    config_file = tmp_path / "broken.yml"
    config_file.write_text("insights: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(config_file)
    assert "broken.yml" in str(excinfo.value)
