"""Configuration loading for codebase analyzer (.codebase-analyzer.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".codebase-analyzer.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class InsightConfig:
    """Thresholds used by the insight rules."""

    large_codebase_files: int = 100
    multi_language_threshold: int = 3
    large_average_file_bytes: int = 10000
    complex_file_functions: int = 10


@dataclass
class ServiceConfig:
    """HTTP service settings."""

    host: str = "0.0.0.0"
    port: int = 5000
    max_payload_bytes: int = 50 * 1024 * 1024
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    require_auth: bool = False


@dataclass
class ScanConfig:
    """Directory scanning exclusions for the CLI."""

    exclude_paths: List[str] = field(default_factory=list)


@dataclass
class AnalyzerSettings:
    """Represents the high-level settings defined in .codebase-analyzer.yml."""

    insights: InsightConfig = field(default_factory=InsightConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)


def load_config(config_path: Path | None = None) -> AnalyzerSettings:
    """Load configuration from disk, returning defaults when the file is absent."""
    if config_path is None:
        return AnalyzerSettings()

    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return AnalyzerSettings()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    defaults = AnalyzerSettings()

    insight_data = _as_dict(data.get("insights"))
    insights = InsightConfig(
        large_codebase_files=_int_or(
            insight_data.get("large_codebase_files"),
            defaults.insights.large_codebase_files,
        ),
        multi_language_threshold=_int_or(
            insight_data.get("multi_language_threshold"),
            defaults.insights.multi_language_threshold,
        ),
        large_average_file_bytes=_int_or(
            insight_data.get("large_average_file_bytes"),
            defaults.insights.large_average_file_bytes,
        ),
        complex_file_functions=_int_or(
            insight_data.get("complex_file_functions"),
            defaults.insights.complex_file_functions,
        ),
    )

    service_data = _as_dict(data.get("service"))
    origins = _as_str_list(service_data.get("cors_origins"))
    require_auth = _as_bool(service_data.get("require_auth"))
    service = ServiceConfig(
        host=_as_str(service_data.get("host")) or defaults.service.host,
        port=_int_or(service_data.get("port"), defaults.service.port),
        max_payload_bytes=_int_or(
            service_data.get("max_payload_bytes"), defaults.service.max_payload_bytes
        ),
        cors_origins=origins or defaults.service.cors_origins,
        require_auth=require_auth if require_auth is not None else False,
    )

    scan_data = _as_dict(data.get("scan"))
    scan = ScanConfig(exclude_paths=_as_str_list(scan_data.get("exclude_paths")))

    return AnalyzerSettings(insights=insights, service=service, scan=scan)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return config_path / CONFIG_FILENAME
    return config_path


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _int_or(value: Any, default: int) -> int:
    parsed = _as_int(value)
    return parsed if parsed is not None else default


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
