from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_PAGE_TITLE = "Student Dashboard"
DEFAULT_IMPROVEMENT_THRESHOLD = 75
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    root_dir: Path
    artifacts_dir: Path
    artifacts_reports_dir: Path
    consistency_report_path: Path
    page_title: str = DEFAULT_PAGE_TITLE
    improvement_threshold: int = DEFAULT_IMPROVEMENT_THRESHOLD
    log_level: str = DEFAULT_LOG_LEVEL


def _read_key(
    key: str,
    *,
    secrets: Mapping[str, object] | None,
    environ: Mapping[str, str],
) -> str | None:
    if secrets is not None and key in secrets:
        value = secrets.get(key)
        if value is not None:
            text = str(value).strip()
            if text:
                return text
    value = environ.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_threshold(raw: str | None) -> int:
    if raw is None:
        return DEFAULT_IMPROVEMENT_THRESHOLD
    try:
        value = int(raw)
    except ValueError as err:
        raise ValueError("SKILLDASH_IMPROVEMENT_THRESHOLD must be an integer.") from err
    if not 0 <= value <= 100:
        raise ValueError("SKILLDASH_IMPROVEMENT_THRESHOLD must be between 0 and 100.")
    return value


def _parse_log_level(raw: str | None) -> str:
    if raw is None:
        return DEFAULT_LOG_LEVEL
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"SKILLDASH_LOG_LEVEL is not a logging level: {raw}")
    return level


def get_settings(
    *,
    environ: Mapping[str, str] | None = None,
    secrets: Mapping[str, object] | None = None,
) -> Settings:
    env = dict(os.environ) if environ is None else dict(environ)
    root = Path(__file__).resolve().parents[2]
    artifacts_dir = root / "artifacts"
    reports_dir = artifacts_dir / "reports"

    return Settings(
        root_dir=root,
        artifacts_dir=artifacts_dir,
        artifacts_reports_dir=reports_dir,
        consistency_report_path=reports_dir / "mock_data_report.json",
        page_title=_read_key("SKILLDASH_PAGE_TITLE", secrets=secrets, environ=env) or DEFAULT_PAGE_TITLE,
        improvement_threshold=_parse_threshold(
            _read_key("SKILLDASH_IMPROVEMENT_THRESHOLD", secrets=secrets, environ=env)
        ),
        log_level=_parse_log_level(_read_key("SKILLDASH_LOG_LEVEL", secrets=secrets, environ=env)),
    )


def ensure_artifact_directories(settings: Settings) -> None:
    settings.artifacts_dir.mkdir(parents=True, exist_ok=True)
    settings.artifacts_reports_dir.mkdir(parents=True, exist_ok=True)
