from __future__ import annotations

import pytest

from skilldash.config import DEFAULT_IMPROVEMENT_THRESHOLD, Settings, ensure_artifact_directories, get_settings


def test_settings_defaults_without_environment() -> None:
    settings = get_settings(environ={})
    assert settings.page_title == "Student Dashboard"
    assert settings.improvement_threshold == DEFAULT_IMPROVEMENT_THRESHOLD == 75
    assert settings.log_level == "INFO"
    assert settings.consistency_report_path.name == "mock_data_report.json"
    assert settings.consistency_report_path.parent == settings.artifacts_reports_dir


def test_settings_read_from_environment() -> None:
    settings = get_settings(
        environ={
            "SKILLDASH_PAGE_TITLE": "My Progress",
            "SKILLDASH_IMPROVEMENT_THRESHOLD": "60",
            "SKILLDASH_LOG_LEVEL": "debug",
        }
    )
    assert settings.page_title == "My Progress"
    assert settings.improvement_threshold == 60
    assert settings.log_level == "DEBUG"


def test_secrets_take_precedence_over_environment() -> None:
    settings = get_settings(
        environ={"SKILLDASH_PAGE_TITLE": "From env"},
        secrets={"SKILLDASH_PAGE_TITLE": "From secrets"},
    )
    assert settings.page_title == "From secrets"


def test_blank_values_fall_back_to_defaults() -> None:
    settings = get_settings(environ={"SKILLDASH_PAGE_TITLE": "   ", "SKILLDASH_IMPROVEMENT_THRESHOLD": ""})
    assert settings.page_title == "Student Dashboard"
    assert settings.improvement_threshold == 75


@pytest.mark.parametrize("raw", ["abc", "-1", "101"])
def test_invalid_threshold_raises(raw: str) -> None:
    with pytest.raises(ValueError, match="SKILLDASH_IMPROVEMENT_THRESHOLD"):
        get_settings(environ={"SKILLDASH_IMPROVEMENT_THRESHOLD": raw})


def test_invalid_log_level_raises() -> None:
    with pytest.raises(ValueError, match="SKILLDASH_LOG_LEVEL"):
        get_settings(environ={"SKILLDASH_LOG_LEVEL": "chatty"})


def test_ensure_artifact_directories_creates_reports_dir(tmp_path) -> None:
    settings = Settings(
        root_dir=tmp_path,
        artifacts_dir=tmp_path / "artifacts",
        artifacts_reports_dir=tmp_path / "artifacts" / "reports",
        consistency_report_path=tmp_path / "artifacts" / "reports" / "mock_data_report.json",
    )
    ensure_artifact_directories(settings)
    assert settings.artifacts_reports_dir.is_dir()
