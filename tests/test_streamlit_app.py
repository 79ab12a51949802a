from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from skilldash import mock_data
from skilldash.focus_areas import ALL_ABOVE_THRESHOLD_MESSAGE
from skilldash.models import FocusArea

APP_PATH = Path(__file__).resolve().parents[1] / "apps" / "streamlit_app.py"


def _run_app() -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=60)
    at.run()
    assert not at.exception
    return at


def _markdown_values(at: AppTest) -> list[str]:
    return [element.value for element in at.markdown]


def _count_fragments(at: AppTest, fragment: str) -> int:
    return sum(value.count(fragment) for value in _markdown_values(at))


def test_page_renders_title_cards_and_ranked_focus_list() -> None:
    at = _run_app()
    assert at.title[0].value == "Student Dashboard"
    values = _markdown_values(at)
    assert any("15 remaining (75%)" in value for value in values)
    assert any("8 remaining (60%)" in value for value in values)
    assert any(">71%<" in value for value in values)
    assert _count_fragments(at, 'class="skilldash-focus-item"') == 2
    ranked = [value for value in values if 'class="skilldash-focus-item"' in value]
    assert "1. Trigonometry Basics" in ranked[0] and "Score: 42%" in ranked[0]
    assert "2. Algebraic Formulas" in ranked[1] and "Score: 65%" in ranked[1]
    assert not any(ALL_ABOVE_THRESHOLD_MESSAGE in value for value in values)


def test_card_without_total_has_no_progress_row() -> None:
    at = _run_app()
    # Only the quiz and lesson cards carry a total.
    assert _count_fragments(at, 'class="skilldash-progress"') == 2
    assert _count_fragments(at, 'class="skilldash-card-caption"') == 2


def test_nav_starts_on_lessons_and_click_moves_highlight() -> None:
    at = _run_app()
    assert at.button(key="nav_lessons").proto.type == "primary"
    assert at.button(key="nav_analytics").proto.type == "secondary"
    before = _markdown_values(at)

    at.button(key="nav_analytics").click().run()

    assert not at.exception
    assert at.button(key="nav_analytics").proto.type == "primary"
    assert at.button(key="nav_lessons").proto.type == "secondary"
    assert at.button(key="nav_practice").proto.type == "secondary"
    assert at.session_state["skilldash_nav_state"].active == "Analytics"
    assert _markdown_values(at) == before


def test_page_shows_fallback_when_all_scores_meet_threshold(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        mock_data,
        "MOCK_FOCUS_AREAS",
        (
            FocusArea(area="Geometry Theorems", score=88, color="#22C55E", bar_color="#10B981"),
            FocusArea(area="Probability & Stats", score=75, color="#6366F1", bar_color="#6366F1"),
        ),
    )
    at = _run_app()
    values = _markdown_values(at)
    assert sum(ALL_ABOVE_THRESHOLD_MESSAGE in value for value in values) == 1
    assert _count_fragments(at, 'class="skilldash-focus-item"') == 0


def test_threshold_setting_reaches_focus_list(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKILLDASH_IMPROVEMENT_THRESHOLD", "40")
    at = _run_app()
    assert _count_fragments(at, 'class="skilldash-focus-item"') == 0
    assert any(ALL_ABOVE_THRESHOLD_MESSAGE in value for value in _markdown_values(at))
