from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from typing import Any

from .models import FocusArea, NavItem, StatisticsSnapshot

logger = logging.getLogger(__name__)

HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def _ts() -> str:
    return datetime.now(UTC).isoformat()


def _assert_equal(name: str, actual: Any, expected: Any) -> dict[str, Any]:
    return {
        "name": name,
        "expected": expected,
        "actual": actual,
        "pass": actual == expected,
    }


def _duplicates(values: list[str]) -> list[str]:
    seen: set[str] = set()
    dupes: list[str] = []
    for value in values:
        if value in seen and value not in dupes:
            dupes.append(value)
        seen.add(value)
    return dupes


def _statistics_checks(snapshot: StatisticsSnapshot) -> list[dict[str, Any]]:
    return [
        _assert_equal(
            "totals_non_negative",
            snapshot.total_quizzes >= 0 and snapshot.total_lessons >= 0,
            True,
        ),
        _assert_equal(
            "quizzes_answered_within_total",
            snapshot.quizzes_answered <= snapshot.total_quizzes,
            True,
        ),
        _assert_equal(
            "lessons_completed_within_total",
            snapshot.lessons_completed <= snapshot.total_lessons,
            True,
        ),
    ]


def _focus_area_checks(focus_areas: tuple[FocusArea, ...]) -> list[dict[str, Any]]:
    out_of_range = [record.area for record in focus_areas if not 0 <= record.score <= 100]
    bad_colors = [
        record.area
        for record in focus_areas
        if not (HEX_COLOR_RE.match(record.color) and HEX_COLOR_RE.match(record.bar_color))
    ]
    return [
        _assert_equal("scores_out_of_range", out_of_range, []),
        _assert_equal("duplicate_topic_names", _duplicates([r.area for r in focus_areas]), []),
        _assert_equal("invalid_hex_colors", bad_colors, []),
    ]


def _navigation_checks(nav_items: tuple[NavItem, ...]) -> list[dict[str, Any]]:
    names = [item.name for item in nav_items]
    return [
        _assert_equal("navigation_not_empty", len(names) > 0, True),
        _assert_equal("blank_navigation_names", [n for n in names if not n.strip()], []),
        _assert_equal("duplicate_navigation_names", _duplicates(names), []),
    ]


def run_all_checks(
    snapshot: StatisticsSnapshot,
    focus_areas: tuple[FocusArea, ...],
    nav_items: tuple[NavItem, ...],
) -> dict[str, Any]:
    checks = [
        *_statistics_checks(snapshot),
        *_focus_area_checks(focus_areas),
        *_navigation_checks(nav_items),
    ]
    failed = [check["name"] for check in checks if not check["pass"]]
    if failed:
        logger.warning("Mock data checks failed: %s", ", ".join(failed))
    return {
        "generated_at_utc": _ts(),
        "status": "fail" if failed else "pass",
        "failed": failed,
        "checks": checks,
    }
