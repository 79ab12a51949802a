from __future__ import annotations

import math
from dataclasses import dataclass

from .models import StatisticsSnapshot

QUIZ_COLOR = "#4F46E5"
LESSON_COLOR = "#16A34A"
MASTERY_COLOR = "#9333EA"


def completion_percentage(value: int | float, total: int | float | None) -> int:
    """Share of ``total`` reached by ``value``, as a whole percentage.

    An absent or zero total yields 0 without dividing. Halves round up, so
    71.5 becomes 72 rather than the banker's rounding of ``round``.
    """
    if not total:
        return 0
    return int(math.floor(value / total * 100 + 0.5))


@dataclass(frozen=True)
class StatCard:
    title: str
    value: int
    icon: str
    color: str
    total: int | None = None
    unit: str = ""

    @property
    def show_progress(self) -> bool:
        return bool(self.total)

    @property
    def percentage(self) -> int:
        return completion_percentage(self.value, self.total)

    @property
    def remaining(self) -> int | None:
        if self.total is None:
            return None
        return self.total - self.value

    @property
    def display_value(self) -> str:
        return f"{self.value}{self.unit}"

    @property
    def progress_caption(self) -> str:
        return f"{self.remaining} remaining ({self.percentage}%)"


def overall_mastery(snapshot: StatisticsSnapshot) -> int:
    return completion_percentage(
        snapshot.quizzes_answered + snapshot.lessons_completed,
        snapshot.total_quizzes + snapshot.total_lessons,
    )


def build_stat_cards(snapshot: StatisticsSnapshot) -> tuple[StatCard, ...]:
    return (
        StatCard(
            title="Quizzes Answered",
            value=snapshot.quizzes_answered,
            total=snapshot.total_quizzes,
            icon="target",
            color=QUIZ_COLOR,
        ),
        StatCard(
            title="Lessons Completed",
            value=snapshot.lessons_completed,
            total=snapshot.total_lessons,
            icon="book",
            color=LESSON_COLOR,
        ),
        StatCard(
            title="Overall Mastery",
            value=overall_mastery(snapshot),
            unit="%",
            icon="bar_chart",
            color=MASTERY_COLOR,
        ),
    )
