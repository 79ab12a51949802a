from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StatisticsSnapshot:
    quizzes_answered: int
    total_quizzes: int
    lessons_completed: int
    total_lessons: int


@dataclass(frozen=True)
class FocusArea:
    area: str
    score: int
    color: str
    bar_color: str


@dataclass(frozen=True)
class NavItem:
    name: str
    href: str
    icon: str


@dataclass(frozen=True)
class RankedFocusArea:
    rank: int
    area: FocusArea
