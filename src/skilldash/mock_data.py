from __future__ import annotations

from .models import FocusArea, NavItem, StatisticsSnapshot

MOCK_STATS = StatisticsSnapshot(
    quizzes_answered=45,
    total_quizzes=60,
    lessons_completed=12,
    total_lessons=20,
)

MOCK_FOCUS_AREAS: tuple[FocusArea, ...] = (
    FocusArea(area="Algebraic Formulas", score=65, color="#EF4444", bar_color="#EF4444"),
    FocusArea(area="Geometry Theorems", score=88, color="#22C55E", bar_color="#10B981"),
    FocusArea(area="Trigonometry Basics", score=42, color="#F59E0B", bar_color="#F59E0B"),
    FocusArea(area="Probability & Stats", score=75, color="#6366F1", bar_color="#6366F1"),
)

# Future items can be appended here.
NAV_ITEMS: tuple[NavItem, ...] = (
    NavItem(name="Lessons", href="#lessons", icon="book"),
    NavItem(name="Practice", href="#practice", icon="target"),
    NavItem(name="Analytics", href="#analytics", icon="trending_up"),
)
