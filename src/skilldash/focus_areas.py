from __future__ import annotations

from collections.abc import Iterable

import polars as pl

from .models import FocusArea, RankedFocusArea

IMPROVEMENT_THRESHOLD = 75
ALL_ABOVE_THRESHOLD_MESSAGE = "Excellent! All focus areas are above the improvement threshold."


def recommend_focus_areas(
    records: Iterable[FocusArea],
    threshold: int = IMPROVEMENT_THRESHOLD,
) -> tuple[FocusArea, ...]:
    """Areas scoring strictly below ``threshold``, lowest score first.

    ``sorted`` is stable, so equal scores keep their input order.
    """
    below = [record for record in records if record.score < threshold]
    return tuple(sorted(below, key=lambda record: record.score))


def rank_focus_areas(
    records: Iterable[FocusArea],
    threshold: int = IMPROVEMENT_THRESHOLD,
) -> tuple[RankedFocusArea, ...]:
    return tuple(
        RankedFocusArea(rank=rank, area=record)
        for rank, record in enumerate(recommend_focus_areas(records, threshold), start=1)
    )


def format_ranked_item(entry: RankedFocusArea) -> tuple[str, str]:
    return f"{entry.rank}. {entry.area.area}", f"Score: {entry.area.score}%"


def focus_area_frame(records: Iterable[FocusArea]) -> pl.DataFrame:
    rows = list(records)
    return pl.DataFrame(
        {
            "name": [record.area for record in rows],
            "Score": [record.score for record in rows],
            "bar_color": [record.bar_color for record in rows],
        },
        schema={"name": pl.Utf8, "Score": pl.Int64, "bar_color": pl.Utf8},
    )
