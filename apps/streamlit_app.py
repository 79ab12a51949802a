from __future__ import annotations

import html
import logging
import sys
from pathlib import Path

import streamlit as st

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from skilldash.charts import CHART_TITLE, build_performance_figure
from skilldash.checks import run_all_checks
from skilldash.config import Settings, get_settings
from skilldash.focus_areas import ALL_ABOVE_THRESHOLD_MESSAGE, format_ranked_item, rank_focus_areas
from skilldash.icons import icon_token
from skilldash.logging_setup import configure_logging
from skilldash.mock_data import MOCK_FOCUS_AREAS, MOCK_STATS, NAV_ITEMS
from skilldash.models import FocusArea, NavItem
from skilldash.navigation import NavigationState
from skilldash.stats import StatCard, build_stat_cards

logger = logging.getLogger(__name__)

NAV_STATE_KEY = "skilldash_nav_state"

PAGE_CSS = """
<style>
:root {
  --ink: #111827;
  --muted: #6b7280;
  --accent: #4f46e5;
  --panel: #ffffff;
}
.stApp {
  background: #f9fafb;
  color: var(--ink);
}
h1, h2, h3 {
  font-weight: 800 !important;
  color: var(--ink);
}
.skilldash-card-value {
  font-size: 2.25rem;
  font-weight: 800;
  color: var(--ink);
  margin: 0.25rem 0;
}
.skilldash-card-caption {
  font-size: 0.875rem;
  color: var(--muted);
}
.skilldash-progress {
  width: 100%;
  height: 0.5rem;
  border-radius: 9999px;
  background: #e5e7eb;
  margin-top: 0.5rem;
}
.skilldash-progress > div {
  height: 100%;
  border-radius: 9999px;
}
.skilldash-focus-item {
  display: flex;
  justify-content: space-between;
  align-items: center;
  padding: 0.75rem;
  margin-bottom: 0.75rem;
  border-radius: 6px;
  background: rgba(17, 24, 39, 0.03);
}
.skilldash-fallback {
  padding: 0.75rem;
  text-align: center;
  color: var(--muted);
  background: #f3f4f6;
  border-radius: 6px;
}
</style>
"""


def _secrets_mapping() -> dict[str, object] | None:
    try:
        return dict(st.secrets)
    except Exception:
        return None


def _nav_state() -> NavigationState:
    if NAV_STATE_KEY not in st.session_state:
        st.session_state[NAV_STATE_KEY] = NavigationState.initial(NAV_ITEMS)
    return st.session_state[NAV_STATE_KEY]


def _select_nav_item(name: str) -> None:
    st.session_state[NAV_STATE_KEY] = _nav_state().select(name)
    logger.debug("Active navigation item: %s", name)


def render_navbar(items: tuple[NavItem, ...]) -> None:
    state = _nav_state()
    brand_col, *item_cols, user_col = st.columns([3] + [1] * len(items) + [1], vertical_alignment="center")
    with brand_col:
        st.markdown(f"#### :violet[{icon_token('bar_chart')} SkillDash]")
    for col, item in zip(item_cols, items):
        with col:
            st.button(
                item.name,
                key=f"nav_{item.href.lstrip('#')}",
                icon=icon_token(item.icon),
                type="primary" if state.is_active(item.name) else "secondary",
                on_click=_select_nav_item,
                args=(item.name,),
                width="stretch",
            )
    with user_col:
        st.markdown(icon_token("user"))


def render_stat_card(card: StatCard) -> None:
    with st.container(border=True):
        title_col, icon_col = st.columns([4, 1])
        with title_col:
            st.markdown(f"**{card.title}**")
        with icon_col:
            st.markdown(f":gray[{icon_token(card.icon)}]")
        st.markdown(
            f'<p class="skilldash-card-value">{card.display_value}</p>',
            unsafe_allow_html=True,
        )
        if card.show_progress:
            st.markdown(
                f'<span class="skilldash-card-caption">{card.progress_caption}</span>',
                unsafe_allow_html=True,
            )
            width = min(max(card.percentage, 0), 100)
            st.markdown(
                '<div class="skilldash-progress">'
                f'<div style="width: {width}%; background: {card.color};"></div>'
                "</div>",
                unsafe_allow_html=True,
            )


def render_performance_chart(records: tuple[FocusArea, ...]) -> None:
    with st.container(border=True):
        st.subheader(f"{icon_token('bar_chart')} {CHART_TITLE}")
        st.plotly_chart(
            build_performance_figure(records),
            width="stretch",
            config={"displayModeBar": False},
        )


def render_focus_list(records: tuple[FocusArea, ...], threshold: int) -> None:
    with st.container(border=True):
        st.subheader(f"{icon_token('trending_up')} High-Impact Focus Areas")
        st.caption(
            "Your lowest scores indicate these areas need immediate practice "
            "to improve overall performance."
        )
        ranked = rank_focus_areas(records, threshold)
        if not ranked:
            st.markdown(
                f'<div class="skilldash-fallback">{ALL_ABOVE_THRESHOLD_MESSAGE}</div>',
                unsafe_allow_html=True,
            )
            return
        for entry in ranked:
            label, score = format_ranked_item(entry)
            label = html.escape(label)
            color = entry.area.color
            st.markdown(
                f'<div class="skilldash-focus-item" style="border-left: 4px solid {color};">'
                f"<span>{label}</span>"
                f'<span style="color: {color}; font-weight: 700;">{score}</span>'
                "</div>",
                unsafe_allow_html=True,
            )


def render_dashboard(settings: Settings) -> None:
    report = run_all_checks(MOCK_STATS, MOCK_FOCUS_AREAS, NAV_ITEMS)
    if report["status"] != "pass":
        st.warning(f"Mock data checks failed: {', '.join(report['failed'])}")

    render_navbar(NAV_ITEMS)
    st.title(settings.page_title)

    card_cols = st.columns(3)
    for col, card in zip(card_cols, build_stat_cards(MOCK_STATS)):
        with col:
            render_stat_card(card)

    chart_col, list_col = st.columns(2, gap="large")
    with chart_col:
        render_performance_chart(MOCK_FOCUS_AREAS)
    with list_col:
        render_focus_list(MOCK_FOCUS_AREAS, settings.improvement_threshold)


def main() -> None:
    settings = get_settings(secrets=_secrets_mapping())
    configure_logging(settings.log_level)
    st.set_page_config(
        page_title=settings.page_title,
        page_icon=":bar_chart:",
        layout="wide",
    )
    st.markdown(PAGE_CSS, unsafe_allow_html=True)
    render_dashboard(settings)


if __name__ == "__main__":
    main()
