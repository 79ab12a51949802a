from __future__ import annotations

from collections.abc import Iterable

import plotly.express as px
import plotly.graph_objects as go

from .focus_areas import focus_area_frame
from .models import FocusArea

CHART_TITLE = "Area Performance Overview (Score %)"
SCORE_AXIS_RANGE: tuple[int, int] = (0, 100)
GRID_COLOR = "#e0e0e0"


def build_performance_figure(records: Iterable[FocusArea]) -> go.Figure:
    # Bars sit at row positions, so repeated topic names never share a bar.
    frame = focus_area_frame(records).with_row_index("position")
    fig = px.bar(
        frame.to_pandas(),
        x="position",
        y="Score",
        custom_data=["name"],
        labels={"position": "", "Score": ""},
    )
    fig.update_traces(
        marker_color=frame["bar_color"].to_list(),
        hovertemplate="%{customdata[0]}<br>Score: %{y}<extra></extra>",
    )
    fig.update_layout(
        barmode="group",
        height=340,
        margin={"l": 10, "r": 10, "t": 10, "b": 0},
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        hoverlabel={"bgcolor": "#ffffff", "bordercolor": GRID_COLOR},
        showlegend=False,
    )
    fig.update_xaxes(
        tickmode="array",
        tickvals=frame["position"].to_list(),
        ticktext=frame["name"].to_list(),
        showgrid=False,
        showline=False,
        ticks="",
    )
    fig.update_yaxes(
        range=list(SCORE_AXIS_RANGE),
        autorange=False,
        fixedrange=True,
        showgrid=True,
        gridcolor=GRID_COLOR,
        griddash="dash",
        showline=False,
        ticks="",
    )
    return fig
