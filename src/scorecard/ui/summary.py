from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from scorecard.core.scale import RatingScale
from scorecard.core.store import NO_DATA, PerspectiveAverage


def averages_frame(averages: Sequence[PerspectiveAverage]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "perspective": [item.title for item in averages],
            "average": pd.to_numeric(
                pd.Series([item.average for item in averages], dtype="object"),
                errors="coerce",
            ),
            "display": [item.display for item in averages],
        }
    )


def averages_chart(
    averages: Sequence[PerspectiveAverage], scale: RatingScale, *, title: str | None = None
) -> go.Figure:
    df = averages_frame(averages).dropna(subset=["average"])
    fig = px.bar(
        df,
        x="perspective",
        y="average",
        text="display",
        title=title,
        range_y=[scale.min, scale.max],
    )
    fig.update_layout(xaxis_title=None, yaxis_title="Average rating")
    return fig


def overall_gauge(value: float | None, scale: RatingScale, *, title: str = "Overall") -> go.Figure:
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=value,
            number={"valueformat": ".2f"},
            title={"text": title if value is not None else f"{title} ({NO_DATA})"},
            gauge={"axis": {"range": [scale.min, scale.max]}},
        )
    )
    fig.update_layout(height=260, margin={"l": 20, "r": 20, "t": 60, "b": 20})
    return fig


__all__ = ["averages_chart", "averages_frame", "overall_gauge"]
