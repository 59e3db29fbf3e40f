from __future__ import annotations

import html
import sys
from pathlib import Path

import streamlit as st


def _find_repo_root(start: Path) -> Path:
    current = start.resolve()
    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
    return start.resolve().parent

ROOT = _find_repo_root(Path(__file__).resolve())
SRC_DIR = ROOT / "src"

# Add src to sys.path so we can import scorecard
if str(SRC_DIR) not in sys.path:
    sys.path.append(str(SRC_DIR))

from scorecard.app.config import load_settings
from scorecard.app.workflow import session_from_settings
from scorecard.core.session import ScorecardSession
from scorecard.observability import configure_logging
from scorecard.ui.layout import (
    LABELS,
    OVERVIEW_GRID,
    TOPIC_TILE,
    edit_toggle_label,
    summary_heading,
)
from scorecard.ui.styles import TILE_CSS
from scorecard.ui.summary import averages_chart, averages_frame, overall_gauge

st.set_page_config(page_title=LABELS["app_title"], page_icon="B", layout="wide")
st.markdown(TILE_CSS, unsafe_allow_html=True)


def _bump_revision(_model: object) -> None:
    st.session_state["model_revision"] = st.session_state.get("model_revision", 0) + 1


def _get_session() -> ScorecardSession:
    session = st.session_state.get("scorecard_session")
    if session is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        session = session_from_settings(settings)
        session.store.subscribe(_bump_revision)
        st.session_state["scorecard_session"] = session
        st.session_state["model_revision"] = 0
    return session


def _tile(session: ScorecardSession, slot: int | str) -> None:
    model = session.model
    is_topic = slot == TOPIC_TILE
    text = model.main_topic if is_topic else model.perspectives[int(slot)].title
    key = "topic" if is_topic else f"title_{slot}"
    if session.edit_mode:
        value = st.text_input(key, value=text, key=key, label_visibility="collapsed")
        if value != text:
            if is_topic:
                session.set_main_topic(value)
            else:
                session.set_perspective_title(int(slot), value)
    else:
        css_class = "scorecard-tile center" if is_topic else "scorecard-tile"
        st.markdown(
            f'<div class="{css_class}">{html.escape(text)}</div>',
            unsafe_allow_html=True,
        )
    if st.button("Open", key=f"open_{key}"):
        result = session.select_topic() if is_topic else session.select_perspective(int(slot))
        if result:
            st.rerun()


def render_overview(session: ScorecardSession) -> None:
    st.title(LABELS["app_title"])
    for row in OVERVIEW_GRID:
        columns = st.columns(3)
        for column, slot in zip(columns, row):
            if slot is None:
                continue
            with column:
                _tile(session, slot)


def _rating_input(session: ScorecardSession, index: int, position: int, rating: float) -> None:
    scale = session.store.scale
    key = f"rating_{index}_{position}"
    options = scale.options
    if len(options) <= 10:
        current = options.index(rating) if rating in options else 0
        value = st.selectbox(
            key, options, index=current, key=key, label_visibility="collapsed"
        )
    else:
        value = st.slider(
            key,
            min_value=scale.min,
            max_value=scale.max,
            value=rating,
            step=scale.step,
            key=key,
            label_visibility="collapsed",
        )
    if value != rating:
        session.set_criterion_field(index, position, "rating", str(value))


def render_detail(session: ScorecardSession) -> None:
    index = session.state.active_index
    if index is None:
        return
    perspective = session.model.perspectives[index]
    st.header(perspective.title)
    for position, criterion in enumerate(perspective.criteria):
        name_col, rating_col = st.columns([4, 1])
        with name_col:
            if session.edit_mode:
                key = f"name_{index}_{position}"
                name = st.text_input(
                    key,
                    value=criterion.name,
                    key=key,
                    placeholder=LABELS["criterion_placeholder"],
                    label_visibility="collapsed",
                )
                if name != criterion.name:
                    session.set_criterion_field(index, position, "name", name)
            else:
                st.write(criterion.name)
        with rating_col:
            _rating_input(session, index, position, criterion.rating)

    back_col, add_col = st.columns(2)
    with back_col:
        if st.button(LABELS["back"], key="detail_back"):
            session.back()
            st.rerun()
    with add_col:
        if session.edit_mode and st.button(LABELS["add_criterion"], key="add_criterion"):
            session.add_criterion(index)
            st.rerun()


def render_summary(session: ScorecardSession) -> None:
    st.header(summary_heading(session.model.main_topic))
    averages = session.averages()
    scale = session.store.scale
    table_col, gauge_col = st.columns([2, 1])
    with table_col:
        df = averages_frame(averages)
        st.dataframe(
            df[["perspective", "display"]].rename(
                columns={"display": LABELS["average_prefix"]}
            ),
            hide_index=True,
            width="stretch",
        )
    with gauge_col:
        st.plotly_chart(overall_gauge(session.overall_average(), scale), width="stretch")
    st.plotly_chart(averages_chart(averages, scale), width="stretch")
    if st.button(LABELS["back_to_overview"], key="summary_back"):
        session.back()
        st.rerun()


session = _get_session()

if st.button(edit_toggle_label(session.edit_mode), key="edit_toggle"):
    session.toggle_edit_mode()
    st.rerun()

if session.last_error:
    st.warning(session.last_error)

view = session.state.view
if view == "overview":
    render_overview(session)
elif view == "detail":
    render_detail(session)
else:
    render_summary(session)

st.caption(f"Revision {st.session_state.get('model_revision', 0)}")
