from __future__ import annotations

from typing import Literal

TOPIC_TILE = "topic"

TileSlot = int | Literal["topic"] | None

# 3x3 overview grid: perspectives sit around the central topic tile.
OVERVIEW_GRID: tuple[tuple[TileSlot, TileSlot, TileSlot], ...] = (
    (None, 0, None),
    (2, TOPIC_TILE, 3),
    (None, 1, None),
)

LABELS = {
    "app_title": "Balanced Scorecard",
    "edit_on": "Finish editing",
    "edit_off": "Enable editing",
    "criterion_placeholder": "Criterion",
    "add_criterion": "+ Criterion",
    "back": "Back",
    "back_to_overview": "Back to overview",
    "summary_suffix": "Evaluation",
    "average_prefix": "Avg rating",
}


def edit_toggle_label(edit_mode: bool) -> str:
    return LABELS["edit_on"] if edit_mode else LABELS["edit_off"]


def summary_heading(main_topic: str) -> str:
    return f"{main_topic}: {LABELS['summary_suffix']}"


def perspective_slots() -> list[int]:
    return [slot for row in OVERVIEW_GRID for slot in row if isinstance(slot, int)]
