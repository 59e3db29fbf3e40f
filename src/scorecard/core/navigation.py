from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from scorecard.core.errors import InvalidTransition
from scorecard.core.model import PERSPECTIVE_COUNT, check_index

ViewName = Literal["overview", "detail", "summary"]


@dataclass(frozen=True)
class NavigationState:
    view: ViewName = "overview"
    active_index: int | None = None

    def __post_init__(self) -> None:
        if self.view == "detail" and self.active_index is None:
            raise ValueError("Detail view requires an active perspective index.")
        if self.view != "detail" and self.active_index is not None:
            raise ValueError(f"{self.view} view does not carry an active index.")

    @classmethod
    def overview(cls) -> "NavigationState":
        return cls("overview")

    @classmethod
    def detail(cls, index: int) -> "NavigationState":
        return cls("detail", index)

    @classmethod
    def summary(cls) -> "NavigationState":
        return cls("summary")


class NavigationController:
    """Overview is the hub: detail and summary are only reachable from it."""

    def __init__(self, perspective_count: int = PERSPECTIVE_COUNT) -> None:
        self.perspective_count = perspective_count
        self.state = NavigationState.overview()

    def _require(self, view: ViewName, action: str) -> None:
        if self.state.view != view:
            raise InvalidTransition(self.state.view, action)

    def select_perspective(self, index: int) -> NavigationState:
        self._require("overview", "select a perspective")
        check_index("perspective", index, self.perspective_count)
        self.state = NavigationState.detail(index)
        return self.state

    def select_topic(self) -> NavigationState:
        self._require("overview", "open the summary")
        self.state = NavigationState.summary()
        return self.state

    def back(self) -> NavigationState:
        if self.state.view == "overview":
            raise InvalidTransition("overview", "go back")
        self.state = NavigationState.overview()
        return self.state


__all__ = ["NavigationController", "NavigationState", "ViewName"]
