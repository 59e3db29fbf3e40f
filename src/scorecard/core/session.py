"""Session boundary between the presentation layer and the scorecard core.

A ``ScorecardSession`` bundles one store, one navigation controller and the
edit-mode flag. Its public actions never raise ``ScorecardError``: rejections
are logged, kept as ``last_error`` and returned as a falsy ``ActionResult``.
"""

from __future__ import annotations

from dataclasses import dataclass
import functools
import logging
import time
from typing import Any, Callable
import uuid

from scorecard.core.errors import ScorecardError
from scorecard.core.model import ScorecardModel, initial_model
from scorecard.core.navigation import NavigationController, NavigationState
from scorecard.core.scale import ORDINAL, RatingPolicy, RatingScale
from scorecard.core.store import CriterionField, PerspectiveAverage, ScorecardStore
from scorecard.observability import get_logger, log_event


@dataclass(frozen=True)
class ActionResult:
    action: str
    ok: bool
    value: Any = None
    error: str | None = None
    error_type: str | None = None

    def __bool__(self) -> bool:
        return self.ok


def session_action(
    func: Callable[..., Any],
) -> Callable[..., ActionResult]:
    """Run a session action, turning ``ScorecardError`` into a logged rejection."""

    @functools.wraps(func)
    def wrapper(self: "ScorecardSession", *args: Any, **kwargs: Any) -> ActionResult:
        logger = get_logger(func.__module__)
        action_id = str(uuid.uuid4())
        start_time = time.perf_counter()
        try:
            value = func(self, *args, **kwargs)
        except ScorecardError as exc:
            duration = time.perf_counter() - start_time
            self.last_error = str(exc)
            log_event(
                logger,
                logging.WARNING,
                f"Rejected {func.__name__}: {exc}",
                event="rejected",
                action=func.__name__,
                action_id=action_id,
                duration_seconds=duration,
                error_type=type(exc).__name__,
            )
            return ActionResult(
                action=func.__name__,
                ok=False,
                error=str(exc),
                error_type=type(exc).__name__,
            )
        duration = time.perf_counter() - start_time
        self.last_error = None
        log_event(
            logger,
            logging.DEBUG,
            f"Completed {func.__name__}",
            event="complete",
            action=func.__name__,
            action_id=action_id,
            duration_seconds=duration,
        )
        return ActionResult(action=func.__name__, ok=True, value=value)

    return wrapper


class ScorecardSession:
    def __init__(
        self,
        store: ScorecardStore | None = None,
        navigation: NavigationController | None = None,
        *,
        edit_mode: bool = True,
    ) -> None:
        self.store = store or ScorecardStore()
        self.navigation = navigation or NavigationController(
            len(self.store.snapshot.perspectives)
        )
        self.edit_mode = edit_mode
        self.last_error: str | None = None

    @classmethod
    def create(
        cls,
        *,
        scale: RatingScale = ORDINAL,
        rating_policy: RatingPolicy = "reject",
        main_topic: str | None = None,
        titles: list[str] | tuple[str, ...] | None = None,
        edit_mode: bool = True,
    ) -> "ScorecardSession":
        kwargs: dict[str, Any] = {}
        if main_topic is not None:
            kwargs["main_topic"] = main_topic
        if titles is not None:
            kwargs["titles"] = tuple(titles)
        model = initial_model(scale.default, **kwargs)
        store = ScorecardStore(model, scale=scale, rating_policy=rating_policy)
        return cls(store, edit_mode=edit_mode)

    @property
    def model(self) -> ScorecardModel:
        return self.store.snapshot

    @property
    def state(self) -> NavigationState:
        return self.navigation.state

    def averages(self) -> list[PerspectiveAverage]:
        return self.store.compute_averages()

    def overall_average(self) -> float | None:
        return self.store.overall_average()

    def toggle_edit_mode(self) -> bool:
        self.edit_mode = not self.edit_mode
        return self.edit_mode

    @session_action
    def set_main_topic(self, text: str) -> ScorecardModel:
        return self.store.set_main_topic(text)

    @session_action
    def set_perspective_title(self, index: int, text: str) -> ScorecardModel:
        return self.store.set_perspective_title(index, text)

    @session_action
    def add_criterion(self, perspective_index: int) -> ScorecardModel:
        return self.store.add_criterion(perspective_index)

    @session_action
    def set_criterion_field(
        self,
        perspective_index: int,
        criterion_index: int,
        field: CriterionField,
        value: Any,
    ) -> ScorecardModel:
        return self.store.set_criterion_field(perspective_index, criterion_index, field, value)

    @session_action
    def select_perspective(self, index: int) -> NavigationState:
        return self.navigation.select_perspective(index)

    @session_action
    def select_topic(self) -> NavigationState:
        return self.navigation.select_topic()

    @session_action
    def back(self) -> NavigationState:
        return self.navigation.back()


__all__ = ["ActionResult", "ScorecardSession", "session_action"]
