"""Scorecard store: owns the model snapshot and every mutation of it.

Each successful operation builds a new ``ScorecardModel`` by replacing the
targeted element at its index and publishes it to subscribers. Failed
operations raise a ``ScorecardError`` before anything is published, so the
previous snapshot stays current.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Iterable, Literal, Sequence

from scorecard.core.model import (
    Criterion,
    ScorecardModel,
    check_index,
    initial_model,
    replace_at,
    with_perspective,
)
from scorecard.core.scale import ORDINAL, Rating, RatingPolicy, RatingScale
from scorecard.observability import get_logger

CriterionField = Literal["name", "rating"]
Listener = Callable[[ScorecardModel], None]

NO_DATA = "-"

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class PerspectiveAverage:
    title: str
    average: float | None

    @property
    def display(self) -> str:
        if self.average is None:
            return NO_DATA
        return f"{self.average:.2f}"

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "average": self.average}


def mean_rating(ratings: Sequence[Rating]) -> float | None:
    if not ratings:
        return None
    mean = sum(ratings) / len(ratings)
    return float(Decimal(str(mean)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def overall_average(averages: Iterable[PerspectiveAverage]) -> float | None:
    """Mean of the per-perspective averages that carry data."""
    return mean_rating([item.average for item in averages if item.average is not None])


class ScorecardStore:
    def __init__(
        self,
        model: ScorecardModel | None = None,
        *,
        scale: RatingScale = ORDINAL,
        rating_policy: RatingPolicy = "reject",
    ) -> None:
        self.scale = scale
        self.rating_policy = rating_policy
        self._model = model if model is not None else initial_model(scale.default)
        self._listeners: list[Listener] = []

    @property
    def snapshot(self) -> ScorecardModel:
        return self._model

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, model: ScorecardModel) -> ScorecardModel:
        self._model = model
        for listener in list(self._listeners):
            listener(model)
        return model

    def set_main_topic(self, text: str) -> ScorecardModel:
        return self._publish(replace(self._model, main_topic=text))

    def set_perspective_title(self, index: int, text: str) -> ScorecardModel:
        perspective = self._model.perspective(index)
        return self._publish(
            with_perspective(self._model, index, replace(perspective, title=text))
        )

    def add_criterion(self, perspective_index: int) -> ScorecardModel:
        perspective = self._model.perspective(perspective_index)
        criteria = perspective.criteria + (Criterion(name="", rating=self.scale.default),)
        _LOGGER.debug(
            "Added criterion",
            extra={
                "extra_data": {
                    "perspective_index": perspective_index,
                    "criteria_count": len(criteria),
                }
            },
        )
        return self._publish(
            with_perspective(
                self._model, perspective_index, replace(perspective, criteria=criteria)
            )
        )

    def set_criterion_field(
        self,
        perspective_index: int,
        criterion_index: int,
        field: CriterionField,
        value: Any,
    ) -> ScorecardModel:
        perspective = self._model.perspective(perspective_index)
        check_index("criterion", criterion_index, len(perspective.criteria))
        criterion = perspective.criteria[criterion_index]
        if field == "name":
            updated = replace(criterion, name=str(value))
        elif field == "rating":
            updated = replace(
                criterion, rating=self.scale.parse(value, policy=self.rating_policy)
            )
        else:
            raise ValueError(f"Unsupported criterion field: {field}")
        criteria = replace_at(perspective.criteria, criterion_index, updated)
        return self._publish(
            with_perspective(
                self._model, perspective_index, replace(perspective, criteria=criteria)
            )
        )

    def compute_averages(self) -> list[PerspectiveAverage]:
        return [
            PerspectiveAverage(
                title=perspective.title,
                average=mean_rating([criterion.rating for criterion in perspective.criteria]),
            )
            for perspective in self._model.perspectives
        ]

    def overall_average(self) -> float | None:
        return overall_average(self.compute_averages())


__all__ = [
    "CriterionField",
    "Listener",
    "NO_DATA",
    "PerspectiveAverage",
    "ScorecardStore",
    "mean_rating",
    "overall_average",
]
