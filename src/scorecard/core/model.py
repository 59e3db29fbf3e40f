from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Sequence, TypeVar

from scorecard.core.errors import IndexOutOfRange
from scorecard.core.scale import Rating

PERSPECTIVE_COUNT = 4
DEFAULT_MAIN_TOPIC = "Company strategy"
DEFAULT_PERSPECTIVE_TITLES = tuple(
    f"Perspective {number}" for number in range(1, PERSPECTIVE_COUNT + 1)
)

T = TypeVar("T")


@dataclass(frozen=True)
class Criterion:
    name: str
    rating: Rating

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "rating": self.rating}


@dataclass(frozen=True)
class Perspective:
    title: str
    criteria: tuple[Criterion, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "criteria": [criterion.to_dict() for criterion in self.criteria],
        }


@dataclass(frozen=True)
class ScorecardModel:
    main_topic: str
    perspectives: tuple[Perspective, ...]

    def __post_init__(self) -> None:
        if len(self.perspectives) != PERSPECTIVE_COUNT:
            raise ValueError(
                f"A scorecard holds exactly {PERSPECTIVE_COUNT} perspectives, "
                f"got {len(self.perspectives)}."
            )

    def perspective(self, index: int) -> Perspective:
        check_index("perspective", index, len(self.perspectives))
        return self.perspectives[index]

    def to_dict(self) -> dict[str, Any]:
        return {
            "main_topic": self.main_topic,
            "perspectives": [perspective.to_dict() for perspective in self.perspectives],
        }


def initial_model(
    default_rating: Rating,
    *,
    main_topic: str = DEFAULT_MAIN_TOPIC,
    titles: Sequence[str] = DEFAULT_PERSPECTIVE_TITLES,
) -> ScorecardModel:
    perspectives = tuple(
        Perspective(title=title, criteria=(Criterion(name="", rating=default_rating),))
        for title in titles
    )
    return ScorecardModel(main_topic=main_topic, perspectives=perspectives)


def check_index(kind: str, index: int, size: int) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < size:
        raise IndexOutOfRange(kind, index, size)


def replace_at(items: tuple[T, ...], index: int, item: T) -> tuple[T, ...]:
    """Return a new tuple with ``items[index]`` swapped for ``item``."""
    return items[:index] + (item,) + items[index + 1 :]


def with_perspective(
    model: ScorecardModel, index: int, perspective: Perspective
) -> ScorecardModel:
    return replace(model, perspectives=replace_at(model.perspectives, index, perspective))


__all__ = [
    "Criterion",
    "DEFAULT_MAIN_TOPIC",
    "DEFAULT_PERSPECTIVE_TITLES",
    "PERSPECTIVE_COUNT",
    "Perspective",
    "ScorecardModel",
    "check_index",
    "initial_model",
    "replace_at",
    "with_perspective",
]
