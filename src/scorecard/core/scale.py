from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Literal

from scorecard.core.errors import InvalidRating

Rating = int | float
ScaleName = Literal["ordinal", "percentage"]
RatingPolicy = Literal["reject", "clamp"]


@dataclass(frozen=True)
class RatingScale:
    min: Rating
    max: Rating
    step: Rating = 1

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError("Rating scale step must be positive.")
        if self.max <= self.min:
            raise ValueError("Rating scale max must exceed min.")

    @property
    def default(self) -> Rating:
        """Midpoint of the scale, snapped to the step grid."""
        steps = round((self.max - self.min) / 2 / self.step)
        return _normalize(self.min + steps * self.step)

    @property
    def options(self) -> list[Rating]:
        count = int(math.floor((self.max - self.min) / self.step + 1e-9))
        return [_normalize(self.min + i * self.step) for i in range(count + 1)]

    def contains(self, value: Rating) -> bool:
        return self.min <= value <= self.max

    def clamp(self, value: Rating) -> Rating:
        if value < self.min:
            return self.min
        if value > self.max:
            return self.max
        return value

    def parse(self, raw: Any, *, policy: RatingPolicy = "reject") -> Rating:
        if isinstance(raw, bool):
            raise InvalidRating(raw, "not a number")
        try:
            value = float(raw if isinstance(raw, (int, float)) else str(raw).strip())
        except ValueError as exc:
            raise InvalidRating(raw, "not a number") from exc
        except OverflowError as exc:
            raise InvalidRating(raw, "not a finite number") from exc
        if not math.isfinite(value):
            raise InvalidRating(raw, "not a finite number")
        if not self.contains(value):
            if policy == "clamp":
                return _normalize(self.clamp(value))
            raise InvalidRating(raw, f"outside scale bounds [{self.min}, {self.max}]")
        return _normalize(value)

    def as_dict(self) -> dict[str, Rating]:
        return {"min": self.min, "max": self.max, "step": self.step}


ORDINAL = RatingScale(min=1, max=5, step=1)
PERCENTAGE = RatingScale(min=0, max=100, step=1)

SCALES: dict[str, RatingScale] = {
    "ordinal": ORDINAL,
    "percentage": PERCENTAGE,
}


def scale_for(name: str) -> RatingScale:
    try:
        return SCALES[name]
    except KeyError as exc:
        raise ValueError(f"Unsupported scale: {name}") from exc


def _normalize(value: Rating) -> Rating:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


__all__ = [
    "ORDINAL",
    "PERCENTAGE",
    "Rating",
    "RatingPolicy",
    "RatingScale",
    "SCALES",
    "ScaleName",
    "scale_for",
]
