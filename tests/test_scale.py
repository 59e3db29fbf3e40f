from __future__ import annotations

import math

import pytest

from scorecard.core.errors import InvalidRating
from scorecard.core.scale import ORDINAL, PERCENTAGE, RatingScale, scale_for


def test_presets() -> None:
    assert ORDINAL.options == [1, 2, 3, 4, 5]
    assert ORDINAL.default == 3
    assert PERCENTAGE.default == 50
    assert len(PERCENTAGE.options) == 101
    assert scale_for("percentage") is PERCENTAGE


def test_custom_step_default_snaps_to_grid() -> None:
    scale = RatingScale(min=0, max=10, step=4)
    assert scale.options == [0, 4, 8]
    assert scale.default == 4


def test_parse_accepts_text_and_numbers() -> None:
    assert ORDINAL.parse("4") == 4
    assert ORDINAL.parse(2.5) == 2.5
    assert isinstance(ORDINAL.parse("4.0"), int)


@pytest.mark.parametrize("raw", [True, "four", math.inf, None, 10**400, "1e400"])
def test_parse_rejects_non_numbers(raw: object) -> None:
    with pytest.raises(InvalidRating):
        ORDINAL.parse(raw)


def test_invalid_scale_definitions() -> None:
    with pytest.raises(ValueError):
        RatingScale(min=5, max=1)
    with pytest.raises(ValueError):
        RatingScale(min=0, max=1, step=0)
    with pytest.raises(ValueError):
        scale_for("stars")


def test_invalid_rating_carries_value_and_reason() -> None:
    with pytest.raises(InvalidRating) as exc:
        ORDINAL.parse(10**400)
    assert exc.value.value == 10**400
    assert exc.value.reason == "not a finite number"
