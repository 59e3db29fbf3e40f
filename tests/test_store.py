from __future__ import annotations

import pytest

from scorecard.core.errors import IndexOutOfRange, InvalidRating
from scorecard.core.model import Criterion, Perspective, ScorecardModel
from scorecard.core.scale import PERCENTAGE
from scorecard.core.store import PerspectiveAverage, ScorecardStore, overall_average


def _model(ratings: list[list[float]], main_topic: str = "Strategy") -> ScorecardModel:
    return ScorecardModel(
        main_topic=main_topic,
        perspectives=tuple(
            Perspective(
                title=f"P{index}",
                criteria=tuple(Criterion(name=f"c{pos}", rating=r) for pos, r in enumerate(row)),
            )
            for index, row in enumerate(ratings)
        ),
    )


def test_initial_model_has_one_placeholder_per_perspective() -> None:
    store = ScorecardStore()
    model = store.snapshot
    assert len(model.perspectives) == 4
    for perspective in model.perspectives:
        assert perspective.criteria == (Criterion(name="", rating=3),)


def test_percentage_scale_placeholder_uses_midpoint() -> None:
    store = ScorecardStore(scale=PERCENTAGE)
    assert store.snapshot.perspectives[0].criteria[0].rating == 50


def test_set_main_topic_replaces_snapshot() -> None:
    store = ScorecardStore()
    before = store.snapshot
    after = store.set_main_topic("Growth")
    assert after.main_topic == "Growth"
    assert before.main_topic != "Growth"
    assert after.perspectives is before.perspectives


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_set_perspective_title_only_touches_target(index: int) -> None:
    store = ScorecardStore()
    before = store.snapshot
    after = store.set_perspective_title(index, "Finance")
    assert after.perspectives[index].title == "Finance"
    for other in range(4):
        if other == index:
            continue
        assert after.perspectives[other] is before.perspectives[other]
    assert after.perspectives is not before.perspectives


@pytest.mark.parametrize("index", [-1, 4, 10])
def test_out_of_range_perspective_leaves_model_unchanged(index: int) -> None:
    store = ScorecardStore()
    before = store.snapshot
    with pytest.raises(IndexOutOfRange):
        store.set_perspective_title(index, "x")
    with pytest.raises(IndexOutOfRange):
        store.add_criterion(index)
    with pytest.raises(IndexOutOfRange):
        store.set_criterion_field(index, 0, "name", "x")
    assert store.snapshot is before


def test_add_criterion_appends_default() -> None:
    store = ScorecardStore()
    before = store.snapshot
    after = store.add_criterion(1)
    assert len(after.perspectives[1].criteria) == len(before.perspectives[1].criteria) + 1
    assert after.perspectives[1].criteria[-1] == Criterion(name="", rating=3)
    assert after.perspectives[1].criteria[0] is before.perspectives[1].criteria[0]
    for other in (0, 2, 3):
        assert after.perspectives[other] is before.perspectives[other]


def test_set_criterion_name_and_rating() -> None:
    store = ScorecardStore()
    store.add_criterion(0)
    before = store.snapshot
    store.set_criterion_field(0, 1, "name", "Revenue")
    after = store.set_criterion_field(0, 1, "rating", " 5 ")
    assert after.perspectives[0].criteria[1] == Criterion(name="Revenue", rating=5)
    assert after.perspectives[0].criteria[0] is before.perspectives[0].criteria[0]
    assert before.perspectives[0].criteria[1] == Criterion(name="", rating=3)


def test_criterion_index_out_of_range() -> None:
    store = ScorecardStore()
    before = store.snapshot
    with pytest.raises(IndexOutOfRange) as exc:
        store.set_criterion_field(0, 1, "rating", "4")
    assert exc.value.kind == "criterion"
    assert store.snapshot is before


@pytest.mark.parametrize("value", ["abc", "", "nan", "inf", "9", "0"])
def test_invalid_rating_keeps_prior_value(value: str) -> None:
    store = ScorecardStore()
    store.set_criterion_field(2, 0, "rating", "4")
    before = store.snapshot
    with pytest.raises(InvalidRating):
        store.set_criterion_field(2, 0, "rating", value)
    assert store.snapshot is before
    assert store.snapshot.perspectives[2].criteria[0].rating == 4


def test_clamp_policy_stores_bound() -> None:
    store = ScorecardStore(rating_policy="clamp")
    assert store.set_criterion_field(0, 0, "rating", "9").perspectives[0].criteria[0].rating == 5
    assert store.set_criterion_field(0, 0, "rating", "-2").perspectives[0].criteria[0].rating == 1
    with pytest.raises(InvalidRating):
        store.set_criterion_field(0, 0, "rating", "nan")


def test_unknown_field_is_a_programming_error() -> None:
    store = ScorecardStore()
    with pytest.raises(ValueError):
        store.set_criterion_field(0, 0, "weight", "1")  # type: ignore[arg-type]


def test_averages_on_ordinal_scale() -> None:
    store = ScorecardStore(_model([[3, 3, 3], [1, 2], [5], [4, 5, 5]]))
    averages = store.compute_averages()
    assert [item.average for item in averages] == [3.0, 1.5, 5.0, 4.67]
    assert averages[0].display == "3.00"
    assert averages[0].title == "P0"


def test_averages_on_percentage_scale() -> None:
    store = ScorecardStore(_model([[50, 60, 70, 80], [0], [100], [10, 20]]), scale=PERCENTAGE)
    assert store.compute_averages()[0].average == 65.0


def test_empty_perspective_yields_sentinel() -> None:
    store = ScorecardStore(_model([[], [2], [4], [3]]))
    averages = store.compute_averages()
    assert averages[0].average is None
    assert averages[0].display == "-"
    assert store.overall_average() == 3.0


def test_overall_average_of_perspective_averages() -> None:
    store = ScorecardStore(_model([[50], [60], [70], [80]]), scale=PERCENTAGE)
    assert store.overall_average() == 65


def test_overall_average_without_data() -> None:
    assert overall_average([PerspectiveAverage("a", None), PerspectiveAverage("b", None)]) is None


def test_subscribers_receive_each_snapshot_once() -> None:
    store = ScorecardStore()
    seen: list[ScorecardModel] = []
    unsubscribe = store.subscribe(seen.append)
    store.set_main_topic("A")
    with pytest.raises(IndexOutOfRange):
        store.add_criterion(7)
    store.add_criterion(0)
    assert len(seen) == 2
    assert seen[0].main_topic == "A"
    assert seen[-1] is store.snapshot
    unsubscribe()
    store.set_main_topic("B")
    assert len(seen) == 2


def test_model_requires_four_perspectives() -> None:
    with pytest.raises(ValueError):
        ScorecardModel(main_topic="x", perspectives=(Perspective(title="only"),))


def test_averages_round_half_up() -> None:
    store = ScorecardStore(_model([[2, 2, 2, 2, 2, 2, 2, 3], [1], [1], [1]]))
    average = store.compute_averages()[0]
    assert average.average == 2.13
    assert average.display == "2.13"


def test_overall_average_rounds_half_up() -> None:
    averages = [PerspectiveAverage("a", 2.0), PerspectiveAverage("b", 2.25)]
    assert overall_average(averages) == 2.13
