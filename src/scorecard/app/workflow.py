from __future__ import annotations

from typing import Any, Mapping

from scorecard.app.config import ScorecardSettings
from scorecard.core.session import ActionResult, ScorecardSession


def session_from_settings(settings: ScorecardSettings) -> ScorecardSession:
    return ScorecardSession.create(
        scale=settings.rating_scale,
        rating_policy=settings.rating_policy,
        main_topic=settings.main_topic,
        titles=settings.perspective_titles,
        edit_mode=settings.edit_mode,
    )


def apply_payload(session: ScorecardSession, payload: Mapping[str, Any]) -> list[ActionResult]:
    """Replay a scorecard description through the session's public actions.

    Returns the rejected actions; accepted ones have already updated the model.
    """
    results: list[ActionResult] = []
    if "main_topic" in payload:
        results.append(session.set_main_topic(str(payload["main_topic"])))
    perspectives = payload.get("perspectives") or []
    if not isinstance(perspectives, list):
        raise ValueError("perspectives must be a list")
    for index, entry in enumerate(perspectives):
        if not isinstance(entry, Mapping):
            raise ValueError(f"perspectives[{index}] must be an object")
        if "title" in entry:
            results.append(session.set_perspective_title(index, str(entry["title"])))
        for position, criterion in enumerate(entry.get("criteria") or []):
            if not isinstance(criterion, Mapping):
                raise ValueError(f"perspectives[{index}].criteria[{position}] must be an object")
            if position > 0:
                results.append(session.add_criterion(index))
            if "name" in criterion:
                results.append(
                    session.set_criterion_field(index, position, "name", criterion["name"])
                )
            if "rating" in criterion:
                results.append(
                    session.set_criterion_field(index, position, "rating", criterion["rating"])
                )
    return [result for result in results if not result.ok]


def summary_payload(
    session: ScorecardSession, rejected: list[ActionResult] | None = None
) -> dict[str, Any]:
    return {
        "main_topic": session.model.main_topic,
        "scale": session.store.scale.as_dict(),
        "averages": [item.to_dict() for item in session.averages()],
        "overall_average": session.overall_average(),
        "rejected": [
            {"action": item.action, "error_type": item.error_type, "error": item.error}
            for item in (rejected or [])
        ],
    }
