"""Scorecard core: model, store, navigation and session."""

from .errors import IndexOutOfRange, InvalidRating, InvalidTransition, ScorecardError
from .model import Criterion, Perspective, ScorecardModel, initial_model
from .navigation import NavigationController, NavigationState
from .scale import ORDINAL, PERCENTAGE, RatingScale, scale_for
from .session import ActionResult, ScorecardSession
from .store import PerspectiveAverage, ScorecardStore, overall_average

__all__ = [
    "ActionResult",
    "Criterion",
    "IndexOutOfRange",
    "InvalidRating",
    "InvalidTransition",
    "NavigationController",
    "NavigationState",
    "ORDINAL",
    "PERCENTAGE",
    "Perspective",
    "PerspectiveAverage",
    "RatingScale",
    "ScorecardError",
    "ScorecardModel",
    "ScorecardSession",
    "ScorecardStore",
    "initial_model",
    "overall_average",
    "scale_for",
]
