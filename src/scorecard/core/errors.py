from __future__ import annotations

from typing import Any


class ScorecardError(ValueError):
    """Base class for rejected scorecard operations."""


class IndexOutOfRange(ScorecardError):
    """Raised when an operation addresses a perspective or criterion that does not exist."""

    def __init__(self, kind: str, index: int, size: int) -> None:
        super().__init__(f"{kind} index {index} out of range [0, {size})")
        self.kind = kind
        self.index = index
        self.size = size


class InvalidRating(ScorecardError):
    """Raised when a rating is not a finite number inside the scale bounds."""

    def __init__(self, value: Any, reason: str) -> None:
        super().__init__(f"Invalid rating {value!r}: {reason}")
        self.value = value
        self.reason = reason


class InvalidTransition(ScorecardError):
    """Raised when a navigation action is not allowed from the current view."""

    def __init__(self, view: str, action: str) -> None:
        super().__init__(f"Cannot {action} from {view} view")
        self.view = view
        self.action = action


__all__ = ["IndexOutOfRange", "InvalidRating", "InvalidTransition", "ScorecardError"]
