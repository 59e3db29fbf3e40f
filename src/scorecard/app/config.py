from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Literal, Mapping

from scorecard.core.model import (
    DEFAULT_MAIN_TOPIC,
    DEFAULT_PERSPECTIVE_TITLES,
    PERSPECTIVE_COUNT,
)
from scorecard.core.scale import RatingScale, scale_for

ScaleLiteral = Literal["ordinal", "percentage"]
RatingPolicyLiteral = Literal["reject", "clamp"]

ENV_PREFIX = "SCORECARD_"

_ALLOWED_SCALES = {"ordinal", "percentage"}
_ALLOWED_POLICIES = {"reject", "clamp"}
_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_BOOL_FIELDS = {"edit_mode"}


@dataclass(frozen=True)
class ScorecardSettings:
    scale: ScaleLiteral = "ordinal"
    rating_policy: RatingPolicyLiteral = "reject"
    main_topic: str = DEFAULT_MAIN_TOPIC
    perspective_titles: tuple[str, ...] = DEFAULT_PERSPECTIVE_TITLES
    edit_mode: bool = True
    log_level: str = "INFO"

    @property
    def rating_scale(self) -> RatingScale:
        return scale_for(self.scale)

    def as_dict(self) -> dict[str, Any]:
        return {
            "scale": self.scale,
            "rating_policy": self.rating_policy,
            "main_topic": self.main_topic,
            "perspective_titles": list(self.perspective_titles),
            "edit_mode": self.edit_mode,
            "log_level": self.log_level,
        }


def _find_repo_root(start: Path) -> Path:
    current = start.resolve()
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return start.resolve()


def _default_config_path() -> Path:
    root = _find_repo_root(Path(__file__).resolve())
    return root / "config" / "scorecard.yaml"


def _parse_scalar(value: str) -> Any:
    cleaned = value.strip().strip("'\"")
    lowered = cleaned.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    return cleaned


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    values: dict[str, Any] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if ":" not in stripped:
            continue
        key, raw_value = stripped.split(":", 1)
        values[key.strip()] = _parse_scalar(raw_value)
    return values


def _load_env(environ: Mapping[str, str]) -> dict[str, Any]:
    valid_keys = set(ScorecardSettings().as_dict().keys())
    values: dict[str, Any] = {}
    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        key = name[len(ENV_PREFIX):].lower()
        if key in valid_keys:
            values[key] = raw
    return values


def _parse_titles(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        titles = [item.strip() for item in value.split(",")]
    elif isinstance(value, (list, tuple)):
        titles = [str(item).strip() for item in value]
    else:
        raise ValueError(f"Invalid perspective_titles: {value!r}")
    if len(titles) != PERSPECTIVE_COUNT:
        raise ValueError(
            f"perspective_titles needs exactly {PERSPECTIVE_COUNT} entries, got {len(titles)}"
        )
    return tuple(titles)


def _apply_overrides(
    settings: ScorecardSettings, values: Mapping[str, Any]
) -> ScorecardSettings:
    if not values:
        return settings
    valid_keys = set(settings.as_dict().keys())
    unknown = [key for key in values.keys() if key not in valid_keys]
    if unknown:
        raise ValueError(f"Unknown settings keys: {', '.join(sorted(unknown))}")
    updated: dict[str, Any] = {}
    for key, value in values.items():
        if key in _BOOL_FIELDS:
            if isinstance(value, str):
                updated[key] = value.strip().lower() in {"1", "true", "yes", "on"}
            else:
                updated[key] = bool(value)
            continue
        if key == "scale":
            scale = str(value).strip().lower()
            if scale not in _ALLOWED_SCALES:
                raise ValueError(f"Unsupported scale: {scale}")
            updated[key] = scale
            continue
        if key == "rating_policy":
            policy = str(value).strip().lower()
            if policy not in _ALLOWED_POLICIES:
                raise ValueError(f"Unsupported rating_policy: {policy}")
            updated[key] = policy
            continue
        if key == "log_level":
            level = str(value).strip().upper()
            if level not in _ALLOWED_LOG_LEVELS:
                raise ValueError(f"Unsupported log_level: {level}")
            updated[key] = level
            continue
        if key == "perspective_titles":
            updated[key] = _parse_titles(value)
            continue
        updated[key] = str(value)
    return replace(settings, **updated)


def apply_overrides(
    settings: ScorecardSettings, values: Mapping[str, Any]
) -> ScorecardSettings:
    return _apply_overrides(settings, values)


def load_settings(
    overrides: Mapping[str, Any] | None = None,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ScorecardSettings:
    settings = ScorecardSettings()
    path = config_path or _default_config_path()
    settings = _apply_overrides(settings, _load_yaml(path))
    settings = _apply_overrides(settings, _load_env(os.environ if environ is None else environ))
    if overrides:
        settings = _apply_overrides(settings, overrides)
    return settings
