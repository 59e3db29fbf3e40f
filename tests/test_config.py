from __future__ import annotations

from pathlib import Path

import pytest

from scorecard.app.config import ScorecardSettings, apply_overrides, load_settings
from scorecard.core.scale import PERCENTAGE


def test_defaults_without_config_file(tmp_path: Path) -> None:
    settings = load_settings(config_path=tmp_path / "missing.yaml", environ={})
    assert settings == ScorecardSettings()
    assert settings.rating_scale.default == 3


def test_yaml_env_and_overrides_layer_in_order(tmp_path: Path) -> None:
    config = tmp_path / "scorecard.yaml"
    config.write_text(
        "# comment\n"
        "scale: percentage\n"
        "main_topic: 'Strategie des Unternehmens'\n"
        "perspective_titles: Finance, Customer, Processes, Learning\n"
        "edit_mode: false\n",
        encoding="utf-8",
    )
    settings = load_settings(
        {"log_level": "debug"},
        config_path=config,
        environ={"SCORECARD_RATING_POLICY": "clamp", "SCORECARD_EDIT_MODE": "yes", "OTHER": "1"},
    )
    assert settings.scale == "percentage"
    assert settings.rating_scale is PERCENTAGE
    assert settings.main_topic == "Strategie des Unternehmens"
    assert settings.perspective_titles == ("Finance", "Customer", "Processes", "Learning")
    assert settings.edit_mode is True
    assert settings.rating_policy == "clamp"
    assert settings.log_level == "DEBUG"


def test_environment_defaults_to_os_environ(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("SCORECARD_SCALE", "percentage")
    settings = load_settings(config_path=tmp_path / "missing.yaml")
    assert settings.scale == "percentage"


@pytest.mark.parametrize(
    "overrides",
    [
        {"scale": "stars"},
        {"rating_policy": "ignore"},
        {"log_level": "LOUD"},
        {"perspective_titles": "A, B, C"},
        {"colour": "blue"},
    ],
)
def test_invalid_overrides_are_rejected(overrides: dict) -> None:
    with pytest.raises(ValueError):
        apply_overrides(ScorecardSettings(), overrides)
