"""Scorecard module entrypoint."""

from __future__ import annotations

import argparse
import json
import os
import subprocess
import sys
from pathlib import Path
from typing import Any, Sequence

from scorecard.app.config import load_settings
from scorecard.app.workflow import (
    apply_payload,
    session_from_settings,
    summary_payload,
)
from scorecard.observability import configure_logging, get_logger

logger = get_logger("scorecard")


def _load_json_value(value: str) -> Any:
    path = Path(value)
    if path.exists():
        return json.loads(path.read_text(encoding="utf-8"))
    return json.loads(value)


def _settings(args: argparse.Namespace, payload: dict[str, Any] | None = None):
    overrides: dict[str, Any] = {
        key: payload[key] for key in ("scale", "rating_policy") if payload and key in payload
    }
    if args.scale:
        overrides["scale"] = args.scale
    if args.rating_policy:
        overrides["rating_policy"] = args.rating_policy
    config_path = Path(args.config) if args.config else None
    return load_settings(overrides, config_path=config_path)


def _run_averages(args: argparse.Namespace) -> None:
    payload = _load_json_value(args.params)
    if not isinstance(payload, dict):
        raise ValueError("--params must describe a JSON object.")
    settings = _settings(args, payload)
    configure_logging(settings.log_level)
    session = session_from_settings(settings)
    rejected = apply_payload(session, payload)
    if rejected:
        logger.warning(
            f"{len(rejected)} action(s) rejected",
            extra={"extra_data": {"event": "rejected", "count": len(rejected)}},
        )
    print(json.dumps(summary_payload(session, rejected), indent=2))


def _app_path() -> Path:
    return Path(__file__).resolve().parents[2] / "ui" / "streamlit_app.py"


def _run_ui(args: argparse.Namespace) -> None:
    app_path = _app_path()
    if not app_path.exists():
        raise FileNotFoundError(f"Streamlit app not found: {app_path}")
    env = os.environ.copy()
    if args.scale:
        env["SCORECARD_SCALE"] = args.scale
    if args.rating_policy:
        env["SCORECARD_RATING_POLICY"] = args.rating_policy
    command = [sys.executable, "-m", "streamlit", "run", str(app_path)]
    if args.port:
        command += ["--server.port", str(args.port)]
    raise SystemExit(subprocess.call(command, env=env))


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--scale",
        choices=["ordinal", "percentage"],
        default=None,
        help="Rating scale (defaults to the configured one).",
    )
    parser.add_argument(
        "--rating-policy",
        choices=["reject", "clamp"],
        default=None,
        help="How out-of-range ratings are handled.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a scorecard.yaml (defaults to config/scorecard.yaml).",
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="scorecard")
    subparsers = parser.add_subparsers(dest="command", required=True)

    averages_parser = subparsers.add_parser(
        "averages", help="Compute perspective averages for a scorecard."
    )
    averages_parser.add_argument("--params", required=True, help="JSON string or path.")
    _add_common(averages_parser)
    averages_parser.set_defaults(handler=_run_averages)

    ui_parser = subparsers.add_parser("ui", help="Launch the Streamlit app.")
    ui_parser.add_argument("--port", type=int, default=None, help="Server port.")
    _add_common(ui_parser)
    ui_parser.set_defaults(handler=_run_ui)

    args = parser.parse_args(argv)
    args.handler(args)


if __name__ == "__main__":
    main()
