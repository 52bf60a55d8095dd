"""Command-line interface for scoring recorded exercise attempts.

Usage:
    trace-score list
    trace-score score letter A drawing.json
    trace-score score shape circle drawing.json --config tuning.json
    trace-score dots house taps.json --log-level DEBUG

Drawing files hold a JSON list of strokes (or {"strokes": [...]}), each
stroke a list of [x, y] pairs or {"x": .., "y": ..} objects. Tap files hold
a JSON list of {"x": .., "y": .., "t": ms} objects, t measured from the
start of the attempt.

Or run via the module:
    python -m trace_lib.cli score number 3 drawing.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .api.services import ExerciseService
from .config import DEFAULT_CONFIG, ScoringConfig
from .domain.results import ScoreResult
from .log_config import configure_logging
from .scoring.dots import DotSequenceSession, TapOutcome

logger = logging.getLogger(__name__)


class _ReplayClock:
    """Clock that reports the timestamp of the tap being replayed."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='trace-score',
        description='Score recorded tracing and connect-the-dots attempts'
    )
    parser.add_argument('--log-level', default='WARNING',
                        help='Log level (DEBUG, INFO, WARNING, ERROR)')
    parser.add_argument('--log-file', default=None,
                        help='Also write logs to this file')
    parser.add_argument('--config', type=Path, default=None,
                        help='JSON file overriding scoring constants')
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('list', help='List built-in exercises')

    score = sub.add_parser('score', help='Score a drawing against a guide')
    score.add_argument('kind', choices=['letter', 'number', 'shape'])
    score.add_argument('label', help="Guide label, e.g. 'A', '7' or 'circle'")
    score.add_argument('drawing', type=Path, help='JSON drawing file')

    dots = sub.add_parser('dots', help='Replay taps on a dot pattern')
    dots.add_argument('pattern', help="Dot pattern name, e.g. 'house'")
    dots.add_argument('taps', type=Path, help='JSON tap file')
    return parser


def load_drawing(path: Path) -> list[Any]:
    """Read strokes from a JSON drawing file."""
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get('strokes', [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of strokes")
    return data


def load_taps(path: Path) -> list[dict]:
    """Read timed taps from a JSON tap file."""
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, list) or not all(isinstance(tap, dict) for tap in data):
        raise ValueError(f"{path}: expected a list of tap objects")
    return data


def replay_taps(session: DotSequenceSession, clock: _ReplayClock,
                taps: list[dict]) -> ScoreResult | None:
    """Feed timed taps into a session until it completes."""
    for tap in taps:
        clock.now = float(tap.get('t', 0.0)) / 1000.0
        if session.tap(float(tap['x']), float(tap['y'])) is TapOutcome.COMPLETED:
            break
    return session.result


def _run(args: argparse.Namespace) -> dict:
    config = ScoringConfig.from_json(args.config) if args.config else DEFAULT_CONFIG

    if args.command == 'list':
        return ExerciseService(config=config).catalog()

    if args.command == 'score':
        service = ExerciseService(config=config)
        breakdown = service.score_drawing(args.kind, args.label, load_drawing(args.drawing))
        return ScoreResult(score=breakdown.score, duration=0, breakdown=breakdown).to_dict()

    clock = _ReplayClock()
    service = ExerciseService(config=config, clock=clock)
    session = service.start_dots(args.pattern)
    result = replay_taps(session, clock, load_taps(args.taps))
    if result is None:
        return {
            'complete': False,
            'connected': len(session.connected),
            'wrong_taps': session.wrong_taps,
        }
    return {'complete': True, 'wrong_taps': session.wrong_taps, **result.to_dict()}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Process exit status: 0 on success, 1 on bad input, 2 on I/O errors.
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, log_file=args.log_file)

    try:
        output = _run(args)
    except (ValueError, KeyError, TypeError) as e:
        logger.error("Invalid input: %s", e)
        return 1
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return 2

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
