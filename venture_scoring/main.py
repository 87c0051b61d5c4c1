"""Command-line entry point for one-off scoring runs.

Usage:
    python -m venture_scoring.main reliability metrics.json
    python -m venture_scoring.main risk opportunity.json
    python -m venture_scoring.main recommend request.json
    python -m venture_scoring.main generate-weights public/models --seed 7
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import load_settings
from .engine import ScoringEngine
from .lifecycle import write_synthetic_weights
from .models import ActivityMetrics, OpportunityFeatures

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="venture-scoring",
        description="Score entrepreneurs, assess opportunity risk and match investors.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    reliability = sub.add_parser("reliability", help="Score activity metrics from a JSON file")
    reliability.add_argument("file", type=Path)

    risk = sub.add_parser("risk", help="Assess an opportunity from a JSON file")
    risk.add_argument("file", type=Path)

    recommend = sub.add_parser(
        "recommend", help='Rank opportunities: {"investor": {...}, "opportunities": [...]}'
    )
    recommend.add_argument("file", type=Path)

    weights = sub.add_parser("generate-weights", help="Write synthetic network weight blobs")
    weights.add_argument("directory", type=Path)
    weights.add_argument("--seed", type=int, default=0)

    return parser


def run(args: argparse.Namespace) -> int:
    if args.command == "generate-weights":
        for name, path in write_synthetic_weights(args.directory, seed=args.seed).items():
            logger.info("Wrote %s weights to %s", name, path)
        return 0

    try:
        payload = json.loads(args.file.read_text(encoding="utf-8"))
        settings = load_settings()
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    logging.getLogger().setLevel(settings.log_level)

    try:
        with ScoringEngine.from_settings(settings) as engine:
            if args.command == "reliability":
                result = engine.score_entrepreneur(ActivityMetrics.model_validate(payload))
            elif args.command == "risk":
                result = engine.assess_opportunity(OpportunityFeatures.model_validate(payload))
            else:
                result = engine.recommend_with_report(
                    payload.get("investor"), payload.get("opportunities") or []
                )
    except (ValidationError, ValueError, AttributeError, FileNotFoundError) as exc:
        print(f"error: invalid input: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(result.model_dump_json(indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return run(build_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
