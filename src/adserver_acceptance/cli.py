"""
Command-line entry point.

Usage:
  adserver-acceptance --config config/scenarios.sample.json --scenario z1
"""

import argparse
from pathlib import Path
from typing import List, Optional

from adserver_acceptance.config import load_suite_config
from adserver_acceptance.errors import AcceptanceError
from adserver_acceptance.runner import run_suite
from adserver_acceptance.utils import configure_logging, get_logger

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adserver-acceptance",
        description="Check that an ad server's creative distribution converges to its targets.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Suite config (JSON or YAML). Defaults to $ADSERVER_ACCEPTANCE_CONFIG or config/scenarios.json.",
    )
    parser.add_argument(
        "--scenario",
        action="append",
        dest="scenarios",
        default=None,
        help="Scenario label to run; repeat for several. Runs all scenarios when omitted.",
    )
    parser.add_argument("--log-level", default=None, help="Log level (defaults to $LOG_LEVEL or INFO).")
    parser.add_argument("--json-logs", action="store_true", help="Emit structured JSON logs.")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, json_output=args.json_logs, log_file=args.log_file)

    try:
        suite, path = load_suite_config(args.config)
        logger.info(f"Loaded {len(suite.scenarios)} scenario(s) from {path}")
        results = run_suite(suite, args.scenarios)
    except AcceptanceError as exc:
        logger.error(f"Acceptance run failed: {exc}")
        return 1

    for result in results:
        print(f"{result.label}: converged after {result.requests} requests {result.snapshot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
