"""Command line entry point: ``python -m tabletop_rules``.

Runs the diagnostic smoke sequence against the configured (or given)
rule system and prints the result.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from tabletop_rules.core.config import get_settings
from tabletop_rules.core.exceptions import ConfigurationError, RulesEngineError
from tabletop_rules.core.logging import configure_logging, get_logger
from tabletop_rules.engine.factory import available_systems
from tabletop_rules.smoke import run_smoke


logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabletop_rules",
        description="Exercise the rules engine once and print the results.",
    )
    parser.add_argument(
        "--system",
        help=f"rule system key ({', '.join(available_systems())}); defaults to configuration",
    )
    parser.add_argument("--seed", type=int, help="session seed; defaults to configuration")
    parser.add_argument("--json", action="store_true", help="print the report as JSON")
    parser.add_argument(
        "--log-file",
        type=Path,
        help="also write log lines to this file; defaults to configuration",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the smoke sequence and return a process exit code."""
    args = build_parser().parse_args(argv)

    # Logging is configured from settings, so a settings failure is reported
    # on stderr directly.
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    configure_logging(
        level=settings.effective_log_level,
        json_format=settings.log_json,
        log_file=args.log_file or settings.log_file,
    )

    try:
        system = args.system or settings.engine.system
        seed = settings.engine.default_seed if args.seed is None else args.seed
        report = run_smoke(system, seed)
    except RulesEngineError as exc:
        logger.error("Smoke run failed", error=exc.message, **exc.details)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        check = report["check"]
        print(f"system: {report['system']}  seed: {report['seed']}")
        print(
            f"check:  roll={check['roll']} total={check['total']} "
            f"margin={check['margin']} success={check['success']}"
        )
        print(f"damage: {report['damage']}")
        for entry in report["order"]:
            print(f"turn {entry['rank']}: {entry['actor_id']} (initiative {entry['initiative']})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
