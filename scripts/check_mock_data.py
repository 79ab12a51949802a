#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from skilldash.checks import run_all_checks
from skilldash.config import ensure_artifact_directories, get_settings
from skilldash.logging_setup import configure_logging
from skilldash.mock_data import MOCK_FOCUS_AREAS, MOCK_STATS, NAV_ITEMS
from skilldash.reporting import write_json_report

logger = logging.getLogger("check_mock_data")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run consistency checks over the dashboard mock data.")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional report output path. Default: artifacts/reports/mock_data_report.json",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero if any check fails.",
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    ensure_artifact_directories(settings)

    report = run_all_checks(MOCK_STATS, MOCK_FOCUS_AREAS, NAV_ITEMS)
    output_path = settings.consistency_report_path if args.output is None else settings.root_dir / args.output
    write_json_report(report, output_path)

    print(json.dumps(report, indent=2))
    logger.info("Report written to: %s", output_path)

    if args.strict and report["status"] != "pass":
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
