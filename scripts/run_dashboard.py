#!/usr/bin/env python3
from __future__ import annotations

import argparse
import importlib.util
import logging
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from skilldash.config import get_settings
from skilldash.logging_setup import configure_logging

logger = logging.getLogger("run_dashboard")


def _smoke_import(app_path: Path) -> None:
    spec = importlib.util.spec_from_file_location("streamlit_app", app_path)
    if spec is None or spec.loader is None:
        raise RuntimeError(f"Unable to create import spec for {app_path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)


def main() -> int:
    parser = argparse.ArgumentParser(description="Run or smoke-check the SkillDash Streamlit app.")
    parser.add_argument(
        "--port",
        type=int,
        default=8501,
        help="Streamlit port.",
    )
    parser.add_argument(
        "--smoke",
        action="store_true",
        help="Only import the app module without starting a server.",
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    page_path = settings.root_dir / "apps" / "streamlit_app.py"

    if not page_path.exists():
        logger.error("Missing app file: %s", page_path)
        return 1

    _smoke_import(page_path)
    if args.smoke:
        logger.info("Smoke check successful.")
        return 0

    cmd = [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        str(page_path),
        "--server.headless=true",
        f"--server.port={args.port}",
    ]
    logger.info("Starting Streamlit on port %d", args.port)
    return subprocess.call(cmd, cwd=settings.root_dir)


if __name__ == "__main__":
    raise SystemExit(main())
