from __future__ import annotations

import logging

from skilldash.logging_setup import configure_logging


def test_configure_logging_sets_root_level_and_keeps_single_handler() -> None:
    root = logging.getLogger()
    previous_level = root.level
    try:
        configure_logging("DEBUG")
        handler_count = len(root.handlers)
        configure_logging("WARNING")
        assert root.level == logging.WARNING
        assert len(root.handlers) == handler_count
    finally:
        root.setLevel(previous_level)
