"""Mini README: Tests for the shared logging helpers.

Confirms environment labels map onto log levels and that reconfiguring the
root logger changes its level without stacking extra handlers.
"""

from __future__ import annotations

import logging

import pytest

from finledger.logging_utils import configure_root_logger, get_logger, level_for_environment


@pytest.mark.parametrize(
    ("environment", "expected"),
    [
        ("production", logging.WARNING),
        ("  Debug ", logging.DEBUG),
        ("development", logging.INFO),
        ("staging", logging.INFO),
    ],
)
def test_level_for_environment(environment: str, expected: int) -> None:
    assert level_for_environment(environment) == expected


def test_reconfiguring_adjusts_level_without_duplicate_handlers() -> None:
    root = logging.getLogger()
    previous_level = root.level
    get_logger(__name__)
    handler_count = len(root.handlers)
    try:
        configure_root_logger(logging.WARNING)
        assert root.level == logging.WARNING
        configure_root_logger(logging.DEBUG)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == handler_count
    finally:
        root.setLevel(previous_level)
