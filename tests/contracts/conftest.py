"""
Pytest configuration for contract tests.

Labels: all tests in tests/contracts/ are marked "contract". Contract tests must
not sleep; time only moves through SteppedScheduler.advance().
"""

from __future__ import annotations

import pytest


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "tests/contracts" in str(item.path).replace("\\", "/"):
            item.add_marker(pytest.mark.contract)
