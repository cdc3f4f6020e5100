"""Global pytest configuration.

Restores the package log level after every test so CLI tests that pass
``--verbose`` or ``--quiet`` do not leak their level into later tests.
"""

from __future__ import annotations

import logging

import pytest

from polypath.logging import set_global_log_level


@pytest.fixture(autouse=True)
def _restore_log_level():
    yield
    set_global_log_level(logging.INFO)
