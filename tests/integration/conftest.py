"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_CRADLE_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_CRADLE_NETWORK_TESTS") != "1",
    reason="Requires a live Cradle back-end. Set RUN_CRADLE_NETWORK_TESTS=1 to run",
)
