"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from maskcopy import IdentityRegistry, MaskEngine, MaskSettings


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return MaskSettings(
        private_prefix="_",
        validate_hook_signatures=True,
        warn_ignored_hooks=True,
        trace_hooks=False,
    )


@pytest.fixture
def engine(settings):
    """Fresh MaskEngine with default settings."""
    return MaskEngine(settings)


@pytest.fixture
def registry():
    """Empty per-call registry."""
    return IdentityRegistry()
