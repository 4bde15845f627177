"""Shared test fixtures for pulsar operator tests."""

import pytest
from rich.console import Console

from pulsar_operator.crds import GlobalSpec


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture
def empty_spec() -> GlobalSpec:
    """Return a spec with every field absent."""
    return GlobalSpec()
