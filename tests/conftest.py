"""Shared pytest fixtures for the Caravan Weigh test suite.

Provides deterministic id generation, a controllable clock and a fresh
controller wired to both, so every state transition can be tested without
Streamlit.
"""

import pytest

from src.core.config import Settings
from tests.fakes import FakeClock, SequentialIdProvider

TODAY = "2026-10-19"


@pytest.fixture
def id_provider():
    """Deterministic id provider (``id-1``, ``id-2``…)."""
    return SequentialIdProvider()


@pytest.fixture
def clock():
    """Fake clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def settings():
    """Settings with defaults only (no .env lookup)."""
    return Settings(_env_file=None)


@pytest.fixture
def controller(id_provider, clock, settings):
    """Fresh controller over the seed rows with deterministic dependencies.

    Returns:
        WeighbridgeController: Seed rows loaded, today fixed to ``TODAY``.
    """
    from src.services.controller import WeighbridgeController
    from src.services.notifications import NotificationCenter

    return WeighbridgeController(
        id_provider=id_provider,
        notifications=NotificationCenter(clock=clock),
        settings=settings,
        today=lambda: TODAY,
    )
