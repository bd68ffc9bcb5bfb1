"""
Shared pytest fixtures for the circulation desk tests.

Every system built here uses explicit ``Settings`` and a fixed clock so
results never depend on the environment or the wall clock.
"""

from datetime import date
from decimal import Decimal

import pytest

from libranet import LibrarySystem, Settings, seed_demo_data

TODAY = date(2024, 3, 1)


@pytest.fixture
def settings():
    return Settings(fine_per_day=Decimal("10"), currency="Rs.", log_level="INFO")


@pytest.fixture
def system(settings):
    return LibrarySystem(settings=settings, clock=lambda: TODAY)


@pytest.fixture
def seeded(system):
    seed_demo_data(system)
    return system


@pytest.fixture
def aisha(seeded):
    return seeded.get_user(1)


@pytest.fixture
def vikram(seeded):
    return seeded.get_user(2)
