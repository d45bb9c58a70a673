"""
Pytest fixtures for the villager generator test suite.

Provides seeded dice, the bundled reference tables, and small fixture
tables written to a temporary directory.
"""

import random

import pytest

from tests.helpers import write_fixture_tables
from villagers.dice import DiceRoller
from villagers.generator import VillagerGenerator
from villagers.table_loader import ReferenceTables


# =============================================================================
# DICE FIXTURES
# =============================================================================


@pytest.fixture
def seeded_dice():
    """Provide a seeded DiceRoller for reproducible tests."""
    return DiceRoller(random.Random(42))


@pytest.fixture
def clean_dice():
    """Provide an unseeded DiceRoller."""
    return DiceRoller()


# =============================================================================
# TABLE FIXTURES
# =============================================================================


@pytest.fixture(scope="session")
def bundled_tables():
    """The reference tables shipped with the package."""
    return ReferenceTables.load()


@pytest.fixture
def fixture_dir(tmp_path):
    """Directory holding the small fixture tables."""
    return write_fixture_tables(tmp_path)


@pytest.fixture
def fixture_tables(fixture_dir):
    """Fixture tables loaded through the normal loader."""
    return ReferenceTables.load(fixture_dir)


@pytest.fixture
def generator(bundled_tables, seeded_dice):
    """A seeded generator over the bundled tables."""
    return VillagerGenerator(bundled_tables, seeded_dice)
