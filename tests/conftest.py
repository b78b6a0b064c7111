"""Shared pytest fixtures."""

from pathlib import Path

import pytest

from src.family_tree.family import Family
from src.family_tree.models import Gender, Person

SEED_PATH = Path(__file__).parent.parent / "data" / "family.json"


@pytest.fixture
def seed_path():
    """Path to the bundled seed file."""
    return SEED_PATH


@pytest.fixture
def family(seed_path):
    """Family built from the bundled seed file."""
    return Family.from_seed(seed_path)


@pytest.fixture
def small_family():
    """Margaret with two children, one of them married."""
    return Family([
        Person(
            name="Margaret",
            gender=Gender.FEMALE,
            husband="Arthur",
            children=[
                Person(name="Jane", gender=Gender.FEMALE, mother="Margaret", spouse="Michael"),
                Person(name="Christopher", gender=Gender.MALE, mother="Margaret"),
            ],
        )
    ])
