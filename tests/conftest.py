from pathlib import Path

import pytest

from models import Blueprint

EXAMPLE_FILE = Path(__file__).parent / "example_blueprints.txt"


@pytest.fixture
def blueprint_one():
    return Blueprint(
        ore=(4, 0, 0, 0),
        clay=(2, 0, 0, 0),
        obsidian=(3, 14, 0, 0),
        geode=(2, 0, 7, 0),
        id=1,
    )


@pytest.fixture
def blueprint_two():
    return Blueprint(
        ore=(2, 0, 0, 0),
        clay=(3, 0, 0, 0),
        obsidian=(3, 8, 0, 0),
        geode=(3, 0, 12, 0),
        id=2,
    )


@pytest.fixture
def example_file():
    return EXAMPLE_FILE
