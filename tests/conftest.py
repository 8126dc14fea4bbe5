"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from recordcopy import PropertyCopier, get_registry


@dataclass
class FixturePerson:
    name: str | None = None
    age: int | None = None


@dataclass
class FixturePersonRow:
    name: str | None = None
    age: int | None = None
    notes: str | None = None


@pytest.fixture
def clean_registry():
    """Empty the global shape cache around a test."""
    get_registry().clear()
    yield
    get_registry().clear()


@pytest.fixture
def person_cls():
    return FixturePerson


@pytest.fixture
def row_cls():
    return FixturePersonRow


@pytest.fixture
def copier():
    """Copier from FixturePerson to FixturePersonRow."""
    return PropertyCopier(FixturePerson, FixturePersonRow)
