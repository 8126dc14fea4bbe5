"""Tests for CopierSettings and how engines consume them."""

from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from recordcopy import OverrideStatus, PropertyCopier, get_registry
from recordcopy.config import CopierSettings


@dataclass
class Person:
    name: str | None = None
    age: int | None = None


def test_defaults(monkeypatch):
    monkeypatch.delenv("RECORDCOPY_DEFAULT_POLICY", raising=False)
    monkeypatch.delenv("RECORDCOPY_CACHE_SHAPES", raising=False)

    settings = CopierSettings()

    assert settings.default_policy is OverrideStatus.OVERRIDE_ONLY_IF_TARGET_IS_NEW
    assert settings.cache_shapes is True


def test_policy_from_environment(monkeypatch):
    monkeypatch.setenv("RECORDCOPY_DEFAULT_POLICY", "override_all_target_values")
    monkeypatch.setenv("RECORDCOPY_CACHE_SHAPES", "false")

    settings = CopierSettings()

    assert settings.default_policy is OverrideStatus.OVERRIDE_ALL_TARGET_VALUES
    assert settings.cache_shapes is False


def test_policy_accepts_enum_member():
    settings = CopierSettings(
        default_policy=OverrideStatus.OVERRIDE_ONLY_IF_TARGET_PROPERTY_VALUE_IS_NULL
    )

    assert settings.default_policy is OverrideStatus.OVERRIDE_ONLY_IF_TARGET_PROPERTY_VALUE_IS_NULL


def test_unknown_policy_rejected():
    with pytest.raises(ValidationError, match="Unknown override policy"):
        CopierSettings(default_policy="OVERWRITE_EVERYTHING")


def test_engine_uses_configured_default_policy():
    settings = CopierSettings(default_policy="OVERRIDE_ONLY_IF_TARGET_PROPERTY_VALUE_IS_NULL")
    copier = PropertyCopier(Person, Person, settings=settings)
    target = Person(name="Bob")

    copier.copy_into(Person(name="Ann", age=30), target)

    assert target == Person(name="Bob", age=30)


def test_explicit_policy_beats_configured_default():
    settings = CopierSettings(default_policy="OVERRIDE_ALL_TARGET_VALUES")
    copier = PropertyCopier(Person, Person, settings=settings)
    target = Person(name="Bob")

    copier.copy_into(
        Person(name="Ann", age=30), target, OverrideStatus.OVERRIDE_ONLY_IF_TARGET_IS_NEW
    )

    assert target == Person(name="Bob")


def test_engine_without_shape_cache_leaves_registry_empty(clean_registry):
    copier = PropertyCopier(Person, Person, settings=CopierSettings(cache_shapes=False))

    copier.copy(Person(name="Ann"))

    assert not get_registry().is_registered(Person)
