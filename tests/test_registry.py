"""Tests for the rule variant registry."""

import random

import pytest

from backgammon_rules.variants.bg_casual import BgCasualRule
from backgammon_rules.variants.registry import RuleRegistry, default_registry


class DummyRule(BgCasualRule):
    name = "dummy"
    title = "Dummy"
    country = "Nowhere"
    country_code = "xx"


def test_default_registry_has_casual():
    registry = default_registry()
    assert "bg_casual" in registry
    assert registry.names() == ["bg_casual"]
    assert registry.get("bg_casual") is BgCasualRule


def test_create_returns_fresh_instances():
    registry = default_registry()
    first = registry.create("bg_casual")
    second = registry.create("bg_casual")
    assert isinstance(first, BgCasualRule)
    assert first is not second


def test_create_passes_arguments():
    rng = random.Random(3)
    rule = default_registry().create("bg_casual", rng=rng)
    assert rule.rng is rng


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        default_registry().get("plakoto")


def test_registries_are_independent():
    """Registering into one registry does not leak into another."""
    one = default_registry()
    one.register(DummyRule)
    assert "dummy" in one
    assert "dummy" not in default_registry()


def test_unregister():
    registry = default_registry()
    assert registry.unregister("bg_casual") is True
    assert registry.unregister("bg_casual") is False
    assert len(registry) == 0


def test_register_requires_name():
    class Nameless(BgCasualRule):
        name = ""

    with pytest.raises(ValueError):
        RuleRegistry().register(Nameless)


def test_available_metadata():
    registry = default_registry()
    registry.register(DummyRule)
    listing = registry.available()
    assert [entry["name"] for entry in listing] == ["bg_casual", "dummy"]
    assert listing[0] == {
        "name": "bg_casual",
        "title": "General",
        "description": "Most popular variant of backgammon played in Bulgaria.",
        "country": "Bulgaria",
        "country_code": "bg",
    }
