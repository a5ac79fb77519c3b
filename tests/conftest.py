"""Shared test fixtures for the dice_roller test suite.

scripted_rng
    Factory for ScriptedRandom, a random.Random whose randint returns the
    given values in order and records the (a, b) bounds it was called with.

scripted_roller
    Factory building a DiceRoller whose dice come out in a given order and
    whose clock is frozen at FIXED_NOW. Use it whenever a test asserts exact
    roll values or breakdown text.

fresh_default_roller (autouse)
    Points dice_roller.config.settings at environment-free defaults and resets
    the shared roller, so module-level calls see the stock configuration.

seeded_roller
    A DiceRoller over random.Random(1234) for range/property tests that only
    need reproducibility, not specific values.
"""

from __future__ import annotations

import os
import random
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

import pytest

import dice_roller
from dice_roller import DiceRoller
from dice_roller.config import Settings

FIXED_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class ScriptedRandom(random.Random):
    """random.Random whose randint returns pre-set values in order."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__()
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self.values:
            raise AssertionError(f"ScriptedRandom ran out of values (randint({a}, {b}))")
        return self.values.pop(0)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    def _make(*values: int) -> ScriptedRandom:
        return ScriptedRandom(values)

    return _make


@pytest.fixture
def scripted_roller() -> Callable[..., DiceRoller]:
    def _make(*values: int) -> DiceRoller:
        return DiceRoller(rng=ScriptedRandom(values), clock=lambda: FIXED_NOW)

    return _make


@pytest.fixture
def seeded_roller() -> DiceRoller:
    return DiceRoller(rng=random.Random(1234), clock=lambda: FIXED_NOW)


@pytest.fixture(autouse=True)
def fresh_default_roller(monkeypatch):
    """Rebuild the module-level roller per test from default settings.

    Ambient DICE_ROLLER_* variables and any .env file are ignored.
    """
    for key in list(os.environ):
        if key.startswith("DICE_ROLLER_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(dice_roller.config, "settings", Settings(_env_file=None))
    dice_roller.reset_default_roller()
    yield
    dice_roller.reset_default_roller()
