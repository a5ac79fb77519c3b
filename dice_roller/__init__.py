"""Dice notation parsing and rolling for embedding in chat and game hosts.

    from dice_roller import roll

    result = roll("2d6+3")
    if result.success:
        print(result.breakdown)  # e.g. "4 + 1 + 3 = 5 + 3 = 8"
    else:
        print(result.error)

Module-level functions share one lazily built DiceRoller. Build your own
DiceRoller to inject a random source or clock.
"""

from __future__ import annotations

from collections.abc import Iterable

from dice_roller.dice import parse_notation
from dice_roller.roller import DiceRoller, format_breakdown
from dice_roller.schemas import (
    ModifierSign,
    NotationError,
    RollFailure,
    RollRequest,
    RollResult,
    RollSuccess,
    SkillInfo,
)

__all__ = [
    "DiceRoller",
    "ModifierSign",
    "NotationError",
    "RollFailure",
    "RollRequest",
    "RollResult",
    "RollSuccess",
    "SkillInfo",
    "format_breakdown",
    "get_info",
    "parse_notation",
    "reset_default_roller",
    "roll",
    "roll_d20",
    "roll_d100",
    "roll_dice",
    "roll_multiple",
]

_default_roller: DiceRoller | None = None


def _roller() -> DiceRoller:
    global _default_roller
    if _default_roller is None:
        _default_roller = DiceRoller()
    return _default_roller


def reset_default_roller() -> None:
    """Drop the shared roller so the next call rebuilds it from current settings."""
    global _default_roller
    _default_roller = None


def roll(notation: str | None = None) -> RollResult:
    return _roller().roll(notation)


def roll_multiple(notations: Iterable[str]) -> list[RollResult]:
    return _roller().roll_multiple(notations)


def roll_dice(count: int = 1) -> RollResult:
    return _roller().roll_dice(count)


def roll_d20() -> RollResult:
    return _roller().roll_d20()


def roll_d100() -> RollResult:
    return _roller().roll_d100()


def get_info() -> SkillInfo:
    return _roller().info()
