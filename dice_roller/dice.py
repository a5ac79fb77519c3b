"""Dice notation parser.

Supports standard notation: XdY, XdY+Z, XdY-Z, plus the shorthands dY (one die)
and a bare Y (one die of Y sides).
Examples: 2d6, 1d20, d20, 3d8-1, 2d6+3, 20.

Parsing never raises. Malformed or out-of-range notation comes back as a
NotationError value that the roller turns into a failed result.
"""

from __future__ import annotations

import re

from dice_roller.schemas import (
    MAX_DICE,
    MAX_MODIFIER,
    MAX_SIDES,
    MIN_DICE,
    MIN_MODIFIER,
    MIN_SIDES,
    ModifierSign,
    NotationError,
    RollRequest,
)

_NOTATION_RE = re.compile(
    r"(?:(?P<count>[0-9]*)d)?(?P<sides>[0-9]+)(?:(?P<sign>[+-])(?P<mod>[0-9]+))?",
    re.IGNORECASE,
)

# Digit runs and notations longer than these are echoed truncated in error messages.
_MAX_ECHO_DIGITS = 12
_MAX_ECHO_NOTATION = 40


def _bounded(digits: str, low: int, high: int) -> int | None:
    """Return digits as an int if it lies in [low, high], else None."""
    try:
        value = int(digits)
    except ValueError:
        # Longer than the interpreter's int conversion limit; out of range anyway.
        return None
    return value if low <= value <= high else None


def _echo(text: str, limit: int = _MAX_ECHO_DIGITS) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def _range_error(notation: str, label: str, low: int, high: int, digits: str) -> NotationError:
    return NotationError(
        notation=notation,
        message=(
            f"{label} must be between {low} and {high}, got {_echo(digits)} "
            f"in {_echo(notation, _MAX_ECHO_NOTATION)!r}"
        ),
    )


def parse_notation(notation: str) -> RollRequest | NotationError:
    """Parse dice notation into a RollRequest.

    Args:
        notation: Dice notation string, e.g. "2d6+3".

    Returns:
        The parsed request, or a NotationError describing the first problem found.
    """
    if not isinstance(notation, str):
        return NotationError(
            notation=str(notation),
            message=f"Dice notation must be a string, got {type(notation).__name__}",
        )

    m = _NOTATION_RE.fullmatch(notation)
    if not m:
        return NotationError(notation=notation, message=f"Invalid dice notation: {notation!r}")

    count_digits = m.group("count") or "1"
    count = _bounded(count_digits, MIN_DICE, MAX_DICE)
    if count is None:
        return _range_error(notation, "Die count", MIN_DICE, MAX_DICE, count_digits)

    sides = _bounded(m.group("sides"), MIN_SIDES, MAX_SIDES)
    if sides is None:
        return _range_error(notation, "Die sides", MIN_SIDES, MAX_SIDES, m.group("sides"))

    if m.group("mod") is None:
        return RollRequest(count=count, sides=sides)

    modifier = _bounded(m.group("mod"), MIN_MODIFIER, MAX_MODIFIER)
    if modifier is None:
        return _range_error(notation, "Modifier", MIN_MODIFIER, MAX_MODIFIER, m.group("mod"))

    return RollRequest(
        count=count,
        sides=sides,
        modifier_value=modifier,
        modifier_sign=ModifierSign(m.group("sign")),
    )
