"""Roll engine: turns notation into a RollSuccess or RollFailure.

The random source and the clock are injected so tests can script both. A
DiceRoller holds no per-roll state; the only thing shared between calls is its
random source.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timezone

from dice_roller import config
from dice_roller.config import Settings
from dice_roller.dice import parse_notation
from dice_roller.schemas import (
    NotationError,
    RollFailure,
    RollRequest,
    RollResult,
    RollSuccess,
    SkillInfo,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_breakdown(rolls: Sequence[int], request: RollRequest) -> str:
    """Render the derivation from individual rolls to the total.

    "4 + 2 + 3 = 6 + 3 = 9" with a modifier, "4 + 2 = 6" without. A modifier
    of zero is left out of the text even though the result still reports it.
    """
    subtotal = sum(rolls)
    text = " + ".join(str(r) for r in rolls)
    if request.modifier_value and request.modifier_sign is not None:
        sign = request.modifier_sign.value
        value = request.modifier_value
        total = subtotal + request.signed_modifier
        return f"{text} {sign} {value} = {subtotal} {sign} {value} = {total}"
    return f"{text} = {subtotal}"


class DiceRoller:
    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or config.settings
        self.rng = rng if rng is not None else random.Random(self.settings.seed)
        self.clock = clock or _utcnow

    def roll(self, notation: str | None = None) -> RollResult:
        """Roll the dice described by notation.

        Args:
            notation: Dice notation string, e.g. "2d6+3". Defaults to the
                configured default notation ("1d6").

        Returns:
            RollSuccess with rolls, total and breakdown, or RollFailure carrying
            the reason the notation was rejected.
        """
        if notation is None:
            notation = self.settings.default_notation

        parsed = parse_notation(notation)
        if isinstance(parsed, NotationError):
            logger.debug("Rejected dice notation %r: %s", notation, parsed.message)
            return RollFailure(
                notation=parsed.notation, error=parsed.message, timestamp=self.clock()
            )

        rolls = tuple(self.rng.randint(1, parsed.sides) for _ in range(parsed.count))
        total = sum(rolls) + parsed.signed_modifier
        modifier = (
            f"{parsed.modifier_sign.value}{parsed.modifier_value}"
            if parsed.modifier_sign is not None
            else None
        )
        logger.debug("Rolled %s: %s -> %d", notation, rolls, total)
        return RollSuccess(
            notation=notation,
            rolls=rolls,
            total=total,
            modifier=modifier,
            breakdown=format_breakdown(rolls, parsed),
            timestamp=self.clock(),
        )

    def roll_multiple(self, notations: Iterable[str]) -> list[RollResult]:
        """Roll each notation independently, preserving input order."""
        return [self.roll(notation) for notation in notations]

    def roll_dice(self, count: int = 1) -> RollResult:
        """Roll count six-sided dice."""
        return self.roll(f"{count}d6")

    def roll_d20(self) -> RollResult:
        return self.roll("1d20")

    def roll_d100(self) -> RollResult:
        return self.roll("1d100")

    def info(self) -> SkillInfo:
        return SkillInfo(
            name=self.settings.name,
            version=self.settings.version,
            description=self.settings.description,
        )
