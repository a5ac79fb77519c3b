"""Pydantic value models for parsed notation and roll results.

Every model is frozen: results are built once by the roller and handed to the
caller. Range constraints on a parsed request live here, so a RollRequest that
breaks a bound cannot exist.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

MIN_DICE = 1
MAX_DICE = 100
MIN_SIDES = 2
MAX_SIDES = 1000
MIN_MODIFIER = 0
MAX_MODIFIER = 100


class ModifierSign(str, enum.Enum):
    plus = "+"
    minus = "-"

    @property
    def factor(self) -> int:
        return 1 if self is ModifierSign.plus else -1


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class RollRequest(_Frozen):
    count: int = Field(ge=MIN_DICE, le=MAX_DICE, description="Number of dice to roll.")
    sides: int = Field(ge=MIN_SIDES, le=MAX_SIDES, description="Faces on each die.")
    modifier_value: int | None = Field(
        default=None,
        ge=MIN_MODIFIER,
        le=MAX_MODIFIER,
        description="Magnitude of the flat modifier, or None when the notation has none.",
    )
    modifier_sign: ModifierSign | None = None

    @model_validator(mode="after")
    def _sign_matches_value(self) -> RollRequest:
        if (self.modifier_value is None) != (self.modifier_sign is None):
            raise ValueError("modifier_sign and modifier_value must be given together")
        return self

    @property
    def has_modifier(self) -> bool:
        return self.modifier_value is not None

    @property
    def signed_modifier(self) -> int:
        """Modifier as a signed integer; 0 when absent."""
        if self.modifier_value is None or self.modifier_sign is None:
            return 0
        return self.modifier_sign.factor * self.modifier_value


class NotationError(_Frozen):
    """Why a notation string could not be turned into a RollRequest."""

    notation: str
    message: str

    def __str__(self) -> str:
        return self.message


class RollSuccess(_Frozen):
    success: Literal[True] = True
    notation: str
    rolls: tuple[int, ...]
    total: int
    modifier: str | None = Field(
        default=None,
        description="Sign and magnitude, e.g. '+3'. None when the notation has no modifier.",
    )
    breakdown: str
    timestamp: datetime


class RollFailure(_Frozen):
    success: Literal[False] = False
    notation: str
    error: str
    timestamp: datetime


RollResult = RollSuccess | RollFailure


class SkillInfo(_Frozen):
    name: str
    version: str
    description: str
