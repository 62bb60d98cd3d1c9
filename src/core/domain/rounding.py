"""
RoundingSpec — Округление значения перед форматированием

Режимы округления (по количеству дробных цифр):
    NO_ROUNDING             значение не изменяется
    HALF_UP_WITH_NEG_NUMS   половина к +inf     ( 2.5 ->  3, -2.5 -> -2)
    HALF_DOWN_WITH_NEG_NUMS половина к -inf     ( 2.5 ->  2, -2.5 -> -3)
    HALF_AWAY_FROM_ZERO     половина от нуля    ( 2.5 ->  3, -2.5 -> -3)
    HALF_TOWARDS_ZERO       половина к нулю     ( 2.5 ->  2, -2.5 -> -2)
    HALF_TO_EVEN            банковское          ( 2.5 ->  2,  3.5 ->  4)
    HALF_TO_ODD                                 ( 2.5 ->  3,  3.5 ->  3)
    FLOOR                   к -inf
    CEILING                 к +inf
    TRUNCATE                отбрасывание дробной части
"""

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Decimal,
    localcontext,
)
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


class RoundingType(str, Enum):
    """Режим округления"""

    NO_ROUNDING = "NoRounding"
    HALF_UP_WITH_NEG_NUMS = "HalfUpWithNegNums"
    HALF_DOWN_WITH_NEG_NUMS = "HalfDownWithNegNums"
    HALF_AWAY_FROM_ZERO = "HalfAwayFromZero"
    HALF_TOWARDS_ZERO = "HalfTowardsZero"
    HALF_TO_EVEN = "HalfToEven"
    HALF_TO_ODD = "HalfToOdd"
    FLOOR = "Floor"
    CEILING = "Ceiling"
    TRUNCATE = "Truncate"


MAX_FRACTIONAL_DIGITS: Final[int] = 1_000

# Режимы, которые decimal поддерживает напрямую
_DECIMAL_MODES: Final[dict[RoundingType, str]] = {
    RoundingType.HALF_AWAY_FROM_ZERO: ROUND_HALF_UP,
    RoundingType.HALF_TOWARDS_ZERO: ROUND_HALF_DOWN,
    RoundingType.HALF_TO_EVEN: ROUND_HALF_EVEN,
    RoundingType.FLOOR: ROUND_FLOOR,
    RoundingType.CEILING: ROUND_CEILING,
    RoundingType.TRUNCATE: ROUND_DOWN,
}


class RoundingSpec(BaseModel):
    """Спецификация округления. Immutable (frozen=True)."""

    rounding_type: RoundingType = Field(
        default=RoundingType.NO_ROUNDING, description="Режим округления"
    )
    fractional_digits: int = Field(
        default=0, ge=0, le=MAX_FRACTIONAL_DIGITS, description="Число дробных цифр после округления"
    )

    model_config = {"frozen": True}

    @classmethod
    def no_rounding(cls) -> "RoundingSpec":
        return cls()

    def is_no_op(self) -> bool:
        return self.rounding_type == RoundingType.NO_ROUNDING

    def apply(self, value: Decimal) -> Decimal:
        """
        Округление значения.

        Args:
            value: Конечное десятичное значение

        Returns:
            Округлённое значение с fractional_digits знаками после точки
            (или исходное значение при NO_ROUNDING)
        """
        if self.is_no_op():
            return value

        with localcontext() as ctx:
            ctx.prec = max(
                ctx.prec,
                len(value.as_tuple().digits) + 2,
                value.adjusted() + self.fractional_digits + 2,
            )
            return self._quantize(value)

    def _quantize(self, value: Decimal) -> Decimal:
        quantum = Decimal(1).scaleb(-self.fractional_digits)

        mode = _DECIMAL_MODES.get(self.rounding_type)
        if mode is not None:
            return value.quantize(quantum, rounding=mode)

        if self.rounding_type == RoundingType.HALF_UP_WITH_NEG_NUMS:
            return value.quantize(quantum, rounding=ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN)

        if self.rounding_type == RoundingType.HALF_DOWN_WITH_NEG_NUMS:
            return value.quantize(quantum, rounding=ROUND_HALF_DOWN if value >= 0 else ROUND_HALF_UP)

        # HALF_TO_ODD: на границе выбираем соседа с нечётной последней цифрой
        truncated = value.quantize(quantum, rounding=ROUND_DOWN)
        remainder = abs(value - truncated)
        if remainder * 2 != quantum:
            return value.quantize(quantum, rounding=ROUND_HALF_UP)
        last_digit = int(truncated.scaleb(self.fractional_digits)) % 10
        if last_digit % 2 == 1:
            return truncated
        step = quantum if value >= 0 else -quantum
        return truncated + step

    def deep_copy(self) -> "RoundingSpec":
        return self.model_copy(deep=True)

    def equals(self, other: "RoundingSpec | None") -> bool:
        return (
            other is not None
            and self.rounding_type == other.rounding_type
            and self.fractional_digits == other.fractional_digits
        )
