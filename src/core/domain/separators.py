"""
Separators — Десятичный разделитель и группировка целой части

DecimalSeparatorSpec: символ(ы) radix point ("." в US, "," в Европе).
IntegerGroupingSpec: символ(ы) разделителя групп и схема группировки.

Схемы группировки (размеры групп справа налево, последний повторяется):
    THOUSANDS          [3]     1,000,000
    INDIA_NUMBERING    [3, 2]  6,78,90,00,00,00,00,000
    CHINESE_NUMBERING  [4]     12,3456,7890
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.core.domain.enums import IntegerGroupingType, parse_enum
from src.core.domain.rune_sequence import RuneSequence
from src.core.errors import (
    ErrorContext,
    InvalidArgumentError,
    ValidationFailureError,
    ensure_context,
)


GROUP_SIZES: Final[dict[IntegerGroupingType, tuple[int, ...]]] = {
    IntegerGroupingType.NONE: (),
    IntegerGroupingType.THOUSANDS: (3,),
    IntegerGroupingType.INDIA_NUMBERING: (3, 2),
    IntegerGroupingType.CHINESE_NUMBERING: (4,),
}


def _coerce_runes(v: Any) -> Any:
    if v is None or isinstance(v, str):
        return RuneSequence.from_text(v)
    return v


# =============================================================================
# DECIMAL SEPARATOR
# =============================================================================


class DecimalSeparatorSpec(BaseModel):
    """Десятичный разделитель. Пустой разделитель означает нулевое состояние."""

    separator: RuneSequence = Field(
        default_factory=RuneSequence, description="Символы десятичного разделителя"
    )

    model_config = {"frozen": True}

    @field_validator("separator", mode="before")
    @classmethod
    def coerce_separator(cls, v: Any) -> Any:
        return _coerce_runes(v)

    @classmethod
    def new(
        cls, decimal_chars: "str | RuneSequence", context: ErrorContext | None = None
    ) -> "DecimalSeparatorSpec":
        """
        Создание разделителя с проверкой.

        Raises:
            InvalidArgumentError: Пустой или тривиальный разделитель
        """
        ctx = ensure_context(context, "DecimalSeparatorSpec.new()")
        separator = RuneSequence.from_text(decimal_chars)
        if separator.is_empty():
            raise InvalidArgumentError("'decimal_chars' is empty", ctx)
        if not separator.is_non_trivial():
            raise InvalidArgumentError("'decimal_chars' contains only zero-value characters", ctx)
        return cls(separator=separator)

    @classmethod
    def empty(cls) -> "DecimalSeparatorSpec":
        return cls()

    @property
    def text(self) -> str:
        return self.separator.text

    def is_no_op(self) -> bool:
        return self.separator.is_empty()

    def deep_copy(self) -> "DecimalSeparatorSpec":
        return self.model_copy(deep=True)

    def equals(self, other: "DecimalSeparatorSpec | None") -> bool:
        return other is not None and self.separator.equals(other.separator)

    def validate_spec(self, context: ErrorContext | None = None) -> None:
        ctx = ensure_context(context, "DecimalSeparatorSpec.validate_spec()")
        if self.separator.is_empty():
            raise ValidationFailureError("decimal separator is empty", ctx)
        if not self.separator.is_non_trivial():
            raise ValidationFailureError(
                "decimal separator contains only zero-value characters", ctx
            )


# =============================================================================
# INTEGER GROUPING
# =============================================================================


class IntegerGroupingSpec(BaseModel):
    """
    Разделитель групп целой части.

    grouping_type = NONE отключает группировку независимо от separator.
    """

    separator: RuneSequence = Field(
        default_factory=RuneSequence, description="Символы разделителя групп"
    )
    grouping_type: IntegerGroupingType = Field(
        default=IntegerGroupingType.NONE, description="Схема группировки"
    )

    model_config = {"frozen": True}

    @field_validator("separator", mode="before")
    @classmethod
    def coerce_separator(cls, v: Any) -> Any:
        return _coerce_runes(v)

    @classmethod
    def new(
        cls,
        grouping_chars: "str | RuneSequence | None",
        grouping_type: "IntegerGroupingType | str",
        context: ErrorContext | None = None,
    ) -> "IntegerGroupingSpec":
        """
        Создание спецификации группировки с проверкой.

        Args:
            grouping_chars: Символы разделителя (обязательны, если схема не NONE)
            grouping_type: Схема группировки

        Raises:
            InvalidArgumentError: Неизвестная схема или пустой разделитель
                при включённой группировке
        """
        ctx = ensure_context(context, "IntegerGroupingSpec.new()")
        try:
            parsed = parse_enum(IntegerGroupingType, grouping_type)
        except ValueError as e:
            raise InvalidArgumentError(f"'grouping_type' is invalid: {e}", ctx) from e

        separator = RuneSequence.from_text(grouping_chars)
        if parsed == IntegerGroupingType.NONE:
            return cls.no_grouping()

        if separator.is_empty():
            raise InvalidArgumentError(
                f"'grouping_chars' is empty but grouping type is {parsed.value}", ctx
            )
        if not separator.is_non_trivial():
            raise InvalidArgumentError(
                "'grouping_chars' contains only zero-value characters", ctx
            )
        return cls(separator=separator, grouping_type=parsed)

    @classmethod
    def no_grouping(cls) -> "IntegerGroupingSpec":
        return cls()

    @classmethod
    def thousands(
        cls, grouping_chars: "str | RuneSequence", context: ErrorContext | None = None
    ) -> "IntegerGroupingSpec":
        return cls.new(grouping_chars, IntegerGroupingType.THOUSANDS, context)

    @property
    def text(self) -> str:
        return self.separator.text

    @property
    def group_sizes(self) -> tuple[int, ...]:
        return GROUP_SIZES[self.grouping_type]

    def is_no_op(self) -> bool:
        return self.grouping_type == IntegerGroupingType.NONE or self.separator.is_empty()

    def deep_copy(self) -> "IntegerGroupingSpec":
        return self.model_copy(deep=True)

    def equals(self, other: "IntegerGroupingSpec | None") -> bool:
        return (
            other is not None
            and self.separator.equals(other.separator)
            and self.grouping_type == other.grouping_type
        )

    def validate_spec(self, context: ErrorContext | None = None) -> None:
        ctx = ensure_context(context, "IntegerGroupingSpec.validate_spec()")
        if self.grouping_type == IntegerGroupingType.NONE:
            return
        if self.separator.is_empty():
            raise ValidationFailureError(
                f"grouping type is {self.grouping_type.value} but separator is empty", ctx
            )
        if not self.separator.is_non_trivial():
            raise ValidationFailureError(
                "grouping separator contains only zero-value characters", ctx
            )
