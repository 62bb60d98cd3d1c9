"""
NumberFieldSpec — Ширина поля и выравнивание

field_width = -1 означает автоматическую ширину (по содержимому).
Допустимый диапазон: [-1, 1_000_000].

Justification проверяется только тогда, когда ширина поля больше длины
содержимого; в остальных случаях значение игнорируется.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.domain.enums import TextJustify, parse_enum
from src.core.errors import (
    ErrorContext,
    InvalidArgumentError,
    ValidationFailureError,
    ensure_context,
)


# =============================================================================
# CONSTANTS
# =============================================================================


AUTO_FIELD_WIDTH: Final[int] = -1
MIN_FIELD_WIDTH: Final[int] = -1
MAX_FIELD_WIDTH: Final[int] = 1_000_000


def check_field_width(width: int) -> str | None:
    """
    Проверка ширины поля.

    Returns:
        Текст ошибки или None, если ширина допустима
    """
    if isinstance(width, bool) or not isinstance(width, int):
        return f"field width must be an integer, got {type(width).__name__}"
    if width < MIN_FIELD_WIDTH:
        return f"field width {width} is less than minus one ({MIN_FIELD_WIDTH})"
    if width > MAX_FIELD_WIDTH:
        return f"field width {width} is greater than one-million ({MAX_FIELD_WIDTH})"
    return None


# =============================================================================
# NUMBER FIELD SPEC
# =============================================================================


class NumberFieldSpec(BaseModel):
    """
    Поле фиксированной ширины для числовой строки.

    Immutable модель (frozen=True).
    """

    field_width: int = Field(
        default=AUTO_FIELD_WIDTH, description="Ширина поля (-1 = по содержимому)"
    )
    justification: TextJustify = Field(
        default=TextJustify.RIGHT, description="Выравнивание внутри поля"
    )

    model_config = {"frozen": True}

    @field_validator("field_width")
    @classmethod
    def validate_field_width(cls, v: int) -> int:
        error = check_field_width(v)
        if error is not None:
            raise ValueError(error)
        return v

    @classmethod
    def new(
        cls,
        field_width: int,
        justification: "TextJustify | str" = TextJustify.RIGHT,
        context: ErrorContext | None = None,
    ) -> "NumberFieldSpec":
        """
        Создание спецификации поля с проверкой.

        Raises:
            InvalidArgumentError: Ширина вне [-1, 1_000_000] или неизвестное
                значение justification
        """
        ctx = ensure_context(context, "NumberFieldSpec.new()")
        error = check_field_width(field_width)
        if error is not None:
            raise InvalidArgumentError(error, ctx)
        try:
            parsed = parse_enum(TextJustify, justification)
        except ValueError as e:
            raise InvalidArgumentError(f"'justification' is invalid: {e}", ctx) from e
        return cls(field_width=field_width, justification=parsed)

    @classmethod
    def auto_size(cls) -> "NumberFieldSpec":
        return cls()

    def is_auto_size(self) -> bool:
        return self.field_width == AUTO_FIELD_WIDTH

    def needs_justification(self, content_length: int) -> bool:
        """Поле шире содержимого: justification будет применено."""
        return not self.is_auto_size() and self.field_width > content_length

    def deep_copy(self) -> "NumberFieldSpec":
        return self.model_copy(deep=True)

    def equals(self, other: "NumberFieldSpec | None") -> bool:
        return (
            other is not None
            and self.field_width == other.field_width
            and self.justification == other.justification
        )

    def validate_spec(self, context: ErrorContext | None = None) -> None:
        """Justification здесь не проверяется: оно нужно только при рендеринге."""
        ctx = ensure_context(context, "NumberFieldSpec.validate_spec()")
        error = check_field_width(self.field_width)
        if error is not None:
            raise ValidationFailureError(error, ctx)
