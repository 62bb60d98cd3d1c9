"""
NumberSymbolGroup — Полная конфигурация символов одного формата

Три слота знака (positive, zero, negative) и слот символа валюты,
который применяется ко всем трём случаям. Каждый слот может быть no-op.

Символ валюты хранится отдельно от знака: порядок между ними определяет
currency_relative_position валюты, но только если placement валюты и
знака на этой стороне совпадает.
"""

from pydantic import BaseModel, Field

from src.core.domain.enums import (
    CurrencySignRelativePosition,
    NumberFieldPlacement,
    NumericSignValue,
)
from src.core.domain.rune_sequence import RuneSequence
from src.core.domain.symbol_spec import NumberSymbolSpec
from src.core.errors import (
    ErrorContext,
    InvalidArgumentError,
    ValidationFailureError,
    ensure_context,
)


# =============================================================================
# NUMBER SYMBOL GROUP
# =============================================================================


class NumberSymbolGroup(BaseModel):
    """
    Группа символов формата.

    Immutable модель (frozen=True). Замена слота создаёт новую группу
    (with_positive / with_zero / with_negative / with_currency).
    """

    positive_number_sign: NumberSymbolSpec = Field(
        default_factory=NumberSymbolSpec, description="Символы положительных значений"
    )
    zero_number_sign: NumberSymbolSpec = Field(
        default_factory=NumberSymbolSpec, description="Символы нулевого значения"
    )
    negative_number_sign: NumberSymbolSpec = Field(
        default_factory=NumberSymbolSpec, description="Символы отрицательных значений"
    )
    currency_symbol: NumberSymbolSpec = Field(
        default_factory=NumberSymbolSpec, description="Символ валюты (для всех случаев)"
    )

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Factory methods
    # -------------------------------------------------------------------------

    @classmethod
    def no_op(cls) -> "NumberSymbolGroup":
        return cls()

    @classmethod
    def simple_currency(
        cls,
        currency_symbol: "str | RuneSequence",
        use_leading: bool = True,
        placement: "NumberFieldPlacement | str" = NumberFieldPlacement.INSIDE,
        context: ErrorContext | None = None,
    ) -> "NumberSymbolGroup":
        """
        Простой денежный формат.

        Positive/zero выводят только символ валюты, negative выводит знак
        минус рядом с валютой на той же стороне. Пробел не добавляется:
        "$123.45", "$-123.45" (use_leading=True) или "123.45€", "123.45-€".

        Args:
            currency_symbol: Символ валюты (непустой)
            use_leading: True — валюта и минус перед числом, False — после
            placement: Положение символов относительно поля

        Raises:
            InvalidArgumentError: Пустой символ валюты
        """
        ctx = ensure_context(context, "NumberSymbolGroup.simple_currency()")

        if use_leading:
            currency = NumberSymbolSpec.new_currency_leading(
                currency_symbol,
                placement,
                CurrencySignRelativePosition.OUTSIDE_NUM_SIGN,
                ctx.push("currency_symbol"),
            )
            negative = NumberSymbolSpec.new_leading("-", placement, ctx.push("negative"))
        else:
            currency = NumberSymbolSpec.new_currency_trailing(
                currency_symbol,
                placement,
                CurrencySignRelativePosition.OUTSIDE_NUM_SIGN,
                ctx.push("currency_symbol"),
            )
            negative = NumberSymbolSpec.new_trailing("-", placement, ctx.push("negative"))

        return cls(negative_number_sign=negative, currency_symbol=currency)

    @classmethod
    def simple_signed_number(
        cls,
        use_leading_sign: bool = True,
        placement: "NumberFieldPlacement | str" = NumberFieldPlacement.INSIDE,
        context: ErrorContext | None = None,
    ) -> "NumberSymbolGroup":
        """
        Число со знаком: positive/zero без символов, negative — минус
        перед числом (use_leading_sign=True) или после него.
        """
        ctx = ensure_context(context, "NumberSymbolGroup.simple_signed_number()")
        if use_leading_sign:
            negative = NumberSymbolSpec.new_leading("-", placement, ctx)
        else:
            negative = NumberSymbolSpec.new_trailing("-", placement, ctx)
        return cls(negative_number_sign=negative)

    # -------------------------------------------------------------------------
    # Slot access
    # -------------------------------------------------------------------------

    def for_sign(self, sign: NumericSignValue) -> NumberSymbolSpec:
        """Слот знака для данного случая."""
        if sign == NumericSignValue.NEGATIVE:
            return self.negative_number_sign
        if sign == NumericSignValue.ZERO:
            return self.zero_number_sign
        if sign == NumericSignValue.POSITIVE:
            return self.positive_number_sign
        raise InvalidArgumentError(f"unknown numeric sign value: {sign!r}")

    def has_currency(self) -> bool:
        return not self.currency_symbol.is_no_op()

    def with_positive(self, spec: NumberSymbolSpec) -> "NumberSymbolGroup":
        return self._with_slot("positive_number_sign", spec)

    def with_zero(self, spec: NumberSymbolSpec) -> "NumberSymbolGroup":
        return self._with_slot("zero_number_sign", spec)

    def with_negative(self, spec: NumberSymbolSpec) -> "NumberSymbolGroup":
        return self._with_slot("negative_number_sign", spec)

    def with_currency(self, spec: NumberSymbolSpec) -> "NumberSymbolGroup":
        return self._with_slot("currency_symbol", spec)

    def _with_slot(self, slot: str, spec: NumberSymbolSpec | None) -> "NumberSymbolGroup":
        ctx = ErrorContext.of(f"NumberSymbolGroup.with_{slot}()")
        if spec is None:
            raise InvalidArgumentError(f"'{slot}' is None", ctx)
        try:
            spec.validate_spec(ctx)
        except ValidationFailureError as e:
            raise InvalidArgumentError(e.message, e.context) from e
        return self.model_copy(update={slot: spec.deep_copy()}, deep=True)

    # -------------------------------------------------------------------------
    # Value operations
    # -------------------------------------------------------------------------

    def is_no_op(self) -> bool:
        return all(
            spec.is_no_op()
            for spec in (
                self.positive_number_sign,
                self.zero_number_sign,
                self.negative_number_sign,
                self.currency_symbol,
            )
        )

    def deep_copy(self) -> "NumberSymbolGroup":
        return self.model_copy(deep=True)

    def equals(self, other: "NumberSymbolGroup | None") -> bool:
        if other is None:
            return False
        return (
            self.positive_number_sign.equals(other.positive_number_sign)
            and self.zero_number_sign.equals(other.zero_number_sign)
            and self.negative_number_sign.equals(other.negative_number_sign)
            and self.currency_symbol.equals(other.currency_symbol)
        )

    def validate_spec(self, context: ErrorContext | None = None) -> None:
        """
        Каждый слот проверяется независимо.

        Raises:
            ValidationFailureError: С именем слота в контексте
        """
        ctx = ensure_context(context, "NumberSymbolGroup.validate_spec()")
        self.positive_number_sign.validate_spec(ctx.push("positive_number_sign"))
        self.zero_number_sign.validate_spec(ctx.push("zero_number_sign"))
        self.negative_number_sign.validate_spec(ctx.push("negative_number_sign"))
        self.currency_symbol.validate_spec(ctx.push("currency_symbol"))

    def is_valid(self) -> bool:
        try:
            self.validate_spec()
        except ValidationFailureError:
            return False
        return True
