"""
Number Renderer — Форматирование значения по NumberFormatSpec

Последовательность:
1. Проверка формата (no-op формат не используется)
2. Приведение значения к Decimal и округление по RoundingSpec
3. Выбор слота знака (negative / zero / positive)
4. Цифры: группировка целой части + десятичный разделитель
5. Символы Inside склеиваются с числом, результат выравнивается в поле,
   затем добавляются символы Outside

Порядок валюты и знака на одной стороне:

| Сторона   | Relative position | Результат          |
|-----------|-------------------|--------------------|
| leading   | OutsideNumSign    | валюта, знак, число |
| leading   | InsideNumSign     | знак, валюта, число |
| trailing  | OutsideNumSign    | число, знак, валюта |
| trailing  | InsideNumSign     | число, валюта, знак |

Relative position учитывается только при совпадении placement валюты и
знака на этой стороне; иначе каждый символ идёт в свою область поля.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.core.domain import (
    CurrencySignRelativePosition,
    NumberFieldPlacement,
    NumberFormatSpec,
    NumberSymbolSpec,
    NumericSignValue,
    is_no_op,
)
from src.core.errors import (
    ErrorContext,
    InvalidArgumentError,
    ValidationFailureError,
    ensure_context,
)
from src.core.logging import get_logger
from src.core.text import (
    group_integer_digits,
    justify_in_field,
    sign_of,
    split_digits,
    to_decimal,
)

logger = get_logger(__name__)


# =============================================================================
# SYMBOL LAYOUT
# =============================================================================


@dataclass(frozen=True)
class SymbolLayout:
    """Символы, разложенные по четырём областям поля."""

    outside_leading: str = ""
    inside_leading: str = ""
    inside_trailing: str = ""
    outside_trailing: str = ""


def _side(
    sign_text: str,
    sign_placement: NumberFieldPlacement,
    currency_text: str,
    currency_placement: NumberFieldPlacement,
    relative_position: CurrencySignRelativePosition,
    leading: bool,
) -> tuple[str, str]:
    """
    Раскладка одной стороны числа.

    Returns:
        (outside_text, inside_text) для этой стороны
    """
    outside = ""
    inside = ""

    if sign_text and currency_text and sign_placement == currency_placement:
        currency_inside_sign = relative_position == CurrencySignRelativePosition.INSIDE_NUM_SIGN
        if leading:
            combined = sign_text + currency_text if currency_inside_sign else currency_text + sign_text
        else:
            combined = currency_text + sign_text if currency_inside_sign else sign_text + currency_text
        if sign_placement == NumberFieldPlacement.OUTSIDE:
            return combined, ""
        return "", combined

    if sign_text and currency_text and relative_position != CurrencySignRelativePosition.NONE:
        logger.debug(
            "currency_relative_position_ignored",
            side="leading" if leading else "trailing",
            sign_placement=sign_placement.value,
            currency_placement=currency_placement.value,
        )

    # Разные placement: на каждую область приходится не больше одного символа
    for text, placement in ((sign_text, sign_placement), (currency_text, currency_placement)):
        if not text:
            continue
        if placement == NumberFieldPlacement.OUTSIDE:
            outside = text
        else:
            inside = text

    return outside, inside


def layout_symbols(sign_spec: NumberSymbolSpec, currency_spec: NumberSymbolSpec) -> SymbolLayout:
    """
    Раскладка символов знака и валюты по областям поля.

    Args:
        sign_spec: Слот знака для текущего случая
        currency_spec: Слот валюты группы (может быть no-op)

    Returns:
        SymbolLayout
    """
    relative_position = currency_spec.currency_relative_position

    outside_leading, inside_leading = _side(
        sign_spec.leading_text,
        sign_spec.leading_placement,
        currency_spec.leading_text,
        currency_spec.leading_placement,
        relative_position,
        leading=True,
    )
    outside_trailing, inside_trailing = _side(
        sign_spec.trailing_text,
        sign_spec.trailing_placement,
        currency_spec.trailing_text,
        currency_spec.trailing_placement,
        relative_position,
        leading=False,
    )
    return SymbolLayout(
        outside_leading=outside_leading,
        inside_leading=inside_leading,
        inside_trailing=inside_trailing,
        outside_trailing=outside_trailing,
    )


# =============================================================================
# RENDERER
# =============================================================================


class NumberStringRenderer:
    """Форматирование числовых значений по NumberFormatSpec."""

    def __init__(self, spec: NumberFormatSpec):
        """
        Args:
            spec: Формат (проверяется при создании)

        Raises:
            InvalidArgumentError: Формат равен None или не проходит проверку
        """
        ctx = ErrorContext.of("NumberStringRenderer()")
        if is_no_op(spec):
            raise InvalidArgumentError("number format spec is empty or invalid", ctx)
        self.spec = spec

    def number_text(self, value: Decimal) -> str:
        """Цифры абсолютного значения с группировкой и десятичным разделителем."""
        integer_digits, fractional_digits = split_digits(value)
        grouping = self.spec.integer_grouping
        if not grouping.is_no_op():
            integer_digits = group_integer_digits(
                integer_digits, grouping.text, grouping.group_sizes
            )
        if not fractional_digits:
            return integer_digits
        return integer_digits + self.spec.decimal_separator.text + fractional_digits

    def render(
        self, value: "Decimal | int | float | str", context: ErrorContext | None = None
    ) -> str:
        """
        Форматирование значения.

        Args:
            value: Decimal, int, float или числовая строка

        Returns:
            Отформатированная строка

        Raises:
            InvalidArgumentError: Неподдерживаемое значение
            ValidationFailureError: Отрицательное значение при пустом
                слоте negative
        """
        ctx = ensure_context(context, "NumberStringRenderer.render()")

        number = self.spec.rounding.apply(to_decimal(value, ctx))
        sign = sign_of(number)
        sign_spec = self.spec.symbols.for_sign(sign)

        if sign == NumericSignValue.NEGATIVE and sign_spec.is_no_op():
            raise ValidationFailureError(
                "negative value cannot be formatted: negative number sign is empty", ctx
            )

        layout = layout_symbols(sign_spec, self.spec.symbols.currency_symbol)
        inside = layout.inside_leading + self.number_text(number) + layout.inside_trailing

        field = self.spec.number_field
        justified = justify_in_field(inside, field.field_width, field.justification, ctx)
        result = layout.outside_leading + justified + layout.outside_trailing

        logger.debug("number_rendered", sign=sign.value, length=len(result))
        return result


def render_number(
    value: "Decimal | int | float | str",
    spec: NumberFormatSpec,
    context: ErrorContext | None = None,
) -> str:
    """Форматирование одного значения (см. NumberStringRenderer.render)."""
    ctx = ensure_context(context, "render_number()")
    return NumberStringRenderer(spec).render(value, ctx)
