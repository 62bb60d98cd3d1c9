"""
FormatBuilder — Сборка NumberFormatSpec

Слой оркестрации: проверяет входные данные и собирает NumberFormatSpec
из региональных пресетов, из упрощённых параметров или из явно заданных
компонентов.

Порядок проверки во всех builder'ах:
1. Обязательные аргументы не None
2. Проверка каждого компонента (разделитель, ширина поля, символы)
3. Атомарная сборка через assemble_components()

При первой ошибке выбрасывается InvalidArgumentError; частично
собранный формат никогда не возвращается.
"""

from dataclasses import dataclass, field

from src.builder.locale_recipes import (
    decimal_separator_for_locale,
    integer_grouping_for_locale,
    parse_locale,
    parse_role,
    symbol_group_for_locale,
)
from src.core.domain import (
    CurrencySignRelativePosition,
    DecimalSeparatorSpec,
    FormatLocale,
    FormatRole,
    IntegerGroupingSpec,
    IntegerGroupingType,
    NumberFieldPlacement,
    NumberFieldSpec,
    NumberFormatSpec,
    NumberSymbolGroup,
    NumberSymbolSpec,
    RoundingSpec,
    RuneSequence,
    TextJustify,
    assemble_components,
)
from src.core.errors import ErrorContext, InvalidArgumentError, ensure_context
from src.core.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# EXPLICIT SYMBOLS
# =============================================================================


@dataclass(frozen=True)
class CurrencySymbols:
    """Символ валюты для build_explicit()."""

    leading: str = ""
    trailing: str = ""
    placement: NumberFieldPlacement = NumberFieldPlacement.INSIDE
    relative_position: CurrencySignRelativePosition = field(
        default=CurrencySignRelativePosition.OUTSIDE_NUM_SIGN
    )


def _sign_slot(
    leading: str | None,
    trailing: str | None,
    placement: "NumberFieldPlacement | str",
    context: ErrorContext,
) -> NumberSymbolSpec:
    """Слот знака из явно заданных символов (пустые символы -> no-op)."""
    leading_seq = RuneSequence.from_text(leading)
    trailing_seq = RuneSequence.from_text(trailing)

    if leading_seq.is_empty() and trailing_seq.is_empty():
        return NumberSymbolSpec.no_op()
    if trailing_seq.is_empty():
        return NumberSymbolSpec.new_leading(leading_seq, placement, context)
    if leading_seq.is_empty():
        return NumberSymbolSpec.new_trailing(trailing_seq, placement, context)
    return NumberSymbolSpec.new_leading_trailing(leading_seq, trailing_seq, placement, context)


# =============================================================================
# FORMAT BUILDER
# =============================================================================


class FormatBuilder:
    """
    Сборщик NumberFormatSpec.

    Builder не хранит состояния между вызовами: каждый метод возвращает
    новый NumberFormatSpec.
    """

    def build_from_locale(
        self,
        locale: "FormatLocale | str",
        role: "FormatRole | str",
        number_field: NumberFieldSpec,
        context: ErrorContext | None = None,
    ) -> NumberFormatSpec:
        """
        Формат именованной локали.

        Args:
            locale: US, USParen, UK, UKMinusInside, UKMinusOutside,
                Germany, France, EU
            role: SignedNumber или Currency
            number_field: Поле и выравнивание

        Returns:
            Новый NumberFormatSpec

        Raises:
            InvalidArgumentError: Неизвестная локаль/роль или number_field = None
        """
        ctx = ensure_context(context, "FormatBuilder.build_from_locale()")

        if locale is None:
            raise InvalidArgumentError("'locale' is None", ctx)
        if role is None:
            raise InvalidArgumentError("'role' is None", ctx)
        if number_field is None:
            raise InvalidArgumentError("'number_field' is None", ctx)

        parsed_locale = parse_locale(locale, ctx)
        parsed_role = parse_role(role, ctx)

        spec = assemble_components(
            decimal_separator_for_locale(parsed_locale, ctx.push("decimal_separator")),
            integer_grouping_for_locale(parsed_locale, ctx.push("integer_grouping")),
            symbol_group_for_locale(parsed_locale, parsed_role, ctx.push("symbols")),
            number_field,
            None,
            ctx,
        )
        logger.debug(
            "format_built_from_locale",
            locale=parsed_locale.value,
            role=parsed_role.value,
        )
        return spec

    def build_simple(
        self,
        decimal_chars: str,
        grouping_chars: str,
        currency_symbol: str,
        use_leading_symbols: bool,
        field_width: int,
        justification: "TextJustify | str",
        context: ErrorContext | None = None,
    ) -> NumberFormatSpec:
        """
        Упрощённый формат без имени локали.

        Пустой currency_symbol даёт число со знаком, иначе денежный формат.
        Пустой grouping_chars отключает группировку (не ошибка).
        Символы размещаются внутри поля (Inside).

        Examples:
            build_simple(".", ",", "$", True, 10, TextJustify.RIGHT)
            форматирует 123.45 как "   $123.45"
        """
        ctx = ensure_context(context, "FormatBuilder.build_simple()")

        if decimal_chars is None:
            raise InvalidArgumentError("'decimal_chars' is None", ctx)

        decimal_separator = DecimalSeparatorSpec.new(decimal_chars, ctx.push("decimal_separator"))

        if grouping_chars:
            integer_grouping = IntegerGroupingSpec.thousands(
                grouping_chars, ctx.push("integer_grouping")
            )
        else:
            integer_grouping = IntegerGroupingSpec.no_grouping()

        number_field = NumberFieldSpec.new(field_width, justification, ctx.push("number_field"))

        if currency_symbol:
            symbols = NumberSymbolGroup.simple_currency(
                currency_symbol,
                use_leading_symbols,
                NumberFieldPlacement.INSIDE,
                ctx.push("symbols"),
            )
        else:
            symbols = NumberSymbolGroup.simple_signed_number(
                use_leading_symbols,
                NumberFieldPlacement.INSIDE,
                ctx.push("symbols"),
            )

        return assemble_components(
            decimal_separator, integer_grouping, symbols, number_field, None, ctx
        )

    def build_pure_number_format(
        self,
        decimal_chars: str,
        use_leading_minus_sign: bool,
        field_width: int,
        justification: "TextJustify | str",
        context: ErrorContext | None = None,
    ) -> NumberFormatSpec:
        """
        Машиночитаемый формат: без группировки, без валюты, без плюса.

        "1000000.00", "-1000000.00" (или "1000000.00-"), но никогда
        "1,000,000.00".
        """
        ctx = ensure_context(context, "FormatBuilder.build_pure_number_format()")

        if decimal_chars is None:
            raise InvalidArgumentError("'decimal_chars' is None", ctx)

        decimal_separator = DecimalSeparatorSpec.new(decimal_chars, ctx.push("decimal_separator"))
        number_field = NumberFieldSpec.new(field_width, justification, ctx.push("number_field"))
        symbols = NumberSymbolGroup.simple_signed_number(
            use_leading_minus_sign, NumberFieldPlacement.INSIDE, ctx.push("symbols")
        )

        return assemble_components(
            decimal_separator,
            IntegerGroupingSpec.no_grouping(),
            symbols,
            number_field,
            None,
            ctx,
        )

    def build_explicit(
        self,
        decimal_chars: str,
        grouping_chars: str,
        grouping_type: "IntegerGroupingType | str",
        leading_positive: str,
        trailing_positive: str,
        positive_placement: "NumberFieldPlacement | str",
        leading_negative: str,
        trailing_negative: str,
        negative_placement: "NumberFieldPlacement | str",
        leading_zero: str,
        trailing_zero: str,
        zero_placement: "NumberFieldPlacement | str",
        field_width: int,
        justification: "TextJustify | str",
        currency: CurrencySymbols | None = None,
        rounding: RoundingSpec | None = None,
        context: ErrorContext | None = None,
    ) -> NumberFormatSpec:
        """
        Полностью явный формат: каждый символ и placement задаётся отдельно
        для каждого случая знака.

        Пустые символы случая дают no-op слот. Placement проверяется только
        для непустых слотов.

        Args:
            currency: Символ валюты (None = без валюты)
            rounding: Округление (None = без округления)

        Raises:
            InvalidArgumentError: Первая найденная ошибка входных данных
        """
        ctx = ensure_context(context, "FormatBuilder.build_explicit()")

        if decimal_chars is None:
            raise InvalidArgumentError("'decimal_chars' is None", ctx)
        if grouping_type is None:
            raise InvalidArgumentError("'grouping_type' is None", ctx)

        decimal_separator = DecimalSeparatorSpec.new(decimal_chars, ctx.push("decimal_separator"))
        integer_grouping = IntegerGroupingSpec.new(
            grouping_chars, grouping_type, ctx.push("integer_grouping")
        )
        number_field = NumberFieldSpec.new(field_width, justification, ctx.push("number_field"))

        symbols = NumberSymbolGroup(
            positive_number_sign=_sign_slot(
                leading_positive, trailing_positive, positive_placement, ctx.push("positive")
            ),
            zero_number_sign=_sign_slot(
                leading_zero, trailing_zero, zero_placement, ctx.push("zero")
            ),
            negative_number_sign=_sign_slot(
                leading_negative, trailing_negative, negative_placement, ctx.push("negative")
            ),
        )

        if currency is not None:
            symbols = symbols.with_currency(
                NumberSymbolSpec.new_currency(
                    currency.leading,
                    currency.trailing,
                    currency.placement,
                    currency.relative_position,
                    ctx.push("currency"),
                )
            )

        return assemble_components(
            decimal_separator, integer_grouping, symbols, number_field, rounding, ctx
        )

    def build_from_components(
        self,
        decimal_separator: DecimalSeparatorSpec,
        integer_grouping: IntegerGroupingSpec,
        symbols: NumberSymbolGroup,
        number_field: NumberFieldSpec,
        rounding: RoundingSpec | None = None,
        context: ErrorContext | None = None,
    ) -> NumberFormatSpec:
        """Сборка из готовых компонентов (см. assemble_components)."""
        ctx = ensure_context(context, "FormatBuilder.build_from_components()")
        return assemble_components(
            decimal_separator, integer_grouping, symbols, number_field, rounding, ctx
        )

    def with_number_field(
        self,
        spec: NumberFormatSpec,
        field_width: int,
        justification: "TextJustify | str",
        context: ErrorContext | None = None,
    ) -> NumberFormatSpec:
        """Тот же формат в другом поле."""
        ctx = ensure_context(context, "FormatBuilder.with_number_field()")
        if spec is None:
            raise InvalidArgumentError("'spec' is None", ctx)
        number_field = NumberFieldSpec.new(field_width, justification, ctx.push("number_field"))
        return spec.with_number_field(number_field, ctx)

