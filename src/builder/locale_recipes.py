"""
Locale Recipes — Региональные значения по умолчанию

Таблица соглашений (разделители и символы) для именованных локалей:

| Locale         | Decimal | Group | Negative (signed) | Currency, negative |
|----------------|---------|-------|-------------------|--------------------|
| US             | .       | ,     | -123.45           | $ -1,000,000.00    |
| USParen        | .       | ,     | (123.45)          | $ (1,000,000.00)   |
| UK             | .       | ,     | -123.45           | - £123.45          |
| UKMinusInside  | .       | ,     | -123.45           | £ -123.45          |
| UKMinusOutside | .       | ,     | -123.45           | -£ 123.45          |
| Germany        | ,       | .     | 123,45-           | 1.000.000,00- €    |
| France         | ,       | " "   | -1 000 000        | -1 000 000,00 €    |
| EU             | ,       | .     | -123,45           | 123,45- €          |

Positive и zero во всех локалях без знака (неявный знак); в денежном
формате они выводят только символ валюты. UK выводит "£123.45";
UKMinusInside и UKMinusOutside отделяют символ фунта пробелом
("£ 123.45", "£ 0.00").
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from src.core.domain import (
    CurrencySignRelativePosition,
    DecimalSeparatorSpec,
    FormatLocale,
    FormatRole,
    IntegerGroupingSpec,
    IntegerGroupingType,
    NumberFieldPlacement,
    NumberSymbolGroup,
    NumberSymbolSpec,
    parse_enum,
)
from src.core.errors import ErrorContext, InvalidArgumentError, ensure_context
from src.core.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# SEPARATOR CONVENTIONS
# =============================================================================


@dataclass(frozen=True)
class LocaleConventions:
    """Разделители локали."""

    decimal_separator: str
    integer_separator: str
    grouping_type: IntegerGroupingType = IntegerGroupingType.THOUSANDS


LOCALE_CONVENTIONS: Final[dict[FormatLocale, LocaleConventions]] = {
    FormatLocale.US: LocaleConventions(".", ","),
    FormatLocale.US_PAREN: LocaleConventions(".", ","),
    FormatLocale.UK: LocaleConventions(".", ","),
    FormatLocale.UK_MINUS_INSIDE: LocaleConventions(".", ","),
    FormatLocale.UK_MINUS_OUTSIDE: LocaleConventions(".", ","),
    FormatLocale.GERMANY: LocaleConventions(",", "."),
    FormatLocale.FRANCE: LocaleConventions(",", " "),
    FormatLocale.EU: LocaleConventions(",", "."),
}

INSIDE: Final[NumberFieldPlacement] = NumberFieldPlacement.INSIDE


def parse_locale(locale: "FormatLocale | str", context: ErrorContext) -> FormatLocale:
    if locale is None:
        raise InvalidArgumentError("'locale' is None", context)
    try:
        return parse_enum(FormatLocale, locale)
    except ValueError as e:
        raise InvalidArgumentError(f"'locale' is invalid: {e}", context) from e


def parse_role(role: "FormatRole | str", context: ErrorContext) -> FormatRole:
    if role is None:
        raise InvalidArgumentError("'role' is None", context)
    try:
        return parse_enum(FormatRole, role)
    except ValueError as e:
        raise InvalidArgumentError(f"'role' is invalid: {e}", context) from e


def locale_conventions(
    locale: "FormatLocale | str", context: ErrorContext | None = None
) -> LocaleConventions:
    ctx = ensure_context(context, "locale_conventions()")
    return LOCALE_CONVENTIONS[parse_locale(locale, ctx)]


def decimal_separator_for_locale(
    locale: "FormatLocale | str", context: ErrorContext | None = None
) -> DecimalSeparatorSpec:
    ctx = ensure_context(context, "decimal_separator_for_locale()")
    return DecimalSeparatorSpec.new(locale_conventions(locale, ctx).decimal_separator, ctx)


def integer_grouping_for_locale(
    locale: "FormatLocale | str", context: ErrorContext | None = None
) -> IntegerGroupingSpec:
    ctx = ensure_context(context, "integer_grouping_for_locale()")
    conventions = locale_conventions(locale, ctx)
    return IntegerGroupingSpec.new(
        conventions.integer_separator, conventions.grouping_type, ctx
    )


# =============================================================================
# SIGNED NUMBER RECIPES
# =============================================================================


def _signed_leading_minus(ctx: ErrorContext) -> NumberSymbolGroup:
    return NumberSymbolGroup.simple_signed_number(True, INSIDE, ctx)


def _signed_trailing_minus(ctx: ErrorContext) -> NumberSymbolGroup:
    return NumberSymbolGroup.simple_signed_number(False, INSIDE, ctx)


def _signed_parentheses(ctx: ErrorContext) -> NumberSymbolGroup:
    return NumberSymbolGroup(
        negative_number_sign=NumberSymbolSpec.new_leading_trailing("(", ")", INSIDE, ctx),
    )


_SIGNED_RECIPES: Final[dict[FormatLocale, Callable[[ErrorContext], NumberSymbolGroup]]] = {
    FormatLocale.US: _signed_leading_minus,
    FormatLocale.US_PAREN: _signed_parentheses,
    FormatLocale.UK: _signed_leading_minus,
    FormatLocale.UK_MINUS_INSIDE: _signed_leading_minus,
    FormatLocale.UK_MINUS_OUTSIDE: _signed_leading_minus,
    FormatLocale.GERMANY: _signed_trailing_minus,
    FormatLocale.FRANCE: _signed_leading_minus,
    FormatLocale.EU: _signed_leading_minus,
}


# =============================================================================
# CURRENCY RECIPES
# =============================================================================


def _currency_us(ctx: ErrorContext) -> NumberSymbolGroup:
    # $ -1,000,000.00
    return NumberSymbolGroup(
        negative_number_sign=NumberSymbolSpec.new_leading("-", INSIDE, ctx),
        currency_symbol=NumberSymbolSpec.new_currency_leading(
            "$ ", INSIDE, CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, ctx
        ),
    )


def _currency_us_paren(ctx: ErrorContext) -> NumberSymbolGroup:
    # $ (1,000,000.00)
    return NumberSymbolGroup(
        negative_number_sign=NumberSymbolSpec.new_leading_trailing("(", ")", INSIDE, ctx),
        currency_symbol=NumberSymbolSpec.new_currency_leading(
            "$ ", INSIDE, CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, ctx
        ),
    )


def _currency_uk(ctx: ErrorContext) -> NumberSymbolGroup:
    # - £123.45
    return NumberSymbolGroup(
        negative_number_sign=NumberSymbolSpec.new_leading("- ", INSIDE, ctx),
        currency_symbol=NumberSymbolSpec.new_currency_leading(
            "£", INSIDE, CurrencySignRelativePosition.INSIDE_NUM_SIGN, ctx
        ),
    )


def _currency_uk_minus_inside(ctx: ErrorContext) -> NumberSymbolGroup:
    # £ 123.45, £ -123.45
    return NumberSymbolGroup(
        negative_number_sign=NumberSymbolSpec.new_leading("-", INSIDE, ctx),
        currency_symbol=NumberSymbolSpec.new_currency_leading(
            "£ ", INSIDE, CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, ctx
        ),
    )


def _currency_uk_minus_outside(ctx: ErrorContext) -> NumberSymbolGroup:
    # £ 123.45, -£ 123.45
    return NumberSymbolGroup(
        negative_number_sign=NumberSymbolSpec.new_leading("-", INSIDE, ctx),
        currency_symbol=NumberSymbolSpec.new_currency_leading(
            "£ ", INSIDE, CurrencySignRelativePosition.INSIDE_NUM_SIGN, ctx
        ),
    )


def _currency_germany(ctx: ErrorContext) -> NumberSymbolGroup:
    # 1.000.000,00- €
    return NumberSymbolGroup(
        negative_number_sign=NumberSymbolSpec.new_trailing("-", INSIDE, ctx),
        currency_symbol=NumberSymbolSpec.new_currency_trailing(
            " €", INSIDE, CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, ctx
        ),
    )


def _currency_france(ctx: ErrorContext) -> NumberSymbolGroup:
    # -1 000 000,00 €
    return NumberSymbolGroup(
        negative_number_sign=NumberSymbolSpec.new_leading("-", INSIDE, ctx),
        currency_symbol=NumberSymbolSpec.new_currency_trailing(
            " €", INSIDE, CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, ctx
        ),
    )


def _currency_eu(ctx: ErrorContext) -> NumberSymbolGroup:
    # 123,45- €
    return NumberSymbolGroup(
        negative_number_sign=NumberSymbolSpec.new_trailing("-", INSIDE, ctx),
        currency_symbol=NumberSymbolSpec.new_currency_trailing(
            " €", INSIDE, CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, ctx
        ),
    )


_CURRENCY_RECIPES: Final[dict[FormatLocale, Callable[[ErrorContext], NumberSymbolGroup]]] = {
    FormatLocale.US: _currency_us,
    FormatLocale.US_PAREN: _currency_us_paren,
    FormatLocale.UK: _currency_uk,
    FormatLocale.UK_MINUS_INSIDE: _currency_uk_minus_inside,
    FormatLocale.UK_MINUS_OUTSIDE: _currency_uk_minus_outside,
    FormatLocale.GERMANY: _currency_germany,
    FormatLocale.FRANCE: _currency_france,
    FormatLocale.EU: _currency_eu,
}

_RECIPES_BY_ROLE: Final[
    dict[FormatRole, dict[FormatLocale, Callable[[ErrorContext], NumberSymbolGroup]]]
] = {
    FormatRole.SIGNED_NUMBER: _SIGNED_RECIPES,
    FormatRole.CURRENCY: _CURRENCY_RECIPES,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def symbol_group_for_locale(
    locale: "FormatLocale | str",
    role: "FormatRole | str",
    context: ErrorContext | None = None,
) -> NumberSymbolGroup:
    """
    Группа символов локали по умолчанию.

    Args:
        locale: Именованная локаль (US, USParen, UK, UKMinusInside,
            UKMinusOutside, Germany, France, EU)
        role: SignedNumber или Currency

    Returns:
        Новый NumberSymbolGroup

    Raises:
        InvalidArgumentError: Неизвестная локаль или роль
    """
    ctx = ensure_context(context, "symbol_group_for_locale()")
    parsed_locale = parse_locale(locale, ctx)
    parsed_role = parse_role(role, ctx)

    recipe = _RECIPES_BY_ROLE[parsed_role][parsed_locale]
    group = recipe(ctx.push(f"{parsed_locale.value}/{parsed_role.value}"))

    logger.debug(
        "locale_symbols_resolved",
        locale=parsed_locale.value,
        role=parsed_role.value,
    )
    return group


def signed_number_symbols(
    locale: "FormatLocale | str", context: ErrorContext | None = None
) -> NumberSymbolGroup:
    return symbol_group_for_locale(locale, FormatRole.SIGNED_NUMBER, context)


def currency_symbols(
    locale: "FormatLocale | str", context: ErrorContext | None = None
) -> NumberSymbolGroup:
    return symbol_group_for_locale(locale, FormatRole.CURRENCY, context)
