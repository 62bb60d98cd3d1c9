"""
Country Culture — Культурные параметры страны

CountryCultureSpec объединяет справочные данные страны (ISO 3166 коды,
ISO 4217 валюта, младшая денежная единица) с двумя готовыми форматами:
денежным и числом со знаком.

Денежный формат округляется до currency_decimal_digits (HalfAwayFromZero),
поэтому 1234.5 USD выводится как "$ 1,234.50".
"""

from typing import Final

from pydantic import BaseModel, Field

from src.builder import FormatBuilder
from src.builder.locale_recipes import parse_locale
from src.core.domain import (
    FormatLocale,
    FormatRole,
    NumberFieldSpec,
    NumberFormatSpec,
    RoundingSpec,
    RoundingType,
)
from src.core.errors import ErrorContext, InvalidArgumentError, ensure_context


# =============================================================================
# COUNTRY CULTURE SPEC
# =============================================================================


class CountryCultureSpec(BaseModel):
    """
    Культурные параметры страны.

    Immutable модель (frozen=True).
    """

    # Идентификация
    country_name: str = Field(..., min_length=1, description="Короткое название страны")
    official_state_name: str = Field(..., min_length=1, description="Официальное название")
    alternate_names: tuple[str, ...] = Field(default=(), description="Другие названия")
    country_code_two_char: str = Field(..., min_length=2, max_length=2, description="ISO 3166-1 alpha-2")
    country_code_three_char: str = Field(..., min_length=3, max_length=3, description="ISO 3166-1 alpha-3")
    country_code_number: str = Field(..., pattern=r"^\d{3}$", description="ISO 3166-1 numeric")

    # Валюта
    currency_code: str = Field(..., min_length=3, max_length=3, description="ISO 4217 код")
    currency_code_number: str = Field(..., pattern=r"^\d{3}$", description="ISO 4217 numeric")
    currency_name: str = Field(..., min_length=1, description="Название валюты")
    currency_symbol: str = Field(..., min_length=1, description="Символ валюты")
    minor_currency_name: str = Field(default="", description="Младшая денежная единица")
    minor_currency_symbol: str = Field(default="", description="Символ младшей единицы")
    currency_decimal_digits: int = Field(default=2, ge=0, le=4, description="Дробные цифры валюты")

    # Форматы
    currency_format: NumberFormatSpec = Field(..., description="Денежный формат")
    signed_number_format: NumberFormatSpec = Field(..., description="Формат числа со знаком")

    model_config = {"frozen": True}

    def deep_copy(self) -> "CountryCultureSpec":
        return self.model_copy(deep=True)


# =============================================================================
# PRESETS
# =============================================================================


_COUNTRY_DATA: Final[dict[FormatLocale, dict[str, object]]] = {
    FormatLocale.US: {
        "country_name": "United States",
        "official_state_name": "United States of America",
        "alternate_names": ("USA", "U.S.A.", "America"),
        "country_code_two_char": "US",
        "country_code_three_char": "USA",
        "country_code_number": "840",
        "currency_code": "USD",
        "currency_code_number": "840",
        "currency_name": "Dollar",
        "currency_symbol": "$",
        "minor_currency_name": "Cent",
        "minor_currency_symbol": "¢",
    },
    FormatLocale.UK: {
        "country_name": "United Kingdom",
        "official_state_name": "United Kingdom of Great Britain and Northern Ireland",
        "alternate_names": ("UK", "Great Britain", "Britain"),
        "country_code_two_char": "GB",
        "country_code_three_char": "GBR",
        "country_code_number": "826",
        "currency_code": "GBP",
        "currency_code_number": "826",
        "currency_name": "Pound",
        "currency_symbol": "£",
        "minor_currency_name": "Pence",
        "minor_currency_symbol": "p",
    },
    FormatLocale.GERMANY: {
        "country_name": "Germany",
        "official_state_name": "Federal Republic of Germany",
        "alternate_names": ("Deutschland",),
        "country_code_two_char": "DE",
        "country_code_three_char": "DEU",
        "country_code_number": "276",
        "currency_code": "EUR",
        "currency_code_number": "978",
        "currency_name": "Euro",
        "currency_symbol": "€",
        "minor_currency_name": "Cent",
        "minor_currency_symbol": "c",
    },
    FormatLocale.FRANCE: {
        "country_name": "France",
        "official_state_name": "French Republic",
        "alternate_names": ("République française",),
        "country_code_two_char": "FR",
        "country_code_three_char": "FRA",
        "country_code_number": "250",
        "currency_code": "EUR",
        "currency_code_number": "978",
        "currency_name": "Euro",
        "currency_symbol": "€",
        "minor_currency_name": "Cent",
        "minor_currency_symbol": "c",
    },
}

SUPPORTED_COUNTRIES: Final[tuple[FormatLocale, ...]] = tuple(_COUNTRY_DATA)


def country_culture(
    locale: "FormatLocale | str",
    number_field: NumberFieldSpec | None = None,
    builder: FormatBuilder | None = None,
    context: ErrorContext | None = None,
) -> CountryCultureSpec:
    """
    Культурные параметры страны.

    Args:
        locale: US, UK, Germany или France
        number_field: Поле для обоих форматов (по умолчанию auto-size)
        builder: FormatBuilder (по умолчанию новый)

    Returns:
        Новый CountryCultureSpec

    Raises:
        InvalidArgumentError: Локаль не является страной (например, EU)
    """
    ctx = ensure_context(context, "country_culture()")
    parsed = parse_locale(locale, ctx)
    if parsed not in _COUNTRY_DATA:
        raise InvalidArgumentError(
            f"no country culture preset for locale {parsed.value}", ctx
        )

    builder = builder or FormatBuilder()
    number_field = number_field or NumberFieldSpec.auto_size()
    data = _COUNTRY_DATA[parsed]
    decimal_digits = 2

    currency_format = builder.build_from_locale(
        parsed, FormatRole.CURRENCY, number_field, ctx.push("currency_format")
    ).with_rounding(
        RoundingSpec(
            rounding_type=RoundingType.HALF_AWAY_FROM_ZERO,
            fractional_digits=decimal_digits,
        ),
        ctx.push("currency_format"),
    )
    signed_number_format = builder.build_from_locale(
        parsed, FormatRole.SIGNED_NUMBER, number_field, ctx.push("signed_number_format")
    )

    return CountryCultureSpec(
        **data,
        currency_decimal_digits=decimal_digits,
        currency_format=currency_format,
        signed_number_format=signed_number_format,
    )
