"""
Tests for locale recipes

Покрывает:
- Таблицу разделителей локалей
- Группы символов SignedNumber / Currency для каждой локали
- Round-trip: build_from_locale + чтение компонентов воспроизводит таблицу
"""

import pytest

from src.builder import (
    FormatBuilder,
    currency_symbols,
    decimal_separator_for_locale,
    integer_grouping_for_locale,
    locale_conventions,
    signed_number_symbols,
    symbol_group_for_locale,
)
from src.core.domain import (
    CurrencySignRelativePosition,
    FormatLocale,
    FormatRole,
    IntegerGroupingType,
    NumberFieldPlacement,
    NumberFieldSpec,
)
from src.core.errors import InvalidArgumentError


# (locale, decimal, grouping)
SEPARATOR_TABLE = [
    (FormatLocale.US, ".", ","),
    (FormatLocale.US_PAREN, ".", ","),
    (FormatLocale.UK, ".", ","),
    (FormatLocale.UK_MINUS_INSIDE, ".", ","),
    (FormatLocale.UK_MINUS_OUTSIDE, ".", ","),
    (FormatLocale.GERMANY, ",", "."),
    (FormatLocale.FRANCE, ",", " "),
    (FormatLocale.EU, ",", "."),
]

# (locale, negative leading, negative trailing)
SIGNED_TABLE = [
    (FormatLocale.US, "-", ""),
    (FormatLocale.US_PAREN, "(", ")"),
    (FormatLocale.UK, "-", ""),
    (FormatLocale.UK_MINUS_INSIDE, "-", ""),
    (FormatLocale.UK_MINUS_OUTSIDE, "-", ""),
    (FormatLocale.GERMANY, "", "-"),
    (FormatLocale.FRANCE, "-", ""),
    (FormatLocale.EU, "-", ""),
]

# (locale, currency leading, currency trailing, relative position, negative leading, negative trailing)
CURRENCY_TABLE = [
    (FormatLocale.US, "$ ", "", CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, "-", ""),
    (FormatLocale.US_PAREN, "$ ", "", CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, "(", ")"),
    (FormatLocale.UK, "£", "", CurrencySignRelativePosition.INSIDE_NUM_SIGN, "- ", ""),
    (FormatLocale.UK_MINUS_INSIDE, "£ ", "", CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, "-", ""),
    (FormatLocale.UK_MINUS_OUTSIDE, "£ ", "", CurrencySignRelativePosition.INSIDE_NUM_SIGN, "-", ""),
    (FormatLocale.GERMANY, "", " €", CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, "", "-"),
    (FormatLocale.FRANCE, "", " €", CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, "-", ""),
    (FormatLocale.EU, "", " €", CurrencySignRelativePosition.OUTSIDE_NUM_SIGN, "", "-"),
]


class TestLocaleConventions:
    """Тесты разделителей локалей."""

    @pytest.mark.parametrize("locale,decimal_chars,grouping_chars", SEPARATOR_TABLE)
    def test_separators(self, locale, decimal_chars, grouping_chars):
        conventions = locale_conventions(locale)

        assert conventions.decimal_separator == decimal_chars
        assert conventions.integer_separator == grouping_chars
        assert conventions.grouping_type == IntegerGroupingType.THOUSANDS
        assert decimal_separator_for_locale(locale).text == decimal_chars
        assert integer_grouping_for_locale(locale).text == grouping_chars

    def test_locale_from_string(self):
        assert locale_conventions("germany").decimal_separator == ","

    def test_unknown_locale(self):
        with pytest.raises(InvalidArgumentError, match="locale"):
            locale_conventions("Atlantis")


class TestLocaleSymbolGroups:
    """Тесты групп символов локалей."""

    @pytest.mark.parametrize("locale,leading,trailing", SIGNED_TABLE)
    def test_signed_number(self, locale, leading, trailing):
        group = signed_number_symbols(locale)

        assert group.positive_number_sign.is_no_op()
        assert group.zero_number_sign.is_no_op()
        assert group.negative_number_sign.leading_text == leading
        assert group.negative_number_sign.trailing_text == trailing
        assert not group.has_currency()

    @pytest.mark.parametrize(
        "locale,cur_leading,cur_trailing,position,neg_leading,neg_trailing", CURRENCY_TABLE
    )
    def test_currency(self, locale, cur_leading, cur_trailing, position, neg_leading, neg_trailing):
        group = currency_symbols(locale)

        assert group.positive_number_sign.is_no_op()
        assert group.zero_number_sign.is_no_op()
        assert group.currency_symbol.leading_text == cur_leading
        assert group.currency_symbol.trailing_text == cur_trailing
        assert group.currency_symbol.currency_relative_position == position
        assert group.negative_number_sign.leading_text == neg_leading
        assert group.negative_number_sign.trailing_text == neg_trailing

    @pytest.mark.parametrize("locale", list(FormatLocale))
    @pytest.mark.parametrize("role", list(FormatRole))
    def test_all_symbols_inside_field(self, locale, role):
        group = symbol_group_for_locale(locale, role)

        for spec in (group.negative_number_sign, group.currency_symbol):
            for symbols, placement in (
                (spec.leading_symbols, spec.leading_placement),
                (spec.trailing_symbols, spec.trailing_placement),
            ):
                if not symbols.is_empty():
                    assert placement == NumberFieldPlacement.INSIDE
        assert group.is_valid()

    def test_unknown_role(self):
        with pytest.raises(InvalidArgumentError, match="role"):
            symbol_group_for_locale(FormatLocale.US, "Percentage")


class TestLocaleRoundTrip:
    """build_from_locale воспроизводит таблицу символ в символ."""

    @pytest.mark.parametrize(
        "locale,cur_leading,cur_trailing,position,neg_leading,neg_trailing", CURRENCY_TABLE
    )
    def test_currency_round_trip(
        self, locale, cur_leading, cur_trailing, position, neg_leading, neg_trailing
    ):
        spec = FormatBuilder().build_from_locale(
            locale, FormatRole.CURRENCY, NumberFieldSpec.auto_size()
        )
        conventions = locale_conventions(locale)

        assert spec.decimal_separator.separator.runes == tuple(conventions.decimal_separator)
        assert spec.integer_grouping.separator.runes == tuple(conventions.integer_separator)
        assert spec.symbols.currency_symbol.leading_symbols.runes == tuple(cur_leading)
        assert spec.symbols.currency_symbol.trailing_symbols.runes == tuple(cur_trailing)
        assert spec.symbols.negative_number_sign.leading_symbols.runes == tuple(neg_leading)
        assert spec.symbols.negative_number_sign.trailing_symbols.runes == tuple(neg_trailing)
        assert spec.symbols.positive_number_sign.is_no_op()
        assert spec.symbols.zero_number_sign.is_no_op()
