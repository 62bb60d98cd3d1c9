"""
Format assembly layer.

FormatBuilder, locale recipes and JSON configuration loading.
"""

from src.builder.config import format_spec_from_config, format_spec_to_config
from src.builder.format_builder import CurrencySymbols, FormatBuilder
from src.builder.locale_recipes import (
    LOCALE_CONVENTIONS,
    LocaleConventions,
    currency_symbols,
    decimal_separator_for_locale,
    integer_grouping_for_locale,
    locale_conventions,
    signed_number_symbols,
    symbol_group_for_locale,
)

__all__ = [
    # Builder
    "FormatBuilder",
    "CurrencySymbols",
    # Locale recipes
    "LOCALE_CONVENTIONS",
    "LocaleConventions",
    "locale_conventions",
    "decimal_separator_for_locale",
    "integer_grouping_for_locale",
    "symbol_group_for_locale",
    "signed_number_symbols",
    "currency_symbols",
    # Config
    "format_spec_from_config",
    "format_spec_to_config",
]
