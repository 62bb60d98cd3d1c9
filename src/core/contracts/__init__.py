"""
Contract Validation Module

Модуль для валидации JSON конфигурации форматов числовых строк.
"""

from .validators import (
    ContractValidator,
    LocaleFormatRequestValidator,
    NumberFormatSpecValidator,
    SchemaLoader,
    validate_locale_format_request,
    validate_number_format_spec,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumberFormatSpecValidator",
    "LocaleFormatRequestValidator",
    # Functions
    "validate_number_format_spec",
    "validate_locale_format_request",
]
