"""
Config — Загрузка NumberFormatSpec из JSON конфигурации

Поддерживаются две формы:

Явная (схема number_format_spec.json):
    {
        "decimal_separator": ",",
        "integer_grouping": {"separator": ".", "grouping_type": "Thousands"},
        "symbols": {"negative": {"trailing": "-", "trailing_placement": "InsideNumField"}},
        "number_field": {"field_width": -1, "justification": "Right"}
    }

Пресет локали (схема locale_format_request.json):
    {"locale": "Germany", "role": "Currency", "number_field": {"field_width": 20}}

Данные сначала проверяются JSON Schema (jsonschema.ValidationError при
несоответствии), затем собираются через FormatBuilder / assemble_components.
"""

from typing import Any, Dict

from pydantic import ValidationError

from src.builder.format_builder import FormatBuilder
from src.core.contracts import (
    validate_locale_format_request,
    validate_number_format_spec,
)
from src.core.domain import (
    DecimalSeparatorSpec,
    IntegerGroupingSpec,
    NumberFieldSpec,
    NumberFormatSpec,
    NumberSymbolGroup,
    NumberSymbolSpec,
    RoundingSpec,
    TextJustify,
    assemble_components,
)
from src.core.errors import ErrorContext, InvalidArgumentError, ensure_context

_SYMBOL_SLOTS = (
    ("positive", "positive_number_sign"),
    ("zero", "zero_number_sign"),
    ("negative", "negative_number_sign"),
    ("currency", "currency_symbol"),
)


def _number_field_from_config(data: Dict[str, Any] | None, ctx: ErrorContext) -> NumberFieldSpec:
    if not data:
        return NumberFieldSpec.auto_size()
    return NumberFieldSpec.new(
        data["field_width"], data.get("justification", TextJustify.RIGHT.value), ctx
    )


def _symbol_spec_from_config(data: Dict[str, Any] | None, ctx: ErrorContext) -> NumberSymbolSpec:
    if not data:
        return NumberSymbolSpec.no_op()
    try:
        return NumberSymbolSpec(
            leading_symbols=data.get("leading", ""),
            leading_placement=data.get("leading_placement", "None"),
            trailing_symbols=data.get("trailing", ""),
            trailing_placement=data.get("trailing_placement", "None"),
            currency_relative_position=data.get("currency_relative_position", "None"),
        )
    except ValidationError as e:
        raise InvalidArgumentError(f"invalid symbol spec: {e}", ctx) from e


def _rounding_from_config(data: Dict[str, Any] | None, ctx: ErrorContext) -> RoundingSpec | None:
    if not data:
        return None
    try:
        return RoundingSpec(**data)
    except ValidationError as e:
        raise InvalidArgumentError(f"invalid rounding spec: {e}", ctx) from e


def format_spec_from_config(
    data: Dict[str, Any],
    builder: FormatBuilder | None = None,
    context: ErrorContext | None = None,
) -> NumberFormatSpec:
    """
    Создание NumberFormatSpec из словаря конфигурации.

    Args:
        data: Конфигурация (явная форма или пресет локали)
        builder: FormatBuilder для пресетов (по умолчанию новый)

    Returns:
        Новый NumberFormatSpec

    Raises:
        jsonschema.ValidationError: Данные не соответствуют схеме
        InvalidArgumentError: Компоненты не прошли проверку (ошибки pydantic
            тоже приводятся к InvalidArgumentError с контекстом поля)
    """
    ctx = ensure_context(context, "format_spec_from_config()")
    if data is None:
        raise InvalidArgumentError("'data' is None", ctx)

    if "locale" in data:
        validate_locale_format_request(data)
        builder = builder or FormatBuilder()
        return builder.build_from_locale(
            data["locale"],
            data["role"],
            _number_field_from_config(data.get("number_field"), ctx.push("number_field")),
            ctx,
        )

    validate_number_format_spec(data)

    grouping = data["integer_grouping"]
    symbols_data = data.get("symbols", {})
    symbols = NumberSymbolGroup(
        **{
            attr: _symbol_spec_from_config(symbols_data.get(key), ctx.push(f"symbols.{key}"))
            for key, attr in _SYMBOL_SLOTS
        }
    )
    rounding = _rounding_from_config(data.get("rounding"), ctx.push("rounding"))

    return assemble_components(
        DecimalSeparatorSpec.new(data["decimal_separator"], ctx.push("decimal_separator")),
        IntegerGroupingSpec.new(
            grouping.get("separator", ""), grouping["grouping_type"], ctx.push("integer_grouping")
        ),
        symbols,
        _number_field_from_config(data["number_field"], ctx.push("number_field")),
        rounding,
        ctx,
    )


def _symbol_spec_to_config(spec: NumberSymbolSpec) -> Dict[str, Any]:
    return {
        "leading": spec.leading_text,
        "leading_placement": spec.leading_placement.value,
        "trailing": spec.trailing_text,
        "trailing_placement": spec.trailing_placement.value,
        "currency_relative_position": spec.currency_relative_position.value,
    }


def format_spec_to_config(spec: NumberFormatSpec) -> Dict[str, Any]:
    """
    Сериализация NumberFormatSpec в словарь явной формы.

    Результат проходит validate_number_format_spec() и обратно
    загружается format_spec_from_config() в равный формат.
    """
    if spec is None:
        raise InvalidArgumentError("'spec' is None", ErrorContext.of("format_spec_to_config()"))

    return {
        "decimal_separator": spec.decimal_separator.text,
        "integer_grouping": {
            "separator": spec.integer_grouping.text,
            "grouping_type": spec.integer_grouping.grouping_type.value,
        },
        "symbols": {
            key: _symbol_spec_to_config(getattr(spec.symbols, attr))
            for key, attr in _SYMBOL_SLOTS
        },
        "number_field": {
            "field_width": spec.number_field.field_width,
            "justification": spec.number_field.justification.value,
        },
        "rounding": {
            "rounding_type": spec.rounding.rounding_type.value,
            "fractional_digits": spec.rounding.fractional_digits,
        },
    }
