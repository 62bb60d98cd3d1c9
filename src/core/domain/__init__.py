"""
Domain models and value objects.

Contains the number string format model: rune sequences, symbol specs,
separators, field specs, rounding and the NumberFormatSpec aggregate.
"""

from src.core.domain.enums import (
    CurrencySignRelativePosition,
    FormatLocale,
    FormatRole,
    IntegerGroupingType,
    NumberFieldPlacement,
    NumericSignValue,
    SymbolPlacementKind,
    TextJustify,
    parse_enum,
)
from src.core.domain.format_spec import NumberFormatSpec, assemble_components, is_no_op
from src.core.domain.number_field import (
    AUTO_FIELD_WIDTH,
    MAX_FIELD_WIDTH,
    MIN_FIELD_WIDTH,
    NumberFieldSpec,
    check_field_width,
)
from src.core.domain.rounding import RoundingSpec, RoundingType
from src.core.domain.rune_sequence import RuneSequence
from src.core.domain.separators import (
    GROUP_SIZES,
    DecimalSeparatorSpec,
    IntegerGroupingSpec,
)
from src.core.domain.symbol_group import NumberSymbolGroup
from src.core.domain.symbol_spec import NumberSymbolSpec

__all__ = [
    # Enums
    "NumberFieldPlacement",
    "CurrencySignRelativePosition",
    "SymbolPlacementKind",
    "TextJustify",
    "IntegerGroupingType",
    "NumericSignValue",
    "FormatLocale",
    "FormatRole",
    "parse_enum",
    # Rune sequence
    "RuneSequence",
    # Symbols
    "NumberSymbolSpec",
    "NumberSymbolGroup",
    # Separators
    "GROUP_SIZES",
    "DecimalSeparatorSpec",
    "IntegerGroupingSpec",
    # Number field
    "AUTO_FIELD_WIDTH",
    "MIN_FIELD_WIDTH",
    "MAX_FIELD_WIDTH",
    "NumberFieldSpec",
    "check_field_width",
    # Rounding
    "RoundingType",
    "RoundingSpec",
    # Aggregate
    "NumberFormatSpec",
    "assemble_components",
    "is_no_op",
]
