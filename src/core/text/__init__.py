"""
Core text helpers

Выравнивание в поле и преобразование значений в строки цифр.
"""

from src.core.text.justify import PAD_CHAR, justify_in_field
from src.core.text.numeric_text import (
    group_integer_digits,
    sign_of,
    split_digits,
    to_decimal,
)

__all__ = [
    # Justification
    "PAD_CHAR",
    "justify_in_field",
    # Numeric text
    "to_decimal",
    "sign_of",
    "split_digits",
    "group_integer_digits",
]
