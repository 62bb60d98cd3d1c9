"""
Enums — Закрытые перечисления модели форматирования чисел

Значения перечислений совпадают с текстовыми селекторами, которые
используются в JSON конфигурации ("InsideNumField", "Thousands", ...).
parse_enum() разбирает такие селекторы без учёта регистра.
"""

from enum import Enum
from typing import TypeVar


# =============================================================================
# FIELD PLACEMENT
# =============================================================================


class NumberFieldPlacement(str, Enum):
    """
    Положение символа относительно поля фиксированной ширины.

    INSIDE: символ выравнивается вместе с числом и входит в ширину поля.
    OUTSIDE: символ добавляется после выравнивания и увеличивает длину
    результата сверх заявленной ширины.
    """

    NONE = "None"
    INSIDE = "InsideNumField"
    OUTSIDE = "OutsideNumField"


class CurrencySignRelativePosition(str, Enum):
    """
    Порядок символа валюты и знака числа на одной стороне.

    OUTSIDE_NUM_SIGN: валюта снаружи знака ("$ -123.45", "123.45- €")
    INSIDE_NUM_SIGN: валюта внутри знака ("- $123.45", "123.45€ -")
    """

    NONE = "None"
    OUTSIDE_NUM_SIGN = "OutsideNumSign"
    INSIDE_NUM_SIGN = "InsideNumSign"


class SymbolPlacementKind(str, Enum):
    """Производное состояние NumberSymbolSpec: с какой стороны есть символы"""

    NONE = "None"
    BEFORE = "Before"
    AFTER = "After"
    BEFORE_AND_AFTER = "BeforeAndAfter"


# =============================================================================
# FIELD / GROUPING
# =============================================================================


class TextJustify(str, Enum):
    """Выравнивание текста в поле"""

    NONE = "None"
    LEFT = "Left"
    RIGHT = "Right"
    CENTER = "Center"


class IntegerGroupingType(str, Enum):
    """
    Схема группировки целой части.

    THOUSANDS: 1,000,000
    INDIA_NUMBERING: 6,78,90,00,00,00,00,000
    CHINESE_NUMBERING: 12,3456,7890
    """

    NONE = "None"
    THOUSANDS = "Thousands"
    INDIA_NUMBERING = "IndiaNumbering"
    CHINESE_NUMBERING = "ChineseNumbering"


# =============================================================================
# SIGN / LOCALE
# =============================================================================


class NumericSignValue(str, Enum):
    """Знак форматируемого значения"""

    NEGATIVE = "Negative"
    ZERO = "Zero"
    POSITIVE = "Positive"


class FormatLocale(str, Enum):
    """Именованные региональные пресеты"""

    US = "US"
    US_PAREN = "USParen"  # отрицательные значения в скобках
    UK = "UK"
    UK_MINUS_INSIDE = "UKMinusInside"  # £ -123.45
    UK_MINUS_OUTSIDE = "UKMinusOutside"  # -£ 123.45
    GERMANY = "Germany"
    FRANCE = "France"
    EU = "EU"


class FormatRole(str, Enum):
    """Назначение формата: число со знаком или денежная сумма"""

    SIGNED_NUMBER = "SignedNumber"
    CURRENCY = "Currency"


# =============================================================================
# PARSING
# =============================================================================


E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: type[E], value: "E | str") -> E:
    """
    Разбор значения перечисления.

    Принимает член перечисления, его значение ("InsideNumField") или имя
    ("INSIDE"). Сравнение строк выполняется без учёта регистра.

    Args:
        enum_cls: Класс перечисления
        value: Член перечисления или текстовый селектор

    Returns:
        Член перечисления

    Raises:
        ValueError: Если селектор не соответствует ни одному члену
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{enum_cls.__name__}: unsupported selector type {type(value).__name__}")

    needle = value.strip().lower()
    for member in enum_cls:
        if needle in (str(member.value).lower(), member.name.lower()):
            return member

    raise ValueError(f"{enum_cls.__name__}: unknown selector '{value}'")
