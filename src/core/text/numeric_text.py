"""
Numeric Text — Преобразование значения в цифры и группировка целой части

Модуль превращает числовое значение в пару строк цифр (целая и дробная
части) и вставляет разделители групп в целую часть.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf и bool никогда не форматируются (InvalidArgumentError)
2. Дробные цифры сохраняются как есть: Decimal("1.50") -> ("1", "50")
3. Отрицательный ноль считается нулём
"""

import math
from decimal import Decimal, InvalidOperation

from src.core.domain.enums import NumericSignValue
from src.core.errors import ErrorContext, InvalidArgumentError, ensure_context


# =============================================================================
# VALUE CONVERSION
# =============================================================================


def to_decimal(value: "Decimal | int | float | str", context: ErrorContext | None = None) -> Decimal:
    """
    Приведение значения к конечному Decimal.

    float переводится через str(), поэтому 123.45 даёт Decimal("123.45"),
    а не двоичное приближение.

    Raises:
        InvalidArgumentError: bool, неподдерживаемый тип, нечисловая строка,
            NaN или бесконечность
    """
    ctx = ensure_context(context, "to_decimal()")

    if isinstance(value, bool):
        raise InvalidArgumentError("boolean values cannot be formatted as numbers", ctx)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise InvalidArgumentError(f"non-finite value: {value}", ctx)
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise InvalidArgumentError(f"not a numeric string: {value!r}", ctx) from e
    else:
        raise InvalidArgumentError(f"unsupported value type: {type(value).__name__}", ctx)

    if not result.is_finite():
        raise InvalidArgumentError(f"non-finite value: {value}", ctx)
    return result


def sign_of(value: Decimal) -> NumericSignValue:
    if value.is_zero():
        return NumericSignValue.ZERO
    if value < 0:
        return NumericSignValue.NEGATIVE
    return NumericSignValue.POSITIVE


def split_digits(value: Decimal) -> tuple[str, str]:
    """
    Разделение абсолютного значения на целые и дробные цифры.

    Returns:
        (integer_digits, fractional_digits); целая часть минимум "0",
        дробная может быть пустой. Все цифры сохраняются независимо от
        точности текущего decimal контекста.

    Examples:
        >>> split_digits(Decimal("-1000000.00"))
        ('1000000', '00')
        >>> split_digits(Decimal("1E+3"))
        ('1000', '')
    """
    text = format(value.copy_abs(), "f")
    integer_part, _, fractional_part = text.partition(".")
    integer_part = integer_part.lstrip("0") or "0"
    return integer_part, fractional_part


# =============================================================================
# INTEGER GROUPING
# =============================================================================


def group_integer_digits(digits: str, separator: str, group_sizes: tuple[int, ...]) -> str:
    """
    Вставка разделителей в целую часть.

    Группы отсчитываются справа налево по group_sizes; последний размер
    повторяется до конца строки.

    Args:
        digits: Цифры целой части
        separator: Разделитель групп (пустой = без группировки)
        group_sizes: Размеры групп, например (3,) или (3, 2)

    Examples:
        >>> group_integer_digits("1000000", ",", (3,))
        '1,000,000'
        >>> group_integer_digits("6789000000000000", ",", (3, 2))
        '6,78,90,00,00,00,00,000'
    """
    if not separator or not group_sizes or len(digits) <= group_sizes[0]:
        return digits

    groups: list[str] = []
    end = len(digits)
    size_index = 0
    while end > 0:
        size = group_sizes[min(size_index, len(group_sizes) - 1)]
        start = max(0, end - size)
        groups.append(digits[start:end])
        end = start
        size_index += 1

    return separator.join(reversed(groups))
