"""
Justify — Выравнивание текста в поле фиксированной ширины

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. width == -1 или width <= len(text): текст возвращается без изменений,
   justification игнорируется (даже TextJustify.NONE)
2. width > len(text): длина результата ровно width
3. CENTER: левый отступ (width - n) // 2, остаток справа
"""

from typing import Final

from src.core.domain.enums import TextJustify, parse_enum
from src.core.domain.number_field import check_field_width
from src.core.errors import ErrorContext, InvalidArgumentError, ensure_context

PAD_CHAR: Final[str] = " "


def justify_in_field(
    text: str,
    width: int,
    justification: "TextJustify | str",
    context: ErrorContext | None = None,
) -> str:
    """
    Размещение текста в поле фиксированной ширины.

    Args:
        text: Исходный текст
        width: Ширина поля (-1 = по содержимому)
        justification: Выравнивание (используется только если поле шире текста)
        context: Контекст ошибки

    Returns:
        Выровненный текст

    Raises:
        InvalidArgumentError: Ширина вне [-1, 1_000_000] или justification
            не задано (NONE / неизвестно), когда оно действительно нужно

    Examples:
        >>> justify_in_field("-123.45", 8, TextJustify.RIGHT)
        ' -123.45'
        >>> justify_in_field("abc", 2, TextJustify.NONE)
        'abc'
    """
    ctx = ensure_context(context, "justify_in_field()")

    error = check_field_width(width)
    if error is not None:
        raise InvalidArgumentError(error, ctx)

    length = len(text)
    if width == -1 or width <= length:
        return text

    try:
        parsed = parse_enum(TextJustify, justification)
    except ValueError as e:
        raise InvalidArgumentError(f"'justification' is invalid: {e}", ctx) from e

    padding = width - length
    if parsed == TextJustify.LEFT:
        return text + PAD_CHAR * padding
    if parsed == TextJustify.RIGHT:
        return PAD_CHAR * padding + text
    if parsed == TextJustify.CENTER:
        left = padding // 2
        return PAD_CHAR * left + text + PAD_CHAR * (padding - left)

    raise InvalidArgumentError(
        f"justification is required: field width {width} exceeds text length {length}",
        ctx,
    )
