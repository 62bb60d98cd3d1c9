"""
Errors — Иерархия ошибок форматирования чисел

Все ошибки библиотеки наследуются от NumberFormatError (подкласс ValueError),
поэтому вызывающий код может ловить их как обычные ValueError.

Виды ошибок:
- InvalidArgumentError: некорректный входной параметр (пустой обязательный
  символ, ширина поля вне диапазона, отсутствующая justification и т.д.)
- ValidationFailureError: собранный компонент не прошёл структурную проверку

Каждая ошибка несёт ErrorContext — цепочку меток вызова, которая
добавляется в начало сообщения. Это позволяет проследить вложенную ошибку
до исходного вызова builder'а без stack trace.
"""

from dataclasses import dataclass
from typing import Final


# =============================================================================
# ERROR CONTEXT
# =============================================================================


CONTEXT_SEPARATOR: Final[str] = " -> "


@dataclass(frozen=True)
class ErrorContext:
    """
    Упорядоченная цепочка меток вызова.

    Immutable: push() возвращает новый контекст, исходный не изменяется.
    """

    frames: tuple[str, ...] = ()

    @classmethod
    def of(cls, *labels: str) -> "ErrorContext":
        """Создание контекста из произвольного числа меток (пустые пропускаются)."""
        return cls(frames=tuple(label for label in labels if label))

    def push(self, label: str) -> "ErrorContext":
        """
        Добавление метки в конец цепочки.

        Args:
            label: Метка вызова (например, 'FormatBuilder.build_simple()')

        Returns:
            Новый ErrorContext
        """
        if not label:
            return self
        return ErrorContext(frames=self.frames + (label,))

    def is_empty(self) -> bool:
        return not self.frames

    def __str__(self) -> str:
        return CONTEXT_SEPARATOR.join(self.frames)


def ensure_context(context: ErrorContext | None, label: str) -> ErrorContext:
    """Нормализация опционального контекста и добавление метки текущего вызова."""
    if context is None:
        context = ErrorContext()
    return context.push(label)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumberFormatError(ValueError):
    """Базовая ошибка библиотеки форматирования чисел."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context if context is not None else ErrorContext()
        super().__init__(self._compose())

    def _compose(self) -> str:
        if self.context.is_empty():
            return self.message
        return f"{self.context}: {self.message}"


class InvalidArgumentError(NumberFormatError):
    """Некорректный входной параметр."""


class ValidationFailureError(NumberFormatError):
    """Компонент спецификации не прошёл структурную проверку."""
