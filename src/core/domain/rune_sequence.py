"""
RuneSequence — Последовательность символов для текста символов формата

Immutable Pydantic модель: хранит кортеж одиночных символов ("$", " -",
"()" и т.д.). Копирование создаёт независимый экземпляр, общих буферов
между владельцами нет.
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field, field_validator


class RuneSequence(BaseModel):
    """
    Упорядоченная последовательность символов (может быть пустой).

    Immutable модель (frozen=True).
    """

    runes: tuple[str, ...] = Field(
        default=(), description="Символы последовательности, по одному на элемент"
    )

    model_config = {"frozen": True}

    @field_validator("runes")
    @classmethod
    def validate_single_characters(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Каждый элемент должен быть ровно одним символом."""
        for index, rune in enumerate(v):
            if len(rune) != 1:
                raise ValueError(
                    f"runes[{index}] must be a single character, got {rune!r}"
                )
        return v

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "RuneSequence":
        return cls()

    @classmethod
    def from_text(cls, text: "str | Iterable[str] | RuneSequence | None") -> "RuneSequence":
        """
        Создание последовательности из строки или итерируемого набора символов.

        Args:
            text: Строка, итерируемый набор символов, RuneSequence или None

        Returns:
            Новый RuneSequence (None превращается в пустую последовательность)
        """
        if text is None:
            return cls()
        if isinstance(text, RuneSequence):
            return text.deep_copy()
        return cls(runes=tuple(text))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def text(self) -> str:
        return "".join(self.runes)

    def __len__(self) -> int:
        return len(self.runes)

    def __str__(self) -> str:
        return self.text

    def is_empty(self) -> bool:
        return len(self.runes) == 0

    def is_non_trivial(self) -> bool:
        """
        Проверка, что последовательность содержит хотя бы один символ
        с ненулевым кодом.
        """
        return any(ord(rune) != 0 for rune in self.runes)

    def deep_copy(self) -> "RuneSequence":
        return self.model_copy(deep=True)

    def equals(self, other: "RuneSequence | None") -> bool:
        if other is None:
            return False
        return self.runes == other.runes
