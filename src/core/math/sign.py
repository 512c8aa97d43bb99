"""
Sign — Знак длинного числа

Двузначный знак с правилом комбинации при умножении/делении:
одинаковые знаки → PLUS, разные → MINUS.

Ноль всегда несёт знак PLUS; это правило применяют сами числа
после каждой операции.
"""

from enum import Enum


class Sign(str, Enum):
    """Знак числа"""

    PLUS = "+"
    MINUS = "-"

    def __mul__(self, other: object) -> "Sign":
        if not isinstance(other, Sign):
            return NotImplemented
        return Sign.PLUS if self is other else Sign.MINUS

    def negated(self) -> "Sign":
        """Противоположный знак"""
        return Sign.MINUS if self is Sign.PLUS else Sign.PLUS

    @classmethod
    def of(cls, value: int) -> "Sign":
        """
        Знак машинного целого.

        Ноль считается положительным.

        Examples:
            >>> Sign.of(-5)
            <Sign.MINUS: '-'>
            >>> Sign.of(0)
            <Sign.PLUS: '+'>
        """
        return cls.MINUS if value < 0 else cls.PLUS
