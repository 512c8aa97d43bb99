"""
Rational — Точная рациональная дробь

Дробь хранит модули числителя и знаменателя как BigInteger и
собственный знак. Арифметика — перекрёстное умножение числителей
и знаменателей с последующей нормализацией через НОД.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после любой публичной операции):
1. numerator.sign == denominator.sign == PLUS
2. denominator > 0
3. gcd(numerator, denominator) == 1 (для нуля: 0/1)
4. Ноль имеет знак PLUS

ФОРМУЛЫ:
    a/b + c/d = (a*d + c*b) / (b*d)
    a/b * c/d = (a*c) / (b*d)
    (a/b) / (c/d) = (a*d) / (b*c)
"""

import re
from typing import Final, TextIO, Union

from src.core.math.biginteger import (
    BigInteger,
    DivisionByZero,
    MalformedInput,
    gcd,
    read_token,
)
from src.core.math.numerical_safeguards import validate_non_negative_int
from src.core.math.sign import Sign

# Точность десятичного представления при конверсии во float
FLOAT_CONVERSION_PRECISION: Final[int] = 30

# Литерал дроби: "p" или "p/q"
_FRACTION_LITERAL: Final = re.compile(r"(-?[0-9]+)(?:/(-?[0-9]+))?")


RationalLike = Union["Rational", BigInteger, int, str]


class Rational:
    """
    Точная рациональная дробь на BigInteger.

    Изменяемый объект: составные операторы меняют экземпляр на месте,
    бинарные операторы возвращают новый экземпляр.

    Examples:
        >>> str(Rational(1, 3) + Rational(1, 6))
        '1/2'
        >>> Rational(1, 3).to_decimal(4)
        '0.3333'
    """

    __slots__ = ("_numerator", "_denominator", "_sign")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, numerator: RationalLike = 0, denominator: RationalLike = 1):
        if isinstance(numerator, str) and "/" in numerator:
            numerator = self.parse(numerator)

        if isinstance(numerator, Rational) or isinstance(denominator, Rational):
            value = Rational._of(numerator)
            value /= Rational._of(denominator)
            self._numerator = value._numerator
            self._denominator = value._denominator
            self._sign = value._sign
            return

        self._numerator = BigInteger(numerator)
        self._denominator = BigInteger(denominator)
        if self._denominator.is_zero():
            raise DivisionByZero(f"Zero denominator for numerator {self._numerator}")

        self._sign = self._numerator.sign * self._denominator.sign
        self._numerator = abs(self._numerator)
        self._denominator = abs(self._denominator)
        self._normalize()

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """
        Разбор литерала "p" или "p/q".

        Raises:
            MalformedInput: Если строка не является литералом дроби
            DivisionByZero: Если q == 0
        """
        match = _FRACTION_LITERAL.fullmatch(text)
        if match is None:
            raise MalformedInput(f"Not a fraction literal: {text!r}")

        numerator, denominator = match.groups()
        return cls(numerator, denominator if denominator is not None else 1)

    @classmethod
    def from_stream(cls, stream: TextIO) -> "Rational":
        """Чтение дроби из текстового потока (один токен)"""
        return cls.parse(read_token(stream))

    @staticmethod
    def _of(value: RationalLike) -> "Rational":
        if isinstance(value, Rational):
            return value.copy()
        return Rational(value)

    @staticmethod
    def _coerce(value: object) -> "Rational":
        if isinstance(value, Rational):
            return value
        if isinstance(value, BigInteger):
            return Rational(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return Rational(value)
        return NotImplemented

    def copy(self) -> "Rational":
        result = Rational.__new__(Rational)
        result._numerator = self._numerator.copy()
        result._denominator = self._denominator.copy()
        result._sign = self._sign
        return result

    def _normalize(self) -> None:
        self._sign = self._sign * self._numerator.sign * self._denominator.sign
        self._numerator.sign = Sign.PLUS
        self._denominator.sign = Sign.PLUS

        if self._numerator.is_zero():
            self._sign = Sign.PLUS
            self._denominator = BigInteger(1)
            return

        g = gcd(self._numerator, self._denominator)
        if g.is_one():
            return
        self._numerator /= g
        self._denominator /= g

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> BigInteger:
        """Модуль числителя (копия)"""
        return self._numerator.copy()

    @property
    def denominator(self) -> BigInteger:
        """Знаменатель (копия, всегда > 0)"""
        return self._denominator.copy()

    @property
    def sign(self) -> Sign:
        return self._sign

    def is_zero(self) -> bool:
        return self._numerator.is_zero()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def reciprocal(self) -> "Rational":
        """
        Обратная дробь.

        Raises:
            DivisionByZero: Для нуля
        """
        if self.is_zero():
            raise DivisionByZero("Reciprocal of zero")
        result = self.copy()
        result._numerator, result._denominator = result._denominator, result._numerator
        return result

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        text = str(self._numerator)
        if not self._denominator.is_one():
            text += "/" + str(self._denominator)
        if self._sign is Sign.MINUS:
            return "-" + text
        return text

    def __repr__(self) -> str:
        return f"Rational('{self}')"

    def to_decimal(self, precision: int = 0) -> str:
        """
        Десятичное представление с фиксированной точностью.

        Числитель умножается на 10^precision и делится нацело на
        знаменатель. Это усечение к нулю, а не округление.

        Args:
            precision: Количество знаков после точки (>= 0)

        Returns:
            Строка вида "[-]I.FFFF"; при precision == 0 — "[-]I" без точки.
            Знак '-' ставится только если отображаемые цифры не все нули.

        Raises:
            ValueError: Если precision не неотрицательное целое

        Examples:
            >>> Rational(-22, 7).to_decimal(3)
            '-3.142'
            >>> Rational(1, 8).to_decimal(0)
            '0'
        """
        validate_non_negative_int(precision, "precision")

        scaled = self._numerator * BigInteger("1" + "0" * precision)
        digits = str(scaled / self._denominator)

        split = max(len(digits) - precision, 0)
        integer_part = digits[:split] or "0"
        text = integer_part
        if precision > 0:
            text += "." + digits[split:].rjust(precision, "0")

        if self._sign is Sign.MINUS and digits != "0":
            return "-" + text
        return text

    def __float__(self) -> float:
        return float(self.to_decimal(FLOAT_CONVERSION_PRECISION))

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return (
            self._sign is other._sign
            and self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __lt__(self, other: RationalLike) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if self._sign is not other._sign:
            return self._sign is Sign.MINUS

        lhs = self._numerator * other._denominator
        rhs = other._numerator * self._denominator
        if lhs == rhs:
            return False
        return (self._sign is Sign.MINUS) ^ (lhs < rhs)

    def __le__(self, other: RationalLike) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not other < self

    def __gt__(self, other: RationalLike) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other < self

    def __ge__(self, other: RationalLike) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not self < other

    # -------------------------------------------------------------------------
    # Составные операторы (изменяют self)
    # -------------------------------------------------------------------------

    def _add_signed(self, other: "Rational", other_sign: Sign) -> None:
        # Знак дроби переносится в числитель на время вычисления
        cross = other._numerator * self._denominator
        cross.sign = other_sign

        numerator = self._numerator.copy()
        numerator.sign = self._sign
        numerator *= other._denominator
        numerator += cross

        self._denominator = self._denominator * other._denominator
        self._numerator = numerator
        self._sign = Sign.PLUS
        self._normalize()

    def __iadd__(self, other: RationalLike) -> "Rational":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self._add_signed(other, other._sign)
        return self

    def __isub__(self, other: RationalLike) -> "Rational":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self._add_signed(other, other._sign.negated())
        return self

    def __imul__(self, other: RationalLike) -> "Rational":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self._numerator = self._numerator * other._numerator
        self._denominator = self._denominator * other._denominator
        self._sign = self._sign * other._sign
        self._normalize()
        return self

    def __itruediv__(self, other: RationalLike) -> "Rational":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self *= other.reciprocal()
        return self

    # -------------------------------------------------------------------------
    # Бинарные и унарные операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: RationalLike) -> "Rational":
        return self.copy().__iadd__(other)

    def __sub__(self, other: RationalLike) -> "Rational":
        return self.copy().__isub__(other)

    def __mul__(self, other: RationalLike) -> "Rational":
        return self.copy().__imul__(other)

    def __truediv__(self, other: RationalLike) -> "Rational":
        return self.copy().__itruediv__(other)

    def __radd__(self, other: Union[BigInteger, int]) -> "Rational":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other + self

    def __rsub__(self, other: Union[BigInteger, int]) -> "Rational":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __rmul__(self, other: Union[BigInteger, int]) -> "Rational":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self

    def __rtruediv__(self, other: Union[BigInteger, int]) -> "Rational":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __neg__(self) -> "Rational":
        result = self.copy()
        if not result.is_zero():
            result._sign = result._sign.negated()
        return result

    def __pos__(self) -> "Rational":
        return self.copy()

    def __abs__(self) -> "Rational":
        result = self.copy()
        result._sign = Sign.PLUS
        return result
