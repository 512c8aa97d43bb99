"""
BigInteger — Целое число произвольной точности

Модуль реализует знаковое длинное целое на массиве десятичных групп:
- Хранение: группы по GROUP_WIDTH десятичных цифр, младшая группа первой
- Сложение/вычитание с переносом/заёмом по основанию RADIX
- Умножение через FFT-свёртку (O(n log n)) с переходом на точную
  schoolbook свёртку за границей точности double
- Деление в столбик повторным вычитанием сдвинутого делителя
- Разбор и форматирование в десятичной системе

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каноническая форма: нет старших нулевых групп, ноль хранится как [0]
2. Ноль всегда имеет знак PLUS
3. Деление усекает к нулю, знак остатка совпадает со знаком делимого
4. Деление на ноль → DivisionByZero, никогда не молчаливый результат
"""

import logging
import re
from typing import Final, TextIO, Union

from src.core.math.fft import fft_convolve, schoolbook_convolve
from src.core.math.numerical_safeguards import fft_convolution_is_safe
from src.core.math.sign import Sign

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество десятичных цифр в одной группе
GROUP_WIDTH: Final[int] = 4

# Основание системы счисления групп
RADIX: Final[int] = 10**GROUP_WIDTH

# Допустимый десятичный литерал: необязательный '-' и хотя бы одна цифра
_DECIMAL_LITERAL: Final = re.compile(r"-?[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Деление или остаток от деления на ноль.

    Операция не выполняется, делимое не изменяется.
    """

    pass


class MalformedInput(ValueError):
    """
    Строка не является десятичным литералом.

    Допустимо: необязательный ведущий '-', затем только цифры 0-9.
    Пустая строка, '+', разделители и пробелы недопустимы.
    """

    pass


# =============================================================================
# ОПЕРАЦИИ НАД МОДУЛЯМИ (списки групп)
# =============================================================================


def _delete_trailing_zero_groups(groups: list[int]) -> None:
    while len(groups) > 1 and groups[-1] == 0:
        groups.pop()


def _magnitude_less(lhs: list[int], rhs: list[int]) -> bool:
    """|lhs| < |rhs| для канонических списков групп."""
    if len(lhs) != len(rhs):
        return len(lhs) < len(rhs)
    for i in range(len(lhs) - 1, -1, -1):
        if lhs[i] != rhs[i]:
            return lhs[i] < rhs[i]
    return False


def _add_magnitudes(lhs: list[int], rhs: list[int]) -> list[int]:
    length = max(len(lhs), len(rhs))
    result = []
    carry = 0
    for i in range(length):
        total = carry
        if i < len(lhs):
            total += lhs[i]
        if i < len(rhs):
            total += rhs[i]
        carry, group = divmod(total, RADIX)
        result.append(group)
    result.append(carry)
    _delete_trailing_zero_groups(result)
    return result


def _subtract_magnitudes(big: list[int], small: list[int]) -> list[int]:
    """|big| - |small|, требует |big| >= |small|."""
    result = []
    borrow = 0
    for i in range(len(big)):
        group = big[i] - borrow - (small[i] if i < len(small) else 0)
        borrow = 0
        if group < 0:
            group += RADIX
            borrow = 1
        result.append(group)
    _delete_trailing_zero_groups(result)
    return result


def _multiply_magnitudes(lhs: list[int], rhs: list[int]) -> list[int]:
    if fft_convolution_is_safe(len(lhs), len(rhs), RADIX):
        coefficients = fft_convolve(lhs, rhs)
    else:
        logger.debug(
            "FFT precision bound exceeded for %d x %d groups, using schoolbook convolution",
            len(lhs),
            len(rhs),
        )
        coefficients = schoolbook_convolve(lhs, rhs)

    result = []
    carry = 0
    for value in coefficients:
        carry, group = divmod(value + carry, RADIX)
        result.append(group)
    while carry:
        carry, group = divmod(carry, RADIX)
        result.append(group)
    _delete_trailing_zero_groups(result)
    return result


def _divide_by_ten(groups: list[int]) -> None:
    remainder = 0
    for i in range(len(groups) - 1, -1, -1):
        current = groups[i] + remainder * RADIX
        groups[i], remainder = divmod(current, 10)
    _delete_trailing_zero_groups(groups)


# =============================================================================
# BIG INTEGER
# =============================================================================


IntegerLike = Union["BigInteger", int]


class BigInteger:
    """
    Знаковое целое произвольной точности.

    Изменяемый объект: составные операторы (+=, -=, *=, /=, %=) меняют
    экземпляр на месте, бинарные операторы возвращают новый экземпляр.
    Все копии глубокие, хранилище групп не разделяется между экземплярами.

    Examples:
        >>> str(BigInteger("999") + 1)
        '1000'
        >>> str(BigInteger(-7) / 2), str(BigInteger(-7) % 2)
        ('-3', '-1')
    """

    __slots__ = ("_groups", "_sign")

    # Изменяемый тип не хэшируется
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Union["BigInteger", int, str] = 0):
        if isinstance(value, BigInteger):
            self._groups = list(value._groups)
            self._sign = value._sign
        elif isinstance(value, bool):
            raise TypeError("BigInteger cannot be constructed from bool")
        elif isinstance(value, int):
            self._sign = Sign.of(value)
            self._groups = self._groups_of(abs(value))
        elif isinstance(value, str):
            self._sign, self._groups = self._parse(value)
        else:
            raise TypeError(f"Cannot construct BigInteger from {type(value).__name__}")
        self._normalize()

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @staticmethod
    def _groups_of(magnitude: int) -> list[int]:
        groups = []
        while True:
            magnitude, group = divmod(magnitude, RADIX)
            groups.append(group)
            if magnitude == 0:
                return groups

    @staticmethod
    def _parse(text: str) -> tuple[Sign, list[int]]:
        if not _DECIMAL_LITERAL.fullmatch(text):
            raise MalformedInput(f"Not a decimal integer literal: {text!r}")

        sign = Sign.PLUS
        start = 0
        if text[0] == "-":
            sign = Sign.MINUS
            start = 1

        # Окна по GROUP_WIDTH символов с младшего конца, старшее окно может быть короче
        groups = []
        end = len(text)
        while end > start:
            begin = max(start, end - GROUP_WIDTH)
            groups.append(int(text[begin:end]))
            end = begin
        return sign, groups

    @classmethod
    def from_stream(cls, stream: TextIO) -> "BigInteger":
        """
        Чтение числа из текстового потока.

        Читается один токен, ограниченный пробельными символами.

        Raises:
            MalformedInput: Если поток пуст или токен не является числом
        """
        return cls(read_token(stream))

    def copy(self) -> "BigInteger":
        return BigInteger(self)

    def _normalize(self) -> None:
        _delete_trailing_zero_groups(self._groups)
        if self.is_zero():
            self._sign = Sign.PLUS

    @staticmethod
    def _coerce(value: object) -> "BigInteger":
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return BigInteger(value)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Доступ к представлению
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        """Количество групп"""
        return len(self._groups)

    def __getitem__(self, index: int) -> int:
        """Группа по индексу (младшая группа — индекс 0)"""
        return self._groups[index]

    @property
    def sign(self) -> Sign:
        return self._sign

    @sign.setter
    def sign(self, value: Sign) -> None:
        self._sign = Sign(value)
        self._normalize()

    def is_zero(self) -> bool:
        return len(self._groups) == 1 and self._groups[0] == 0

    def is_one(self) -> bool:
        return len(self._groups) == 1 and self._groups[0] == 1 and self._sign is Sign.PLUS

    def is_negative(self) -> bool:
        return self._sign is Sign.MINUS

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        digits = "".join(f"{group:0{GROUP_WIDTH}d}" for group in reversed(self._groups))
        digits = digits.lstrip("0") or "0"
        if self._sign is Sign.MINUS:
            return "-" + digits
        return digits

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def __int__(self) -> int:
        magnitude = 0
        for group in reversed(self._groups):
            magnitude = magnitude * RADIX + group
        return -magnitude if self._sign is Sign.MINUS else magnitude

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._sign is other._sign and self._groups == other._groups

    def __lt__(self, other: IntegerLike) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if self._sign is not other._sign:
            return self._sign is Sign.MINUS
        if self._groups == other._groups:
            return False
        negative = self._sign is Sign.MINUS
        return negative ^ _magnitude_less(self._groups, other._groups)

    def __le__(self, other: IntegerLike) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not other < self

    def __gt__(self, other: IntegerLike) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other < self

    def __ge__(self, other: IntegerLike) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not self < other

    # -------------------------------------------------------------------------
    # Составные операторы (изменяют self)
    # -------------------------------------------------------------------------

    def __iadd__(self, other: IntegerLike) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        if self._sign is other._sign:
            self._groups = _add_magnitudes(self._groups, other._groups)
        elif _magnitude_less(self._groups, other._groups):
            self._groups = _subtract_magnitudes(other._groups, self._groups)
            self._sign = other._sign
        else:
            self._groups = _subtract_magnitudes(self._groups, other._groups)

        self._normalize()
        return self

    def __isub__(self, other: IntegerLike) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self += -other
        return self

    def __imul__(self, other: IntegerLike) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        if self.is_zero() or other.is_zero():
            self._groups = [0]
        else:
            self._groups = _multiply_magnitudes(self._groups, other._groups)
        self._sign = self._sign * other._sign

        self._normalize()
        return self

    def __itruediv__(self, other: IntegerLike) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        digits, _ = long_division(self, other)
        quotient = BigInteger("".join(str(digit) for digit in digits))
        sign = self._sign * other._sign

        self._groups = quotient._groups
        self._sign = sign
        self._normalize()
        return self

    def __imod__(self, other: IntegerLike) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        self -= self / other * other
        return self

    def increment(self) -> "BigInteger":
        """Увеличение на 1 на месте"""
        self += 1
        return self

    def decrement(self) -> "BigInteger":
        """Уменьшение на 1 на месте"""
        self -= 1
        return self

    # -------------------------------------------------------------------------
    # Бинарные и унарные операторы (возвращают новый экземпляр)
    # -------------------------------------------------------------------------

    def __add__(self, other: IntegerLike) -> "BigInteger":
        result = self.copy()
        return result.__iadd__(other)

    def __sub__(self, other: IntegerLike) -> "BigInteger":
        result = self.copy()
        return result.__isub__(other)

    def __mul__(self, other: IntegerLike) -> "BigInteger":
        result = self.copy()
        return result.__imul__(other)

    def __truediv__(self, other: IntegerLike) -> "BigInteger":
        result = self.copy()
        return result.__itruediv__(other)

    def __mod__(self, other: IntegerLike) -> "BigInteger":
        result = self.copy()
        return result.__imod__(other)

    def __divmod__(self, other: IntegerLike) -> tuple["BigInteger", "BigInteger"]:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        quotient = self / other
        return quotient, self - quotient * other

    def __radd__(self, other: int) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other + self

    def __rsub__(self, other: int) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __rmul__(self, other: int) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self

    def __rtruediv__(self, other: int) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __rmod__(self, other: int) -> "BigInteger":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other % self

    def __neg__(self) -> "BigInteger":
        result = self.copy()
        result._sign = result._sign.negated()
        result._normalize()
        return result

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __abs__(self) -> "BigInteger":
        result = self.copy()
        result._sign = Sign.PLUS
        return result


# =============================================================================
# ДЕЛЕНИЕ В СТОЛБИК
# =============================================================================


def long_division(dividend: BigInteger, divisor: BigInteger) -> tuple[list[int], BigInteger]:
    """
    Деление модулей в столбик по десятичным разрядам.

    Делитель сдвигается на (len(dividend) - len(divisor) + 1) * GROUP_WIDTH
    десятичных разрядов, затем для каждого разряда от старшего к младшему
    считается, сколько раз сдвинутый делитель вычитается из остатка.
    После каждого разряда сдвинутый делитель делится на 10.

    Args:
        dividend: Делимое (знак игнорируется)
        divisor: Делитель (знак игнорируется)

    Returns:
        (digits, remainder):
            - digits: десятичные цифры частного |dividend| / |divisor|,
              старшая первой (возможны ведущие нули)
            - remainder: |dividend| mod |divisor|, неотрицательный

    Raises:
        DivisionByZero: Если divisor == 0

    Examples:
        >>> digits, remainder = long_division(BigInteger(7), BigInteger(2))
        >>> int("".join(map(str, digits))), str(remainder)
        (3, '1')
    """
    if divisor.is_zero():
        raise DivisionByZero(f"Division of {dividend} by zero")

    remainder = abs(dividend)
    if len(divisor) > len(dividend):
        return [0], remainder

    degree = (len(dividend) - len(divisor) + 1) * GROUP_WIDTH
    shifted = BigInteger(str(abs(divisor)) + "0" * degree)

    digits = []
    for _ in range(degree, -1, -1):
        digit = 0
        while not _magnitude_less(remainder._groups, shifted._groups):
            remainder._groups = _subtract_magnitudes(remainder._groups, shifted._groups)
            digit += 1
        digits.append(digit)
        _divide_by_ten(shifted._groups)

    remainder._normalize()
    return digits, remainder


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def gcd(a: IntegerLike, b: IntegerLike) -> BigInteger:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Работает с модулями, результат неотрицательный. gcd(0, 0) == 0.

    Examples:
        >>> str(gcd(BigInteger(12), BigInteger(-18)))
        '6'
    """
    a = abs(BigInteger(a))
    b = abs(BigInteger(b))
    while b:
        a %= b
        a, b = b, a
    return a


def read_token(stream: TextIO) -> str:
    """
    Чтение одного токена, ограниченного пробельными символами.

    Ведущие пробелы пропускаются, первый пробел после токена поглощается.

    Raises:
        MalformedInput: Если до конца потока не найдено ни одного символа
    """
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)

    token = []
    while char and not char.isspace():
        token.append(char)
        char = stream.read(1)

    if not token:
        raise MalformedInput("Unexpected end of stream, expected a token")
    return "".join(token)
