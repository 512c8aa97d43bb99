"""
FFT — Быстрое преобразование Фурье и свёртка целых последовательностей

Модуль реализует умножение многочленов за O(n log n):
- Итеративный FFT in-place (bit-reversal перестановка + butterfly стадии)
- Обратное преобразование с делением на длину
- Свёртка целочисленных последовательностей с округлением до целых
- Точная schoolbook свёртка O(n²) для операндов за границей точности

ФОРМУЛЫ:
    w_len = exp(±2πi / len)      (знак минус для обратного преобразования)
    A(x) * B(x) = IFFT(FFT(A) · FFT(B))

Ограничение точности: коэффициенты свёртки должны оставаться в пределах
точности double, см. numerical_safeguards.fft_convolution_is_safe.
"""

import cmath
import math
from typing import Sequence

from src.core.math.numerical_safeguards import (
    round_half_up,
    validate_power_of_two,
)


# =============================================================================
# ПРЕОБРАЗОВАНИЕ
# =============================================================================


def _bit_reverse_permute(values: list[complex]) -> None:
    n = len(values)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            values[i], values[j] = values[j], values[i]


def fft(values: list[complex], invert: bool = False) -> None:
    """
    Итеративное быстрое преобразование Фурье in-place.

    Args:
        values: Коэффициенты (длина — степень двойки), изменяются на месте
        invert: True для обратного преобразования (с делением на длину)

    Raises:
        ValueError: Если длина не степень двойки
    """
    n = len(values)
    validate_power_of_two(n, "len(values)")

    _bit_reverse_permute(values)

    length = 2
    while length <= n:
        half = length // 2
        angle = 2 * math.pi / length * (-1 if invert else 1)
        roots = [cmath.exp(1j * angle * k) for k in range(half)]
        for start in range(0, n, length):
            for k in range(half):
                u = values[start + k]
                v = values[start + k + half] * roots[k]
                values[start + k] = u + v
                values[start + k + half] = u - v
        length <<= 1

    if invert:
        for i in range(n):
            values[i] /= n


def padded_length(len_a: int, len_b: int) -> int:
    """
    Длина FFT для свёртки: степень двойки ≥ 2 * max(len_a, len_b).

    Examples:
        >>> padded_length(3, 5)
        16
        >>> padded_length(1, 1)
        2
    """
    n = 1
    while n < max(len_a, len_b, 1):
        n <<= 1
    return n << 1


# =============================================================================
# СВЁРТКА
# =============================================================================


def fft_convolve(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Свёртка двух целочисленных последовательностей через FFT.

    Результат не нормализован по основанию: коэффициенты могут быть
    больше основания, перенос выполняет вызывающий код.

    Args:
        a: Первая последовательность (младшие коэффициенты первыми)
        b: Вторая последовательность

    Returns:
        Коэффициенты произведения длины padded_length(len(a), len(b))
    """
    n = padded_length(len(a), len(b))

    fa = [complex(x) for x in a] + [0j] * (n - len(a))
    fb = [complex(x) for x in b] + [0j] * (n - len(b))

    fft(fa)
    fft(fb)
    for i in range(n):
        fa[i] *= fb[i]
    fft(fa, invert=True)

    return [round_half_up(value.real) for value in fa]


def schoolbook_convolve(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Точная свёртка O(len(a) * len(b)) только на целых числах.

    Контракт совпадает с fft_convolve: та же длина результата,
    коэффициенты без переноса.
    """
    result = [0] * padded_length(len(a), len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        for j, y in enumerate(b):
            result[i + j] += x * y
    return result
