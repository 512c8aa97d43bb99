"""
Numerical Safeguards — FFT Precision Guards

Модуль обеспечивает численную устойчивость FFT-умножения длинных чисел:
- Граница точности double (52 бита мантиссы) для коэффициентов свёртки
- Округление результатов обратного FFT до ближайшего целого
- Проверка, помещается ли свёртка в безопасный диапазон
- Валидация целочисленных параметров (precision, длины)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат FFT-свёртки используется только если он гарантированно точен
2. NaN/Inf никогда не превращаются в "цифры" (ValueError)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Количество бит мантиссы double (IEEE 754)
# Целые числа до 2^52 представляются точно
FLOAT_MANTISSA_BITS: Final[int] = 52

# Запас бит под накопленную ошибку округления внутри FFT
# Ошибка растёт с глубиной преобразования, поэтому граница берётся с запасом
FFT_ERROR_HEADROOM_BITS: Final[int] = 8

# Максимальная безопасная величина коэффициента свёртки с учётом глубины FFT
FFT_SAFE_MAGNITUDE: Final[int] = 2 ** (FLOAT_MANTISSA_BITS - FFT_ERROR_HEADROOM_BITS)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def round_half_up(value: float) -> int:
    """
    Округление float до ближайшего целого (half up).

    Теоретически результат обратного FFT — целое число, поэтому
    добавляем 0.5 и берём floor.

    Args:
        value: Значение после обратного преобразования

    Returns:
        Ближайшее целое

    Raises:
        ValueError: Если value NaN/Inf

    Examples:
        >>> round_half_up(41.9999999)
        42
        >>> round_half_up(7.0000001)
        7
        >>> round_half_up(-0.0000001)
        0
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot round non-finite value: {value}")

    return math.floor(value + 0.5)


# =============================================================================
# ГРАНИЦА ТОЧНОСТИ СВЁРТКИ
# =============================================================================


def convolution_magnitude_bound(len_a: int, len_b: int, radix: int) -> int:
    """
    Верхняя граница коэффициента свёртки двух последовательностей цифр.

    Каждое произведение цифр ≤ (radix - 1)^2, а в один коэффициент
    попадает не более min(len_a, len_b) произведений.

    Args:
        len_a: Длина первой последовательности
        len_b: Длина второй последовательности
        radix: Основание системы счисления цифр

    Returns:
        (radix - 1)^2 * min(len_a, len_b)

    Examples:
        >>> convolution_magnitude_bound(3, 5, 10)
        243
    """
    validate_non_negative_int(len_a, "len_a")
    validate_non_negative_int(len_b, "len_b")
    if radix < 2:
        raise ValueError(f"radix must be >= 2, got {radix}")

    return (radix - 1) ** 2 * min(len_a, len_b)


def fft_convolution_is_safe(len_a: int, len_b: int, radix: int) -> bool:
    """
    Проверка, что FFT-свёртка будет точной после округления.

    Граница коэффициента умножается на глубину преобразования
    (log2 длины FFT), результат должен быть ≤ FFT_SAFE_MAGNITUDE.

    Args:
        len_a: Длина первой последовательности
        len_b: Длина второй последовательности
        radix: Основание системы счисления цифр

    Returns:
        True если округление результата FFT гарантированно точное

    Examples:
        >>> fft_convolution_is_safe(10, 10, 10_000)
        True
        >>> fft_convolution_is_safe(10**6, 10**6, 10_000)
        False
    """
    bound = convolution_magnitude_bound(len_a, len_b, radix)
    depth = max(2 * max(len_a, len_b, 1) - 1, 1).bit_length()

    return bound * depth <= FFT_SAFE_MAGNITUDE


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение — неотрицательное целое.

    bool не принимается, хотя формально является подклассом int.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_power_of_two(value: int, name: str) -> None:
    """
    Валидация, что значение — положительная степень двойки.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не степень двойки
    """
    validate_non_negative_int(value, name)

    if value == 0 or value & (value - 1):
        raise ValueError(f"{name} must be a power of two, got {value}")
