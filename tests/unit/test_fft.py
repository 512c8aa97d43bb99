"""
Тесты для FFT и целочисленной свёртки

Проверяет:
1. Длину дополнения до степени двойки
2. Прямое/обратное преобразование
3. Совпадение FFT-свёртки с точной schoolbook свёрткой
"""

import random

import pytest

from src.core.math.fft import (
    fft,
    fft_convolve,
    padded_length,
    schoolbook_convolve,
)


class TestPaddedLength:
    """Тесты padded_length"""

    def test_room_for_double_length(self) -> None:
        assert padded_length(3, 5) == 16
        assert padded_length(4, 4) == 8
        assert padded_length(1, 1) == 2

    def test_empty_operands(self) -> None:
        assert padded_length(0, 0) == 2

    def test_result_fits_product(self) -> None:
        for len_a, len_b in [(1, 7), (9, 9), (16, 3), (33, 33)]:
            assert padded_length(len_a, len_b) >= len_a + len_b - 1


class TestTransform:
    """Тесты fft"""

    def test_impulse_transforms_to_ones(self) -> None:
        values = [1 + 0j, 0j, 0j, 0j]
        fft(values)
        for value in values:
            assert value == pytest.approx(1 + 0j)

    def test_constant_transforms_to_impulse(self) -> None:
        values = [2 + 0j] * 8
        fft(values)
        assert values[0] == pytest.approx(16 + 0j)
        for value in values[1:]:
            assert abs(value) == pytest.approx(0.0, abs=1e-9)

    def test_inverse_restores_input(self) -> None:
        original = [complex(x) for x in (3, 1, 4, 1, 5, 9, 2, 6)]
        values = list(original)
        fft(values)
        fft(values, invert=True)
        for restored, expected in zip(values, original):
            assert restored == pytest.approx(expected)

    def test_length_one_is_identity(self) -> None:
        values = [5 + 0j]
        fft(values)
        assert values == [5 + 0j]

    def test_non_power_of_two_raises(self) -> None:
        with pytest.raises(ValueError, match="power of two"):
            fft([1 + 0j, 2 + 0j, 3 + 0j])


class TestConvolution:
    """Тесты fft_convolve и schoolbook_convolve"""

    def test_small_polynomial_product(self) -> None:
        """(1 + 2x + 3x²)(4 + 5x) = 4 + 13x + 22x² + 15x³"""
        expected = [4, 13, 22, 15, 0, 0, 0, 0]
        assert fft_convolve([1, 2, 3], [4, 5]) == expected
        assert schoolbook_convolve([1, 2, 3], [4, 5]) == expected

    def test_coefficients_not_carried(self) -> None:
        """Коэффициенты могут превышать основание, перенос не выполняется"""
        assert fft_convolve([9999], [9999]) == [99980001, 0]

    def test_zero_operand(self) -> None:
        assert fft_convolve([0, 0], [7, 8]) == [0, 0, 0, 0]
        assert schoolbook_convolve([0, 0], [7, 8]) == [0, 0, 0, 0]

    def test_fft_matches_schoolbook_random(self) -> None:
        rng = random.Random(20240517)
        for _ in range(25):
            a = [rng.randrange(10_000) for _ in range(rng.randint(1, 60))]
            b = [rng.randrange(10_000) for _ in range(rng.randint(1, 60))]
            assert fft_convolve(a, b) == schoolbook_convolve(a, b)

    def test_output_length_matches(self) -> None:
        a, b = [1] * 5, [2] * 12
        assert len(fft_convolve(a, b)) == padded_length(5, 12)
        assert len(schoolbook_convolve(a, b)) == padded_length(5, 12)
