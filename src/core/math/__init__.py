"""
Core math modules

Длинная арифметика: целые произвольной точности, точные дроби,
FFT-свёртка и численные защиты для неё.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    FFT_ERROR_HEADROOM_BITS,
    FFT_SAFE_MAGNITUDE,
    FLOAT_MANTISSA_BITS,
    convolution_magnitude_bound,
    fft_convolution_is_safe,
    is_valid_float,
    round_half_up,
    validate_non_negative_int,
    validate_power_of_two,
)

# Sign
from src.core.math.sign import Sign

# FFT
from src.core.math.fft import (
    fft,
    fft_convolve,
    padded_length,
    schoolbook_convolve,
)

# BigInteger
from src.core.math.biginteger import (
    GROUP_WIDTH,
    RADIX,
    BigInteger,
    DivisionByZero,
    MalformedInput,
    gcd,
    long_division,
    read_token,
)

# Rational
from src.core.math.rational import (
    FLOAT_CONVERSION_PRECISION,
    Rational,
)

__all__ = [
    # Numerical Safeguards — Constants
    "FLOAT_MANTISSA_BITS",
    "FFT_ERROR_HEADROOM_BITS",
    "FFT_SAFE_MAGNITUDE",
    # Numerical Safeguards — Functions
    "convolution_magnitude_bound",
    "fft_convolution_is_safe",
    "is_valid_float",
    "round_half_up",
    "validate_non_negative_int",
    "validate_power_of_two",
    # Sign
    "Sign",
    # FFT
    "fft",
    "fft_convolve",
    "padded_length",
    "schoolbook_convolve",
    # BigInteger — Constants
    "GROUP_WIDTH",
    "RADIX",
    # BigInteger — Exceptions
    "DivisionByZero",
    "MalformedInput",
    # BigInteger — Types & Functions
    "BigInteger",
    "gcd",
    "long_division",
    "read_token",
    # Rational
    "FLOAT_CONVERSION_PRECISION",
    "Rational",
]
