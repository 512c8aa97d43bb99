"""
Records — Сериализуемые записи длинных чисел

Immutable Pydantic модели для обмена значениями BigInteger и Rational
в JSON. Записи хранят только каноническую форму:
- десятичные литералы без ведущих нулей и без "-0"
- дробь несократима, знаменатель > 0, знак вынесен в отдельное поле

Соответствуют схемам contracts/schema/big_integer.json и rational.json.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.biginteger import BigInteger, gcd
from src.core.math.rational import Rational
from src.core.math.sign import Sign

# =============================================================================
# ПАТТЕРНЫ КАНОНИЧЕСКИХ ЛИТЕРАЛОВ
# =============================================================================

# Знаковое целое: 0 или ненулевое без ведущих нулей
SIGNED_LITERAL_PATTERN: Final[str] = r"^(0|-?[1-9][0-9]*)$"

# Неотрицательное целое
NATURAL_LITERAL_PATTERN: Final[str] = r"^(0|[1-9][0-9]*)$"

# Положительное целое
POSITIVE_LITERAL_PATTERN: Final[str] = r"^[1-9][0-9]*$"


# =============================================================================
# BIG INTEGER RECORD
# =============================================================================


class BigIntegerRecord(BaseModel):
    """
    Запись BigInteger.

    Immutable модель (frozen=True), value: каноническая десятичная строка.
    """

    value: str = Field(
        ...,
        pattern=SIGNED_LITERAL_PATTERN,
        description="Каноническое десятичное представление (например, '-1024')",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_value(cls, number: BigInteger) -> "BigIntegerRecord":
        return cls(value=str(number))

    def to_value(self) -> BigInteger:
        return BigInteger(self.value)


# =============================================================================
# RATIONAL RECORD
# =============================================================================


class RationalRecord(BaseModel):
    """
    Запись Rational.

    Числитель и знаменатель хранятся как модули, знак хранится отдельно.
    Ноль записывается как sign='+', numerator='0', denominator='1'.
    """

    sign: Sign = Field(Sign.PLUS, description="Знак дроби ('+' или '-')")
    numerator: str = Field(..., pattern=NATURAL_LITERAL_PATTERN, description="Модуль числителя")
    denominator: str = Field(
        "1", pattern=POSITIVE_LITERAL_PATTERN, description="Знаменатель (всегда > 0)"
    )

    model_config = {"frozen": True}

    @field_validator("denominator")
    @classmethod
    def validate_coprime(cls, v: str, info) -> str:
        """Проверка несократимости дроби"""
        if "numerator" in info.data:
            g = gcd(BigInteger(info.data["numerator"]), BigInteger(v))
            if not g.is_one():
                raise ValueError(
                    f"fraction {info.data['numerator']}/{v} is not reduced (gcd={g})"
                )
        return v

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "RationalRecord":
        """Ноль всегда положительный"""
        if self.numerator == "0" and self.sign is Sign.MINUS:
            raise ValueError("zero must carry sign '+'")
        return self

    @classmethod
    def from_value(cls, number: Rational) -> "RationalRecord":
        return cls(
            sign=number.sign,
            numerator=str(number.numerator),
            denominator=str(number.denominator),
        )

    def to_value(self) -> Rational:
        value = Rational(self.numerator, self.denominator)
        if self.sign is Sign.MINUS:
            return -value
        return value
