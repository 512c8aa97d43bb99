"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и patterns
- Интеграция с Pydantic записями
"""

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    BigIntegerValidator,
    RationalValidator,
    SchemaLoader,
    validate_big_integer,
    validate_rational,
)
from src.core.domain import BigIntegerRecord, RationalRecord
from src.core.math import BigInteger, Rational


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schemas_load(self) -> None:
        loader = SchemaLoader()
        for name in ("big_integer", "rational"):
            schema = loader.load_schema(name)
            assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("rational") is loader.load_schema("rational")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# BIG INTEGER CONTRACT
# =============================================================================


class TestBigIntegerContract:
    """Тесты big_integer контракта"""

    @pytest.mark.parametrize("value", ["0", "-1", "10000", "-123456789012345678901234567890"])
    def test_valid(self, value: str) -> None:
        validate_big_integer({"value": value})

    @pytest.mark.parametrize("value", ["-0", "007", "", "1e5"])
    def test_invalid_pattern(self, value: str) -> None:
        with pytest.raises(ValidationError):
            validate_big_integer({"value": value})

    def test_wrong_type(self) -> None:
        with pytest.raises(ValidationError):
            validate_big_integer({"value": 12})

    def test_required_and_extra(self) -> None:
        validator = BigIntegerValidator()
        assert not validator.is_valid({})
        assert not validator.is_valid({"value": "1", "sign": "+"})

    def test_record_dump_is_valid(self) -> None:
        record = BigIntegerRecord.from_value(BigInteger("-98765432109876543210"))
        validate_big_integer(record.model_dump(mode="json"))


# =============================================================================
# RATIONAL CONTRACT
# =============================================================================


class TestRationalContract:
    """Тесты rational контракта"""

    def test_valid(self) -> None:
        validate_rational({"sign": "-", "numerator": "1", "denominator": "3"})
        validate_rational({"sign": "+", "numerator": "0", "denominator": "1"})

    def test_negative_zero_invalid(self) -> None:
        with pytest.raises(ValidationError):
            validate_rational({"sign": "-", "numerator": "0", "denominator": "1"})

    def test_zero_requires_unit_denominator(self) -> None:
        with pytest.raises(ValidationError):
            validate_rational({"sign": "+", "numerator": "0", "denominator": "5"})

    def test_zero_denominator_invalid(self) -> None:
        with pytest.raises(ValidationError):
            validate_rational({"sign": "+", "numerator": "1", "denominator": "0"})

    def test_signed_numerator_invalid(self) -> None:
        with pytest.raises(ValidationError):
            validate_rational({"sign": "+", "numerator": "-1", "denominator": "2"})

    def test_collects_all_errors(self) -> None:
        validator = RationalValidator()
        errors = list(validator.iter_errors({"sign": "?", "numerator": "x"}))
        assert len(errors) >= 3

    @pytest.mark.parametrize(
        "value",
        [Rational(-6, 4), Rational(0), Rational(BigInteger("123456789012345678901"), 7)],
    )
    def test_record_dump_is_valid(self, value: Rational) -> None:
        record = RationalRecord.from_value(value)
        validate_rational(record.model_dump(mode="json"))
