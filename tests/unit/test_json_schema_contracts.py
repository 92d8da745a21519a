"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидатора big_int:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция нарушений constraints (minimum/maximum/minItems)
- Интеграция с Pydantic моделью BigInt
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    BigIntValidator,
    ContractValidator,
    SchemaLoader,
    validate_big_int,
)
from src.core.domain import BigInt, LimbFormat
from src.core.math import to_big_integer


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_big_int():
    """Валидный сериализованный BigInt."""
    return {"limbs": [345678901234567890, 123456789012], "magnitude": 18}


@pytest.fixture
def validator():
    return BigIntValidator()


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_big_int():
    loader = SchemaLoader()
    schema = loader.load_schema("big_int")
    assert schema["title"] == "BigInt"
    assert schema["required"] == ["limbs", "magnitude"]


def test_schema_loader_caches():
    loader = SchemaLoader()
    assert loader.load_schema("big_int") is loader.load_schema("big_int")


def test_schema_loader_missing_schema():
    with pytest.raises(FileNotFoundError):
        SchemaLoader().load_schema("does_not_exist")


def test_schema_loader_missing_dir(tmp_path: Path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "nowhere")


def test_schema_loader_rejects_invalid_schema(tmp_path: Path):
    (tmp_path / "broken.json").write_text(
        json.dumps({"type": "not-a-type"}), encoding="utf-8"
    )
    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        SchemaLoader(tmp_path).load_schema("broken")


def test_contract_validator_with_custom_loader(tmp_path: Path):
    (tmp_path / "digits.json").write_text(
        json.dumps({"type": "string", "pattern": "^[0-9]+$"}), encoding="utf-8"
    )
    validator = ContractValidator("digits", loader=SchemaLoader(tmp_path))
    assert validator.is_valid("12345")
    assert not validator.is_valid("12a3")


# =============================================================================
# TESTS - VALID DATA
# =============================================================================


def test_valid_big_int(valid_big_int, validator):
    validator.validate(valid_big_int)
    assert validator.is_valid(valid_big_int)
    validate_big_int(valid_big_int)


def test_valid_zero(validator):
    assert validator.is_valid({"limbs": [0], "magnitude": 3})


# =============================================================================
# TESTS - VIOLATIONS
# =============================================================================


@pytest.mark.parametrize("field", ["limbs", "magnitude"])
def test_missing_required_field(valid_big_int, validator, field):
    del valid_big_int[field]
    with pytest.raises(ValidationError):
        validator.validate(valid_big_int)


def test_empty_limbs(valid_big_int, validator):
    valid_big_int["limbs"] = []
    with pytest.raises(ValidationError):
        validator.validate(valid_big_int)


@pytest.mark.parametrize("limb", [-1, 10**18, "5", 1.5, None])
def test_invalid_limb(valid_big_int, validator, limb):
    valid_big_int["limbs"] = [limb]
    assert not validator.is_valid(valid_big_int)


@pytest.mark.parametrize("magnitude", [0, 19, "18"])
def test_invalid_magnitude(valid_big_int, validator, magnitude):
    valid_big_int["magnitude"] = magnitude
    assert not validator.is_valid(valid_big_int)


def test_additional_properties_rejected(valid_big_int, validator):
    valid_big_int["length"] = 2
    with pytest.raises(ValidationError):
        validator.validate(valid_big_int)


def test_iter_errors_reports_all(validator):
    errors = list(validator.iter_errors({"limbs": [-1, -2], "magnitude": 0}))
    assert len(errors) == 3


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


def test_big_int_model_generates_valid_json():
    """Проверка, что Pydantic BigInt модель генерирует валидный JSON."""
    value = to_big_integer("123456789012345678901234567890")
    validate_big_int(value.to_contract())


def test_contract_roundtrip_through_model():
    value = to_big_integer("1000000001", LimbFormat(3))
    data = json.loads(json.dumps(value.to_contract()))
    validate_big_int(data)
    assert BigInt.model_validate(data) == value
