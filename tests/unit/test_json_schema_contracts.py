"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Интеграция с Pydantic моделями (NumberSet, NumberSetReport)
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from math_numbers import NumberSet
from math_numbers.core.contracts import (
    NumberSetReportValidator,
    NumberSetValidator,
    SchemaLoader,
    validate_number_set,
    validate_number_set_report,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_number_set():
    """Валидный number_set."""
    return {"numbers": [12, 18, 24]}


@pytest.fixture
def valid_report():
    """Валидный number_set_report."""
    return {
        "numbers": [8, 15],
        "evaluations": [
            {"value": 8, "is_prime": False, "divisors": [1, 2, 4, 8]},
            {"value": 15, "is_prime": False, "divisors": [1, 3, 5, 15]},
        ],
        "gcd": 1,
        "gcd_algorithm": "euclidean",
        "are_coprimes": True,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    @pytest.mark.parametrize("schema_name", ["number_set", "number_set_report"])
    def test_schemas_load(self, schema_name: str):
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("number_set") is loader.load_schema("number_set")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# NUMBER SET CONTRACT
# =============================================================================


class TestNumberSetContract:
    """Тесты контракта number_set."""

    def test_valid(self, valid_number_set):
        validate_number_set(valid_number_set)

    def test_empty_list_valid(self):
        """Arity проверяется операциями, не контрактом"""
        validate_number_set({"numbers": []})

    def test_missing_numbers(self):
        with pytest.raises(ValidationError, match="'numbers' is a required property"):
            validate_number_set({})

    @pytest.mark.parametrize("bad", [1.5, "3", None])
    def test_non_integer_item(self, bad):
        with pytest.raises(ValidationError):
            validate_number_set({"numbers": [1, bad]})

    def test_extra_property(self):
        with pytest.raises(ValidationError):
            validate_number_set({"numbers": [1], "limits": 10})

    def test_is_valid_and_iter_errors(self):
        validator = NumberSetValidator()
        assert validator.is_valid({"numbers": [1, 2]})
        assert not validator.is_valid({"numbers": "1, 2"})
        assert len(list(validator.iter_errors({"numbers": ["a", "b"]}))) == 2

    def test_number_set_dump_complies(self):
        validate_number_set(NumberSet(3, 4).model_dump(mode="json"))


# =============================================================================
# NUMBER SET REPORT CONTRACT
# =============================================================================


class TestNumberSetReportContract:
    """Тесты контракта number_set_report."""

    def test_valid(self, valid_report):
        validate_number_set_report(valid_report)

    def test_zero_gcd_rejected(self, valid_report):
        valid_report["gcd"] = 0
        with pytest.raises(ValidationError):
            validate_number_set_report(valid_report)

    def test_unknown_algorithm_rejected(self, valid_report):
        valid_report["gcd_algorithm"] = "binary"
        with pytest.raises(ValidationError):
            validate_number_set_report(valid_report)

    def test_evaluation_missing_field(self, valid_report):
        del valid_report["evaluations"][0]["is_prime"]
        assert not NumberSetReportValidator().is_valid(valid_report)

    @pytest.mark.parametrize(
        "numbers",
        [(), (17,), (8, 15), (12, 18, 24), (0, -7, 14), (0, 0), (1,)],
    )
    def test_evaluate_output_complies(self, numbers):
        report = NumberSet(*numbers).evaluate()
        validate_number_set_report(report.model_dump(mode="json"))
