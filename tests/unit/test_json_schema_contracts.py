"""
Tests for JSON Schema Contract Validators

Тестирование:
- Валидность самих схем
- Валидация правильного отчёта
- Детекция нарушений required полей и типов
- Детекция нарушения value/error взаимоисключения
- Интеграция с Pydantic моделью DemoReport
"""

import copy
import json

import pytest
from jsonschema import ValidationError

from closurekit.core.contracts import (
    SCHEMA_DIR,
    ContractValidator,
    DemoReportValidator,
    SchemaLoader,
    validate_demo_report,
)
from closurekit.demo import run_demo


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_report():
    """Валидный demo_report для тестирования."""
    return {
        "validators": [
            {"name": "factorial", "args": [5], "value": 120, "error": None},
            {
                "name": "power",
                "args": [2, -1],
                "value": None,
                "error": "negative exponents not supported",
            },
        ],
        "closures": {
            "counter_outputs": {"counter_a": [1, 2, 3]},
            "multiplier_outputs": {"times_2": 10},
            "accumulator_trace": [100, 150, 120],
            "accumulator_final": 120,
        },
        "pipeline": {
            "source": [1, 2, 3, 4],
            "squared": [1, 4, 9, 16],
            "evens": [2, 4],
            "sum": 10,
            "product": 24,
            "composed": 20,
            "chained_output": [4, 16],
        },
        "process": {
            "identity": {"pid": 1234, "ppid": 1},
            "addresses": {"container_id": 140000000, "first_element_id": None},
        },
        "aliasing": {
            "original_value": 10,
            "new_value": 99,
            "after_rebind": 10,
            "after_mutate": 99,
        },
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader."""

    def test_schema_dir_exists(self):
        assert SCHEMA_DIR.exists()
        assert (SCHEMA_DIR / "demo_report.json").exists()

    def test_load_schema_cached(self):
        loader = SchemaLoader()
        first = loader.load_schema("demo_report")
        second = loader.load_schema("demo_report")
        assert first is second
        assert first["title"] == "demo_report"

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(schema_dir=tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(
            json.dumps({"type": "no-such-type"}), encoding="utf-8"
        )
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(schema_dir=tmp_path).load_schema("broken")

    def test_custom_loader_for_validator(self, tmp_path):
        (tmp_path / "ints.json").write_text(
            json.dumps({"type": "array", "items": {"type": "integer"}}), encoding="utf-8"
        )
        validator = ContractValidator("ints", loader=SchemaLoader(schema_dir=tmp_path))
        assert validator.is_valid([1, 2, 3])
        assert not validator.is_valid([1, "2"])


# =============================================================================
# DEMO REPORT CONTRACT
# =============================================================================


class TestDemoReportContract:
    """Тесты demo_report контракта."""

    def test_valid_report(self, valid_report):
        validate_demo_report(valid_report)
        assert DemoReportValidator().is_valid(valid_report)

    def test_missing_required_section(self, valid_report):
        del valid_report["pipeline"]
        with pytest.raises(ValidationError):
            validate_demo_report(valid_report)

    def test_wrong_type(self, valid_report):
        valid_report["pipeline"]["sum"] = "ten"
        with pytest.raises(ValidationError):
            validate_demo_report(valid_report)

    def test_unknown_validator_name(self, valid_report):
        valid_report["validators"][0]["name"] = "fibonacci"
        with pytest.raises(ValidationError):
            validate_demo_report(valid_report)

    def test_value_and_error_both_set(self, valid_report):
        valid_report["validators"][0]["error"] = "oops"
        with pytest.raises(ValidationError):
            validate_demo_report(valid_report)

    def test_value_and_error_both_null(self, valid_report):
        valid_report["validators"][0]["value"] = None
        with pytest.raises(ValidationError):
            validate_demo_report(valid_report)

    def test_negative_pid(self, valid_report):
        valid_report["process"]["identity"]["pid"] = -1
        with pytest.raises(ValidationError):
            validate_demo_report(valid_report)

    def test_additional_properties_rejected(self, valid_report):
        report = copy.deepcopy(valid_report)
        report["extra"] = 1
        assert not DemoReportValidator().is_valid(report)
        assert len(list(DemoReportValidator().iter_errors(report))) == 1

    def test_pydantic_dump_is_valid(self):
        """DemoReport.model_dump(mode='json') проходит контракт."""
        report = run_demo(out=lambda line: None)
        validate_demo_report(report.model_dump(mode="json"))
