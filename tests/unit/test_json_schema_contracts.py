"""
Тесты для JSON Schema контрактов

Проверяет:
1. Загрузку и meta-validation схем
2. Валидацию vector_snapshot (валидные/невалидные payload)
3. Валидацию extremum_result
4. Снимок вектора и восстановление из payload
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any

import pytest
from jsonschema import ValidationError

from src.numvec.contracts import (
    ExtremumResultValidator,
    SchemaLoader,
    VectorSnapshotValidator,
    validate_extremum_result,
    validate_vector_snapshot,
)
from src.numvec.errors import ElementTypeError, InvalidArgument
from src.numvec.vector import NumericVector


@pytest.fixture
def valid_snapshot() -> dict[str, Any]:
    """Валидный снимок int-вектора"""
    return {"dtype": "int", "size": 3, "elements": [10, 20, 30]}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    def test_loads_known_schemas(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("vector_snapshot")["title"] == "VectorSnapshot"
        assert loader.load_schema("extremum_result")["title"] == "ExtremumResult"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("vector_snapshot") is loader.load_schema("vector_snapshot")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# VECTOR SNAPSHOT
# =============================================================================


class TestVectorSnapshotContract:
    """Тесты для vector_snapshot контракта"""

    def test_valid_snapshot(self, valid_snapshot: dict[str, Any]) -> None:
        validate_vector_snapshot(valid_snapshot)
        assert VectorSnapshotValidator().is_valid(valid_snapshot)

    def test_empty_snapshot(self) -> None:
        validate_vector_snapshot({"dtype": "float", "size": 0, "elements": []})

    def test_missing_field(self, valid_snapshot: dict[str, Any]) -> None:
        del valid_snapshot["size"]
        with pytest.raises(ValidationError):
            validate_vector_snapshot(valid_snapshot)

    def test_unknown_dtype(self, valid_snapshot: dict[str, Any]) -> None:
        valid_snapshot["dtype"] = "complex"
        with pytest.raises(ValidationError):
            validate_vector_snapshot(valid_snapshot)

    def test_negative_size(self, valid_snapshot: dict[str, Any]) -> None:
        valid_snapshot["size"] = -1
        with pytest.raises(ValidationError):
            validate_vector_snapshot(valid_snapshot)

    def test_float_element_in_int_snapshot(self, valid_snapshot: dict[str, Any]) -> None:
        valid_snapshot["elements"] = [1, 2.5, 3]
        with pytest.raises(ValidationError):
            validate_vector_snapshot(valid_snapshot)

    def test_fraction_elements_must_be_strings(self) -> None:
        with pytest.raises(ValidationError):
            validate_vector_snapshot({"dtype": "fraction", "size": 1, "elements": [0.5]})

    def test_extra_field_rejected(self, valid_snapshot: dict[str, Any]) -> None:
        valid_snapshot["capacity"] = 8
        with pytest.raises(ValidationError):
            validate_vector_snapshot(valid_snapshot)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(VectorSnapshotValidator().iter_errors({"dtype": "int"}))
        assert len(errors) >= 1


# =============================================================================
# EXTREMUM RESULT
# =============================================================================


class TestExtremumResultContract:
    """Тесты для extremum_result контракта"""

    def test_single(self) -> None:
        validate_extremum_result({"kind": "single", "position": 4, "value": 5})

    def test_ties(self) -> None:
        validate_extremum_result({"kind": "ties", "positions": [1, 3], "value": 1})

    def test_ties_need_two_positions(self) -> None:
        with pytest.raises(ValidationError):
            validate_extremum_result({"kind": "ties", "positions": [1], "value": 1})

    def test_mixed_variant_rejected(self) -> None:
        """single с positions не соответствует ни одному варианту"""
        assert not ExtremumResultValidator().is_valid(
            {"kind": "single", "positions": [1, 3], "value": 1}
        )


# =============================================================================
# VECTOR PAYLOAD ROUND TRIP
# =============================================================================


class TestVectorPayload:
    """Тесты для NumericVector.to_payload / from_payload"""

    def test_to_payload_int(self) -> None:
        v = NumericVector.from_iterable([10, 20, 30], dtype=int)
        assert v.to_payload() == {"dtype": "int", "size": 3, "elements": [10, 20, 30]}

    def test_to_payload_exact_types(self) -> None:
        v = NumericVector.from_iterable([Fraction(1, 3), 2], dtype=Fraction)
        assert v.to_payload()["elements"] == ["1/3", "2"]

        d = NumericVector.from_iterable([Decimal("1.10")], dtype=Decimal)
        assert d.to_payload()["elements"] == ["1.10"]

    def test_to_payload_rejects_overflowed_element(self) -> None:
        v = NumericVector.from_iterable([1.0, 1e308])
        v *= 10.0
        with pytest.raises(ElementTypeError):
            v.to_payload()

    def test_from_payload(self, valid_snapshot: dict[str, Any]) -> None:
        v = NumericVector.from_payload(valid_snapshot)
        assert v.dtype is int
        assert v.to_list() == [10, 20, 30]

    def test_from_payload_decimal(self) -> None:
        v = NumericVector.from_payload({"dtype": "decimal", "size": 2, "elements": ["0.1", "0.2"]})
        assert v.sum() == Decimal("0.3")

    def test_from_payload_size_mismatch(self, valid_snapshot: dict[str, Any]) -> None:
        valid_snapshot["size"] = 5
        with pytest.raises(InvalidArgument, match="does not match"):
            NumericVector.from_payload(valid_snapshot)

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity", "sNaN"])
    def test_from_payload_non_finite_decimal_rejected(self, raw: str) -> None:
        with pytest.raises(ElementTypeError, match="Non-finite"):
            NumericVector.from_payload({"dtype": "decimal", "size": 1, "elements": [raw]})

    def test_from_payload_schema_violation(self) -> None:
        with pytest.raises(ValidationError):
            NumericVector.from_payload({"dtype": "int", "elements": [1]})
