"""
Тесты для доменной модели ExtremumResult

Проверяет:
1. Создание SingleExtremum / TiedExtremum и выбор варианта по числу вхождений
2. Immutability (frozen=True)
3. Валидацию tie-set (минимум две позиции, строго по возрастанию)
4. Разбор по дискриминатору kind и JSON payload
"""

from fractions import Fraction

import jsonschema
import pytest
from pydantic import ValidationError

from src.numvec.domain import (
    SingleExtremum,
    TiedExtremum,
    extremum_from_payload,
    extremum_from_positions,
    parse_extremum,
)


class TestSingleExtremum:
    """Тесты для модели SingleExtremum"""

    def test_creation(self) -> None:
        result = SingleExtremum(position=4, value=5)
        assert result.kind == "single"
        assert result.position == 4
        assert result.value == 5
        assert result.positions == (4,)
        assert result.count == 1

    def test_immutable(self) -> None:
        result = SingleExtremum(position=4, value=5)
        with pytest.raises(ValidationError):
            result.position = 1  # type: ignore

    def test_negative_position_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SingleExtremum(position=-1, value=5)


class TestTiedExtremum:
    """Тесты для модели TiedExtremum"""

    def test_creation(self) -> None:
        result = TiedExtremum(positions=(1, 3), value=1)
        assert result.kind == "ties"
        assert result.positions == (1, 3)
        assert result.count == 2

    def test_list_positions_coerced_to_tuple(self) -> None:
        result = TiedExtremum(positions=[0, 2, 5], value=7)  # type: ignore[arg-type]
        assert result.positions == (0, 2, 5)

    def test_single_position_rejected(self) -> None:
        """Tie-set требует минимум две позиции"""
        with pytest.raises(ValidationError):
            TiedExtremum(positions=(1,), value=1)

    def test_unordered_positions_rejected(self) -> None:
        with pytest.raises(ValidationError, match="strictly ascending"):
            TiedExtremum(positions=(3, 1), value=1)

    def test_duplicate_positions_rejected(self) -> None:
        with pytest.raises(ValidationError, match="strictly ascending"):
            TiedExtremum(positions=(1, 1), value=1)

    def test_negative_positions_rejected(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            TiedExtremum(positions=(-1, 2), value=1)


class TestExtremumFromPositions:
    """Тесты для extremum_from_positions"""

    def test_one_position_gives_single(self) -> None:
        result = extremum_from_positions([4], 5)
        assert isinstance(result, SingleExtremum)
        assert result.position == 4

    def test_many_positions_give_ties(self) -> None:
        result = extremum_from_positions([1, 3], 1)
        assert isinstance(result, TiedExtremum)
        assert result.positions == (1, 3)

    def test_empty_positions_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one position"):
            extremum_from_positions([], 0)


class TestParseExtremum:
    """Тесты для разбора по дискриминатору"""

    def test_parse_single(self) -> None:
        result = parse_extremum({"kind": "single", "position": 2, "value": 9})
        assert result == SingleExtremum(position=2, value=9)

    def test_parse_ties(self) -> None:
        result = parse_extremum({"kind": "ties", "positions": [0, 4], "value": 9})
        assert isinstance(result, TiedExtremum)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_extremum({"kind": "range", "position": 2, "value": 9})


class TestExtremumPayload:
    """Тесты для to_payload / extremum_from_payload"""

    def test_single_payload(self) -> None:
        payload = SingleExtremum(position=4, value=5).to_payload()
        assert payload == {"kind": "single", "position": 4, "value": 5}

    def test_ties_payload_with_fraction(self) -> None:
        payload = TiedExtremum(positions=(1, 3), value=Fraction(1, 2)).to_payload()
        assert payload == {"kind": "ties", "positions": [1, 3], "value": "1/2"}

    def test_from_payload(self) -> None:
        result = extremum_from_payload(
            {"kind": "ties", "positions": [1, 3], "value": "1/2"}, Fraction
        )
        assert result == TiedExtremum(positions=(1, 3), value=Fraction(1, 2))

    def test_from_payload_schema_violation(self) -> None:
        """Payload без positions не проходит контракт"""
        with pytest.raises(jsonschema.ValidationError):
            extremum_from_payload({"kind": "ties", "value": 1}, int)
