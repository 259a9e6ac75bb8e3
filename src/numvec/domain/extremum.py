"""
Extremum — Результат max()/min() с явной отчётностью о ничьих

Tagged union из двух immutable Pydantic моделей:
- SingleExtremum: экстремум встречается ровно один раз (позиция и значение)
- TiedExtremum: экстремум встречается несколько раз (все позиции по возрастанию)

Дискриминатор: поле kind ("single" / "ties"). Вызывающий код обязан
обработать оба варианта.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from src.numvec.contracts.validators import validate_extremum_result
from src.numvec.math.elements import decode_element, encode_element


# =============================================================================
# MODELS
# =============================================================================


class SingleExtremum(BaseModel):
    """
    Единственный экстремум.

    Содержит:
    - position: индекс элемента в векторе
    - value: значение экстремума
    """

    kind: Literal["single"] = "single"
    position: int = Field(..., ge=0, description="Индекс единственного экстремума")
    value: Any = Field(..., description="Значение экстремума")

    model_config = {"frozen": True}

    @property
    def positions(self) -> tuple[int, ...]:
        """Позиции в том же виде, что и у TiedExtremum"""
        return (self.position,)

    @property
    def count(self) -> int:
        """Число вхождений экстремума (всегда 1)"""
        return 1

    def to_payload(self) -> dict[str, Any]:
        """Снимок в формате extremum_result контракта"""
        payload = {"kind": self.kind, "position": self.position, "value": encode_element(self.value)}
        validate_extremum_result(payload)
        return payload


class TiedExtremum(BaseModel):
    """
    Экстремум, достигнутый несколькими элементами (tie-set).

    positions содержит все позиции со значением экстремума и только их,
    строго по возрастанию, минимум две.
    """

    kind: Literal["ties"] = "ties"
    positions: tuple[int, ...] = Field(..., min_length=2, description="Позиции по возрастанию")
    value: Any = Field(..., description="Значение экстремума")

    model_config = {"frozen": True}

    @field_validator("positions")
    @classmethod
    def validate_positions_ascending(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Позиции неотрицательные, строго возрастают (без дубликатов)"""
        if any(p < 0 for p in v):
            raise ValueError(f"positions must be non-negative, got {v}")
        if any(a >= b for a, b in zip(v, v[1:])):
            raise ValueError(f"positions must be strictly ascending, got {v}")
        return v

    @property
    def count(self) -> int:
        """Число вхождений экстремума"""
        return len(self.positions)

    def to_payload(self) -> dict[str, Any]:
        """Снимок в формате extremum_result контракта"""
        payload = {
            "kind": self.kind,
            "positions": list(self.positions),
            "value": encode_element(self.value),
        }
        validate_extremum_result(payload)
        return payload


ExtremumResult = Annotated[
    Union[SingleExtremum, TiedExtremum],
    Field(discriminator="kind"),
]

_EXTREMUM_ADAPTER: TypeAdapter = TypeAdapter(ExtremumResult)


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def extremum_from_positions(positions: list[int], value: Any) -> SingleExtremum | TiedExtremum:
    """
    Выбор варианта по числу вхождений.

    Args:
        positions: Все позиции экстремума (по возрастанию, минимум одна)
        value: Значение экстремума

    Returns:
        SingleExtremum при одном вхождении, иначе TiedExtremum

    Raises:
        ValueError: Если positions пуст
    """
    if not positions:
        raise ValueError("Extremum requires at least one position")
    if len(positions) == 1:
        return SingleExtremum(position=positions[0], value=value)
    return TiedExtremum(positions=tuple(positions), value=value)


def parse_extremum(data: dict[str, Any]) -> SingleExtremum | TiedExtremum:
    """
    Разбор dict в нужный вариант по полю kind.

    Raises:
        pydantic.ValidationError: Если данные не соответствуют ни одному варианту
    """
    return _EXTREMUM_ADAPTER.validate_python(data)


def extremum_from_payload(data: dict[str, Any], dtype: type) -> SingleExtremum | TiedExtremum:
    """
    Восстановление результата из extremum_result контракта.

    Args:
        data: Payload контракта
        dtype: dtype вектора, к которому относится значение экстремума

    Raises:
        jsonschema.ValidationError: Если data не соответствует схеме
        ElementTypeError: Если value не представимо в dtype
    """
    validate_extremum_result(data)
    return parse_extremum({**data, "value": decode_element(data["value"], dtype)})
