"""
Elements — Политика типа элементов (dtype)

Модуль определяет, какие скалярные типы может хранить NumericVector,
и как значения приводятся к dtype вектора:
- Реестр поддерживаемых dtype и их имён для контрактов
- Нулевой (аддитивный) и единичный (мультипликативный) элементы
- Безопасное приведение значений без потери точности
- Валидация конечности float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вектор однороден: все элементы имеют ровно один dtype
2. Приведение никогда не теряет информацию (0.5 в int-векторе → ошибка)
3. bool не считается числом, даже если является подклассом int
4. Элементы конечны: NaN и Inf не попадают в вектор
"""

import math
from decimal import Decimal
from fractions import Fraction
from numbers import Integral, Rational
from typing import Any, Final

from src.numvec.errors import ElementTypeError

# =============================================================================
# РЕЕСТР DTYPE
# =============================================================================

# Поддерживаемые типы элементов (все поддерживают +, -, *, /, ==, <)
SUPPORTED_DTYPES: Final[tuple[type, ...]] = (int, float, Fraction, Decimal)

# Floating dtype: только для них определена normalize()
FLOATING_DTYPES: Final[tuple[type, ...]] = (float,)

# dtype по умолчанию для NumericVector()
DEFAULT_DTYPE: Final[type] = float

# Имена dtype в JSON контрактах (vector_snapshot.dtype)
DTYPE_NAMES: Final[dict[type, str]] = {
    int: "int",
    float: "float",
    Fraction: "fraction",
    Decimal: "decimal",
}


def validate_dtype(dtype: Any) -> type:
    """
    Проверка, что dtype поддерживается.

    Args:
        dtype: Тип элементов

    Returns:
        dtype без изменений

    Raises:
        ElementTypeError: Если dtype не из SUPPORTED_DTYPES
    """
    if dtype not in SUPPORTED_DTYPES:
        supported = ", ".join(t.__name__ for t in SUPPORTED_DTYPES)
        raise ElementTypeError(f"Unsupported dtype {dtype!r}, expected one of: {supported}")
    return dtype


def dtype_name(dtype: type) -> str:
    """Имя dtype для контрактов (например, Fraction → 'fraction')"""
    return DTYPE_NAMES[validate_dtype(dtype)]


def dtype_from_name(name: str) -> type:
    """
    Обратное преобразование имени в dtype.

    Raises:
        ElementTypeError: Если имя неизвестно
    """
    for dtype, dtype_label in DTYPE_NAMES.items():
        if dtype_label == name:
            return dtype
    raise ElementTypeError(f"Unknown dtype name: {name!r}")


def is_floating(dtype: type) -> bool:
    """True если dtype floating (допускает normalize)"""
    return dtype in FLOATING_DTYPES


# =============================================================================
# НЕЙТРАЛЬНЫЕ ЭЛЕМЕНТЫ
# =============================================================================


def zero_of(dtype: type) -> Any:
    """
    Аддитивный нейтральный элемент dtype.

    Используется как значение по умолчанию для новых слотов и как
    начальное значение для sum() и dot_product().

    Examples:
        >>> zero_of(int)
        0
        >>> zero_of(Fraction)
        Fraction(0, 1)
    """
    return dtype()


def unit_of(dtype: type) -> Any:
    """
    Мультипликативный нейтральный элемент dtype.

    Начальное значение для product().
    """
    return dtype(1)


# =============================================================================
# ПРИВЕДЕНИЕ ЗНАЧЕНИЙ
# =============================================================================


def coerce_element(value: Any, dtype: type) -> Any:
    """
    Приведение значения к dtype вектора без потери информации.

    Правила:
    - bool отклоняется для любого dtype
    - Значение уже нужного типа возвращается как есть
    - int (Integral) расширяется до float/Fraction/Decimal
    - Fraction допускает любые Rational (int, Fraction)
    - NaN и Inf (float и Decimal) отклоняются
    - Всё остальное отклоняется (float в int-векторе, Decimal во float-векторе)

    Args:
        value: Исходное значение
        dtype: Тип элементов вектора

    Returns:
        Значение типа dtype

    Raises:
        ElementTypeError: Если значение не представимо в dtype

    Examples:
        >>> coerce_element(3, float)
        3.0
        >>> coerce_element(Fraction(1, 2), Fraction)
        Fraction(1, 2)
        >>> coerce_element(0.5, int)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ElementTypeError: ...
    """
    if isinstance(value, bool):
        raise ElementTypeError(f"bool is not a numeric element: {value!r}")
    if isinstance(value, float) and not is_valid_float(value):
        raise ElementTypeError(f"Non-finite float is not a valid element: {value!r}")
    if isinstance(value, Decimal) and not value.is_finite():
        raise ElementTypeError(f"Non-finite Decimal is not a valid element: {value!r}")

    if type(value) is dtype:
        return value

    if isinstance(value, Integral):
        # int → float может потерять точность для очень больших чисел
        if dtype is float and abs(int(value)) > 2**53:
            raise ElementTypeError(f"Integer {value} is not exactly representable as float")
        return dtype(int(value))

    if dtype is Fraction and isinstance(value, Rational):
        return Fraction(value)

    raise ElementTypeError(
        f"Value {value!r} of type {type(value).__name__} "
        f"cannot be stored in a {dtype.__name__} vector"
    )


def coerce_elements(values: Any, dtype: type) -> list[Any]:
    """
    Приведение последовательности значений к dtype.

    Материализует iterable целиком до возврата, поэтому ошибка в любом
    элементе обнаруживается до мутации вектора.

    Args:
        values: Iterable значений
        dtype: Тип элементов вектора

    Returns:
        Новый список приведённых значений
    """
    return [coerce_element(v, dtype) for v in values]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def validate_count(count: Any, name: str) -> int:
    """
    Валидация целочисленного аргумента (размер, count, позиция).

    Args:
        count: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        count как int

    Raises:
        ElementTypeError: Если count не целое число
    """
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise ElementTypeError(f"{name} must be an integer, got {count!r}")
    return int(count)


# =============================================================================
# JSON КОДИРОВАНИЕ
# =============================================================================


def encode_element(value: Any) -> Any:
    """
    Кодирование элемента для JSON контрактов.

    int/float передаются как числа, Fraction/Decimal как строки
    (без потери точности).

    Raises:
        ElementTypeError: Для float NaN/Inf (не представимы в JSON)

    Examples:
        >>> encode_element(Fraction(3, 4))
        '3/4'
        >>> encode_element(Decimal("0.10"))
        '0.10'
    """
    if isinstance(value, float) and not is_valid_float(value):
        raise ElementTypeError(f"Non-finite float cannot be encoded: {value}")
    if isinstance(value, (Fraction, Decimal)):
        return str(value)
    return value


def decode_element(raw: Any, dtype: type) -> Any:
    """
    Декодирование элемента из JSON контракта в dtype.

    Строки разрешены только для Fraction/Decimal.

    Raises:
        ElementTypeError: Если raw не представим в dtype
    """
    if isinstance(raw, str):
        if dtype not in (Fraction, Decimal):
            raise ElementTypeError(f"String element {raw!r} is not valid for {dtype.__name__}")
        try:
            parsed = dtype(raw)
        except (ValueError, ArithmeticError) as e:
            raise ElementTypeError(f"Cannot parse {raw!r} as {dtype.__name__}: {e}") from e
        return coerce_element(parsed, dtype)
    if dtype is Decimal and isinstance(raw, float):
        return coerce_element(Decimal(repr(raw)), dtype)
    return coerce_element(raw, dtype)
