"""
NumericVector — Владеющий непрерывный числовой вектор

Модуль содержит единственную сущность пакета и свободные функции над ней:
- Ёмкость: конструирование, resize, clear, subvec, concat
- Структурные правки: insert / erase по индексу с сохранением порядка
- Редукции: sum, product, mean, median, magnitude
- Порядковые статистики: max / min с явной отчётностью о ничьих
- Линейная алгебра: dot_product, cross_product, normalize, умножение на скаляр
- Сравнения: структурное равенство, лексикографический порядок

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(storage) == size всегда; storage принадлежит только вектору
2. Все элементы имеют dtype вектора (см. math.elements)
3. Ошибки детектируются до мутации: неудачная операция не меняет вектор
4. Сдвиги сохраняют порядок: insert копирует с конца, erase с начала
5. Любая реаллокация инвалидирует ранее полученные итераторы

СЕМАНТИКА ОПЕРАТОРОВ:
- a + b / a - b возвращают новый вектор (in-place формы: +=, -=,
  add_assign, sub_assign)
- == сравнивает содержимое, а не идентичность буфера
"""

import builtins
import logging
import operator
from collections.abc import MutableSequence
from functools import reduce
from typing import Any, Callable, Iterable, Iterator, Optional

from src.numvec.contracts.validators import validate_vector_snapshot
from src.numvec.domain.extremum import SingleExtremum, TiedExtremum, extremum_from_positions
from src.numvec.errors import ElementTypeError, EmptyOperand, InvalidArgument, OutOfRange
from src.numvec.math.elements import (
    DEFAULT_DTYPE,
    coerce_element,
    coerce_elements,
    decode_element,
    dtype_from_name,
    dtype_name,
    encode_element,
    is_floating,
    unit_of,
    validate_count,
    validate_dtype,
    zero_of,
)
from src.numvec.math.linalg import cross, inner, sqrt
from src.numvec.math.selection import median as select_median
from src.numvec.render import render_sequence

logger = logging.getLogger("numvec.vector")


class NumericVector:
    """
    Владеющий числовой вектор с единым dtype.

    Хранилище: приватный list, наружу никогда не отдаётся: итерация идёт
    по текущему буферу, subvec/copy возвращают независимые копии.

    Examples:
        >>> v = NumericVector.from_iterable([3, 1, 4, 1, 5], dtype=int)
        >>> v.max()
        SingleExtremum(kind='single', position=4, value=5)
        >>> v.min().positions
        (1, 3)
    """

    __slots__ = ("_dtype", "_entries")

    def __init__(self, size: int = 0, *, dtype: type = DEFAULT_DTYPE) -> None:
        self._dtype = validate_dtype(dtype)
        size = validate_count(size, "size")
        if size < 0:
            raise OutOfRange(f"Vector size must be non-negative, got {size}")
        self._entries: list[Any] = [zero_of(dtype)] * size

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def _from_entries(cls, entries: list[Any], dtype: type) -> "NumericVector":
        """Обёртка над уже приведённым списком (без копирования и проверок)"""
        vec = cls.__new__(cls)
        vec._dtype = dtype
        vec._entries = entries
        return vec

    @classmethod
    def from_iterable(cls, values: Iterable[Any], *, dtype: type = DEFAULT_DTYPE) -> "NumericVector":
        """
        Копирующее конструирование из любого iterable.

        Raises:
            ElementTypeError: Если dtype не поддерживается или элемент не представим
        """
        validate_dtype(dtype)
        return cls._from_entries(coerce_elements(values, dtype), dtype)

    @classmethod
    def adopt(
        cls,
        buffer: Optional[MutableSequence[Any]],
        *,
        dtype: type = DEFAULT_DTYPE,
    ) -> "NumericVector":
        """
        Принятие владения внешним буфером.

        Элементы переходят в вектор, исходный буфер очищается и не должен
        использоваться дальше. None даёт пустой вектор.

        Args:
            buffer: Изменяемый буфер элементов или None
            dtype: Тип элементов

        Returns:
            Новый вектор размера len(buffer)

        Raises:
            TypeError: Если buffer не изменяемая последовательность
            ElementTypeError: Если элемент не представим в dtype (буфер не трогается)
        """
        validate_dtype(dtype)
        if buffer is None:
            return cls(0, dtype=dtype)
        if not isinstance(buffer, MutableSequence):
            raise TypeError(f"adopt() requires a mutable buffer, got {type(buffer).__name__}")

        entries = coerce_elements(buffer, dtype)
        buffer.clear()
        return cls._from_entries(entries, dtype)

    @classmethod
    def take(cls, other: "NumericVector") -> "NumericVector":
        """
        Перемещение: новый вектор забирает хранилище other.

        other становится пустым (size 0) и сохраняет dtype.
        """
        if not isinstance(other, NumericVector):
            raise TypeError(f"take() requires a NumericVector, got {type(other).__name__}")
        vec = cls._from_entries(other._entries, other._dtype)
        other._entries = []
        return vec

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "NumericVector":
        """
        Восстановление вектора из vector_snapshot контракта.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
            InvalidArgument: Если size не совпадает с числом элементов
            ElementTypeError: Если элемент не представим в dtype
        """
        validate_vector_snapshot(data)
        dtype = dtype_from_name(data["dtype"])
        elements = data["elements"]
        if data["size"] != len(elements):
            raise InvalidArgument(
                f"Snapshot size {data['size']} does not match {len(elements)} elements"
            )
        return cls._from_entries([decode_element(raw, dtype) for raw in elements], dtype)

    def to_payload(self) -> dict[str, Any]:
        """
        Снимок вектора в формате vector_snapshot контракта.

        Raises:
            ElementTypeError: Если float элемент NaN/Inf
        """
        payload = {
            "dtype": dtype_name(self._dtype),
            "size": len(self._entries),
            "elements": [encode_element(x) for x in self._entries],
        }
        validate_vector_snapshot(payload)
        return payload

    def copy(self) -> "NumericVector":
        """Независимая копия вектора"""
        return self._from_entries(list(self._entries), self._dtype)

    # =========================================================================
    # СВОЙСТВА И ДОСТУП
    # =========================================================================

    @property
    def dtype(self) -> type:
        return self._dtype

    @property
    def size(self) -> int:
        """Логическое число элементов"""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def _check_index(self, index: Any) -> int:
        index = validate_count(index, "index")
        if not 0 <= index < len(self._entries):
            raise OutOfRange(f"Index {index} out of range for size {len(self._entries)}")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._entries[self._check_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        index = self._check_index(index)
        self._entries[index] = coerce_element(value, self._dtype)

    def to_list(self) -> list[Any]:
        """Копия элементов в виде list"""
        return list(self._entries)

    # =========================================================================
    # ЁМКОСТЬ
    # =========================================================================

    def _reallocated(self, new_size: int, fill: Any) -> list[Any]:
        """
        Новый буфер размера new_size.

        Копирует min(size, new_size) элементов по порядку, оставшиеся
        слоты заполняет fill. Текущее хранилище не меняется.
        """
        keep = builtins.min(len(self._entries), new_size)
        buf = self._entries[:keep]
        buf.extend([fill] * (new_size - keep))
        return buf

    def _swap_in(self, buf: list[Any]) -> None:
        logger.debug("Reallocated storage: size %d -> %d", len(self._entries), len(buf))
        self._entries = buf

    def resize(self, new_size: int, fill: Any = None) -> None:
        """
        Изменение размера с сохранением префикса.

        Рост дописывает fill (ноль dtype, если не задан), уменьшение
        отрезает хвост. resize(size) ничего не делает.

        Raises:
            OutOfRange: Если new_size < 0
            ElementTypeError: Если fill не представим в dtype
        """
        new_size = validate_count(new_size, "new_size")
        if new_size < 0:
            raise OutOfRange(f"Vector size must be non-negative, got {new_size}")
        if new_size == len(self._entries):
            return

        fill_value = zero_of(self._dtype) if fill is None else coerce_element(fill, self._dtype)
        self._swap_in(self._reallocated(new_size, fill_value))

    def clear(self) -> None:
        """Освобождение хранилища, size → 0"""
        self._swap_in([])

    def swap(self, other: "NumericVector") -> None:
        """Обмен хранилищем и dtype с другим вектором"""
        if not isinstance(other, NumericVector):
            raise TypeError(f"swap() requires a NumericVector, got {type(other).__name__}")
        self._entries, other._entries = other._entries, self._entries
        self._dtype, other._dtype = other._dtype, self._dtype

    def subvec(self, start: int, end: int) -> "NumericVector":
        """
        Копия полуинтервала [start, end).

        Raises:
            OutOfRange: Если start >= end или end > size
        """
        start = validate_count(start, "start")
        end = validate_count(end, "end")
        if start < 0 or start >= end or end > len(self._entries):
            raise OutOfRange(
                f"Invalid range for subvector: [{start}, {end}) with size {len(self._entries)}"
            )
        return self._from_entries(self._entries[start:end], self._dtype)

    # =========================================================================
    # СТРУКТУРНЫЕ ПРАВКИ
    # =========================================================================

    def _check_insert_pos(self, pos: Any) -> int:
        pos = validate_count(pos, "pos")
        if not 0 <= pos <= len(self._entries):
            raise OutOfRange(f"Insert position {pos} out of range for size {len(self._entries)}")
        return pos

    def _insert_block(self, pos: int, block: list[Any]) -> None:
        """
        Вставка готового блока на позицию pos.

        Буфер растёт через реаллокацию, хвост [pos, size) сдвигается
        вправо на len(block) копированием с конца, затем блок пишется
        в образовавшийся разрыв. Новый буфер подменяет старый целиком.
        """
        count = len(block)
        if count == 0:
            return

        old_size = len(self._entries)
        buf = self._reallocated(old_size + count, zero_of(self._dtype))
        for i in range(old_size - 1, pos - 1, -1):
            buf[i + count] = buf[i]
        buf[pos : pos + count] = block
        self._swap_in(buf)

    def insert(self, pos: int, value: Any) -> None:
        """
        Вставка одного значения перед позицией pos.

        Raises:
            OutOfRange: Если pos > size
        """
        pos = self._check_insert_pos(pos)
        self._insert_block(pos, [coerce_element(value, self._dtype)])

    def insert_repeat(self, pos: int, count: int, value: Any) -> None:
        """
        Вставка count копий value перед позицией pos.

        Examples:
            >>> v = NumericVector.from_iterable([10, 20, 30], dtype=int)
            >>> v.insert_repeat(1, 2, 9)
            >>> v.to_list()
            [10, 9, 9, 20, 30]
        """
        pos = self._check_insert_pos(pos)
        count = validate_count(count, "count")
        if count < 0:
            raise InvalidArgument(f"count must be non-negative, got {count}")
        self._insert_block(pos, [coerce_element(value, self._dtype)] * count)

    def insert_range(self, pos: int, values: Iterable[Any]) -> None:
        """
        Вставка последовательности values непрерывным блоком перед pos.

        values материализуется до мутации, поэтому допустимо передать сам
        вектор или литеральный список.
        """
        pos = self._check_insert_pos(pos)
        self._insert_block(pos, coerce_elements(values, self._dtype))

    def _erase_block(self, first: int, last: int) -> None:
        """
        Удаление блока [first, last).

        Хвост [last, size) сдвигается на first копированием с начала
        в копии буфера, затем копия усекается и подменяет старый буфер.
        """
        count = last - first
        old_size = len(self._entries)
        buf = self._reallocated(old_size, zero_of(self._dtype))
        for i in range(last, old_size):
            buf[i - count] = buf[i]
        del buf[old_size - count :]
        self._swap_in(buf)

    def erase(self, pos: int) -> None:
        """
        Удаление элемента на позиции pos.

        Raises:
            OutOfRange: Если pos >= size
        """
        pos = validate_count(pos, "pos")
        if not 0 <= pos < len(self._entries):
            raise OutOfRange(f"Erase position {pos} out of range for size {len(self._entries)}")
        self._erase_block(pos, pos + 1)

    def erase_range(self, first: int, last: int) -> None:
        """
        Удаление полуинтервала [first, last).

        Raises:
            OutOfRange: Если first >= size, last > size или first >= last
        """
        first = validate_count(first, "first")
        last = validate_count(last, "last")
        size = len(self._entries)
        if first < 0 or first >= size or last > size or first >= last:
            raise OutOfRange(f"Invalid erase range [{first}, {last}) for size {size}")
        self._erase_block(first, last)

    # =========================================================================
    # РЕДУКЦИИ
    # =========================================================================

    def sum(self) -> Any:
        """Левая свёртка сложением, начиная с нуля dtype"""
        return reduce(operator.add, self._entries, zero_of(self._dtype))

    def product(self) -> Any:
        """Левая свёртка умножением, начиная с единицы dtype"""
        return reduce(operator.mul, self._entries, unit_of(self._dtype))

    def mean(self) -> Any:
        """
        Среднее арифметическое sum() / size.

        Деление истинное: для int-вектора результат float.

        Raises:
            EmptyOperand: Если вектор пуст
        """
        if not self._entries:
            raise EmptyOperand("Cannot compute mean of an empty vector")
        return self.sum() / len(self._entries)

    def median(self) -> Any:
        """
        Медиана через частичную селекцию (вектор не переупорядочивается).

        Raises:
            EmptyOperand: Если вектор пуст
        """
        return select_median(self._entries)

    def magnitude(self) -> Any:
        """Евклидова норма sqrt(dot_product(self, self))"""
        return sqrt(dot_product(self, self))

    # =========================================================================
    # ПОРЯДКОВЫЕ СТАТИСТИКИ
    # =========================================================================

    def _extremum(self, pick: Callable[[list[Any]], Any], label: str) -> SingleExtremum | TiedExtremum:
        if not self._entries:
            raise EmptyOperand(f"Cannot compute {label} of an empty vector")
        extreme = pick(self._entries)
        positions = [i for i, x in enumerate(self._entries) if x == extreme]
        return extremum_from_positions(positions, extreme)

    def max(self) -> SingleExtremum | TiedExtremum:
        """
        Максимум с отчётностью о ничьих.

        Returns:
            SingleExtremum при единственном вхождении, иначе TiedExtremum
            со всеми позициями максимума по возрастанию

        Raises:
            EmptyOperand: Если вектор пуст
        """
        return self._extremum(builtins.max, "max")

    def min(self) -> SingleExtremum | TiedExtremum:
        """Минимум с отчётностью о ничьих (см. max)"""
        return self._extremum(builtins.min, "min")

    # =========================================================================
    # ЛИНЕЙНАЯ АЛГЕБРА И АРИФМЕТИКА
    # =========================================================================

    def normalize(self) -> None:
        """
        Нормировка на месте: каждый элемент делится на magnitude().

        Нулевой вектор остаётся без изменений.

        Raises:
            ElementTypeError: Если dtype не floating
        """
        if not is_floating(self._dtype):
            raise ElementTypeError(
                f"normalize() requires a floating dtype, got {self._dtype.__name__}"
            )
        mag = self.magnitude()
        if mag == 0:
            return
        self *= 1 / mag

    def scale(self, scalar: Any) -> "NumericVector":
        """Умножение каждого элемента на скаляр на месте, возвращает self"""
        factor = coerce_element(scalar, self._dtype)
        self._entries = [x * factor for x in self._entries]
        return self

    def _check_compatible(self, other: Any, *, same_size: bool = True) -> None:
        _require_vector(other)
        if same_size and len(self._entries) != len(other._entries):
            raise InvalidArgument(
                f"Vectors must have the same size: {len(self._entries)} != {len(other._entries)}"
            )
        if self._dtype is not other._dtype:
            raise InvalidArgument(
                f"Vectors must have the same dtype: "
                f"{self._dtype.__name__} != {other._dtype.__name__}"
            )

    def plus(self, other: "NumericVector") -> "NumericVector":
        """
        Поэлементная сумма в новый вектор (операнды не меняются).

        Raises:
            InvalidArgument: Если размеры или dtype различаются
        """
        self._check_compatible(other)
        return self._from_entries(
            [a + b for a, b in zip(self._entries, other._entries)], self._dtype
        )

    def minus(self, other: "NumericVector") -> "NumericVector":
        """Поэлементная разность в новый вектор (см. plus)"""
        self._check_compatible(other)
        return self._from_entries(
            [a - b for a, b in zip(self._entries, other._entries)], self._dtype
        )

    def add_assign(self, other: "NumericVector") -> "NumericVector":
        """Поэлементное прибавление other на месте, возвращает self"""
        self._check_compatible(other)
        self._entries = [a + b for a, b in zip(self._entries, other._entries)]
        return self

    def sub_assign(self, other: "NumericVector") -> "NumericVector":
        """Поэлементное вычитание other на месте, возвращает self"""
        self._check_compatible(other)
        self._entries = [a - b for a, b in zip(self._entries, other._entries)]
        return self

    def __add__(self, other: Any) -> "NumericVector":
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any) -> "NumericVector":
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.minus(other)

    def __iadd__(self, other: Any) -> "NumericVector":
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.add_assign(other)

    def __isub__(self, other: Any) -> "NumericVector":
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.sub_assign(other)

    def __imul__(self, scalar: Any) -> "NumericVector":
        if isinstance(scalar, NumericVector):
            return NotImplemented
        return self.scale(scalar)

    def __mul__(self, scalar: Any) -> "NumericVector":
        if isinstance(scalar, NumericVector):
            return NotImplemented
        return self.copy().scale(scalar)

    __rmul__ = __mul__

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    # Изменяемый контейнер: не хешируется
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: Any) -> bool:
        """Структурное равенство: тот же размер и равные элементы по позициям"""
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self._entries == other._entries

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self._entries < other._entries

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self._entries <= other._entries

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self._entries > other._entries

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self._entries >= other._entries

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        return render_sequence(self._entries)

    def __repr__(self) -> str:
        return f"NumericVector({render_sequence(self._entries)}, dtype={self._dtype.__name__})"


# =============================================================================
# СВОБОДНЫЕ ФУНКЦИИ
# =============================================================================


def _require_vector(value: Any) -> None:
    if not isinstance(value, NumericVector):
        raise TypeError(f"Expected a NumericVector, got {type(value).__name__}")


def dot_product(u: NumericVector, v: NumericVector) -> Any:
    """
    Скалярное произведение Σ u[i] * v[i], начиная с нуля dtype.

    Raises:
        InvalidArgument: Если размеры или dtype различаются
    """
    _require_vector(u)
    u._check_compatible(v)
    return inner(u._entries, v._entries, zero_of(u.dtype))


def cross_product(lhs: NumericVector, rhs: NumericVector) -> NumericVector:
    """
    Векторное произведение (стандартные первые три компоненты,
    циклическое продолжение для i >= 3, см. math.linalg.cross).

    Raises:
        InvalidArgument: Если размеры/dtype различаются или size < 3

    Examples:
        >>> x = NumericVector.from_iterable([1, 0, 0], dtype=int)
        >>> y = NumericVector.from_iterable([0, 1, 0], dtype=int)
        >>> cross_product(x, y).to_list()
        [0, 0, 1]
    """
    _require_vector(lhs)
    lhs._check_compatible(rhs)
    if len(lhs) < 3:
        raise InvalidArgument(f"Cross product requires at least 3 components, got {len(lhs)}")
    return NumericVector._from_entries(cross(lhs._entries, rhs._entries), lhs.dtype)


def concat(v1: NumericVector, v2: NumericVector) -> NumericVector:
    """
    Новый вектор: элементы v1, затем элементы v2.

    Raises:
        TypeError: Если аргумент не NumericVector
        InvalidArgument: Если dtype различаются
    """
    _require_vector(v1)
    v1._check_compatible(v2, same_size=False)
    return NumericVector._from_entries(v1._entries + v2._entries, v1.dtype)
