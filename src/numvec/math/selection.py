"""
Selection — Частичная селекция (quickselect) и медиана

Модуль реализует размещение k-го элемента на его позицию в
отсортированном порядке без полной сортировки остальных:
- Трёхпутевое разбиение (устойчиво к большому числу дубликатов)
- Pivot = медиана из трёх (детерминированно, без random)
- Малые отрезки досортировываются вставками

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после select_kth(buf, k)):
1. buf[k] равен элементу с индексом k в sorted(buf)
2. Все buf[lo:k] <= buf[k]
3. Все buf[k+1:hi] >= buf[k]

ТОНКОСТЬ для median() при чётном размере:
    Одна селекция гарантирует только верхний средний элемент. Элемент
    на позиции mid - 1 НЕ обязан быть его предшественником в sorted
    порядке. Поэтому предшественник берётся вторым проходом как
    max(buf[:mid]), что корректно по инварианту 2.
"""

from typing import Any, Final, MutableSequence, Sequence

from src.numvec.errors import EmptyOperand

# Отрезки не длиннее порога досортировываются вставками
INSERTION_SORT_THRESHOLD: Final[int] = 8


def _median_of_three(a: Any, b: Any, c: Any) -> Any:
    """Медиана трёх значений (pivot для разбиения)"""
    if a < b:
        if b < c:
            return b
        return c if a < c else a
    if a < c:
        return a
    return c if b < c else b


def _insertion_sort(buf: MutableSequence[Any], lo: int, hi: int) -> None:
    """Сортировка вставками отрезка buf[lo:hi] на месте"""
    for i in range(lo + 1, hi):
        item = buf[i]
        j = i - 1
        while j >= lo and item < buf[j]:
            buf[j + 1] = buf[j]
            j -= 1
        buf[j + 1] = item


def select_kth(
    buf: MutableSequence[Any],
    k: int,
    lo: int = 0,
    hi: int | None = None,
) -> Any:
    """
    Частичная селекция: размещает k-й по порядку элемент на позицию k.

    Ожидаемое время O(n). Переставляет элементы buf[lo:hi] на месте.

    Args:
        buf: Изменяемый буфер (переупорядочивается)
        k: Целевая позиция в sorted порядке (lo <= k < hi)
        lo: Начало отрезка (включительно)
        hi: Конец отрезка (не включительно, default: len(buf))

    Returns:
        Значение buf[k] после селекции

    Raises:
        IndexError: Если k вне [lo, hi)

    Examples:
        >>> buf = [5, 1, 4, 2, 3]
        >>> select_kth(buf, 2)
        3
    """
    if hi is None:
        hi = len(buf)

    if not lo <= k < hi:
        raise IndexError(f"k={k} outside of selection range [{lo}, {hi})")

    while hi - lo > INSERTION_SORT_THRESHOLD:
        pivot = _median_of_three(buf[lo], buf[(lo + hi) // 2], buf[hi - 1])

        # [lo, lt) < pivot, [lt, i) == pivot, [gt, hi) > pivot
        lt, i, gt = lo, lo, hi
        while i < gt:
            if buf[i] < pivot:
                buf[lt], buf[i] = buf[i], buf[lt]
                lt += 1
                i += 1
            elif pivot < buf[i]:
                gt -= 1
                buf[i], buf[gt] = buf[gt], buf[i]
            else:
                i += 1

        if k < lt:
            hi = lt
        elif k >= gt:
            lo = gt
        else:
            # k попал в блок равных pivot: позиция уже окончательная
            return buf[k]

    _insertion_sort(buf, lo, hi)
    return buf[k]


def median(values: Sequence[Any]) -> Any:
    """
    Медиана последовательности через частичную селекцию.

    Входная последовательность не изменяется: селекция работает
    на рабочей копии.

    Алгоритм:
        mid = n // 2
        upper = select_kth(scratch, mid)
        n нечётно → upper
        n чётно   → (max(scratch[:mid]) + upper) / 2

    Args:
        values: Последовательность сравнимых чисел

    Returns:
        Средний элемент (нечётный n) или среднее двух средних (чётный n)

    Raises:
        EmptyOperand: Если последовательность пуста

    Examples:
        >>> median([1, 2, 3])
        2
        >>> median([1, 2, 3, 4])
        2.5
    """
    size = len(values)
    if size == 0:
        raise EmptyOperand("Cannot compute median of an empty vector")

    scratch = list(values)
    mid = size // 2
    upper = select_kth(scratch, mid)

    if size % 2 == 1:
        return upper

    # Второй проход: предшественник = максимум левой части разбиения
    lower = max(scratch[:mid])
    return (lower + upper) / 2
