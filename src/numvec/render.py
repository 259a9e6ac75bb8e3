"""
Render — Текстовое представление векторов и результатов

Формат последовательности: [e0, e1, ..., en-1] (пустая → [])
Tie-set позиций рендерится так же. Для ExtremumResult рендерится
активный вариант: одиночная позиция голым числом, ничья списком.
"""

from typing import Any, Iterable

from src.numvec.domain.extremum import SingleExtremum, TiedExtremum


def render_sequence(items: Iterable[Any]) -> str:
    """
    Рендер последовательности в виде [a, b, c].

    Examples:
        >>> render_sequence([1, 2, 3])
        '[1, 2, 3]'
        >>> render_sequence([])
        '[]'
    """
    return "[" + ", ".join(str(item) for item in items) + "]"


def render_extremum(result: SingleExtremum | TiedExtremum) -> str:
    """
    Рендер активного варианта ExtremumResult.

    Examples:
        >>> render_extremum(SingleExtremum(position=4, value=5))
        '4'
        >>> render_extremum(TiedExtremum(positions=(1, 3), value=1))
        '[1, 3]'
    """
    if isinstance(result, SingleExtremum):
        return str(result.position)
    if isinstance(result, TiedExtremum):
        return render_sequence(result.positions)
    raise TypeError(f"Not an extremum result: {result!r}")
