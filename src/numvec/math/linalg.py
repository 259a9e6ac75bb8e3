"""
Linalg — Ядра линейной алгебры над списками

Чистые функции над последовательностями одинаковой длины. Проверки
размеров и dtype выполняет NumericVector; здесь только вычисления.

ФОРМУЛЫ:
    inner(a, b) = zero + Σ a[i] * b[i]

    cross(l, r), n = len(l) >= 3:
        w[0] = l[1]*r[2] - l[2]*r[1]
        w[1] = l[2]*r[0] - l[0]*r[2]
        w[2] = l[0]*r[1] - l[1]*r[0]
        w[i] = l[(i+1)%n]*r[(i+2)%n] - l[(i+2)%n]*r[(i+1)%n],  i >= 3

ВНИМАНИЕ: компоненты i >= 3 считаются по циклической формуле, это
не стандартное N-мерное векторное произведение.
"""

import math
from decimal import Decimal
from typing import Any, Sequence


def inner(a: Sequence[Any], b: Sequence[Any], zero: Any) -> Any:
    """
    Скалярное произведение: поэлементное умножение и свёртка суммой.

    Args:
        a: Первая последовательность
        b: Вторая последовательность (та же длина)
        zero: Начальное значение свёртки (ноль dtype)

    Returns:
        zero + a[0]*b[0] + ... + a[n-1]*b[n-1]
    """
    total = zero
    for x, y in zip(a, b):
        total = total + x * y
    return total


def cross(lhs: Sequence[Any], rhs: Sequence[Any]) -> list[Any]:
    """
    Векторное произведение (3D формула + циклическое продолжение).

    Args:
        lhs: Левый операнд, длина n >= 3
        rhs: Правый операнд, длина n

    Returns:
        Новый список длины n

    Examples:
        >>> cross([1, 0, 0], [0, 1, 0])
        [0, 0, 1]
    """
    n = len(lhs)
    w = [
        lhs[1] * rhs[2] - lhs[2] * rhs[1],
        lhs[2] * rhs[0] - lhs[0] * rhs[2],
        lhs[0] * rhs[1] - lhs[1] * rhs[0],
    ]
    for i in range(3, n):
        j, k = (i + 1) % n, (i + 2) % n
        w.append(lhs[j] * rhs[k] - lhs[k] * rhs[j])
    return w


def sqrt(value: Any) -> Any:
    """
    Квадратный корень с сохранением Decimal.

    Decimal → Decimal.sqrt() (точность текущего контекста),
    остальные типы → math.sqrt (float).
    """
    if isinstance(value, Decimal):
        return value.sqrt()
    return math.sqrt(value)
