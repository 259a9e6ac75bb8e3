"""
Errors — Иерархия исключений numvec

Каждый вид ошибки наследует и базовый VectorError, и соответствующее
встроенное исключение, поэтому вызывающий код может ловить любое из них.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки детектируются до любой мутации (вектор остаётся неизменным)
2. Ошибки всегда пропагируются вызывающему коду, никогда не глотаются
"""


class VectorError(Exception):
    """Базовое исключение для всех ошибок numvec"""

    pass


class OutOfRange(VectorError, IndexError):
    """
    Индекс или диапазон вне границ вектора.

    Источники: insert*, erase*, индексация, subvec, resize с отрицательным размером.
    """

    pass


class InvalidArgument(VectorError, ValueError):
    """
    Некорректная комбинация операндов.

    Источники: векторы разного размера, cross_product при size < 3,
    несовпадающие dtype, несогласованный payload.
    """

    pass


class EmptyOperand(VectorError, ValueError):
    """Редукция, требующая хотя бы одного элемента, вызвана на пустом векторе"""

    pass


class ElementTypeError(VectorError, TypeError):
    """
    Элемент или dtype не поддерживается.

    Например: 0.5 в int-векторе, bool вместо числа, normalize() для
    не-floating dtype.
    """

    pass
