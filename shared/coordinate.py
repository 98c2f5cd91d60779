"""
Разбор координат в алгебраической нотации ("a1".."h8").
"""
from typing import Tuple

from exceptions import InvalidPositionException

FILES = "abcdefgh"
RANKS = "12345678"
BOARD_SIZE = 8


class Position:
    """
    Клетка доски, заданная алгебраической нотацией.

    Строка проверяется сразу в конструкторе, поэтому невалидная
    позиция никогда не существует.

    Attributes:
        row: Номер строки 0-7 ("1" -> 0)
        column: Номер столбца 0-7 ("a" -> 0)
    """

    __slots__ = ("_row", "_column")

    def __init__(self, notation: str):
        """
        Инициализирует позицию.

        Args:
            notation: Строка из двух символов, например "a3"

        Raises:
            InvalidPositionException: если строка не является клеткой доски
        """
        self._row, self._column = Position.parse(notation)

    @staticmethod
    def parse(notation: str) -> Tuple[int, int]:
        """
        Преобразует алгебраическую нотацию в пару (row, column).

        Args:
            notation: Строка вида "e4"

        Returns:
            Кортеж (row, column), оба в диапазоне 0-7
        """
        if not isinstance(notation, str) or len(notation) != 2:
            raise InvalidPositionException(notation)
        file_char, rank_char = notation
        if file_char not in FILES or rank_char not in RANKS:
            raise InvalidPositionException(notation)
        return RANKS.index(rank_char), FILES.index(file_char)

    @classmethod
    def from_indices(cls, row: int, column: int) -> "Position":
        """Создаёт позицию из индексов строки и столбца."""
        if not (0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE):
            raise InvalidPositionException((row, column))
        return cls(FILES[column] + RANKS[row])

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def file(self) -> str:
        return FILES[self._column]

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self._row == other._row and self._column == other._column

    def __hash__(self):
        return hash((self._row, self._column))

    def __str__(self):
        return FILES[self._column] + RANKS[self._row]

    def __repr__(self):
        return f"Position({str(self)!r})"
