"""
Одна горизонталь шахматной доски.
"""
from typing import List, Optional

from pieces import Piece, PieceType, Color

RANK_SIZE = 8


class Rank:
    """
    Горизонталь из 8 клеток, адресуемых номером столбца.

    Длина горизонтали всегда равна 8: содержимое меняется только
    заменой фигуры в одной клетке или целиком через init().
    """

    def __init__(self, pieces: Optional[List[Piece]] = None):
        self._pieces: List[Piece] = [Piece.empty() for _ in range(RANK_SIZE)]
        if pieces is not None:
            self.init(pieces)

    def init(self, pieces: List[Piece]) -> None:
        """
        Заменяет содержимое горизонтали.

        Args:
            pieces: Ровно 8 фигур слева направо
        """
        pieces = list(pieces)
        if len(pieces) != RANK_SIZE:
            raise ValueError(f"Горизонталь должна содержать {RANK_SIZE} клеток, получено {len(pieces)}")
        self._pieces = pieces

    def count_pieces(self, piece_type: PieceType, color: Optional[Color]) -> int:
        """Считает фигуры заданного типа и цвета."""
        return sum(1 for piece in self._pieces if piece.type == piece_type and piece.color == color)

    def get_piece(self, column: int) -> Piece:
        self._check_column(column)
        return self._pieces[column]

    def place_piece(self, piece: Piece, column: int) -> None:
        self._check_column(column)
        self._pieces[column] = piece

    def pieces(self) -> List[Piece]:
        """Возвращает копию фигур горизонтали."""
        return list(self._pieces)

    @staticmethod
    def _check_column(column: int) -> None:
        # Отрицательные индексы списка здесь недопустимы
        if not 0 <= column < RANK_SIZE:
            raise IndexError(f"Столбец вне доски: {column}")

    def __iter__(self):
        return iter(self._pieces)

    def __len__(self):
        return RANK_SIZE

    def __str__(self):
        return "".join(str(piece) for piece in self._pieces)
