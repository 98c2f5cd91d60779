"""
Шахматная доска - общие классы для хранения позиции и подсчёта очков.
"""
from typing import List, Tuple, Union

from coordinate import Position, BOARD_SIZE
from exceptions import InvalidTurnException
from pieces import Piece, PieceType, Color
from rank import Rank

# Порядок фигур на крайних горизонталях (слева направо, от "a" до "h")
BACK_RANK = [
    Piece.rook, Piece.knight, Piece.bishop, Piece.queen,
    Piece.king, Piece.bishop, Piece.knight, Piece.rook,
]

# Пешки одного цвета на одной вертикали при таком количестве теряют половину ценности
DOUBLED_PAWN_THRESHOLD = 2
DOUBLED_PAWN_DIVISOR = 2.0

PositionLike = Union[str, Position]


class Board:
    """
    Доска 8x8 из горизонталей (Rank).

    Строка 0 соответствует горизонтали "1" (белые), строка 7 -
    горизонтали "8" (чёрные). Внешний код адресует клетки строками
    вроде "e4", которые разбираются через Position.

    Attributes:
        ranks: Список из 8 горизонталей
    """

    def __init__(self):
        """Создаёт пустую доску."""
        self.ranks: List[Rank] = [Rank() for _ in range(BOARD_SIZE)]

    def initialize(self) -> None:
        """Расставляет фигуры на начальные позиции."""
        self.initialize_empty()
        self.ranks[0].init([make(Color.WHITE) for make in BACK_RANK])
        self.ranks[1].init([Piece.pawn(Color.WHITE) for _ in range(BOARD_SIZE)])
        self.ranks[6].init([Piece.pawn(Color.BLACK) for _ in range(BOARD_SIZE)])
        self.ranks[7].init([make(Color.BLACK) for make in BACK_RANK])

    def initialize_empty(self) -> None:
        """Очищает все 64 клетки."""
        for rank in self.ranks:
            rank.init([Piece.empty() for _ in range(BOARD_SIZE)])

    def count_pieces(self, piece_type: PieceType, color: Color) -> int:
        """
        Считает фигуры заданного типа и цвета на всей доске.

        Args:
            piece_type: Тип фигуры
            color: Цвет фигуры

        Returns:
            Количество фигур
        """
        return sum(rank.count_pieces(piece_type, color) for rank in self.ranks)

    def find_piece(self, position: PositionLike) -> Piece:
        """
        Получает фигуру на указанной позиции.

        Args:
            position: Позиция ("b8") или Position

        Returns:
            Piece (для пустой клетки - Piece.empty())

        Raises:
            InvalidPositionException: если позиция не является клеткой доски
        """
        position = self._resolve(position)
        return self.ranks[position.row].get_piece(position.column)

    def place_piece(self, piece: Piece, position: PositionLike) -> None:
        """
        Ставит фигуру на клетку, заменяя прежнее содержимое.

        Чтобы очистить клетку, поставьте на неё Piece.empty().
        """
        position = self._resolve(position)
        self.ranks[position.row].place_piece(piece, position.column)

    def check_turn(self, current_turn: Color, position: PositionLike) -> None:
        """
        Проверяет, что фигура на позиции принадлежит цвету, который ходит.

        Допустимость самого хода здесь не проверяется.

        Args:
            current_turn: Цвет, который сейчас ходит
            position: Позиция фигуры, которой хотят сходить

        Raises:
            InvalidPositionException: если позиция невалидна
            InvalidTurnException: если фигура другого цвета или клетка пуста
        """
        position = self._resolve(position)
        piece = self.find_piece(position)
        if not piece.is_color(current_turn):
            raise InvalidTurnException(current_turn, position)

    def pawn_counts_by_file(self, color: Color) -> List[int]:
        """Количество пешек цвета на каждой вертикали (от "a" до "h")."""
        counts = [0] * BOARD_SIZE
        for rank in self.ranks:
            for column, piece in enumerate(rank):
                if piece.type == PieceType.PAWN and piece.color == color:
                    counts[column] += 1
        return counts

    def calculate_point(self, color: Color) -> float:
        """
        Считает материальные очки цвета.

        Каждая пешка на вертикали, где стоят две и более пешки того же
        цвета, стоит половину своей ценности. Это касается всех пешек
        такой вертикали, а не только "лишних".

        Args:
            color: Цвет для подсчёта

        Returns:
            Сумма очков
        """
        pawn_counts = self.pawn_counts_by_file(color)
        total = 0.0
        for rank in self.ranks:
            for column, piece in enumerate(rank):
                if piece.color != color:
                    continue
                total += self._piece_point(piece, pawn_counts[column])
        return total

    def pieces_by_point(self, color: Color, descending: bool = True) -> List[Tuple[Position, Piece]]:
        """
        Возвращает фигуры цвета, отсортированные по базовой ценности.

        Args:
            color: Цвет фигур
            descending: True - от самых ценных к менее ценным

        Returns:
            Список пар (позиция, фигура)
        """
        found = []
        for row, rank in enumerate(self.ranks):
            for column, piece in enumerate(rank):
                if piece.color == color:
                    found.append((Position.from_indices(row, column), piece))
        found.sort(key=lambda item: item[1].point, reverse=descending)
        return found

    def show_board(self) -> str:
        """Текстовое представление доски, горизонталь "8" сверху."""
        return "\n".join(str(rank) for rank in reversed(self.ranks))

    @staticmethod
    def _piece_point(piece: Piece, pawns_on_file: int) -> float:
        if piece.type == PieceType.PAWN and pawns_on_file >= DOUBLED_PAWN_THRESHOLD:
            return piece.point / DOUBLED_PAWN_DIVISOR
        return piece.point

    @staticmethod
    def _resolve(position: PositionLike) -> Position:
        if isinstance(position, Position):
            return position
        return Position(position)

    def __str__(self):
        return self.show_board()
