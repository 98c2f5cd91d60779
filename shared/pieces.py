"""
Шахматные фигуры: цвета, типы и значения фигур.
"""
from enum import Enum
from typing import Optional


class Color(Enum):
    """Цвета фигур."""
    BLACK = "black"
    WHITE = "white"


class PieceType(Enum):
    """Типы шахматных фигур. NONE обозначает пустую клетку."""
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
    NONE = "none"

    @property
    def point(self) -> float:
        """Базовая ценность фигуры в очках."""
        return PIECE_VALUES[self]

    @property
    def symbol(self) -> str:
        return PIECE_SYMBOLS[self]


# Материальные ценности фигур (в очках)
PIECE_VALUES = {
    PieceType.PAWN: 1.0,
    PieceType.KNIGHT: 2.5,
    PieceType.BISHOP: 3.0,
    PieceType.ROOK: 5.0,
    PieceType.QUEEN: 9.0,
    PieceType.KING: 0.0,  # Король не имеет материальной ценности
    PieceType.NONE: 0.0,
}

# Символы для отображения (у чёрных - заглавные)
PIECE_SYMBOLS = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
    PieceType.NONE: ".",
}


class Piece:
    """
    Шахматная фигура - неизменяемая пара (тип, цвет).

    Фигуры сравниваются по значению, поэтому один и тот же объект
    можно ставить на несколько клеток.

    Attributes:
        type: Тип фигуры (PieceType)
        color: Цвет фигуры (Color) или None для пустой клетки
    """

    __slots__ = ("_type", "_color")

    def __init__(self, piece_type: PieceType, color: Optional[Color]):
        """
        Инициализирует фигуру.

        Args:
            piece_type: Тип фигуры
            color: Цвет фигуры (None только для пустой клетки)
        """
        if piece_type == PieceType.NONE and color is not None:
            raise ValueError("Пустая клетка не может иметь цвет")
        if piece_type != PieceType.NONE and color is None:
            raise ValueError(f"Фигура {piece_type.value} должна иметь цвет")
        self._type = piece_type
        self._color = color

    @property
    def type(self) -> PieceType:
        return self._type

    @property
    def color(self) -> Optional[Color]:
        return self._color

    @property
    def point(self) -> float:
        return self._type.point

    @classmethod
    def pawn(cls, color: Color) -> "Piece":
        return cls(PieceType.PAWN, color)

    @classmethod
    def knight(cls, color: Color) -> "Piece":
        return cls(PieceType.KNIGHT, color)

    @classmethod
    def bishop(cls, color: Color) -> "Piece":
        return cls(PieceType.BISHOP, color)

    @classmethod
    def rook(cls, color: Color) -> "Piece":
        return cls(PieceType.ROOK, color)

    @classmethod
    def queen(cls, color: Color) -> "Piece":
        return cls(PieceType.QUEEN, color)

    @classmethod
    def king(cls, color: Color) -> "Piece":
        return cls(PieceType.KING, color)

    @classmethod
    def empty(cls) -> "Piece":
        """Возвращает пустую клетку."""
        return cls(PieceType.NONE, None)

    def is_empty(self) -> bool:
        return self._type == PieceType.NONE

    def is_color(self, color: Color) -> bool:
        return self._color == color

    def to_dict(self) -> dict:
        """
        Преобразует фигуру в словарь для сериализации.

        Returns:
            Словарь с типом и цветом фигуры
        """
        return {
            "type": self._type.value,
            "color": self._color.value if self._color else None,
        }

    def __eq__(self, other):
        if not isinstance(other, Piece):
            return NotImplemented
        return self._type == other._type and self._color == other._color

    def __hash__(self):
        return hash((self._type, self._color))

    def __str__(self):
        symbol = self._type.symbol
        return symbol.upper() if self._color == Color.BLACK else symbol

    def __repr__(self):
        if self.is_empty():
            return "Piece.empty()"
        return f"Piece.{self._type.value}(Color.{self._color.name})"
