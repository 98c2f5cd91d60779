"""
Кастомные исключения для шахматной доски.
"""
from enum import Enum


class ErrorCode(Enum):
    """Коды ошибок, которые доска сообщает вызывающему коду."""
    INVALID_POSITION = "Недопустимая позиция на доске"
    INVALID_TURN = "Сейчас ход другого цвета"

    @property
    def message(self) -> str:
        return self.value


class ChessException(Exception):
    """
    Базовое исключение для всех ошибок шахматной доски.

    Attributes:
        error_code: Код ошибки (ErrorCode)
        message: Сообщение для пользователя
    """

    def __init__(self, error_code: ErrorCode, detail: str = None):
        self.error_code = error_code
        self.message = f"{error_code.message}: {detail}" if detail else error_code.message
        super().__init__(self.message)


class InvalidPositionException(ChessException):
    """Исключение для недопустимых позиций."""

    def __init__(self, position=None):
        self.position = position
        super().__init__(ErrorCode.INVALID_POSITION, repr(position) if position is not None else None)


class InvalidTurnException(ChessException):
    """Исключение когда фигура не принадлежит цвету, который сейчас ходит."""

    def __init__(self, current_turn=None, position=None):
        self.current_turn = current_turn
        self.position = position
        detail = None
        if current_turn is not None and position is not None:
            detail = f"{position} не принадлежит {getattr(current_turn, 'value', current_turn)}"
        super().__init__(ErrorCode.INVALID_TURN, detail)
