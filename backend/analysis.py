# analysis.py - Материальный анализ позиции на доске
from typing import Dict, List, Union
import sys
from pathlib import Path

# Добавляем путь к shared модулю
sys.path.insert(0, str(Path(__file__).parent.parent / "shared"))

from chess_board import Board, DOUBLED_PAWN_THRESHOLD
from coordinate import FILES
from exceptions import InvalidTurnException
from pieces import Color, Piece, PieceType
from logger import setup_logger
from schemas import BoardSnapshot, PieceSchema, ScoreReport, TurnCheckRequest

logger = setup_logger()


class MaterialAnalyzer:
    """Анализатор материала на доске"""

    @staticmethod
    def doubled_pawn_files(board: Board, color: Color) -> List[str]:
        """
        Найти вертикали со сдвоенными пешками

        Args:
            board: Доска
            color: Цвет пешек

        Returns:
            Буквы вертикалей, где стоят две и более пешки цвета
        """
        counts = board.pawn_counts_by_file(color)
        return [FILES[column] for column, count in enumerate(counts) if count >= DOUBLED_PAWN_THRESHOLD]

    @staticmethod
    def score_report(board: Board) -> ScoreReport:
        """
        Посчитать очки обоих цветов

        Returns:
            ScoreReport с очками, разницей (белые минус чёрные) и сдвоенными пешками
        """
        white = board.calculate_point(Color.WHITE)
        black = board.calculate_point(Color.BLACK)
        report = ScoreReport(
            white=white,
            black=black,
            balance=white - black,
            doubled_pawn_files={
                color.value: MaterialAnalyzer.doubled_pawn_files(board, color)
                for color in Color
            },
        )
        logger.debug(f"Очки: белые {white}, чёрные {black}")
        return report

    @staticmethod
    def snapshot(board: Board) -> BoardSnapshot:
        """Снять состояние доски для сериализации."""
        return BoardSnapshot(ranks=[
            [PieceSchema(**piece.to_dict()) for piece in rank]
            for rank in board.ranks
        ])

    @staticmethod
    def from_snapshot(snapshot: Union[BoardSnapshot, Dict]) -> Board:
        """
        Восстановить доску из снимка

        Args:
            snapshot: BoardSnapshot или словарь в его формате

        Returns:
            Новая доска с фигурами из снимка

        Raises:
            pydantic.ValidationError: если словарь не соответствует формату
        """
        if not isinstance(snapshot, BoardSnapshot):
            snapshot = BoardSnapshot.model_validate(snapshot)

        board = Board()
        for rank, row in zip(board.ranks, snapshot.ranks):
            rank.init([MaterialAnalyzer._to_piece(cell) for cell in row])
        return board

    @staticmethod
    def check_turn(board: Board, data: Dict) -> None:
        """
        Проверить очерёдность хода по запросу

        Args:
            board: Доска
            data: Словарь с ключами "color" и "position"

        Raises:
            pydantic.ValidationError: если запрос невалиден
            InvalidTurnException: если фигура не принадлежит цвету
        """
        request = TurnCheckRequest.model_validate(data)
        try:
            board.check_turn(Color(request.color), request.position)
        except InvalidTurnException as e:
            logger.info(f"Ход отклонён: {e.message}")
            raise

    @staticmethod
    def _to_piece(cell: PieceSchema) -> Piece:
        piece_type = PieceType(cell.type)
        if piece_type == PieceType.NONE:
            return Piece.empty()
        return Piece(piece_type, Color(cell.color))
