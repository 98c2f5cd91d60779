"""
Unit-тесты для pydantic схем.
"""
import pytest
import sys
from pathlib import Path
from pydantic import ValidationError

# Добавляем путь к backend модулю
sys.path.insert(0, str(Path(__file__).parent.parent))

from schemas import BoardSnapshot, PieceSchema, PositionRequest, ScoreReport, TurnCheckRequest


def empty_rank():
    return [{"type": "none"} for _ in range(8)]


class TestPositionRequest:
    """Тесты для схемы позиции."""

    @pytest.mark.parametrize("position", ["a1", "h8", "e4"])
    def test_valid(self, position):
        """Тест валидной позиции."""
        assert PositionRequest(position=position).position == position

    @pytest.mark.parametrize("position", ["i1", "f0", "d9", "A1", "a10", ""])
    def test_invalid(self, position):
        """Тест невалидной позиции."""
        with pytest.raises(ValidationError):
            PositionRequest(position=position)


class TestTurnCheckRequest:
    """Тесты для схемы проверки хода."""

    def test_valid(self):
        """Тест валидного запроса."""
        request = TurnCheckRequest(color="black", position="b8")
        assert request.color == "black"

    def test_invalid_color(self):
        """Тест невалидного цвета."""
        with pytest.raises(ValidationError):
            TurnCheckRequest(color="green", position="b8")


class TestPieceSchema:
    """Тесты для схемы фигуры."""

    def test_piece(self):
        """Тест фигуры с цветом."""
        piece = PieceSchema(type="queen", color="white")
        assert piece.type == "queen"

    def test_empty(self):
        """Тест пустой клетки."""
        assert PieceSchema(type="none").color is None

    def test_empty_with_color(self):
        """Тест что у пустой клетки нет цвета."""
        with pytest.raises(ValidationError):
            PieceSchema(type="none", color="white")

    def test_piece_without_color(self):
        """Тест что у фигуры есть цвет."""
        with pytest.raises(ValidationError):
            PieceSchema(type="pawn")

    def test_unknown_type(self):
        """Тест неизвестного типа фигуры."""
        with pytest.raises(ValidationError):
            PieceSchema(type="dragon", color="white")


class TestBoardSnapshot:
    """Тесты для схемы снимка доски."""

    def test_valid(self):
        """Тест пустой доски."""
        snapshot = BoardSnapshot(ranks=[empty_rank() for _ in range(8)])
        assert len(snapshot.ranks) == 8

    def test_wrong_rank_count(self):
        """Тест снимка с 9 горизонталями."""
        with pytest.raises(ValidationError):
            BoardSnapshot(ranks=[empty_rank() for _ in range(9)])

    def test_wrong_rank_length(self):
        """Тест горизонтали из 7 клеток."""
        ranks = [empty_rank() for _ in range(8)]
        ranks[2] = ranks[2][:7]
        with pytest.raises(ValidationError):
            BoardSnapshot(ranks=ranks)


class TestScoreReport:
    """Тесты для схемы отчёта."""

    def test_negative_points(self):
        """Тест что очки не бывают отрицательными."""
        with pytest.raises(ValidationError):
            ScoreReport(white=-1.0, black=0.0, balance=-1.0)

    def test_default_doubled_pawn_files(self):
        """Тест значения по умолчанию."""
        assert ScoreReport(white=1.0, black=0.0, balance=1.0).doubled_pawn_files == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
