"""
Unit-тесты для разбора координат.
"""
import pytest
import sys
from pathlib import Path

# Добавляем путь к shared модулю
sys.path.insert(0, str(Path(__file__).parent.parent))

from coordinate import Position
from exceptions import ErrorCode, InvalidPositionException


class TestPosition:
    """Тесты для класса Position."""

    @pytest.mark.parametrize("notation, row, column", [
        ("a1", 0, 0),
        ("a3", 2, 0),
        ("b8", 7, 1),
        ("h1", 0, 7),
        ("h8", 7, 7),
        ("e4", 3, 4),
    ])
    def test_parse(self, notation, row, column):
        """Тест разбора валидной позиции."""
        position = Position(notation)
        assert position.row == row
        assert position.column == column

    @pytest.mark.parametrize("notation", [
        "i1", "f0", "d9", "A1", "", "a", "a10", " a1", "a1 ", "11", "aa", "a-",
    ])
    def test_invalid_notation(self, notation):
        """Тест что невалидная позиция отклоняется сразу."""
        with pytest.raises(InvalidPositionException) as exc_info:
            Position(notation)
        assert exc_info.value.error_code == ErrorCode.INVALID_POSITION
        assert exc_info.value.position == notation

    @pytest.mark.parametrize("notation", [None, 11, ("a", "1")])
    def test_not_a_string(self, notation):
        """Тест что не-строки отклоняются."""
        with pytest.raises(InvalidPositionException):
            Position(notation)

    def test_from_indices(self):
        """Тест создания позиции из индексов."""
        assert Position.from_indices(2, 0) == Position("a3")
        assert str(Position.from_indices(7, 7)) == "h8"

    @pytest.mark.parametrize("row, column", [(-1, 0), (0, 8), (8, 0)])
    def test_from_invalid_indices(self, row, column):
        """Тест создания позиции из индексов вне доски."""
        with pytest.raises(InvalidPositionException):
            Position.from_indices(row, column)

    def test_str_and_file(self):
        """Тест текстового представления."""
        position = Position("c5")
        assert str(position) == "c5"
        assert position.file == "c"
        assert repr(position) == "Position('c5')"

    def test_equality(self):
        """Тест сравнения позиций."""
        assert Position("d4") == Position("d4")
        assert Position("d4") != Position("d5")
        assert len({Position("d4"), Position("d4")}) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
