"""
Pydantic схемы для валидации входных данных и снимков доски.
"""
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict
from typing import Dict, List, Optional


POSITION_PATTERN = "^[a-h][1-8]$"
COLOR_PATTERN = "^(white|black)$"


class PositionRequest(BaseModel):
    """Позиция на доске в алгебраической нотации."""
    position: str = Field(..., pattern=POSITION_PATTERN, description="Клетка, например e4")


class TurnCheckRequest(BaseModel):
    """Запрос на проверку очерёдности хода."""
    color: str = Field(..., pattern=COLOR_PATTERN)
    position: str = Field(..., pattern=POSITION_PATTERN)


class PieceSchema(BaseModel):
    """Фигура на клетке (type="none" для пустой клетки)."""
    model_config = ConfigDict(frozen=True)

    type: str = Field(..., pattern="^(pawn|knight|bishop|rook|queen|king|none)$")
    color: Optional[str] = Field(None, pattern=COLOR_PATTERN)

    @model_validator(mode="after")
    def validate_color(self):
        """Проверяет, что цвет есть только у непустой клетки."""
        if self.type == "none" and self.color is not None:
            raise ValueError("Пустая клетка не может иметь цвет")
        if self.type != "none" and self.color is None:
            raise ValueError(f"Фигура {self.type} должна иметь цвет")
        return self


class BoardSnapshot(BaseModel):
    """Снимок доски: 8 горизонталей по 8 клеток, ranks[0] - горизонталь "1"."""
    ranks: List[List[PieceSchema]] = Field(..., min_length=8, max_length=8)

    @field_validator('ranks')
    @classmethod
    def validate_ranks(cls, v):
        """Проверяет, что каждая горизонталь содержит 8 клеток."""
        for index, rank in enumerate(v):
            if len(rank) != 8:
                raise ValueError(f"Горизонталь {index + 1} содержит {len(rank)} клеток вместо 8")
        return v


class ScoreReport(BaseModel):
    """Материальные очки обоих цветов."""
    white: float = Field(..., ge=0)
    black: float = Field(..., ge=0)
    balance: float = Field(..., description="Разница очков белых и чёрных")
    doubled_pawn_files: Dict[str, List[str]] = Field(default_factory=dict)
