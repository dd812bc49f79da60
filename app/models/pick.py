from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.scoring import (
    BoutResult,
    Corner,
    Prediction,
    ScoredPick,
    VictoryMethod,
    normalize_method,
)


class PickStatus(str, Enum):
    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    VOID = "void"  # draw / no contest


class Pick(BaseModel):
    """Elección de un usuario para una pelea"""

    id: str = Field(..., alias="_id")  # user_id:bout_id

    user_id: str
    event_id: int
    bout_id: int

    picked_corner: Corner
    picked_method: VictoryMethod
    picked_round: Optional[int] = Field(None, ge=1, le=5)

    locked: bool = False

    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        populate_by_name = True

    @field_validator("picked_method", mode="before")
    @classmethod
    def _normalize_method(cls, value):
        if isinstance(value, str):
            return normalize_method(value)
        return value

    @staticmethod
    def make_id(user_id: str, bout_id: int) -> str:
        return f"{user_id}:{bout_id}"

    def to_prediction(self) -> Prediction:
        return Prediction(
            corner=self.picked_corner,
            method=self.picked_method,
            round=self.picked_round,
        )


class EvaluatedPick(BaseModel):
    """Un pick junto con el resultado (si existe) y su puntuación"""

    pick: Pick
    result: Optional[BoutResult] = None
    score: Optional[ScoredPick] = None
    void: bool = False

    @property
    def user_id(self) -> str:
        return self.pick.user_id

    @property
    def bout_id(self) -> int:
        return self.pick.bout_id

    @property
    def event_id(self) -> int:
        return self.pick.event_id

    @property
    def is_pending(self) -> bool:
        return not self.void and self.score is None

    @property
    def points(self) -> int:
        return self.score.points if self.score else 0

    @property
    def status(self) -> PickStatus:
        if self.void:
            return PickStatus.VOID
        if self.score is None:
            return PickStatus.PENDING
        return PickStatus.CORRECT if self.score.is_correct else PickStatus.INCORRECT
