"""
Modelos de puntuación - predicción, resultado oficial y pick puntuado
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


METHOD_ALIASES = {
    "KO": "KO/TKO",
    "TKO": "KO/TKO",
    "KO/TKO": "KO/TKO",
    "SUB": "SUB",
    "SUBMISSION": "SUB",
    "DEC": "DEC",
    "DECISION": "DEC",
}


def normalize_method(method: str) -> str:
    """Normalizar método a formato estándar (KO/TKO, SUB, DEC)"""
    method_upper = method.strip().upper()
    return METHOD_ALIASES.get(method_upper, method_upper)


class Corner(str, Enum):
    RED = "red"
    BLUE = "blue"


class VictoryMethod(str, Enum):
    DECISION = "DEC"
    KO_TKO = "KO/TKO"
    SUBMISSION = "SUB"


class BoutOutcome(str, Enum):
    """Lo que el admin puede registrar como ganador"""
    RED = "red"
    BLUE = "blue"
    DRAW = "draw"
    NO_CONTEST = "nc"


class _MethodRoundModel(BaseModel):
    """Base compartida: método normalizado + round solo si no es DEC"""

    method: VictoryMethod
    round: Optional[int] = Field(None, ge=1, le=5)

    @field_validator("method", mode="before")
    @classmethod
    def _normalize(cls, value):
        if isinstance(value, str):
            return normalize_method(value)
        return value

    @model_validator(mode="after")
    def _drop_decision_round(self):
        # En DEC el round no significa nada, se ignora
        if self.method == VictoryMethod.DECISION and self.round is not None:
            self.round = None
        return self


class Prediction(_MethodRoundModel):
    """Lo que eligió el usuario: peleador, método y (opcional) round"""

    corner: Corner


class BoutResult(_MethodRoundModel):
    """Resultado oficial de una pelea con ganador"""

    winner: Corner
    time: Optional[str] = None  # "4:32", solo para mostrar


class ResultEntry(_MethodRoundModel):
    """
    Resultado tal cual lo carga el admin.

    Draw y NC anulan la pelea: no hay BoutResult y los picks no puntúan.
    """

    winner: BoutOutcome
    time: Optional[str] = None

    @property
    def is_void(self) -> bool:
        return self.winner in (BoutOutcome.DRAW, BoutOutcome.NO_CONTEST)

    def to_result(self) -> Optional[BoutResult]:
        if self.is_void:
            return None
        return BoutResult(
            winner=Corner(self.winner.value),
            method=self.method,
            round=self.round,
            time=self.time,
        )


class ScoreBreakdown(BaseModel):
    """Desglose para mostrar en la UI, nunca cambia los puntos por sí solo"""

    fighter_correct: bool
    method_correct: bool
    round_correct: bool


class ScoredPick(BaseModel):
    points: int = Field(..., ge=0, le=3)
    breakdown: ScoreBreakdown

    @property
    def is_correct(self) -> bool:
        return self.breakdown.fighter_correct

    @property
    def is_perfect(self) -> bool:
        return self.points == 3
