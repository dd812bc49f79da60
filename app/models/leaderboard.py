from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.bout import BoutMetadata, CardSection
from app.models.pick import EvaluatedPick
from app.models.scoring import VictoryMethod, normalize_method


class LeaderboardCategory(str, Enum):
    GLOBAL = "global"
    MAIN_EVENTS = "main_events"
    MAIN_CARD = "main_card"
    PRELIMS = "prelims"
    EARLY_PRELIMS = "early_prelims"


class RankMetric(str, Enum):
    TOTAL_POINTS = "total_points"
    ACCURACY = "accuracy"
    PICKS_CORRECT = "picks_correct"
    PERFECT_PICKS = "perfect_picks"
    PICKS_TOTAL = "picks_total"


_CATEGORY_SECTIONS = {
    LeaderboardCategory.MAIN_CARD: CardSection.MAIN,
    LeaderboardCategory.PRELIMS: CardSection.PRELIM,
    LeaderboardCategory.EARLY_PRELIMS: CardSection.EARLY_PRELIM,
}


def _weight_key(weight_class: str) -> str:
    return weight_class.lower().replace(" ", "")


class LeaderboardScope(BaseModel):
    """
    Filtro que recorta los picks antes de agrupar por usuario.

    Todos los campos son opcionales y se combinan con AND.
    """

    event_id: Optional[int] = None
    year: Optional[int] = None
    category: LeaderboardCategory = LeaderboardCategory.GLOBAL

    weight_class: Optional[str] = None
    method: Optional[VictoryMethod] = None  # método del resultado oficial
    round: Optional[int] = Field(None, ge=1, le=5)  # round del resultado oficial
    title_fights_only: bool = False

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value):
        if isinstance(value, str):
            return normalize_method(value)
        return value

    @property
    def requires_metadata(self) -> bool:
        return (
            self.year is not None
            or self.category != LeaderboardCategory.GLOBAL
            or self.weight_class is not None
            or self.title_fights_only
        )

    @property
    def requires_result(self) -> bool:
        return self.method is not None or self.round is not None

    def label(self) -> str:
        if self.event_id is not None:
            return str(self.event_id)
        if self.year is not None:
            return str(self.year)
        return "all_time"

    def matches(self, evaluated: EvaluatedPick, bout: Optional[BoutMetadata]) -> bool:
        if self.event_id is not None and evaluated.event_id != self.event_id:
            return False

        if self.requires_result:
            result = evaluated.result
            if result is None:
                return False
            if self.method is not None and result.method != self.method:
                return False
            if self.round is not None and result.round != self.round:
                return False

        if not self.requires_metadata:
            return True
        if bout is None:
            return False

        if self.year is not None and bout.year != self.year:
            return False
        if self.title_fights_only and not bout.is_title_fight:
            return False
        if self.weight_class is not None:
            if bout.weight_class is None or _weight_key(bout.weight_class) != _weight_key(self.weight_class):
                return False

        if self.category == LeaderboardCategory.MAIN_EVENTS:
            return bout.is_main_event
        if self.category in _CATEGORY_SECTIONS:
            return bout.card_section == _CATEGORY_SECTIONS[self.category]
        return True


class LeaderboardEntry(BaseModel):
    """Entrada en una tabla de clasificación (resultado agregado)"""

    rank: int = 0

    user_id: str
    username: str
    avatar_url: Optional[str] = None

    total_points: int = 0
    accuracy: float = 0.0

    picks_total: int = 0
    picks_correct: int = 0
    picks_incorrect: int = 0
    picks_pending: int = 0
    perfect_picks: int = 0

    category: str = "global"  # global | main_events | main_card | prelims | early_prelims
    scope: str = "all_time"   # all_time | year | event

    class Config:
        populate_by_name = True

    def metric(self, rank_by: RankMetric):
        return getattr(self, rank_by.value)
