from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class CardSection(str, Enum):
    MAIN = "main"
    PRELIM = "prelim"
    EARLY_PRELIM = "early_prelim"


class BoutMetadata(BaseModel):
    """
    Datos de la pelea que sirven solo como filtro del leaderboard.

    Viene del servicio de eventos/peleas, no se calcula acá.
    """

    bout_id: int
    event_id: int

    weight_class: Optional[str] = None
    card_section: Optional[CardSection] = None

    is_main_event: bool = False
    is_co_main: bool = False
    is_title_fight: bool = False

    event_date: Optional[date] = None

    class Config:
        populate_by_name = True

    @property
    def year(self) -> Optional[int]:
        return self.event_date.year if self.event_date else None
