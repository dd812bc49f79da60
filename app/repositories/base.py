"""
Interfaces de las fuentes externas (picks, resultados, peleas, usuarios)

La lógica de puntos y leaderboards solo depende de estos contratos;
quien embebe el core decide de dónde salen los datos.
"""

from typing import Iterable, Optional, Protocol

from app.models.bout import BoutMetadata
from app.models.pick import Pick
from app.models.scoring import ResultEntry
from app.models.user import UserIdentity


class PickSource(Protocol):
    async def get_all_picks(self) -> list[Pick]:
        ...

    async def get_picks_for_bout(self, bout_id: int) -> list[Pick]:
        ...

    async def get_picks_for_event(self, event_id: int) -> list[Pick]:
        ...

    async def get_user_picks(self, user_id: str) -> list[Pick]:
        ...


class ResultSource(Protocol):
    async def get_result(self, bout_id: int) -> Optional[ResultEntry]:
        ...

    async def get_results(self, bout_ids: Iterable[int]) -> dict[int, ResultEntry]:
        ...


class BoutSource(Protocol):
    async def get_bout(self, bout_id: int) -> Optional[BoutMetadata]:
        ...

    async def get_bouts(self, bout_ids: Iterable[int]) -> dict[int, BoutMetadata]:
        ...


class UserSource(Protocol):
    async def get_user(self, user_id: str) -> Optional[UserIdentity]:
        ...

    async def get_users(self, user_ids: Iterable[str]) -> dict[str, UserIdentity]:
        ...
