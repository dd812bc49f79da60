"""
🎯 Repositorios en memoria

Implementan las interfaces de app.repositories.base sobre dicts.
Sirven para tests y para embeber el core sin base de datos.
"""

from typing import Iterable, Optional

from app.models.bout import BoutMetadata
from app.models.pick import Pick
from app.models.scoring import ResultEntry
from app.models.user import UserIdentity


class InMemoryPickRepository:
    def __init__(self, picks: Optional[Iterable[Pick]] = None):
        self._picks: dict[str, Pick] = {}
        for pick in picks or []:
            self._picks[pick.id] = pick

    # ============================================
    # 📌 CREATE / UPDATE / DELETE
    # ============================================

    async def create(self, pick: Pick) -> Pick:
        """
        Crea un pick

        ID compuesto: f"{user_id}:{bout_id}"
        """
        if pick.id in self._picks:
            raise ValueError(f"Pick {pick.id} already exists")
        self._picks[pick.id] = pick
        return pick

    async def upsert(self, pick: Pick) -> Pick:
        self._picks[pick.id] = pick
        return pick

    async def delete(self, pick_id: str) -> bool:
        return self._picks.pop(pick_id, None) is not None

    # ============================================
    # 📌 READ
    # ============================================

    async def get_by_id(self, pick_id: str) -> Optional[Pick]:
        return self._picks.get(pick_id)

    async def get_all_picks(self) -> list[Pick]:
        return list(self._picks.values())

    async def get_picks_for_bout(self, bout_id: int) -> list[Pick]:
        """Todos los picks de una pelea"""
        return [p for p in self._picks.values() if p.bout_id == bout_id]

    async def get_picks_for_event(self, event_id: int) -> list[Pick]:
        return [p for p in self._picks.values() if p.event_id == event_id]

    async def get_user_picks(self, user_id: str) -> list[Pick]:
        """Picks de un usuario, del más viejo al más nuevo"""
        picks = [p for p in self._picks.values() if p.user_id == user_id]
        return sorted(picks, key=lambda p: p.created_at)


class InMemoryResultRepository:
    def __init__(self, results: Optional[dict[int, ResultEntry]] = None):
        self._results: dict[int, ResultEntry] = dict(results or {})

    async def set_result(self, bout_id: int, result: ResultEntry) -> ResultEntry:
        """Registra (o corrige) el resultado de una pelea"""
        self._results[bout_id] = result
        return result

    async def delete_result(self, bout_id: int) -> bool:
        """Elimina el resultado; los picks vuelven a quedar pendientes"""
        return self._results.pop(bout_id, None) is not None

    async def get_result(self, bout_id: int) -> Optional[ResultEntry]:
        return self._results.get(bout_id)

    async def get_results(self, bout_ids: Iterable[int]) -> dict[int, ResultEntry]:
        return {
            bout_id: self._results[bout_id]
            for bout_id in bout_ids
            if bout_id in self._results
        }


class InMemoryBoutRepository:
    def __init__(self, bouts: Optional[Iterable[BoutMetadata]] = None):
        self._bouts: dict[int, BoutMetadata] = {b.bout_id: b for b in bouts or []}

    async def add(self, bout: BoutMetadata) -> BoutMetadata:
        self._bouts[bout.bout_id] = bout
        return bout

    async def get_bout(self, bout_id: int) -> Optional[BoutMetadata]:
        return self._bouts.get(bout_id)

    async def get_bouts(self, bout_ids: Iterable[int]) -> dict[int, BoutMetadata]:
        return {
            bout_id: self._bouts[bout_id]
            for bout_id in bout_ids
            if bout_id in self._bouts
        }


class InMemoryUserRepository:
    def __init__(self, users: Optional[Iterable[UserIdentity]] = None):
        self._users: dict[str, UserIdentity] = {u.id: u for u in users or []}

    async def add(self, user: UserIdentity) -> UserIdentity:
        self._users[user.id] = user
        return user

    async def get_user(self, user_id: str) -> Optional[UserIdentity]:
        return self._users.get(user_id)

    async def get_users(self, user_ids: Iterable[str]) -> dict[str, UserIdentity]:
        return {
            user_id: self._users[user_id]
            for user_id in user_ids
            if user_id in self._users
        }
