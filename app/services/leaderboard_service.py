"""
LeaderboardService - Calculates leaderboard data from evaluated picks.

Leaderboards are never stored: every call filters the picks by scope,
groups them per user and ranks the result. The pure functions at module
level do the work; the service only loads data from the sources.
"""

import logging
from typing import Iterable, Mapping, Optional

from app.core.config import Settings, get_settings
from app.models.bout import BoutMetadata
from app.models.leaderboard import (
    LeaderboardCategory,
    LeaderboardEntry,
    LeaderboardScope,
    RankMetric,
)
from app.models.pick import EvaluatedPick
from app.models.user import UserIdentity
from app.repositories.base import BoutSource, PickSource, ResultSource, UserSource
from app.services.points_service import PointsService

logger = logging.getLogger(__name__)


def filter_picks(
    picks: Iterable[EvaluatedPick],
    scope: Optional[LeaderboardScope] = None,
    bouts: Optional[Mapping[int, BoutMetadata]] = None
) -> list[EvaluatedPick]:
    """Keep the picks that fall inside the scope. Void picks never count."""
    bouts = bouts or {}
    kept = []
    for evaluated in picks:
        if evaluated.void:
            continue
        if scope is not None and not scope.matches(evaluated, bouts.get(evaluated.bout_id)):
            continue
        kept.append(evaluated)
    return kept


def _build_entry(
    user_id: str,
    picks: list[EvaluatedPick],
    user: Optional[UserIdentity],
    category: str,
    scope: str
) -> LeaderboardEntry:
    scored = [p for p in picks if p.score is not None]

    picks_correct = sum(1 for p in scored if p.points > 0)
    evaluated_count = len(scored)

    return LeaderboardEntry(
        user_id=user_id,
        username=user.username if user else "Unknown",
        avatar_url=user.avatar_url if user else None,
        total_points=sum(p.points for p in scored),
        picks_total=len(picks),
        picks_correct=picks_correct,
        picks_incorrect=evaluated_count - picks_correct,
        picks_pending=len(picks) - evaluated_count,
        perfect_picks=sum(1 for p in scored if p.points == 3),
        accuracy=picks_correct / evaluated_count if evaluated_count else 0.0,
        category=category,
        scope=scope,
    )


def _sort_key(entry: LeaderboardEntry, rank_by: RankMetric) -> tuple:
    if rank_by == RankMetric.ACCURACY:
        keys = (-entry.accuracy, -entry.picks_correct)
    elif rank_by == RankMetric.PERFECT_PICKS:
        keys = (-entry.perfect_picks, -entry.total_points)
    elif rank_by == RankMetric.TOTAL_POINTS:
        # Menos picks es mejor si empatan en puntos y accuracy
        keys = (-entry.total_points, -entry.accuracy, entry.picks_total)
    else:
        keys = (-entry.metric(rank_by),)
    return keys + (entry.user_id,)


def rank_entries(
    entries: Iterable[LeaderboardEntry],
    rank_by: RankMetric = RankMetric.TOTAL_POINTS
) -> list[LeaderboardEntry]:
    """
    Sort entries by rank_by (descending) and assign 1-based ranks.

    Ranks are positional: equal values still get distinct ranks.
    """
    ordered = sorted(entries, key=lambda e: _sort_key(e, rank_by))
    return [
        entry.model_copy(update={"rank": position})
        for position, entry in enumerate(ordered, start=1)
    ]


def aggregate(
    picks: Iterable[EvaluatedPick],
    scope: Optional[LeaderboardScope] = None,
    rank_by: RankMetric = RankMetric.TOTAL_POINTS,
    bouts: Optional[Mapping[int, BoutMetadata]] = None,
    users: Optional[Mapping[str, UserIdentity]] = None,
    category_label: str = "global",
    scope_label: str = "all_time"
) -> list[LeaderboardEntry]:
    """
    Build a ranked leaderboard from evaluated picks.

    Picks without a recognizable user (blank id, or missing from `users`
    when a directory is given) are dropped.
    """
    grouped: dict[str, list[EvaluatedPick]] = {}
    for evaluated in filter_picks(picks, scope, bouts):
        user_id = evaluated.user_id
        if not user_id or (users is not None and user_id not in users):
            logger.debug(f"Dropping pick {evaluated.pick.id}: unknown user")
            continue
        grouped.setdefault(user_id, []).append(evaluated)

    entries = [
        _build_entry(
            user_id,
            user_picks,
            users.get(user_id) if users is not None else None,
            category_label,
            scope_label,
        )
        for user_id, user_picks in grouped.items()
    ]
    return rank_entries(entries, rank_by)


def summarize_user(
    picks: Iterable[EvaluatedPick],
    user: UserIdentity,
    scope: Optional[LeaderboardScope] = None,
    bouts: Optional[Mapping[int, BoutMetadata]] = None
) -> LeaderboardEntry:
    """Stats card for a single user ("my picks"). Rank is left at 0."""
    own = [p for p in filter_picks(picks, scope, bouts) if p.user_id == user.id]
    label = scope.label() if scope else "all_time"
    category = scope.category.value if scope else LeaderboardCategory.GLOBAL.value
    return _build_entry(user.id, own, user, category, label)


class LeaderboardServiceError(Exception):
    """Base exception for leaderboard service errors."""
    pass


class InvalidCategoryError(LeaderboardServiceError):
    """Raised when the leaderboard category is unknown."""
    pass


class LeaderboardService:
    def __init__(
        self,
        picks: PickSource,
        results: ResultSource,
        bouts: BoutSource,
        users: UserSource,
        settings: Optional[Settings] = None
    ):
        self.picks = picks
        self.bouts = bouts
        self.users = users
        self.points_service = PointsService(picks, results)
        self.settings = settings or get_settings()

    def _resolve_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return self.settings.leaderboard_default_limit
        if limit < 1:
            raise LeaderboardServiceError(f"Invalid limit: {limit}")
        return min(limit, self.settings.leaderboard_max_limit)

    def _resolve_metric(self, rank_by: Optional[RankMetric]) -> RankMetric:
        return rank_by or RankMetric(self.settings.default_rank_metric)

    async def _build_leaderboard(
        self,
        scope: LeaderboardScope,
        rank_by: RankMetric
    ) -> list[LeaderboardEntry]:
        if scope.event_id is not None:
            picks = await self.picks.get_picks_for_event(scope.event_id)
        else:
            picks = await self.picks.get_all_picks()

        if not picks:
            return []

        evaluated = await self.points_service.evaluate_picks(picks)

        bouts = {}
        if scope.requires_metadata:
            bouts = await self.bouts.get_bouts({p.bout_id for p in picks})

        users = await self.users.get_users({p.user_id for p in picks if p.user_id})

        entries = aggregate(
            evaluated,
            scope=scope,
            rank_by=rank_by,
            bouts=bouts,
            users=users,
            category_label=scope.category.value,
            scope_label=scope.label(),
        )

        logger.info(
            f"📊 Leaderboard {scope.category.value}/{scope.label()} "
            f"by {rank_by.value}: {len(entries)} users"
        )
        return entries

    async def get_scoped_leaderboard(
        self,
        scope: LeaderboardScope,
        limit: Optional[int] = None,
        rank_by: Optional[RankMetric] = None
    ) -> list[LeaderboardEntry]:
        """
        Leaderboard for any scope (advanced filters: method, round,
        weight class, title fights).
        """
        limit = self._resolve_limit(limit)
        entries = await self._build_leaderboard(scope, self._resolve_metric(rank_by))
        return entries[:limit]

    async def get_global_leaderboard(
        self,
        limit: Optional[int] = None,
        year: Optional[int] = None,
        rank_by: Optional[RankMetric] = None
    ) -> list[LeaderboardEntry]:
        """Get global leaderboard (all events), optionally for one year."""
        return await self.get_scoped_leaderboard(
            LeaderboardScope(year=year), limit, rank_by
        )

    async def get_event_leaderboard(
        self,
        event_id: int,
        limit: Optional[int] = None,
        rank_by: Optional[RankMetric] = None
    ) -> list[LeaderboardEntry]:
        """Get leaderboard for a specific event."""
        return await self.get_scoped_leaderboard(
            LeaderboardScope(event_id=event_id), limit, rank_by
        )

    async def get_category_leaderboard(
        self,
        category: str,
        limit: Optional[int] = None,
        year: Optional[int] = None,
        rank_by: Optional[RankMetric] = None
    ) -> list[LeaderboardEntry]:
        """
        Get leaderboard by category.

        Categories: global, main_events, main_card, prelims, early_prelims
        """
        try:
            parsed = LeaderboardCategory(category)
        except ValueError:
            raise InvalidCategoryError(f"Unknown leaderboard category: {category}")

        return await self.get_scoped_leaderboard(
            LeaderboardScope(category=parsed, year=year), limit, rank_by
        )

    async def get_user_rank(
        self,
        user_id: str,
        category: str = "global"
    ) -> Optional[dict]:
        """
        Get user's rank in a specific leaderboard category.

        Returns dict with rank and entry data, or None if the user is unknown.
        """
        try:
            parsed = LeaderboardCategory(category)
        except ValueError:
            raise InvalidCategoryError(f"Unknown leaderboard category: {category}")

        scope = LeaderboardScope(category=parsed)
        leaderboard = await self._build_leaderboard(scope, self._resolve_metric(None))

        for entry in leaderboard:
            if entry.user_id == user_id:
                return {"rank": entry.rank, "entry": entry}

        # No tiene picks en este scope: stats vacías si el usuario existe
        user = await self.users.get_user(user_id)
        if user is None:
            return None

        return {
            "rank": None,
            "entry": summarize_user([], user, scope),
        }
