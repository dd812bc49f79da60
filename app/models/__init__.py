from .scoring import (
    BoutOutcome,
    BoutResult,
    Corner,
    Prediction,
    ResultEntry,
    ScoreBreakdown,
    ScoredPick,
    VictoryMethod,
)
from .pick import EvaluatedPick, Pick, PickStatus
from .bout import BoutMetadata, CardSection
from .user import UserIdentity
from .leaderboard import (
    LeaderboardCategory,
    LeaderboardEntry,
    LeaderboardScope,
    RankMetric,
)

__all__ = [
    "BoutOutcome",
    "BoutResult",
    "Corner",
    "Prediction",
    "ResultEntry",
    "ScoreBreakdown",
    "ScoredPick",
    "VictoryMethod",
    "EvaluatedPick",
    "Pick",
    "PickStatus",
    "BoutMetadata",
    "CardSection",
    "UserIdentity",
    "LeaderboardCategory",
    "LeaderboardEntry",
    "LeaderboardScope",
    "RankMetric",
]
