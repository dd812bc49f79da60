"""
Pytest fixtures and configuration for all tests.
"""

import pytest
from datetime import date, datetime, timezone

from app.core.config import Settings
from app.models import BoutMetadata, CardSection, Pick, ResultEntry, UserIdentity
from app.repositories import (
    InMemoryBoutRepository,
    InMemoryPickRepository,
    InMemoryResultRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def make_pick():
    """
    Factory for Pick records.

    Usage: make_pick("alice", bout_id=1, corner="red", method="KO/TKO", round=2)
    """
    def _make(
        user_id: str,
        bout_id: int,
        corner: str = "red",
        method: str = "KO/TKO",
        round: int | None = None,
        event_id: int = 100
    ) -> Pick:
        return Pick(
            _id=Pick.make_id(user_id, bout_id),
            user_id=user_id,
            event_id=event_id,
            bout_id=bout_id,
            picked_corner=corner,
            picked_method=method,
            picked_round=round,
            created_at=datetime(2025, 3, 10, bout_id, tzinfo=timezone.utc),
        )
    return _make


@pytest.fixture
def sample_users():
    """Users with a public identity (ghost has none)."""
    return [
        UserIdentity(_id="alice", username="Alice", avatar_url="avatars/alice.jpg"),
        UserIdentity(_id="bob", username="Bob"),
        UserIdentity(_id="carol", username="Carol"),
        UserIdentity(_id="dave", username="Dave"),  # Sin picks
    ]


@pytest.fixture
def sample_bouts():
    """
    Event 100 (2025): 1 main event, 2 co-main, 3 prelim, 4 early prelim.
    Event 200 (2026): 5 main event, no result yet.
    """
    event_100 = date(2025, 3, 15)
    event_200 = date(2026, 1, 10)
    return [
        BoutMetadata(bout_id=1, event_id=100, weight_class="Lightweight",
                     card_section=CardSection.MAIN, is_main_event=True,
                     is_title_fight=True, event_date=event_100),
        BoutMetadata(bout_id=2, event_id=100, weight_class="Welterweight",
                     card_section=CardSection.MAIN, is_co_main=True,
                     event_date=event_100),
        BoutMetadata(bout_id=3, event_id=100, weight_class="Heavyweight",
                     card_section=CardSection.PRELIM, event_date=event_100),
        BoutMetadata(bout_id=4, event_id=100, weight_class="Flyweight",
                     card_section=CardSection.EARLY_PRELIM, event_date=event_100),
        BoutMetadata(bout_id=5, event_id=200, weight_class="Lightweight",
                     card_section=CardSection.MAIN, is_main_event=True,
                     event_date=event_200),
    ]


@pytest.fixture
def sample_results():
    """Official results; bout 4 is a draw, bout 5 has no result."""
    return {
        1: ResultEntry(winner="red", method="KO", round=2, time="3:45"),
        2: ResultEntry(winner="blue", method="SUBMISSION", round=1),
        3: ResultEntry(winner="red", method="DEC"),
        4: ResultEntry(winner="draw", method="DEC"),
    }


@pytest.fixture
def sample_picks(make_pick):
    """
    Expected totals with sample_results:
    - alice: 3 + 2 + 2 (+ void, + pending) = 7
    - bob:   1 + 0 + 1 (+ pending)         = 2
    - carol: 3 + 3                         = 6
    - ghost: 3 (no identity)
    """
    return [
        make_pick("alice", 1, "red", "KO/TKO", 2),
        make_pick("alice", 2, "blue", "SUB", 3),
        make_pick("alice", 3, "red", "DEC"),
        make_pick("alice", 4, "red", "DEC"),
        make_pick("alice", 5, "blue", "KO/TKO", 1, event_id=200),

        make_pick("bob", 1, "red", "SUB", 2),
        make_pick("bob", 2, "red", "KO/TKO", 1),
        make_pick("bob", 3, "red", "KO/TKO", 3),
        make_pick("bob", 5, "red", "DEC", event_id=200),

        make_pick("carol", 1, "red", "KO/TKO", 2),
        make_pick("carol", 2, "blue", "SUB", 1),

        make_pick("ghost", 1, "red", "KO/TKO", 2),
    ]


@pytest.fixture
def pick_repo(sample_picks):
    return InMemoryPickRepository(sample_picks)


@pytest.fixture
def result_repo(sample_results):
    return InMemoryResultRepository(sample_results)


@pytest.fixture
def bout_repo(sample_bouts):
    return InMemoryBoutRepository(sample_bouts)


@pytest.fixture
def user_repo(sample_users):
    return InMemoryUserRepository(sample_users)


@pytest.fixture
def test_settings():
    """Settings built from defaults, independent of the environment."""
    return Settings(
        app_env="test",
        leaderboard_default_limit=100,
        leaderboard_max_limit=500,
        default_rank_metric="total_points",
    )
