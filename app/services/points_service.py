"""
Servicio de Puntos - Calcula puntos por picks

Sistema de puntos:
- 0 puntos: Peleador incorrecto (método y round no suman nada)
- 1 punto: Acertar el ganador
- 2 puntos: Ganador + método
- 3 puntos: Ganador + método + round exacto (solo KO/TKO y SUB)

Los picks de DEC tienen un máximo de 2 puntos.
"""

import logging
from typing import Optional, Union

from app.models.pick import EvaluatedPick, Pick
from app.models.scoring import (
    BoutResult,
    Prediction,
    ResultEntry,
    ScoreBreakdown,
    ScoredPick,
    VictoryMethod,
    normalize_method,
)
from app.repositories.base import PickSource, ResultSource

logger = logging.getLogger(__name__)

__all__ = [
    "PointsService",
    "PointsServiceError",
    "BoutNotFoundError",
    "evaluate_pick",
    "normalize_method",
    "score_pick",
]


def score_pick(prediction: Prediction, result: BoutResult) -> ScoredPick:
    """
    Calculate the score of a prediction against the official result.

    Pure function: same inputs always give the same ScoredPick.
    """
    fighter_correct = prediction.corner == result.winner
    method_correct = prediction.method == result.method

    if prediction.method == VictoryMethod.DECISION:
        round_correct = False
    else:
        round_correct = prediction.round is not None and prediction.round == result.round

    if not fighter_correct:
        points = 0
    elif prediction.method == VictoryMethod.DECISION:
        points = 2 if method_correct else 1
    elif method_correct and round_correct:
        points = 3
    elif method_correct:
        points = 2
    else:
        points = 1

    return ScoredPick(
        points=points,
        breakdown=ScoreBreakdown(
            fighter_correct=fighter_correct,
            method_correct=method_correct,
            round_correct=round_correct,
        ),
    )


def evaluate_pick(
    pick: Pick,
    result: Union[ResultEntry, BoutResult, None]
) -> EvaluatedPick:
    """
    Attach the current result (if any) to a stored pick.

    - No result yet: pending
    - Draw / no contest: void, never scored
    - Otherwise: scored with score_pick()
    """
    if result is None:
        return EvaluatedPick(pick=pick)

    if isinstance(result, ResultEntry):
        if result.is_void:
            return EvaluatedPick(pick=pick, void=True)
        result = result.to_result()

    return EvaluatedPick(
        pick=pick,
        result=result,
        score=score_pick(pick.to_prediction(), result),
    )


class PointsServiceError(Exception):
    """Base exception for points service errors."""
    pass


class BoutNotFoundError(PointsServiceError):
    """Raised when a bout has no picks and no result."""
    pass


class PointsService:
    """
    Evalúa los picks guardados contra los resultados actuales.

    Nunca guarda puntos: cada llamada recalcula todo desde cero, así que
    corregir o eliminar un resultado se refleja en la siguiente llamada.
    """

    def __init__(self, picks: PickSource, results: ResultSource):
        self.picks = picks
        self.results = results

    async def evaluate_bout(self, bout_id: int) -> list[EvaluatedPick]:
        """Evaluate every pick for a bout with its current result."""
        picks = await self.picks.get_picks_for_bout(bout_id)
        result = await self.results.get_result(bout_id)
        return [evaluate_pick(pick, result) for pick in picks]

    async def summarize_bout(self, bout_id: int) -> dict:
        """
        Resumen de puntos repartidos en una pelea.

        Returns:
            Dict con picks_processed, points_distributed, users_affected, void
        """
        picks = await self.picks.get_picks_for_bout(bout_id)
        result = await self.results.get_result(bout_id)

        if not picks and result is None:
            raise BoutNotFoundError(f"Bout {bout_id} has no picks and no result")

        if result is None or result.is_void:
            return {
                "picks_processed": 0,
                "points_distributed": 0,
                "users_affected": 0,
                "void": result is not None,
            }

        evaluated = [evaluate_pick(pick, result) for pick in picks]
        total_points = sum(e.points for e in evaluated)
        users_affected = {e.user_id for e in evaluated}

        logger.info(
            f"🥊 Bout {bout_id}: {len(evaluated)} picks, "
            f"{total_points} points, {len(users_affected)} users"
        )

        return {
            "picks_processed": len(evaluated),
            "points_distributed": total_points,
            "users_affected": len(users_affected),
            "void": False,
        }

    async def evaluate_user_picks(
        self,
        user_id: str,
        event_id: Optional[int] = None
    ) -> list[EvaluatedPick]:
        """Pick history for a user (optionally a single event) with status."""
        picks = await self.picks.get_user_picks(user_id)
        if event_id is not None:
            picks = [p for p in picks if p.event_id == event_id]

        results = await self.results.get_results({p.bout_id for p in picks})
        return [evaluate_pick(p, results.get(p.bout_id)) for p in picks]

    async def evaluate_picks(self, picks: list[Pick]) -> list[EvaluatedPick]:
        """Evaluate an arbitrary batch of picks, fetching results once."""
        results = await self.results.get_results({p.bout_id for p in picks})
        return [evaluate_pick(p, results.get(p.bout_id)) for p in picks]
