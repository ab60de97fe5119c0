"""
Tempo Scorer

Scores trigger-to-impact timing against the age group's ideal window.
"""

from typing import Optional

from ..domain.benchmarks import TIMING_BENCHMARKS
from ..domain.features import AgeGroup
from .stats import clamp, round_score


class TempoScorer:
    """
    Maps a timing interval to a 0-100 score.

    Scoring zones by distance from the ideal:
    - <= 5ms: 95-100 (perfect)
    - <= 15ms: 80-95 (good)
    - <= 30ms: 60-80 (average)
    - beyond: 60 falling off to a floor of 20

    Timing outside the age group's [min, max] window loses another 10,
    whichever side it falls on.
    """

    NEUTRAL_SCORE = 50
    OUT_OF_WINDOW_PENALTY = 10

    @staticmethod
    def score(trigger_to_impact_ms: Optional[float], age_group: AgeGroup) -> int:
        """
        Calculate the tempo score.

        Args:
            trigger_to_impact_ms: Swing initiation to contact
            age_group: Selects the timing window

        Returns:
            Integer score 0-100; 50 when timing is missing (common with
            vision-only capture)
        """
        if trigger_to_impact_ms is None or trigger_to_impact_ms <= 0:
            return TempoScorer.NEUTRAL_SCORE

        window = TIMING_BENCHMARKS[age_group]
        variance = abs(trigger_to_impact_ms - window.ideal)

        if variance <= 5:
            score = 95 + (5 - variance)
        elif variance <= 15:
            score = 80 + (15 - variance)
        elif variance <= 30:
            score = 60 + (30 - variance) * 0.67
        else:
            score = max(20, 60 - (variance - 30) * 0.8)

        # Too quick = rushing, too slow = dragging
        if not window.contains(trigger_to_impact_ms):
            score -= TempoScorer.OUT_OF_WINDOW_PENALTY

        return round_score(clamp(score))
