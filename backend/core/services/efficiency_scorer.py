"""
Efficiency Scorer

Combines energy-transfer measurements into a single 0-100 rating.
"""

from typing import Optional

from ..domain.features import SwingFeatureVector
from .stats import clamp, round_score


class EfficiencyScorer:
    """
    Averages whichever efficiency inputs are present.

    - speed efficiency: used directly (already 0-100)
    - approach angle: bucketed (optimal 90, good 70, acceptable 50, poor 30)
    - distance in zone: percent of an 18in reference path, capped at 100
    - hand cast: 100 at 4in or less, minus 8 per extra inch, floored at 0

    The mean is clamped to 0-100.
    """

    NEUTRAL_SCORE = 50
    FULL_ZONE_IN = 18.0

    @staticmethod
    def approach_angle_score(angle_deg: float) -> float:
        if 8 <= angle_deg <= 15:
            return 90
        if 5 <= angle_deg <= 18:
            return 70
        if 0 <= angle_deg <= 25:
            return 50
        return 30

    @staticmethod
    def zone_score(distance_in_zone_in: float) -> float:
        return min(100.0, distance_in_zone_in / EfficiencyScorer.FULL_ZONE_IN * 100)

    @staticmethod
    def cast_score(hand_cast_distance_in: float) -> float:
        return clamp(100 - (hand_cast_distance_in - 4) * 8)

    @staticmethod
    def has_inputs(
        speed_efficiency: Optional[float] = None,
        approach_angle: Optional[float] = None,
        distance_in_zone: Optional[float] = None,
        hand_cast_distance: Optional[float] = None,
    ) -> bool:
        """True when at least one input would contribute to the rating."""
        return any(
            v is not None
            for v in (speed_efficiency, approach_angle, distance_in_zone, hand_cast_distance)
        )

    @staticmethod
    def rating(
        speed_efficiency: Optional[float] = None,
        approach_angle: Optional[float] = None,
        distance_in_zone: Optional[float] = None,
        hand_cast_distance: Optional[float] = None,
    ) -> int:
        """
        Calculate the efficiency rating.

        Returns:
            Mean of the available contributions, rounded; 50 if none
        """
        contributions = []
        if speed_efficiency is not None:
            contributions.append(speed_efficiency)
        if approach_angle is not None:
            contributions.append(EfficiencyScorer.approach_angle_score(approach_angle))
        if distance_in_zone is not None:
            contributions.append(EfficiencyScorer.zone_score(distance_in_zone))
        if hand_cast_distance is not None:
            contributions.append(EfficiencyScorer.cast_score(hand_cast_distance))

        if not contributions:
            return EfficiencyScorer.NEUTRAL_SCORE

        return round_score(clamp(sum(contributions) / len(contributions)))

    @staticmethod
    def rate_features(features: SwingFeatureVector) -> int:
        return EfficiencyScorer.rating(
            speed_efficiency=features.speed_efficiency_pct,
            approach_angle=features.attack_angle_deg,
            distance_in_zone=features.distance_in_zone_in,
            hand_cast_distance=features.hand_cast_distance_in,
        )

    @staticmethod
    def features_have_inputs(features: SwingFeatureVector) -> bool:
        return EfficiencyScorer.has_inputs(
            features.speed_efficiency_pct,
            features.attack_angle_deg,
            features.distance_in_zone_in,
            features.hand_cast_distance_in,
        )
