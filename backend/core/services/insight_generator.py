"""
Insight Generator

Rule-driven strengths, improvements and drill prescriptions for a swing.
"""

from typing import Optional

from ..domain.analysis import (
    AttackAngleAnalysis,
    AttackAngleZone,
    LeakType,
    MotorProfile,
    SwingInsights,
)
from ..domain.benchmarks import AGE_BENCHMARKS
from ..domain.features import AgeGroup
from .leaks import LEAK_CATALOG


def _unique(items: list[str]) -> tuple[str, ...]:
    """De-duplicate, keeping first occurrence order."""
    return tuple(dict.fromkeys(item for item in items if item))


class InsightGenerator:
    """
    Turns computed scores into coaching text.

    Deterministic: the same scores always produce the same lists in the
    same order. Rules keyed on a metric are skipped when that metric was
    never measured, so a missing sensor reading does not turn into
    "work on your bat speed".
    """

    @staticmethod
    def generate(
        age_group: AgeGroup,
        bat_speed_mph: Optional[float],
        bat_speed_percentile: float,
        attack_angle: AttackAngleAnalysis,
        efficiency_rating: int,
        tempo_score: int,
        motor_profile: MotorProfile,
        efficiency_measured: bool = True,
        tempo_measured: bool = True,
        leak: Optional[LeakType] = None,
    ) -> SwingInsights:
        """
        Evaluate every insight rule.

        Args:
            age_group: Benchmarks for profile-specific rules
            bat_speed_mph: Raw bat speed (None skips the percentile rules)
            bat_speed_percentile: Percentile for the age group
            attack_angle: Zone classification
            efficiency_rating: 0-100 efficiency
            tempo_score: 0-100 tempo
            motor_profile: Classified profile
            efficiency_measured: False when the rating is the neutral default
            tempo_measured: False when the tempo is the neutral default
            leak: Detected leak, if any

        Returns:
            SwingInsights with de-duplicated lists
        """
        strengths: list[str] = []
        improvements: list[str] = []
        drills: list[str] = []

        # Bat speed
        if bat_speed_mph is not None:
            if bat_speed_percentile >= 90:
                strengths.append("Elite bat speed for age group")
            elif bat_speed_percentile >= 75:
                strengths.append("Above average bat speed")
            elif bat_speed_percentile < 40:
                improvements.append("Focus on bat speed development")
                drills.append("Overload/Underload Training")

        # Attack angle
        if attack_angle.optimal:
            strengths.append("Optimal attack angle for line drives")
        elif attack_angle.measured and attack_angle.zone is AttackAngleZone.FLAT:
            improvements.append("Increase attack angle - swing is too flat")
            drills.extend(["High Tee Drill", "Uphill Swing Drill"])
        elif attack_angle.measured and attack_angle.zone is AttackAngleZone.STEEP:
            improvements.append("Decrease attack angle - swing is too steep")
            drills.extend(["Low Tee Drill", "Bat Path Drill"])

        # Efficiency
        if efficiency_measured:
            if efficiency_rating > 85:
                strengths.append("Excellent energy transfer")
            elif efficiency_rating < 60:
                improvements.append("Work on hand-to-barrel energy transfer")
                drills.extend(["Connection Drill", "Wrist Snap Drill"])

        # Tempo
        if tempo_measured:
            if tempo_score > 80:
                strengths.append("Consistent swing tempo")
            elif tempo_score < 50:
                improvements.append("Develop more consistent timing")
                drills.extend(["Rhythm Drill", "Tempo Tee Work"])

        # Profile-specific
        if motor_profile is MotorProfile.SPINNER:
            if bat_speed_mph and bat_speed_mph < AGE_BENCHMARKS[age_group].p50:
                improvements.append("Leverage rotation for more power")
                drills.append("Hip Lead Drill")
        elif motor_profile is MotorProfile.WHIPPER:
            strengths.append("Quick hands and efficient transfer")
        elif motor_profile is MotorProfile.SLINGSHOTTER:
            if tempo_measured and tempo_score < 60:
                improvements.append("Shorten load for better timing")
                drills.append("Short Toss Timing")
        elif motor_profile is MotorProfile.TITAN:
            strengths.append("Elite swing profile across all metrics")

        # Leak
        if leak is not None and leak.is_leak:
            info = LEAK_CATALOG[leak]
            improvements.append(info.description)
            drills.append(info.drill)

        return SwingInsights(
            strengths=_unique(strengths),
            improvements=_unique(improvements),
            drill_recommendations=_unique(drills),
        )
