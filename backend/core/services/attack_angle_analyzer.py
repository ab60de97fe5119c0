"""
Attack Angle Analyzer

Zone classification for the bat's vertical approach angle at contact.
"""

from typing import Optional

from ..domain.analysis import AttackAngleAnalysis, AttackAngleZone


class AttackAngleAnalyzer:
    """
    Classifies an attack angle as flat, optimal or steep.

    8-15 degrees produces line drives with backspin. Below that the swing
    is too flat, above it the swing is too steep.
    """

    OPTIMAL_MIN_DEG = 8
    OPTIMAL_MAX_DEG = 15

    FEEDBACK = {
        AttackAngleZone.OPTIMAL: "Optimal attack angle for line drives and backspin",
        AttackAngleZone.FLAT: "Attack angle too flat - increase launch angle for better carry",
        AttackAngleZone.STEEP: "Attack angle too steep - flatten swing path to reduce pop-ups",
    }
    NO_DATA_FEEDBACK = "Attack angle data not available"

    @staticmethod
    def analyze(angle_deg: Optional[float]) -> AttackAngleAnalysis:
        """
        Classify an attack angle.

        A missing angle keeps the optimal zone label but is never marked
        optimal, and carries measured=False so consumers can tell the two
        apart.

        Args:
            angle_deg: Signed angle in degrees, None if not measured

        Returns:
            AttackAngleAnalysis with zone and feedback text
        """
        if angle_deg is None:
            return AttackAngleAnalysis(
                optimal=False,
                zone=AttackAngleZone.OPTIMAL,
                feedback=AttackAngleAnalyzer.NO_DATA_FEEDBACK,
                measured=False,
            )

        if AttackAngleAnalyzer.OPTIMAL_MIN_DEG <= angle_deg <= AttackAngleAnalyzer.OPTIMAL_MAX_DEG:
            zone = AttackAngleZone.OPTIMAL
        elif angle_deg < AttackAngleAnalyzer.OPTIMAL_MIN_DEG:
            zone = AttackAngleZone.FLAT
        else:
            zone = AttackAngleZone.STEEP

        return AttackAngleAnalysis(
            optimal=zone is AttackAngleZone.OPTIMAL,
            zone=zone,
            feedback=AttackAngleAnalyzer.FEEDBACK[zone],
        )
