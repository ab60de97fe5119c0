"""
Axis Stability Classifier

Categorizes center-of-gravity lateral velocity and scores drift magnitude.
"""

from typing import Optional

from ..domain.analysis import AxisStability, AxisStabilityType
from .stats import clamp, round_score


class AxisStabilityClassifier:
    """
    Rotational axis stability from cog_velocity_y.

    Categories (checked in this order):
    - < -0.5: BACKWARD_DRIFT
    - > 0.8: FORWARD_SPIN
    - -0.1 to 0.3: STABLE
    - anything else: DEVELOPING

    The score only looks at magnitude (100 - |v| * 80), so it does not
    line up with the category boundaries: 0.5 is DEVELOPING and -0.5 is
    a BACKWARD_DRIFT boundary, and both score 60.
    """

    BACKWARD_THRESHOLD = -0.5
    FORWARD_THRESHOLD = 0.8
    STABLE_RANGE = (-0.1, 0.3)
    SCORE_SLOPE = 80
    UNMEASURED_SCORE = 50

    MESSAGES = {
        AxisStabilityType.BACKWARD_DRIFT: (
            "Center of gravity drifting backward during swing",
            "Feel weight stay centered over belly button through contact",
        ),
        AxisStabilityType.FORWARD_SPIN: (
            "Center of gravity lunging forward, losing rotational axis",
            "Brace front leg and rotate around a fixed post",
        ),
        AxisStabilityType.STABLE: (
            "Excellent rotational axis stability",
            "Maintain current movement pattern",
        ),
        AxisStabilityType.DEVELOPING: (
            "Axis stability is developing - minor drift detected",
            "Focus on keeping head centered over hips through rotation",
        ),
    }

    @staticmethod
    def category(cog_velocity_y: float) -> AxisStabilityType:
        if cog_velocity_y < AxisStabilityClassifier.BACKWARD_THRESHOLD:
            return AxisStabilityType.BACKWARD_DRIFT
        if cog_velocity_y > AxisStabilityClassifier.FORWARD_THRESHOLD:
            return AxisStabilityType.FORWARD_SPIN
        low, high = AxisStabilityClassifier.STABLE_RANGE
        if low <= cog_velocity_y <= high:
            return AxisStabilityType.STABLE
        return AxisStabilityType.DEVELOPING

    @staticmethod
    def score(cog_velocity_y: float) -> int:
        return round_score(clamp(100 - abs(cog_velocity_y) * AxisStabilityClassifier.SCORE_SLOPE))

    @staticmethod
    def classify(cog_velocity_y: Optional[float]) -> AxisStability:
        """
        Classify axis stability.

        Args:
            cog_velocity_y: Lateral center-of-gravity velocity, None if
                the capture path does not provide it

        Returns:
            AxisStability; unmeasured input yields DEVELOPING with a
            neutral score of 50
        """
        if cog_velocity_y is None:
            return AxisStability(
                type=AxisStabilityType.DEVELOPING,
                score=AxisStabilityClassifier.UNMEASURED_SCORE,
                note="",
                cue="",
                measured=False,
            )

        stability_type = AxisStabilityClassifier.category(cog_velocity_y)
        note, cue = AxisStabilityClassifier.MESSAGES[stability_type]
        return AxisStability(
            type=stability_type,
            score=AxisStabilityClassifier.score(cog_velocity_y),
            note=note,
            cue=cue,
        )
