"""
4B Composite Calculator

Weighted Body/Brain/Bat/Ball composite, source-fidelity caps, and grade
labels.
"""

import logging
from dataclasses import replace

from ..domain.analysis import FourBResult, FourBScores, VisionSwingResult
from ..domain.benchmarks import GRADE_THRESHOLDS, LOWEST_GRADE
from ..domain.features import SourceFidelity
from .stats import clamp, round_half_up, round_score

logger = logging.getLogger(__name__)


class FourBCalculator:
    """
    Combines the four component scores.

    Body and Bat carry more weight than Brain and Ball. Caps are a
    provenance rule applied by the pipeline (score / apply_source_caps),
    never inside composite() itself.

    Usage:
        result = FourBCalculator.score(
            FourBScores(body=62, brain=80, bat=58, ball=80),
            SourceFidelity.VISION_2D,
        )
        print(result.composite, result.grade)
    """

    WEIGHTS = {
        "body": 0.30,
        "brain": 0.20,
        "bat": 0.30,
        "ball": 0.20,
    }

    # Max trusted value per component for each capture source
    SOURCE_CAPS = {
        SourceFidelity.SENSOR: {},
        SourceFidelity.VISION_2D: {"brain": 55, "ball": 50},
    }

    # Neutral value for components a source cannot measure
    NEUTRAL_COMPONENT = 50.0

    # -------------------------------------------------------------------------
    # Raw math
    # -------------------------------------------------------------------------

    @staticmethod
    def composite(scores: FourBScores) -> float:
        """Weighted sum of the components, uncapped."""
        w = FourBCalculator.WEIGHTS
        return (
            scores.body * w["body"]
            + scores.brain * w["brain"]
            + scores.bat * w["bat"]
            + scores.ball * w["ball"]
        )

    @staticmethod
    def apply_source_caps(scores: FourBScores, fidelity: SourceFidelity) -> FourBScores:
        """
        Cap components the capture source cannot be trusted on.

        Args:
            scores: Components as estimated
            fidelity: Where they came from

        Returns:
            New FourBScores with caps applied (unchanged for sensor data)
        """
        caps = FourBCalculator.SOURCE_CAPS[fidelity]
        if not caps:
            return scores
        capped = {
            name: min(getattr(scores, name), limit)
            for name, limit in caps.items()
        }
        return replace(scores, **capped)

    @staticmethod
    def grade_label(composite: float) -> str:
        """Scouting-scale label for a composite score."""
        for threshold, label in GRADE_THRESHOLDS:
            if composite >= threshold:
                return label
        return LOWEST_GRADE

    # -------------------------------------------------------------------------
    # Pipeline stage
    # -------------------------------------------------------------------------

    @staticmethod
    def score(scores: FourBScores, fidelity: SourceFidelity) -> FourBResult:
        """
        Caps, then composite, then grade.

        Returns:
            FourBResult with both the entered and effective components
        """
        effective = FourBCalculator.apply_source_caps(scores, fidelity)
        composite = round_score(FourBCalculator.composite(effective))

        if effective != scores:
            logger.debug(f"Applied {fidelity.value} caps: {scores} -> {effective}")

        return FourBResult(
            scores=scores,
            effective=effective,
            composite=composite,
            grade=FourBCalculator.grade_label(composite),
            source_fidelity=fidelity,
        )

    @staticmethod
    def from_swing(
        tempo_score: int,
        efficiency_rating: int,
        bat_speed_percentile: float,
        axis_stability_score: int,
    ) -> FourBScores:
        """
        Bucket single-swing sensor scores into the four components.

        - Brain: tempo (timing)
        - Bat: 60% efficiency, 40% bat-speed percentile
        - Body: axis stability
        - Ball: neutral, a bat sensor sees no ball flight
        """
        bat = 0.6 * efficiency_rating + 0.4 * min(100.0, bat_speed_percentile)
        return FourBScores(
            body=float(axis_stability_score),
            brain=float(tempo_score),
            bat=round_half_up(clamp(bat), 1),
            ball=FourBCalculator.NEUTRAL_COMPONENT,
        )

    @staticmethod
    def from_vision(result: VisionSwingResult) -> FourBScores:
        """Vision-service components clamped to 0-100, neutral where the service sent none."""
        def component(value):
            return FourBCalculator.NEUTRAL_COMPONENT if value is None else clamp(value)

        return FourBScores(
            body=component(result.body),
            brain=component(result.brain),
            bat=component(result.bat),
            ball=component(result.ball),
        )
