"""
Swing Analyzer Service

High-level service that runs every scorer and classifier over a swing
to produce a complete CBSwingAnalysis.

This is the main entry point for analyzing swings.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..domain.analysis import (
    CBSwingAnalysis,
    MotorProfile,
    SessionSummary,
    VisionSessionSummary,
    VisionSwingResult,
)
from ..domain.features import AgeGroup, SourceFidelity, SwingFeatureVector
from .attack_angle_analyzer import AttackAngleAnalyzer
from .axis_stability import AxisStabilityClassifier
from .composite_calculator import FourBCalculator
from .efficiency_scorer import EfficiencyScorer
from .insight_generator import InsightGenerator
from .kinematics import KinematicSequence
from .leaks import LeakDetector
from .motor_profile_classifier import MotorProfileClassifier
from .percentile import PercentileCalculator
from .session_aggregator import SessionAggregator
from .stats import clamp, round_score
from .tempo_scorer import TempoScorer

logger = logging.getLogger(__name__)


class SwingAnalyzer:
    """
    Analyzes swings from sensor feature vectors or vision-service results.

    This service:
    1. Scores percentile, tempo and efficiency
    2. Classifies motor profile, attack angle and axis stability
    3. Computes kinematic ratios and detects energy leaks
    4. Buckets scores into the 4B composite (with source caps)
    5. Generates strengths, improvements and drills

    Holds no state between calls; one instance can serve every request.

    Usage:
        analyzer = SwingAnalyzer()

        result = analyzer.analyze(features, AgeGroup.HIGH_SCHOOL)
        print(f"Profile: {result.motor_profile.value}")

        analyses, summary = analyzer.analyze_session(swings, AgeGroup.U12)
    """

    # -------------------------------------------------------------------------
    # Main Analysis Methods
    # -------------------------------------------------------------------------

    def analyze(
        self,
        features: SwingFeatureVector,
        age_group: AgeGroup,
        source_fidelity: SourceFidelity = SourceFidelity.SENSOR,
    ) -> CBSwingAnalysis:
        """
        Analyze a single swing.

        Args:
            features: Measurements for the swing
            age_group: Benchmarks to score against
            source_fidelity: Where the measurements came from

        Returns:
            Complete CBSwingAnalysis
        """
        percentile = PercentileCalculator.bat_speed_percentile(features.bat_speed_mph, age_group)
        tempo = TempoScorer.score(features.trigger_to_impact_ms, age_group)
        efficiency = EfficiencyScorer.rate_features(features)
        classification = MotorProfileClassifier.classify(features)
        attack_angle = AttackAngleAnalyzer.analyze(features.attack_angle_deg)
        axis = AxisStabilityClassifier.classify(features.cog_velocity_y)
        kinematics = KinematicSequence.ratios(features)
        leak = LeakDetector.detect(features, kinematics)

        four_b = FourBCalculator.score(
            FourBCalculator.from_swing(tempo, efficiency, percentile, axis.score),
            source_fidelity,
        )

        insights = InsightGenerator.generate(
            age_group=age_group,
            bat_speed_mph=features.bat_speed_mph,
            bat_speed_percentile=percentile,
            attack_angle=attack_angle,
            efficiency_rating=efficiency,
            tempo_score=tempo,
            motor_profile=classification.profile,
            efficiency_measured=EfficiencyScorer.features_have_inputs(features),
            tempo_measured=self._has_timing(features),
            leak=leak,
        )

        logger.debug(
            f"Swing analyzed: {classification.profile.value} "
            f"tempo={tempo} efficiency={efficiency} composite={four_b.composite}"
        )

        return CBSwingAnalysis(
            features=features,
            age_group=age_group,
            source_fidelity=source_fidelity,
            tempo_score=tempo,
            efficiency_rating=efficiency,
            bat_speed_percentile=percentile,
            motor_profile=classification.profile,
            motor_profile_confidence=classification.confidence,
            attack_angle=attack_angle,
            axis_stability=axis,
            kinematics=kinematics,
            leak=leak,
            four_b=four_b,
            strengths=insights.strengths,
            improvements=insights.improvements,
            drill_recommendations=insights.drill_recommendations,
        )

    def analyze_vision(
        self,
        result: VisionSwingResult,
        age_group: AgeGroup,
    ) -> CBSwingAnalysis:
        """
        Analyze a swing scored by the vision service.

        Brain and Ball are always capped and the composite is recomputed
        from the capped components; the service's own composite is only
        logged. Timing, efficiency and bat speed cannot be measured from
        2D frames, so those scores stay at their neutral defaults.

        Args:
            result: Parsed vision-service response
            age_group: Benchmarks to score against

        Returns:
            CBSwingAnalysis with source_fidelity=vision2d
        """
        features = SwingFeatureVector(
            pelvis_angular_velocity=result.pelvis_angular_velocity,
            trunk_angular_velocity=result.trunk_angular_velocity,
            arm_angular_velocity=result.arm_angular_velocity,
            cog_velocity_y=result.cog_velocity_y,
        )
        kinematics = KinematicSequence.ratios(features)
        axis = AxisStabilityClassifier.classify(features.cog_velocity_y)
        attack_angle = AttackAngleAnalyzer.analyze(None)
        leak = result.leak or LeakDetector.detect(features, kinematics)

        four_b = FourBCalculator.score(
            FourBCalculator.from_vision(result), SourceFidelity.VISION_2D
        )
        if result.composite is not None and round_score(result.composite) != four_b.composite:
            logger.debug(
                f"Vision composite {result.composite} recomputed as {four_b.composite}"
            )

        profile = result.motor_profile
        confidence = 0
        if profile is not MotorProfile.UNKNOWN and result.confidence is not None:
            # Service reports 0-1; tolerate an already-scaled percent
            scale = 100 if result.confidence <= 1 else 1
            confidence = round_score(clamp(result.confidence * scale))

        tempo = TempoScorer.score(None, age_group)
        efficiency = EfficiencyScorer.rating()

        insights = InsightGenerator.generate(
            age_group=age_group,
            bat_speed_mph=None,
            bat_speed_percentile=0.0,
            attack_angle=attack_angle,
            efficiency_rating=efficiency,
            tempo_score=tempo,
            motor_profile=profile,
            efficiency_measured=False,
            tempo_measured=False,
            leak=leak,
        )
        drills = insights.drill_recommendations
        if result.priority_drill and result.priority_drill not in drills:
            drills = (result.priority_drill,) + drills

        return CBSwingAnalysis(
            features=features,
            age_group=age_group,
            source_fidelity=SourceFidelity.VISION_2D,
            tempo_score=tempo,
            efficiency_rating=efficiency,
            bat_speed_percentile=0.0,
            motor_profile=profile,
            motor_profile_confidence=confidence,
            attack_angle=attack_angle,
            axis_stability=axis,
            kinematics=kinematics,
            leak=leak,
            four_b=four_b,
            strengths=insights.strengths,
            improvements=insights.improvements,
            drill_recommendations=drills,
            coaching_notes=result.coaching_narrative,
        )

    def analyze_session(
        self,
        swings: Sequence[SwingFeatureVector],
        age_group: AgeGroup,
        source_fidelity: SourceFidelity = SourceFidelity.SENSOR,
    ) -> Tuple[List[CBSwingAnalysis], SessionSummary]:
        """
        Analyze every swing of a session and summarize it.

        Waggles are analysed like any other swing; the aggregator leaves
        them out of the summary.

        Returns:
            (per-swing analyses in input order, session summary)
        """
        analyses = [self.analyze(f, age_group, source_fidelity) for f in swings]
        summary = self.summarize(analyses, age_group)
        logger.info(
            f"Session analyzed: {summary.valid_swings}/{summary.total_swings} valid swings, "
            f"dominant profile {summary.dominant_motor_profile.value}"
        )
        return analyses, summary

    def analyze_vision_session(
        self,
        results: Sequence[VisionSwingResult],
        age_group: AgeGroup,
    ) -> Tuple[List[CBSwingAnalysis], VisionSessionSummary]:
        """Analyze a batch of vision results and summarize the batch."""
        analyses = [self.analyze_vision(r, age_group) for r in results]
        return analyses, SessionAggregator.aggregate_vision(results)

    def summarize(
        self,
        analyses: Sequence[CBSwingAnalysis],
        age_group: AgeGroup,
    ) -> SessionSummary:
        return SessionAggregator.aggregate(analyses, age_group)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _has_timing(features: SwingFeatureVector) -> bool:
        timing: Optional[float] = features.trigger_to_impact_ms
        return timing is not None and timing > 0
