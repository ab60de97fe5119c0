"""
Schema Converters

Domain model <-> API schema conversion shared by the REST routes and
the WebSocket handler.
"""

from dataclasses import asdict
from typing import Optional

import config
from core.domain import (
    AgeGroup,
    CBSwingAnalysis,
    FourBResult,
    FourBScores,
    SessionSummary,
    SourceFidelity,
    SwingFeatureVector,
    VisionSessionSummary,
)
from core.services import CaptureSession

from .schemas import (
    AgeGroupEnum,
    AttackAngleSchema,
    AttackAngleZoneEnum,
    AxisStabilitySchema,
    AxisStabilityTypeEnum,
    CaptureSessionResponse,
    FourBResultSchema,
    FourBScoresSchema,
    KinematicRatiosSchema,
    LeakTypeEnum,
    MotorProfileEnum,
    SessionSummarySchema,
    SourceFidelityEnum,
    SwingAnalysisResponse,
    SwingFeaturesSchema,
    VisionSessionSummarySchema,
)


# =============================================================================
# Requests -> domain
# =============================================================================

def resolve_age_group(age_group: Optional[AgeGroupEnum]) -> AgeGroup:
    """Request age group, or the configured default when omitted."""
    if age_group is None:
        return AgeGroup.parse(config.DEFAULT_AGE_GROUP)
    return AgeGroup(age_group.value)


def to_fidelity(fidelity: SourceFidelityEnum) -> SourceFidelity:
    return SourceFidelity(fidelity.value)


def to_features(schema: SwingFeaturesSchema) -> SwingFeatureVector:
    return SwingFeatureVector(**schema.model_dump())


def to_four_b_scores(schema: FourBScoresSchema) -> FourBScores:
    return FourBScores(
        body=schema.body,
        brain=schema.brain,
        bat=schema.bat,
        ball=schema.ball,
    )


# =============================================================================
# Domain -> responses
# =============================================================================

def convert_four_b(result: FourBResult) -> FourBResultSchema:
    return FourBResultSchema(
        scores=FourBScoresSchema(**asdict(result.scores)),
        effective=FourBScoresSchema(**asdict(result.effective)),
        composite=result.composite,
        grade=result.grade,
        source_fidelity=SourceFidelityEnum(result.source_fidelity.value),
        capped=result.capped,
    )


def convert_analysis(result: CBSwingAnalysis) -> SwingAnalysisResponse:
    """Convert domain CBSwingAnalysis to API response schema."""
    return SwingAnalysisResponse(
        features=SwingFeaturesSchema(**asdict(result.features)),
        age_group=AgeGroupEnum(result.age_group.value),
        source_fidelity=SourceFidelityEnum(result.source_fidelity.value),
        tempo_score=result.tempo_score,
        efficiency_rating=result.efficiency_rating,
        bat_speed_percentile=result.bat_speed_percentile,
        motor_profile=MotorProfileEnum(result.motor_profile.value),
        motor_profile_confidence=result.motor_profile_confidence,
        attack_angle=AttackAngleSchema(
            optimal=result.attack_angle.optimal,
            zone=AttackAngleZoneEnum(result.attack_angle.zone.value),
            feedback=result.attack_angle.feedback,
            measured=result.attack_angle.measured,
        ),
        attack_angle_zone=AttackAngleZoneEnum(result.attack_angle_zone.value),
        axis_stability=AxisStabilitySchema(
            type=AxisStabilityTypeEnum(result.axis_stability.type.value),
            score=result.axis_stability.score,
            note=result.axis_stability.note,
            cue=result.axis_stability.cue,
            measured=result.axis_stability.measured,
        ),
        kinematics=KinematicRatiosSchema(**asdict(result.kinematics)),
        leak=LeakTypeEnum(result.leak.value) if result.leak else None,
        four_b=convert_four_b(result.four_b) if result.four_b else None,
        strengths=list(result.strengths),
        improvements=list(result.improvements),
        drill_recommendations=list(result.drill_recommendations),
        coaching_notes=result.coaching_notes,
    )


def convert_summary(summary: SessionSummary) -> SessionSummarySchema:
    return SessionSummarySchema(
        total_swings=summary.total_swings,
        valid_swings=summary.valid_swings,
        avg_bat_speed=summary.avg_bat_speed,
        max_bat_speed=summary.max_bat_speed,
        avg_hand_speed=summary.avg_hand_speed,
        avg_attack_angle=summary.avg_attack_angle,
        avg_tempo_score=summary.avg_tempo_score,
        avg_efficiency=summary.avg_efficiency,
        avg_composite=summary.avg_composite,
        dominant_motor_profile=MotorProfileEnum(summary.dominant_motor_profile.value),
        motor_profile_breakdown={
            profile.value: count for profile, count in summary.motor_profile_breakdown.items()
        },
        bat_speed_percentile=summary.bat_speed_percentile,
        consistency_score=summary.consistency_score,
        primary_leak=LeakTypeEnum(summary.primary_leak.value) if summary.primary_leak else None,
        leak_breakdown={leak.value: count for leak, count in summary.leak_breakdown.items()},
        strengths=list(summary.strengths),
        improvements=list(summary.improvements),
    )


def convert_vision_summary(summary: VisionSessionSummary) -> VisionSessionSummarySchema:
    return VisionSessionSummarySchema(
        swing_count=summary.swing_count,
        avg_body=summary.avg_body,
        avg_brain=summary.avg_brain,
        avg_bat=summary.avg_bat,
        avg_ball=summary.avg_ball,
        avg_composite=summary.avg_composite,
        consistency_cv=summary.consistency_cv,
        consistency_score=summary.consistency_score,
        primary_leak=LeakTypeEnum(summary.primary_leak.value) if summary.primary_leak else None,
        leak_frequency=summary.leak_frequency,
        dominant_motor_profile=MotorProfileEnum(summary.dominant_motor_profile.value),
        profile_confidence=summary.profile_confidence,
    )


def convert_capture_session(session: CaptureSession) -> CaptureSessionResponse:
    return CaptureSessionResponse(
        id=session.id,
        age_group=AgeGroupEnum(session.age_group.value),
        player_name=session.player_name,
        created_at=session.created_at,
        swings=[convert_analysis(a) for a in session.swings],
        summary=convert_summary(session.summary) if session.summary else None,
    )
