"""
Analysis API Schemas

Pydantic models for swing analysis API requests and responses.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Union
from enum import Enum

from .features import AgeGroupEnum, SourceFidelityEnum, SwingFeaturesSchema


class MotorProfileEnum(str, Enum):
    """Motor profiles for API."""
    SPINNER = "SPINNER"
    WHIPPER = "WHIPPER"
    SLINGSHOTTER = "SLINGSHOTTER"
    TITAN = "TITAN"
    UNKNOWN = "UNKNOWN"


class AttackAngleZoneEnum(str, Enum):
    """Attack angle zones for API."""
    FLAT = "flat"
    OPTIMAL = "optimal"
    STEEP = "steep"


class AxisStabilityTypeEnum(str, Enum):
    """Axis stability categories for API."""
    STABLE = "STABLE"
    BACKWARD_DRIFT = "BACKWARD_DRIFT"
    FORWARD_SPIN = "FORWARD_SPIN"
    DEVELOPING = "DEVELOPING"


class LeakTypeEnum(str, Enum):
    """Energy leaks for API."""
    CAST = "CAST"
    COLLAPSE = "COLLAPSE"
    LUNGE = "LUNGE"
    EARLY_ARMS = "EARLY_ARMS"
    POOR_SEPARATION = "POOR_SEPARATION"
    SPIN_OUT = "SPIN_OUT"
    DISCONNECTION = "DISCONNECTION"
    ENERGY_LEAK = "ENERGY_LEAK"
    CLEAN_TRANSFER = "CLEAN_TRANSFER"


class AttackAngleSchema(BaseModel):
    """
    Attack angle zone classification.
    """
    optimal: bool = Field(..., description="Measured angle inside the 8-15 degree window")
    zone: AttackAngleZoneEnum = Field(..., description="flat / optimal / steep")
    feedback: str = Field(..., description="Coaching sentence")
    measured: bool = Field(True, description="False when no angle was provided")


class AxisStabilitySchema(BaseModel):
    """
    Center-of-gravity drift classification.
    """
    type: AxisStabilityTypeEnum = Field(..., description="Stability category")
    score: int = Field(..., ge=0, le=100, description="Drift magnitude score")
    note: str = Field("", description="What was observed")
    cue: str = Field("", description="Coaching cue")
    measured: bool = Field(True, description="False when cog velocity was not provided")


class KinematicRatiosSchema(BaseModel):
    """
    Segment angular velocity ratios. None means couldn't be calculated.
    """
    trunk_to_pelvis: Optional[float] = Field(default=None, description="Trunk / pelvis (transfer ratio)")
    arm_to_trunk: Optional[float] = Field(default=None, description="Arm / trunk")
    pelvis_to_trunk: Optional[float] = Field(default=None, description="Pelvis / trunk")


class FourBScoresSchema(BaseModel):
    """
    The four component scores.
    """
    body: float = Field(..., ge=0, le=100, description="Ground-up kinetic sequence")
    brain: float = Field(..., ge=0, le=100, description="Timing and consistency")
    bat: float = Field(..., ge=0, le=100, description="Energy delivered to the barrel")
    ball: float = Field(..., ge=0, le=100, description="Contact / output quality")

    class Config:
        json_schema_extra = {
            "example": {
                "body": 62,
                "brain": 80,
                "bat": 58,
                "ball": 80
            }
        }


class FourBResultSchema(BaseModel):
    """
    4B composite outcome.
    """
    scores: FourBScoresSchema = Field(..., description="Components as entered")
    effective: FourBScoresSchema = Field(..., description="Components after source caps")
    composite: int = Field(..., ge=0, le=100, description="Weighted composite")
    grade: str = Field(..., description="Scouting-scale grade label")
    source_fidelity: SourceFidelityEnum = Field(..., description="Capture source the caps were chosen for")
    capped: bool = Field(..., description="Whether any component was capped")


class SwingAnalysisResponse(BaseModel):
    """
    Complete swing analysis result.

    This is the main response from the analyze endpoints.
    """
    # Inputs
    features: SwingFeaturesSchema = Field(..., description="Echo of the input features")
    age_group: AgeGroupEnum = Field(..., description="Benchmarks used")
    source_fidelity: SourceFidelityEnum = Field(..., description="Capture source")

    # Scores
    tempo_score: int = Field(..., ge=0, le=100, description="Timing score")
    efficiency_rating: int = Field(..., ge=0, le=100, description="Energy transfer rating")
    bat_speed_percentile: float = Field(..., ge=0, le=100, description="Percentile for age group")

    # Classification
    motor_profile: MotorProfileEnum = Field(..., description="Swing archetype")
    motor_profile_confidence: int = Field(..., ge=0, le=100, description="Profile confidence")
    attack_angle: AttackAngleSchema = Field(..., description="Attack angle analysis")
    attack_angle_zone: AttackAngleZoneEnum = Field(..., description="Shortcut for attack_angle.zone")
    axis_stability: AxisStabilitySchema = Field(..., description="Axis stability")
    kinematics: KinematicRatiosSchema = Field(default_factory=KinematicRatiosSchema, description="Kinematic ratios")
    leak: Optional[LeakTypeEnum] = Field(None, description="Detected energy leak")

    # 4B
    four_b: Optional[FourBResultSchema] = Field(None, description="Composite score")

    # Coaching
    strengths: List[str] = Field(default_factory=list, description="What is working")
    improvements: List[str] = Field(default_factory=list, description="What to work on")
    drill_recommendations: List[str] = Field(default_factory=list, description="Drills to practice")
    coaching_notes: Optional[str] = Field(None, description="Narrative from the vision service")

    class Config:
        json_schema_extra = {
            "example": {
                "age_group": "HS",
                "source_fidelity": "sensor",
                "tempo_score": 87,
                "efficiency_rating": 87,
                "bat_speed_percentile": 68.75,
                "motor_profile": "WHIPPER",
                "motor_profile_confidence": 70,
                "attack_angle_zone": "optimal",
                "strengths": ["Optimal attack angle for line drives", "Excellent energy transfer"]
            }
        }


class AnalyzeSwingRequest(BaseModel):
    """
    Request to analyze one swing.
    """
    features: SwingFeaturesSchema = Field(..., description="Swing measurements")
    age_group: Optional[AgeGroupEnum] = Field(None, description="Age group (server default if omitted)")
    source_fidelity: SourceFidelityEnum = Field(SourceFidelityEnum.SENSOR, description="Capture source")


class AnalyzeSessionRequest(BaseModel):
    """
    Request to analyze a batch of swings from one session.
    """
    swings: List[SwingFeaturesSchema] = Field(..., description="Swings in capture order")
    age_group: Optional[AgeGroupEnum] = Field(None, description="Age group (server default if omitted)")
    source_fidelity: SourceFidelityEnum = Field(SourceFidelityEnum.SENSOR, description="Capture source")


class VisionAnalysisRequest(BaseModel):
    """
    Response of the external vision service, forwarded for scoring.

    The payload may be raw text (optionally wrapped in a Markdown code
    fence) or an already decoded JSON object.
    """
    payload: Union[dict, str] = Field(..., description="Vision service output")
    age_group: Optional[AgeGroupEnum] = Field(None, description="Age group (server default if omitted)")

    class Config:
        json_schema_extra = {
            "example": {
                "payload": {
                    "composite": 52,
                    "body": 58,
                    "brain": 48,
                    "bat": 55,
                    "ball": 45,
                    "leak_detected": "CAST",
                    "motor_profile": "WHIPPER",
                    "confidence": 0.72
                },
                "age_group": "HS"
            }
        }


class VisionSessionRequest(BaseModel):
    """
    Batch of vision-service outputs.
    """
    payloads: List[Union[dict, str]] = Field(..., description="One vision output per swing")
    age_group: Optional[AgeGroupEnum] = Field(None, description="Age group (server default if omitted)")


class CompositeRequest(BaseModel):
    """
    Request to score four components directly.
    """
    scores: FourBScoresSchema = Field(..., description="Component scores")
    source_fidelity: SourceFidelityEnum = Field(SourceFidelityEnum.SENSOR, description="Capture source")


class BenchmarkResponse(BaseModel):
    """
    Benchmarks for one age group.
    """
    age_group: AgeGroupEnum = Field(..., description="Age group")
    bat_speed_percentiles: dict[str, float] = Field(..., description="Breakpoint -> bat speed (mph)")
    timing_ideal_ms: float = Field(..., description="Ideal trigger-to-impact")
    timing_min_ms: float = Field(..., description="Fastest acceptable trigger-to-impact")
    timing_max_ms: float = Field(..., description="Slowest acceptable trigger-to-impact")


class HealthResponse(BaseModel):
    """
    Health check response.
    """
    status: str = Field("healthy", description="Service status")
    version: str = Field(..., description="API version")
    engine_available: bool = Field(..., description="Whether the scoring engine responds")
