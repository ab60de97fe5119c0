"""
Swing Analysis Domain Models

Data structures for the engine's outputs: per-swing analyses,
4B component scores, and session-level summaries.

All records are frozen - an analysis is created once per processed
swing and persisted (or discarded) by the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .features import AgeGroup, SourceFidelity, SwingFeatureVector


class MotorProfile(Enum):
    """
    Swing-mechanics archetypes.

    Declaration order is significant: when two profiles tie, the one
    declared first wins.
    - SPINNER: rotational, barrel stays close, hands cast
    - WHIPPER: efficient transfer, quick trigger, late release
    - SLINGSHOTTER: long path through the zone, power-loaded
    - TITAN: elite across bat speed, efficiency and zone coverage
    """
    SPINNER = "SPINNER"
    WHIPPER = "WHIPPER"
    SLINGSHOTTER = "SLINGSHOTTER"
    TITAN = "TITAN"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, label: Optional[str]) -> "MotorProfile":
        """Map a free-form label to a profile; anything unrecognized is UNKNOWN."""
        if not label:
            return cls.UNKNOWN
        try:
            return cls(str(label).strip().upper())
        except ValueError:
            return cls.UNKNOWN


class AttackAngleZone(Enum):
    FLAT = "flat"
    OPTIMAL = "optimal"
    STEEP = "steep"


class AxisStabilityType(Enum):
    """Center-of-gravity drift categories."""
    STABLE = "STABLE"
    BACKWARD_DRIFT = "BACKWARD_DRIFT"
    FORWARD_SPIN = "FORWARD_SPIN"
    DEVELOPING = "DEVELOPING"


class LeakType(Enum):
    """Named mechanical inefficiency patterns ("energy leaks")."""
    CAST = "CAST"
    COLLAPSE = "COLLAPSE"
    LUNGE = "LUNGE"
    EARLY_ARMS = "EARLY_ARMS"
    POOR_SEPARATION = "POOR_SEPARATION"
    SPIN_OUT = "SPIN_OUT"
    DISCONNECTION = "DISCONNECTION"
    ENERGY_LEAK = "ENERGY_LEAK"
    CLEAN_TRANSFER = "CLEAN_TRANSFER"

    @classmethod
    def parse(cls, label: Optional[str]) -> Optional["LeakType"]:
        if not label:
            return None
        try:
            return cls(str(label).strip().upper())
        except ValueError:
            return None

    @property
    def is_leak(self) -> bool:
        return self is not LeakType.CLEAN_TRANSFER


@dataclass(frozen=True)
class ProfileClassification:
    """Motor profile plus how strongly the indicators agreed (0-100)."""
    profile: MotorProfile
    confidence: int


@dataclass(frozen=True)
class AttackAngleAnalysis:
    """
    Attack angle zone classification.

    Attributes:
        optimal: True only for a measured angle inside the optimal window
        zone: flat / optimal / steep
        feedback: Coaching sentence for the report card
        measured: False when no angle was available
    """
    optimal: bool
    zone: AttackAngleZone
    feedback: str
    measured: bool = True


@dataclass(frozen=True)
class AxisStability:
    """
    Rotational axis stability derived from center-of-gravity drift.

    The score is a continuous signal of drift magnitude and is
    independent of the category boundaries.
    """
    type: AxisStabilityType
    score: int
    note: str
    cue: str
    measured: bool = True


@dataclass(frozen=True)
class KinematicRatios:
    """Segment-to-segment angular velocity ratios (3D capture only)."""
    trunk_to_pelvis: Optional[float] = None
    arm_to_trunk: Optional[float] = None
    pelvis_to_trunk: Optional[float] = None


@dataclass(frozen=True)
class FourBScores:
    """
    The four scoring domains.

    - body: ground-up kinetic sequence
    - brain: timing and consistency
    - bat: energy delivered to the barrel
    - ball: contact / output quality
    """
    body: float
    brain: float
    bat: float
    ball: float


@dataclass(frozen=True)
class FourBResult:
    """
    Composite outcome of the 4B pipeline stage.

    Attributes:
        scores: Component scores as supplied
        effective: Component scores after source-fidelity caps
        composite: Weighted composite of the effective scores
        grade: Grade label for the composite
        source_fidelity: Provenance the caps were chosen for
    """
    scores: FourBScores
    effective: FourBScores
    composite: int
    grade: str
    source_fidelity: SourceFidelity

    @property
    def capped(self) -> bool:
        return self.scores != self.effective


@dataclass(frozen=True)
class SwingInsights:
    """Textual coaching output for one swing."""
    strengths: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()
    drill_recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class CBSwingAnalysis:
    """
    Complete analysis of a single swing.

    This is the main per-swing result object. It echoes the input
    features and carries every derived score, the classification,
    and coaching insights.
    """
    features: SwingFeatureVector
    age_group: AgeGroup
    source_fidelity: SourceFidelity

    # Scores
    tempo_score: int
    efficiency_rating: int
    bat_speed_percentile: float

    # Classification
    motor_profile: MotorProfile
    motor_profile_confidence: int
    attack_angle: AttackAngleAnalysis
    axis_stability: AxisStability
    kinematics: KinematicRatios = field(default_factory=KinematicRatios)
    leak: Optional[LeakType] = None

    # 4B
    four_b: Optional[FourBResult] = None

    # Coaching
    strengths: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()
    drill_recommendations: tuple[str, ...] = ()
    coaching_notes: Optional[str] = None

    # -------------------------------------------------------------------------
    # Echoed features
    # -------------------------------------------------------------------------

    @property
    def bat_speed_mph(self) -> Optional[float]:
        return self.features.bat_speed_mph

    @property
    def hand_speed_mph(self) -> Optional[float]:
        return self.features.hand_speed_mph

    @property
    def attack_angle_deg(self) -> Optional[float]:
        return self.features.attack_angle_deg

    @property
    def attack_angle_zone(self) -> AttackAngleZone:
        return self.attack_angle.zone

    @property
    def attack_angle_optimal(self) -> bool:
        return self.attack_angle.optimal

    @property
    def composite_score(self) -> Optional[int]:
        return self.four_b.composite if self.four_b else None


@dataclass(frozen=True)
class SessionSummary:
    """
    Aggregate over the swings of one capture session.

    Averages cover valid swings only and skip missing values rather
    than counting them as zero.
    """
    total_swings: int
    valid_swings: int

    avg_bat_speed: float
    max_bat_speed: float
    avg_hand_speed: float
    avg_attack_angle: float
    avg_tempo_score: float
    avg_efficiency: float
    avg_composite: Optional[float]

    dominant_motor_profile: MotorProfile
    motor_profile_breakdown: dict[MotorProfile, int]

    bat_speed_percentile: float
    consistency_score: int

    primary_leak: Optional[LeakType] = None
    leak_breakdown: dict[LeakType, int] = field(default_factory=dict)

    strengths: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()


@dataclass(frozen=True)
class VisionSwingResult:
    """
    One swing as scored by the external vision-analysis service.

    Lower-fidelity source of the same information a sensor swing
    produces; component scores are uncapped as received.
    """
    body: Optional[float] = None
    brain: Optional[float] = None
    bat: Optional[float] = None
    ball: Optional[float] = None
    composite: Optional[float] = None
    grade: Optional[str] = None
    leak: Optional[LeakType] = None
    leak_evidence: Optional[str] = None
    motor_profile: MotorProfile = MotorProfile.UNKNOWN
    profile_evidence: Optional[str] = None
    coaching_narrative: Optional[str] = None
    priority_drill: Optional[str] = None
    confidence: Optional[float] = None
    cog_velocity_y: Optional[float] = None
    pelvis_angular_velocity: Optional[float] = None
    trunk_angular_velocity: Optional[float] = None
    arm_angular_velocity: Optional[float] = None


@dataclass(frozen=True)
class VisionSessionSummary:
    """Aggregate over a batch of vision-scored swings."""
    swing_count: int
    avg_body: Optional[float]
    avg_brain: Optional[float]
    avg_bat: Optional[float]
    avg_ball: Optional[float]
    avg_composite: Optional[float]
    consistency_cv: Optional[float]      # percent, needs >= 2 swings
    consistency_score: int
    primary_leak: Optional[LeakType]
    leak_frequency: Optional[str]
    dominant_motor_profile: MotorProfile
    profile_confidence: Optional[float]
