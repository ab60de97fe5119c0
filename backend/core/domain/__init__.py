"""
Domain Models

Pure data structures representing swing measurement and analysis concepts.
No external dependencies - just Python dataclasses and enums.
"""

from .features import AgeGroup, SourceFidelity, SwingFeatureVector
from .benchmarks import (
    AGE_BENCHMARKS,
    TIMING_BENCHMARKS,
    GRADE_THRESHOLDS,
    LOWEST_GRADE,
    PercentileBreakpoints,
    TimingWindow,
)
from .analysis import (
    MotorProfile,
    AttackAngleZone,
    AxisStabilityType,
    LeakType,
    ProfileClassification,
    AttackAngleAnalysis,
    AxisStability,
    KinematicRatios,
    FourBScores,
    FourBResult,
    SwingInsights,
    CBSwingAnalysis,
    SessionSummary,
    VisionSwingResult,
    VisionSessionSummary,
)

__all__ = [
    "AgeGroup",
    "SourceFidelity",
    "SwingFeatureVector",
    "AGE_BENCHMARKS",
    "TIMING_BENCHMARKS",
    "GRADE_THRESHOLDS",
    "LOWEST_GRADE",
    "PercentileBreakpoints",
    "TimingWindow",
    "MotorProfile",
    "AttackAngleZone",
    "AxisStabilityType",
    "LeakType",
    "ProfileClassification",
    "AttackAngleAnalysis",
    "AxisStability",
    "KinematicRatios",
    "FourBScores",
    "FourBResult",
    "SwingInsights",
    "CBSwingAnalysis",
    "SessionSummary",
    "VisionSwingResult",
    "VisionSessionSummary",
]
