"""
Services Layer

Scoring, classification and aggregation services for swing analysis.
Everything here except the repository is pure computation.
"""

from .percentile import PercentileCalculator
from .tempo_scorer import TempoScorer
from .efficiency_scorer import EfficiencyScorer
from .motor_profile_classifier import MotorProfileClassifier
from .attack_angle_analyzer import AttackAngleAnalyzer
from .axis_stability import AxisStabilityClassifier
from .kinematics import KinematicSequence
from .leaks import LEAK_CATALOG, LeakDetector, LeakInfo
from .insight_generator import InsightGenerator
from .composite_calculator import FourBCalculator
from .vision import VisionAnalysisProvider, VisionPayloadError, parse_vision_payload
from .session_aggregator import SessionAggregator
from .swing_analyzer import SwingAnalyzer
from .repository import (
    CaptureSession,
    InMemorySessionRepository,
    SessionNotFoundError,
    SessionRepository,
)

__all__ = [
    "PercentileCalculator",
    "TempoScorer",
    "EfficiencyScorer",
    "MotorProfileClassifier",
    "AttackAngleAnalyzer",
    "AxisStabilityClassifier",
    "KinematicSequence",
    "LEAK_CATALOG",
    "LeakDetector",
    "LeakInfo",
    "InsightGenerator",
    "FourBCalculator",
    "VisionAnalysisProvider",
    "VisionPayloadError",
    "parse_vision_payload",
    "SessionAggregator",
    "SwingAnalyzer",
    "CaptureSession",
    "InMemorySessionRepository",
    "SessionNotFoundError",
    "SessionRepository",
]
