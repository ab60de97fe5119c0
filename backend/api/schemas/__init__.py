"""
API Schemas

Pydantic models for request/response validation.
"""

from .features import (
    AgeGroupEnum,
    SourceFidelityEnum,
    SwingFeaturesSchema,
)

from .analysis import (
    MotorProfileEnum,
    AttackAngleZoneEnum,
    AxisStabilityTypeEnum,
    LeakTypeEnum,
    AttackAngleSchema,
    AxisStabilitySchema,
    KinematicRatiosSchema,
    FourBScoresSchema,
    FourBResultSchema,
    SwingAnalysisResponse,
    AnalyzeSwingRequest,
    AnalyzeSessionRequest,
    VisionAnalysisRequest,
    VisionSessionRequest,
    CompositeRequest,
    BenchmarkResponse,
    HealthResponse,
)

from .session import (
    SessionSummarySchema,
    SessionAnalysisResponse,
    VisionSessionSummarySchema,
    VisionSessionResponse,
    CreateSessionRequest,
    CaptureSessionResponse,
    WebSocketMessageType,
)

__all__ = [
    # Feature schemas
    "AgeGroupEnum",
    "SourceFidelityEnum",
    "SwingFeaturesSchema",
    # Analysis schemas
    "MotorProfileEnum",
    "AttackAngleZoneEnum",
    "AxisStabilityTypeEnum",
    "LeakTypeEnum",
    "AttackAngleSchema",
    "AxisStabilitySchema",
    "KinematicRatiosSchema",
    "FourBScoresSchema",
    "FourBResultSchema",
    "SwingAnalysisResponse",
    "AnalyzeSwingRequest",
    "AnalyzeSessionRequest",
    "VisionAnalysisRequest",
    "VisionSessionRequest",
    "CompositeRequest",
    "BenchmarkResponse",
    "HealthResponse",
    # Session schemas
    "SessionSummarySchema",
    "SessionAnalysisResponse",
    "VisionSessionSummarySchema",
    "VisionSessionResponse",
    "CreateSessionRequest",
    "CaptureSessionResponse",
    "WebSocketMessageType",
]
