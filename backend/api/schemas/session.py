"""
Session API Schemas

Pydantic models for session summaries, capture-session bookkeeping and
live WebSocket streaming.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum
from datetime import datetime

from .analysis import LeakTypeEnum, MotorProfileEnum, SwingAnalysisResponse
from .features import AgeGroupEnum


class SessionSummarySchema(BaseModel):
    """
    Aggregate over the valid swings of a session.
    """
    total_swings: int = Field(..., ge=0, description="Swings received, waggles included")
    valid_swings: int = Field(..., ge=0, description="Swings at or above the waggle floor")

    avg_bat_speed: float = Field(..., description="Mean bat speed (mph)")
    max_bat_speed: float = Field(..., description="Fastest swing (mph)")
    avg_hand_speed: float = Field(..., description="Mean hand speed (mph)")
    avg_attack_angle: float = Field(..., description="Mean attack angle (degrees)")
    avg_tempo_score: float = Field(..., description="Mean tempo score")
    avg_efficiency: float = Field(..., description="Mean efficiency rating")
    avg_composite: Optional[float] = Field(None, description="Mean 4B composite")

    dominant_motor_profile: MotorProfileEnum = Field(..., description="Most frequent profile")
    motor_profile_breakdown: dict[str, int] = Field(..., description="Profile -> swing count")

    bat_speed_percentile: float = Field(..., description="Percentile of the average bat speed")
    consistency_score: int = Field(..., ge=0, le=100, description="Bat speed consistency")

    primary_leak: Optional[LeakTypeEnum] = Field(None, description="Most frequent leak")
    leak_breakdown: dict[str, int] = Field(default_factory=dict, description="Leak -> swing count")

    strengths: List[str] = Field(default_factory=list, description="Union of swing strengths")
    improvements: List[str] = Field(default_factory=list, description="Union of swing improvements")

    class Config:
        json_schema_extra = {
            "example": {
                "total_swings": 12,
                "valid_swings": 10,
                "avg_bat_speed": 64.3,
                "max_bat_speed": 69.1,
                "dominant_motor_profile": "WHIPPER",
                "consistency_score": 91
            }
        }


class SessionAnalysisResponse(BaseModel):
    """
    Per-swing analyses plus the session summary.
    """
    analyses: List[SwingAnalysisResponse] = Field(..., description="One analysis per swing, input order")
    summary: SessionSummarySchema = Field(..., description="Session summary")


class VisionSessionSummarySchema(BaseModel):
    """
    Aggregate over a batch of vision-scored swings.
    """
    swing_count: int = Field(..., ge=0, description="Swings in the batch")
    avg_body: Optional[float] = Field(None, description="Mean Body score")
    avg_brain: Optional[float] = Field(None, description="Mean Brain score (capped)")
    avg_bat: Optional[float] = Field(None, description="Mean Bat score")
    avg_ball: Optional[float] = Field(None, description="Mean Ball score (capped)")
    avg_composite: Optional[float] = Field(None, description="Mean recomputed composite")
    consistency_cv: Optional[float] = Field(None, description="Composite coefficient of variation (%)")
    consistency_score: int = Field(..., ge=0, le=100, description="Composite consistency")
    primary_leak: Optional[LeakTypeEnum] = Field(None, description="Most frequent leak")
    leak_frequency: Optional[str] = Field(None, description="e.g. 'CAST: 3/5 swings'")
    dominant_motor_profile: MotorProfileEnum = Field(..., description="Most frequent profile")
    profile_confidence: Optional[float] = Field(None, description="Share of swings with the dominant profile")


class VisionSessionResponse(BaseModel):
    analyses: List[SwingAnalysisResponse] = Field(..., description="One analysis per swing")
    summary: VisionSessionSummarySchema = Field(..., description="Batch summary")


class CreateSessionRequest(BaseModel):
    """
    Request to open a capture session.
    """
    age_group: Optional[AgeGroupEnum] = Field(None, description="Age group (server default if omitted)")
    player_name: Optional[str] = Field(None, description="Player display name")


class CaptureSessionResponse(BaseModel):
    """
    Stored capture session with its latest summary.
    """
    id: str = Field(..., description="Session ID")
    age_group: AgeGroupEnum = Field(..., description="Benchmarks used")
    player_name: Optional[str] = Field(None, description="Player display name")
    created_at: datetime = Field(..., description="When the session was opened")
    swings: List[SwingAnalysisResponse] = Field(default_factory=list, description="Swings so far")
    summary: Optional[SessionSummarySchema] = Field(None, description="Latest summary")


# =============================================================================
# WebSocket
# =============================================================================

class WebSocketMessageType(str, Enum):
    """Types of WebSocket messages."""
    # Client -> Server
    SWING = "swing"                      # Send one swing's features
    END_SESSION = "end_session"          # Close the live session

    # Server -> Client
    SESSION_STARTED = "session_started"
    SWING_RESULT = "swing_result"        # Analysis for the last swing
    SESSION_SUMMARY = "session_summary"  # Recomputed over all swings so far
    SESSION_ENDED = "session_ended"
    ERROR = "error"                      # Error message
