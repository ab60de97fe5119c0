"""
Feature API Schemas

Pydantic models for swing measurements as clients send them.
"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class AgeGroupEnum(str, Enum):
    """Age groups for API."""
    U8 = "8U"
    U10 = "10U"
    U12 = "12U"
    U14 = "14U"
    HIGH_SCHOOL = "HS"
    COLLEGE = "College"
    PRO = "Pro"


class SourceFidelityEnum(str, Enum):
    """Capture source for API."""
    SENSOR = "sensor"
    VISION_2D = "vision2d"


class SwingFeaturesSchema(BaseModel):
    """
    Raw per-swing measurements.

    Every field is optional. Missing values are scored with neutral
    defaults, never rejected.
    """
    bat_speed_mph: Optional[float] = Field(default=None, description="Max barrel speed (mph)")
    hand_speed_mph: Optional[float] = Field(default=None, description="Max hand speed (mph)")
    attack_angle_deg: Optional[float] = Field(default=None, description="Approach angle, negative = chop (degrees)")
    trigger_to_impact_ms: Optional[float] = Field(default=None, description="Swing start to contact (ms)")
    speed_efficiency_pct: Optional[float] = Field(default=None, description="Hand-to-barrel transfer (0-100)")
    hand_cast_distance_in: Optional[float] = Field(default=None, description="Hand cast distance (inches)")
    distance_in_zone_in: Optional[float] = Field(default=None, description="Barrel distance in the hitting zone (inches)")
    peak_acceleration_g: Optional[float] = Field(default=None, description="Peak barrel acceleration (g)")
    impact_momentum: Optional[float] = Field(default=None, description="Momentum at impact")
    applied_power: Optional[float] = Field(default=None, description="Applied power")
    pelvis_angular_velocity: Optional[float] = Field(default=None, description="Peak pelvis angular velocity (deg/s, 3D only)")
    trunk_angular_velocity: Optional[float] = Field(default=None, description="Peak trunk angular velocity (deg/s, 3D only)")
    arm_angular_velocity: Optional[float] = Field(default=None, description="Peak arm angular velocity (deg/s, 3D only)")
    cog_velocity_y: Optional[float] = Field(default=None, description="Center-of-gravity lateral velocity")

    class Config:
        json_schema_extra = {
            "example": {
                "bat_speed_mph": 72,
                "attack_angle_deg": 11,
                "trigger_to_impact_ms": 148,
                "speed_efficiency_pct": 88,
                "hand_cast_distance_in": 5,
                "distance_in_zone_in": 14
            }
        }
