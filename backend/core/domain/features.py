"""
Swing Feature Domain Models

Raw per-swing measurements as they arrive from a capture pipeline
(bat sensor export, 3D motion capture, or a 2D vision estimate).

Every measurement is optional - upstream sources are lossy and each
scorer has its own rule for what to do when a value is missing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AgeGroup(Enum):
    """
    Development tiers used to index the benchmark tables.

    Declaration order runs youngest to oldest.
    """
    U8 = "8U"
    U10 = "10U"
    U12 = "12U"
    U14 = "14U"
    HIGH_SCHOOL = "HS"
    COLLEGE = "College"
    PRO = "Pro"

    @classmethod
    def parse(cls, value: "str | AgeGroup") -> "AgeGroup":
        """
        Resolve an age group from its label (case-insensitive).

        Raises:
            ValueError: If the label is not a known age group
        """
        if isinstance(value, cls):
            return value
        label = str(value).strip().lower()
        for group in cls:
            if group.value.lower() == label or group.name.lower() == label:
                return group
        raise ValueError(f"Unknown age group: {value!r}")


class SourceFidelity(Enum):
    """Where a swing's numbers came from."""
    SENSOR = "sensor"        # Bat sensor / 3D capture - full trust
    VISION_2D = "vision2d"   # Estimated from 2D video frames - capped


@dataclass(frozen=True)
class SwingFeatureVector:
    """
    Canonical input to every scorer.

    Units:
        speeds in mph, angles in degrees (attack angle is signed,
        negative = chopping down), times in milliseconds, distances
        in inches, angular velocities in deg/s.

    The 3D angular velocities and cog_velocity_y only come from the
    motion-capture path (or as rough estimates from the vision service).
    """
    # Bat sensor
    bat_speed_mph: Optional[float] = None
    hand_speed_mph: Optional[float] = None
    attack_angle_deg: Optional[float] = None
    trigger_to_impact_ms: Optional[float] = None
    speed_efficiency_pct: Optional[float] = None
    hand_cast_distance_in: Optional[float] = None
    distance_in_zone_in: Optional[float] = None
    peak_acceleration_g: Optional[float] = None
    impact_momentum: Optional[float] = None
    applied_power: Optional[float] = None

    # 3D capture
    pelvis_angular_velocity: Optional[float] = None
    trunk_angular_velocity: Optional[float] = None
    arm_angular_velocity: Optional[float] = None

    # Center-of-gravity lateral velocity (sign = direction of drift)
    cog_velocity_y: Optional[float] = None
