"""
Leak Catalog & Detector

Named energy leaks with coaching copy, and threshold-based detection
from sensor / 3D capture measurements.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.analysis import KinematicRatios, LeakType
from ..domain.features import SwingFeatureVector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeakInfo:
    """Display copy for one leak."""
    name: str
    category: str     # body, brain or bat
    description: str
    drill: str


LEAK_CATALOG: dict[LeakType, LeakInfo] = {
    LeakType.CAST: LeakInfo(
        name="Casting",
        category="bat",
        description="Hands extend away from the body during load, barrel gets out early",
        drill="Knob-to-Ball Drill",
    ),
    LeakType.COLLAPSE: LeakInfo(
        name="Front Side Collapse",
        category="body",
        description="Front knee bends at contact instead of bracing",
        drill="Front Leg Brace Drill",
    ),
    LeakType.LUNGE: LeakInfo(
        name="Lunge",
        category="body",
        description="Body drifts forward before rotation starts",
        drill="Stride and Hold Drill",
    ),
    LeakType.EARLY_ARMS: LeakInfo(
        name="Early Arms",
        category="bat",
        description="Arms fire before the torso finishes accelerating",
        drill="Towel Drill",
    ),
    LeakType.POOR_SEPARATION: LeakInfo(
        name="Poor Separation",
        category="body",
        description="Shoulders and hips turn together, no stretch between them",
        drill="Hip Lead Drill",
    ),
    LeakType.SPIN_OUT: LeakInfo(
        name="Spin Out",
        category="body",
        description="Hips over-rotate and lose connection to the ground",
        drill="Anchor Drill",
    ),
    LeakType.DISCONNECTION: LeakInfo(
        name="Disconnection",
        category="bat",
        description="Pelvis, torso and arms are not working together",
        drill="Connection Drill",
    ),
    LeakType.ENERGY_LEAK: LeakInfo(
        name="Energy Leak",
        category="brain",
        description="Energy is escaping somewhere in the kinetic chain",
        drill="Rhythm Drill",
    ),
    LeakType.CLEAN_TRANSFER: LeakInfo(
        name="Clean Transfer",
        category="body",
        description="Energy flowed through the chain",
        drill="",
    ),
}


class LeakDetector:
    """
    Picks the first leak whose threshold is crossed.

    Checks, in order:
    1. cog_velocity_y > 0.8: LUNGE
    2. hand cast > 8in: CAST
    3. trunk/pelvis < 1.0: POOR_SEPARATION
    4. arm/trunk < 1.0: EARLY_ARMS

    If none fires and at least one of those inputs was measured, the swing
    is a CLEAN_TRANSFER. With no relevant inputs nothing can be said.
    """

    LUNGE_COG_VELOCITY = 0.8
    CAST_DISTANCE_IN = 8.0
    MIN_TRANSFER_RATIO = 1.0

    @staticmethod
    def detect(
        features: SwingFeatureVector,
        kinematics: KinematicRatios,
    ) -> Optional[LeakType]:
        cog = features.cog_velocity_y
        cast = features.hand_cast_distance_in

        if cog is not None and cog > LeakDetector.LUNGE_COG_VELOCITY:
            leak = LeakType.LUNGE
        elif cast is not None and cast > LeakDetector.CAST_DISTANCE_IN:
            leak = LeakType.CAST
        elif (
            kinematics.trunk_to_pelvis is not None
            and kinematics.trunk_to_pelvis < LeakDetector.MIN_TRANSFER_RATIO
        ):
            leak = LeakType.POOR_SEPARATION
        elif (
            kinematics.arm_to_trunk is not None
            and kinematics.arm_to_trunk < LeakDetector.MIN_TRANSFER_RATIO
        ):
            leak = LeakType.EARLY_ARMS
        elif (
            cog is not None
            or cast is not None
            or kinematics.trunk_to_pelvis is not None
            or kinematics.arm_to_trunk is not None
        ):
            leak = LeakType.CLEAN_TRANSFER
        else:
            return None

        logger.debug(f"Leak detected: {leak.value}")
        return leak
