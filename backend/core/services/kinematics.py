"""
Kinematic Sequence Ratios

Segment-to-segment angular velocity ratios from 3D capture.
"""

from typing import Optional

from ..domain.analysis import KinematicRatios
from ..domain.features import SwingFeatureVector


class KinematicSequence:
    """
    Energy hand-off between pelvis, trunk and arms.

    A trunk/pelvis ratio above 1 means the trunk sped up what the pelvis
    started (good transfer); below 1 means energy was lost on the way.
    """

    @staticmethod
    def _ratio(numerator: Optional[float], denominator: Optional[float]) -> Optional[float]:
        if numerator is None or denominator is None or denominator <= 0:
            return None
        return numerator / denominator

    @staticmethod
    def ratios(features: SwingFeatureVector) -> KinematicRatios:
        pelvis = features.pelvis_angular_velocity
        trunk = features.trunk_angular_velocity
        arm = features.arm_angular_velocity
        return KinematicRatios(
            trunk_to_pelvis=KinematicSequence._ratio(trunk, pelvis),
            arm_to_trunk=KinematicSequence._ratio(arm, trunk),
            pelvis_to_trunk=KinematicSequence._ratio(pelvis, trunk),
        )
