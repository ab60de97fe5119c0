"""
Motor Profile Classifier

Rule-based, multi-indicator voting over the four swing archetypes.
"""

import logging

from ..domain.analysis import MotorProfile, ProfileClassification
from ..domain.features import SwingFeatureVector

logger = logging.getLogger(__name__)


class MotorProfileClassifier:
    """
    Assigns one motor profile per swing.

    Each profile accrues points from the indicators below. A missing
    measurement contributes nothing, so an empty feature vector cannot
    out-vote a real one.

    - SPINNER: hand cast >8in +30 (>6in +15), zone 12-16in +20,
      efficiency 75-85% +10
    - WHIPPER: efficiency >85% +35 (>80% +20), trigger <150ms +25
      (<160ms +15), hand cast <6in +10
    - SLINGSHOTTER: zone >15in +30 (>13in +15), bat speed >65mph +25
      (>58mph +15), trigger >160ms +10
    - TITAN: +50 when bat speed >70, efficiency >80 and zone >14 all
      hold, +15 for bat speed >75, +20 for efficiency >85 with bat
      speed >65

    The highest score wins; on a tie the profile declared first in
    MotorProfile wins. Confidence is the winning score capped at 100.
    """

    MIN_CONFIDENCE = 25
    MIN_SCORE = 20

    @staticmethod
    def indicator_scores(features: SwingFeatureVector) -> dict[MotorProfile, float]:
        """
        Raw vote table for every profile.

        Args:
            features: Swing measurements

        Returns:
            Points per profile, in MotorProfile declaration order
        """
        scores = {profile: 0.0 for profile in MotorProfile}

        speed_eff = features.speed_efficiency_pct
        hand_cast = features.hand_cast_distance_in
        zone = features.distance_in_zone_in
        bat_speed = features.bat_speed_mph
        trigger = features.trigger_to_impact_ms

        # SPINNER: high hand cast, rotational dominance
        if hand_cast is not None:
            if hand_cast > 8:
                scores[MotorProfile.SPINNER] += 30
            elif hand_cast > 6:
                scores[MotorProfile.SPINNER] += 15
        if zone is not None and 12 < zone < 16:
            scores[MotorProfile.SPINNER] += 20
        if speed_eff is not None and 75 < speed_eff < 85:
            scores[MotorProfile.SPINNER] += 10

        # WHIPPER: high efficiency, quick trigger
        if speed_eff is not None:
            if speed_eff > 85:
                scores[MotorProfile.WHIPPER] += 35
            elif speed_eff > 80:
                scores[MotorProfile.WHIPPER] += 20
        if trigger is not None:
            if trigger < 150:
                scores[MotorProfile.WHIPPER] += 25
            elif trigger < 160:
                scores[MotorProfile.WHIPPER] += 15
        if hand_cast is not None and hand_cast < 6:
            scores[MotorProfile.WHIPPER] += 10

        # SLINGSHOTTER: long zone, high bat speed
        if zone is not None:
            if zone > 15:
                scores[MotorProfile.SLINGSHOTTER] += 30
            elif zone > 13:
                scores[MotorProfile.SLINGSHOTTER] += 15
        if bat_speed is not None:
            if bat_speed > 65:
                scores[MotorProfile.SLINGSHOTTER] += 25
            elif bat_speed > 58:
                scores[MotorProfile.SLINGSHOTTER] += 15
        if trigger is not None and trigger > 160:
            scores[MotorProfile.SLINGSHOTTER] += 10

        # TITAN: elite across the board
        if bat_speed is not None:
            if (
                speed_eff is not None
                and zone is not None
                and bat_speed > 70
                and speed_eff > 80
                and zone > 14
            ):
                scores[MotorProfile.TITAN] += 50
            if bat_speed > 75:
                scores[MotorProfile.TITAN] += 15
            if speed_eff is not None and speed_eff > 85 and bat_speed > 65:
                scores[MotorProfile.TITAN] += 20

        return scores

    @staticmethod
    def classify(features: SwingFeatureVector) -> ProfileClassification:
        """
        Classify a swing.

        Returns:
            The winning profile and its confidence, or (UNKNOWN, 0) when
            the evidence is below the minimum
        """
        scores = MotorProfileClassifier.indicator_scores(features)

        best_profile = MotorProfile.UNKNOWN
        max_score = 0.0
        for profile, points in scores.items():
            if points > max_score:
                max_score = points
                best_profile = profile

        confidence = min(100, int(max_score + 0.5))

        if (
            confidence < MotorProfileClassifier.MIN_CONFIDENCE
            or max_score < MotorProfileClassifier.MIN_SCORE
        ):
            logger.debug(f"Profile below evidence gate (max score {max_score})")
            return ProfileClassification(MotorProfile.UNKNOWN, 0)

        logger.debug(f"Classified {best_profile.value} with confidence {confidence}")
        return ProfileClassification(best_profile, confidence)
