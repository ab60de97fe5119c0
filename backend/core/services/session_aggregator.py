"""
Session Aggregator

Reduces per-swing analyses into session-level summaries: averages,
consistency, dominant-profile voting and leak-frequency voting.
"""

import logging
from collections import Counter
from typing import Iterable, Optional, Sequence, TypeVar

from ..domain.analysis import (
    CBSwingAnalysis,
    LeakType,
    MotorProfile,
    SessionSummary,
    VisionSessionSummary,
    VisionSwingResult,
)
from ..domain.features import AgeGroup, SourceFidelity
from .composite_calculator import FourBCalculator
from .percentile import PercentileCalculator
from .stats import clamp, coefficient_of_variation, mean, present, round_half_up, round_score

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _first_max(counts: dict[T, int]) -> tuple[Optional[T], int]:
    """
    Key with the strictly highest count.

    Ties go to whichever key comes first in the dict, so callers order
    the dict by enum declaration.
    """
    best = None
    best_count = 0
    for key, count in counts.items():
        if count > best_count:
            best = key
            best_count = count
    return best, best_count


def _ordered_union(groups: Iterable[Iterable[str]]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for group in groups:
        for item in group:
            seen.setdefault(item, None)
    return tuple(seen)


def _rounded(value: Optional[float], digits: int) -> Optional[float]:
    return None if value is None else round_half_up(value, digits)


class SessionAggregator:
    """
    Session statistics for a batch of swings.

    Only valid swings count: bat speed must be present and at least
    25 mph, anything slower is a waggle or practice motion.
    """

    WAGGLE_FLOOR_MPH = 25.0

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def is_valid(analysis: CBSwingAnalysis) -> bool:
        speed = analysis.bat_speed_mph
        return speed is not None and speed >= SessionAggregator.WAGGLE_FLOOR_MPH

    @staticmethod
    def consistency_score(values: Sequence[Optional[float]]) -> int:
        """
        100 minus twice the CV (as a percent of 100), floored at 0.

        One value has no spread and scores 100. No values, or a zero
        mean, score 0: there is nothing to call consistent.
        """
        cv = coefficient_of_variation(values)
        if cv is None:
            return 0
        return round_score(max(0.0, 100 - cv * 200))

    # -------------------------------------------------------------------------
    # Sensor sessions
    # -------------------------------------------------------------------------

    @staticmethod
    def aggregate(
        analyses: Sequence[CBSwingAnalysis],
        age_group: AgeGroup,
    ) -> SessionSummary:
        """
        Summarize a capture session.

        Args:
            analyses: Every swing analysed in the session, waggles included
            age_group: Benchmarks for the summary percentile

        Returns:
            SessionSummary over the valid swings
        """
        valid = [a for a in analyses if SessionAggregator.is_valid(a)]
        skipped = len(analyses) - len(valid)
        if skipped:
            logger.debug(f"Filtered {skipped} waggle swing(s) from session")

        bat_speeds = present(a.bat_speed_mph for a in valid)
        avg_bat_speed = mean(bat_speeds)

        profile_counts = {profile: 0 for profile in MotorProfile}
        for a in valid:
            profile_counts[a.motor_profile] += 1
        dominant, _ = _first_max(profile_counts)

        leak_votes = Counter(
            a.leak for a in valid if a.leak is not None and a.leak.is_leak
        )
        leak_breakdown = {leak: leak_votes[leak] for leak in LeakType if leak_votes[leak]}
        primary_leak, _ = _first_max(leak_breakdown)

        composites = [a.composite_score for a in valid]
        avg_composite = mean(composites)

        return SessionSummary(
            total_swings=len(analyses),
            valid_swings=len(valid),
            avg_bat_speed=round_half_up(avg_bat_speed or 0.0, 1),
            max_bat_speed=max(bat_speeds) if bat_speeds else 0.0,
            avg_hand_speed=round_half_up(mean(a.hand_speed_mph for a in valid) or 0.0, 1),
            avg_attack_angle=round_half_up(mean(a.attack_angle_deg for a in valid) or 0.0, 1),
            avg_tempo_score=round_half_up(mean(a.tempo_score for a in valid) or 0.0),
            avg_efficiency=round_half_up(mean(a.efficiency_rating for a in valid) or 0.0),
            avg_composite=_rounded(avg_composite, 0),
            dominant_motor_profile=dominant or MotorProfile.UNKNOWN,
            motor_profile_breakdown=profile_counts,
            bat_speed_percentile=PercentileCalculator.bat_speed_percentile(avg_bat_speed, age_group),
            consistency_score=SessionAggregator.consistency_score(bat_speeds),
            primary_leak=primary_leak,
            leak_breakdown=leak_breakdown,
            strengths=_ordered_union(a.strengths for a in valid),
            improvements=_ordered_union(a.improvements for a in valid),
        )

    # -------------------------------------------------------------------------
    # Vision batches
    # -------------------------------------------------------------------------

    @staticmethod
    def aggregate_vision(results: Sequence[VisionSwingResult]) -> VisionSessionSummary:
        """
        Summarize a batch of vision-scored swings.

        Component averages use the same clamped and capped scores as the
        per-swing 4B records and skip components the service did not
        return. Composites are recomputed per swing
        from the capped components rather than trusted as sent.

        Returns:
            VisionSessionSummary; CV needs at least two swings
        """
        n = len(results)
        four_bs = [
            FourBCalculator.score(
                FourBCalculator.from_vision(r), SourceFidelity.VISION_2D
            )
            for r in results
        ]
        caps = FourBCalculator.SOURCE_CAPS[SourceFidelity.VISION_2D]

        def capped_avg(component: str) -> Optional[float]:
            values = [clamp(v) for v in present(getattr(r, component) for r in results)]
            limit = caps.get(component)
            if limit is not None:
                values = [min(v, limit) for v in values]
            return _rounded(mean(values), 1)

        composites = [float(fb.composite) for fb in four_bs]
        cv = coefficient_of_variation(composites) if n >= 2 else None

        leak_counts = {leak: 0 for leak in LeakType}
        for r in results:
            if r.leak is not None:
                leak_counts[r.leak] += 1
        primary_leak, leak_count = _first_max(leak_counts)
        leak_frequency = (
            f"{primary_leak.value}: {leak_count}/{n} swings" if primary_leak else None
        )

        profile_counts = {p: 0 for p in MotorProfile if p is not MotorProfile.UNKNOWN}
        for r in results:
            if r.motor_profile in profile_counts:
                profile_counts[r.motor_profile] += 1
        dominant, profile_count = _first_max(profile_counts)

        return VisionSessionSummary(
            swing_count=n,
            avg_body=capped_avg("body"),
            avg_brain=capped_avg("brain"),
            avg_bat=capped_avg("bat"),
            avg_ball=capped_avg("ball"),
            avg_composite=_rounded(mean(composites), 1),
            consistency_cv=_rounded(cv * 100, 1) if cv is not None else None,
            consistency_score=SessionAggregator.consistency_score(composites),
            primary_leak=primary_leak,
            leak_frequency=leak_frequency,
            dominant_motor_profile=dominant or MotorProfile.UNKNOWN,
            profile_confidence=_rounded(profile_count / n, 2) if dominant else None,
        )
