"""
Percentile Interpolator

Maps a raw measurement against a breakpoint table to a 0-100 percentile
via piecewise linear interpolation.
"""

from typing import Optional

from ..domain.benchmarks import AGE_BENCHMARKS, PercentileBreakpoints
from ..domain.features import AgeGroup


class PercentileCalculator:
    """
    Scout-style "percentile vs. peer age group" ranking.

    Bands between breakpoints are not equal width: p10-p25 and p75-p90
    span 15 points, p25-p50 and p50-p75 span 25, p90-p99 spans 9.
    Values past p99 can reach 100; values below p10 never drop under 1.

    All methods are static - no state needed.
    """

    @staticmethod
    def percentile(value: Optional[float], breakpoints: PercentileBreakpoints) -> float:
        """
        Interpolate a percentile for a raw value.

        Args:
            value: Measurement in the same unit as the breakpoints
            breakpoints: Published p10..p99 values

        Returns:
            Percentile (1-100), or 0 when the value is missing or not positive
        """
        if value is None or value <= 0:
            return 0.0

        b = breakpoints
        if value >= b.p99:
            return 99 + min(1.0, (value - b.p99) / 10)

        # (lower breakpoint, upper breakpoint, percentile at lower, band width)
        bands = (
            (b.p90, b.p99, 90, 9),
            (b.p75, b.p90, 75, 15),
            (b.p50, b.p75, 50, 25),
            (b.p25, b.p50, 25, 25),
            (b.p10, b.p25, 10, 15),
        )
        for low, high, base, width in bands:
            if value >= low:
                return base + (value - low) / (high - low) * width

        return max(1.0, value / b.p10 * 10)

    @staticmethod
    def bat_speed_percentile(bat_speed_mph: Optional[float], age_group: AgeGroup) -> float:
        """Percentile of a bat speed against the age group's benchmarks."""
        return PercentileCalculator.percentile(bat_speed_mph, AGE_BENCHMARKS[age_group])
