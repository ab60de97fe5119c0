"""
Benchmark Tables

Static reference data the scorers read from: bat-speed percentile
breakpoints and trigger-to-impact windows per age group, plus the
score-to-grade step function.

Bat-speed breakpoints follow published bat-sensor population data;
they are fixed benchmarks, not an empirical distribution.
"""

from dataclasses import dataclass

from .features import AgeGroup


@dataclass(frozen=True)
class PercentileBreakpoints:
    """Measurement value at each published percentile."""
    p10: float
    p25: float
    p50: float
    p75: float
    p90: float
    p99: float

    def as_dict(self) -> dict[str, float]:
        return {
            "p10": self.p10,
            "p25": self.p25,
            "p50": self.p50,
            "p75": self.p75,
            "p90": self.p90,
            "p99": self.p99,
        }


@dataclass(frozen=True)
class TimingWindow:
    """Trigger-to-impact timing for an age group (milliseconds)."""
    ideal: float
    min: float
    max: float

    def contains(self, value_ms: float) -> bool:
        return self.min <= value_ms <= self.max


# =============================================================================
# Bat speed (mph)
# =============================================================================

AGE_BENCHMARKS: dict[AgeGroup, PercentileBreakpoints] = {
    AgeGroup.U8:          PercentileBreakpoints(28, 32, 38, 44, 50, 56),
    AgeGroup.U10:         PercentileBreakpoints(34, 38, 45, 52, 58, 64),
    AgeGroup.U12:         PercentileBreakpoints(40, 45, 52, 60, 66, 72),
    AgeGroup.U14:         PercentileBreakpoints(48, 52, 60, 68, 74, 80),
    AgeGroup.HIGH_SCHOOL: PercentileBreakpoints(54, 58, 66, 74, 80, 88),
    AgeGroup.COLLEGE:     PercentileBreakpoints(62, 65, 72, 78, 85, 92),
    AgeGroup.PRO:         PercentileBreakpoints(68, 72, 78, 84, 90, 98),
}


# =============================================================================
# Trigger-to-impact (ms)
# =============================================================================

TIMING_BENCHMARKS: dict[AgeGroup, TimingWindow] = {
    AgeGroup.U8:          TimingWindow(ideal=160, min=140, max=200),
    AgeGroup.U10:         TimingWindow(ideal=155, min=135, max=190),
    AgeGroup.U12:         TimingWindow(ideal=150, min=130, max=180),
    AgeGroup.U14:         TimingWindow(ideal=145, min=125, max=175),
    AgeGroup.HIGH_SCHOOL: TimingWindow(ideal=140, min=120, max=170),
    AgeGroup.COLLEGE:     TimingWindow(ideal=135, min=115, max=165),
    AgeGroup.PRO:         TimingWindow(ideal=130, min=110, max=160),
}


# =============================================================================
# Grade labels (scouting scale)
# =============================================================================

# Checked top-down; first threshold the score reaches wins.
GRADE_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (80, "Elite"),
    (70, "Plus-Plus"),
    (65, "Plus"),
    (60, "Above Avg"),
    (55, "Average"),
    (50, "Fringe"),
    (45, "Below Avg"),
)

LOWEST_GRADE = "Needs Work"
