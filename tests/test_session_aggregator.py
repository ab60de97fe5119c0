import pytest

from core.domain import LeakType, MotorProfile, SwingFeatureVector, VisionSwingResult
from core.services import SessionAggregator


# =============================================================================
# Sensor sessions
# =============================================================================

class TestSensorSession:

    @pytest.fixture
    def summary(self, analyzer, hs):
        swings = [
            SwingFeatureVector(bat_speed_mph=60),
            SwingFeatureVector(bat_speed_mph=20),   # waggle
            SwingFeatureVector(bat_speed_mph=80),
        ]
        analyses = [analyzer.analyze(f, hs) for f in swings]
        return SessionAggregator.aggregate(analyses, hs)

    def test_counts_exclude_waggles(self, summary):
        assert summary.total_swings == 3
        assert summary.valid_swings == 2

    def test_speed_stats(self, summary):
        assert summary.avg_bat_speed == 70.0
        assert summary.max_bat_speed == 80.0
        # CV = 10 / 70, score = 100 - 200 * CV
        assert summary.consistency_score == 71
        # HS: 70 sits halfway between p50 (66) and p75 (74)
        assert summary.bat_speed_percentile == 62.5

    def test_profile_tie_goes_to_earlier_profile(self, summary):
        # 60 mph alone is UNKNOWN, 80 mph is a SLINGSHOTTER: 1 vote each
        assert summary.motor_profile_breakdown[MotorProfile.SLINGSHOTTER] == 1
        assert summary.motor_profile_breakdown[MotorProfile.UNKNOWN] == 1
        assert set(summary.motor_profile_breakdown) == set(MotorProfile)
        assert summary.dominant_motor_profile is MotorProfile.SLINGSHOTTER

    def test_no_leak_without_leak_inputs(self, summary):
        assert summary.primary_leak is None
        assert summary.leak_breakdown == {}

    def test_clean_transfer_is_not_a_leak_vote(self, analyzer, hs):
        swings = [
            SwingFeatureVector(bat_speed_mph=70, hand_cast_distance_in=5),
            SwingFeatureVector(bat_speed_mph=70, hand_cast_distance_in=5),
            SwingFeatureVector(bat_speed_mph=70, hand_cast_distance_in=10),
        ]
        summary = SessionAggregator.aggregate([analyzer.analyze(f, hs) for f in swings], hs)
        assert summary.primary_leak is LeakType.CAST
        assert summary.leak_breakdown == {LeakType.CAST: 1}

    def test_only_waggles(self, analyzer, hs):
        analyses = [analyzer.analyze(SwingFeatureVector(bat_speed_mph=10), hs)]
        summary = SessionAggregator.aggregate(analyses, hs)
        assert summary.valid_swings == 0
        assert summary.avg_bat_speed == 0.0
        assert summary.consistency_score == 0
        assert summary.dominant_motor_profile is MotorProfile.UNKNOWN

    def test_single_swing_is_perfectly_consistent(self, analyzer, hs, example_features):
        summary = SessionAggregator.aggregate([analyzer.analyze(example_features, hs)], hs)
        assert summary.consistency_score == 100
        assert summary.avg_composite == 66


def test_consistency_score_edges():
    assert SessionAggregator.consistency_score([]) == 0
    assert SessionAggregator.consistency_score([0, 0]) == 0
    assert SessionAggregator.consistency_score([70]) == 100
    assert SessionAggregator.consistency_score([10, 100]) == 0


# =============================================================================
# Vision batches
# =============================================================================

class TestVisionSession:

    @pytest.fixture
    def results(self):
        return [
            VisionSwingResult(body=60, brain=80, bat=70, ball=80,
                              leak=LeakType.CAST, motor_profile=MotorProfile.WHIPPER),
            VisionSwingResult(body=50, brain=50, bat=50, ball=50,
                              leak=LeakType.CAST, motor_profile=MotorProfile.WHIPPER),
            VisionSwingResult(body=70, brain=40, bat=60, ball=30,
                              motor_profile=MotorProfile.SPINNER),
        ]

    def test_capped_averages(self, results):
        summary = SessionAggregator.aggregate_vision(results)
        assert summary.swing_count == 3
        assert summary.avg_body == 60.0
        assert summary.avg_brain == 48.3    # 55, 50, 40
        assert summary.avg_ball == 43.3     # 50, 50, 30
        assert summary.avg_composite == 54.3

    def test_consistency(self, results):
        summary = SessionAggregator.aggregate_vision(results)
        assert summary.consistency_cv == 7.7
        assert summary.consistency_score == 85

    def test_votes(self, results):
        summary = SessionAggregator.aggregate_vision(results)
        assert summary.primary_leak is LeakType.CAST
        assert summary.leak_frequency == "CAST: 2/3 swings"
        assert summary.dominant_motor_profile is MotorProfile.WHIPPER
        assert summary.profile_confidence == 0.67

    def test_clean_transfer_counts_in_vision_votes(self):
        results = [
            VisionSwingResult(body=60, leak=LeakType.CLEAN_TRANSFER),
            VisionSwingResult(body=60, leak=LeakType.CLEAN_TRANSFER),
            VisionSwingResult(body=60, leak=LeakType.CAST),
        ]
        summary = SessionAggregator.aggregate_vision(results)
        assert summary.primary_leak is LeakType.CLEAN_TRANSFER
        assert summary.dominant_motor_profile is MotorProfile.UNKNOWN
        assert summary.profile_confidence is None

    def test_averages_use_clamped_components(self):
        summary = SessionAggregator.aggregate_vision([
            VisionSwingResult(body=140, brain=30, bat=-20, ball=120),
        ])
        assert summary.avg_body == 100.0
        assert summary.avg_bat == 0.0
        assert summary.avg_brain == 30.0
        assert summary.avg_ball == 50.0

    def test_single_result(self):
        summary = SessionAggregator.aggregate_vision([VisionSwingResult(body=60, bat=60)])
        assert summary.consistency_cv is None
        assert summary.consistency_score == 100
        assert summary.avg_brain is None

    def test_empty_batch(self):
        summary = SessionAggregator.aggregate_vision([])
        assert summary.swing_count == 0
        assert summary.avg_composite is None
        assert summary.consistency_score == 0
        assert summary.primary_leak is None
        assert summary.leak_frequency is None
        assert summary.dominant_motor_profile is MotorProfile.UNKNOWN
