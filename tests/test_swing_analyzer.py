import pytest

from core.domain import (
    AttackAngleZone,
    AxisStabilityType,
    LeakType,
    MotorProfile,
    SourceFidelity,
    SwingFeatureVector,
)
from core.services import parse_vision_payload


class TestSensorSwing:

    def test_example_high_school_swing(self, analyzer, example_features, hs):
        result = analyzer.analyze(example_features, hs)

        assert result.bat_speed_percentile == pytest.approx(68.75)
        assert result.tempo_score == 87
        assert result.efficiency_rating == 87
        assert result.motor_profile is MotorProfile.WHIPPER
        assert result.motor_profile_confidence == 70
        assert result.attack_angle_zone is AttackAngleZone.OPTIMAL
        assert result.attack_angle_optimal
        assert result.leak is LeakType.CLEAN_TRANSFER

    def test_example_four_b(self, analyzer, example_features, hs):
        four_b = analyzer.analyze(example_features, hs).four_b
        assert four_b.scores.bat == pytest.approx(79.7)
        assert four_b.scores.brain == 87
        assert four_b.scores.body == 50
        assert four_b.scores.ball == 50
        assert four_b.composite == 66
        assert four_b.grade == "Plus"
        assert not four_b.capped

    def test_echoes_inputs(self, analyzer, example_features, hs):
        result = analyzer.analyze(example_features, hs)
        assert result.features == example_features
        assert result.age_group is hs
        assert result.bat_speed_mph == 72
        assert result.attack_angle_deg == 11
        assert result.source_fidelity is SourceFidelity.SENSOR

    def test_empty_swing_uses_neutral_defaults(self, analyzer, hs):
        result = analyzer.analyze(SwingFeatureVector(), hs)
        assert result.bat_speed_percentile == 0
        assert result.tempo_score == 50
        assert result.efficiency_rating == 50
        assert result.motor_profile is MotorProfile.UNKNOWN
        assert result.attack_angle.measured is False
        assert result.axis_stability.type is AxisStabilityType.DEVELOPING
        assert result.leak is None
        assert result.strengths == ()
        assert result.improvements == ()

    def test_vision_fidelity_caps_sensor_scores(self, analyzer, example_features, hs):
        result = analyzer.analyze(example_features, hs, SourceFidelity.VISION_2D)
        assert result.four_b.effective.brain == 55
        assert result.four_b.capped

    def test_same_input_same_output(self, analyzer, example_features, hs):
        assert analyzer.analyze(example_features, hs) == analyzer.analyze(example_features, hs)


class TestVisionSwing:

    @pytest.fixture
    def payload(self):
        return {
            "body": 58,
            "brain": 80,
            "bat": 55,
            "ball": 70,
            "composite": 64,
            "leak_detected": "CAST",
            "motor_profile": "WHIPPER",
            "coach_rick_take": "Stay connected.",
            "priority_drill": "Towel Drill",
            "confidence": 0.72,
            "cog_velo_y": 0.2,
        }

    def test_caps_and_recomputes_composite(self, analyzer, payload, hs):
        result = analyzer.analyze_vision(parse_vision_payload(payload), hs)
        assert result.source_fidelity is SourceFidelity.VISION_2D
        assert result.four_b.effective.brain == 55
        assert result.four_b.effective.ball == 50
        assert result.four_b.composite == 55
        assert result.four_b.grade == "Average"

    def test_profile_leak_and_coaching(self, analyzer, payload, hs):
        result = analyzer.analyze_vision(parse_vision_payload(payload), hs)
        assert result.motor_profile is MotorProfile.WHIPPER
        assert result.motor_profile_confidence == 72
        assert result.leak is LeakType.CAST
        assert result.drill_recommendations[0] == "Towel Drill"
        assert "Knob-to-Ball Drill" in result.drill_recommendations
        assert result.coaching_notes == "Stay connected."
        assert result.axis_stability.type is AxisStabilityType.STABLE

    def test_unmeasurable_scores_stay_neutral(self, analyzer, payload, hs):
        result = analyzer.analyze_vision(parse_vision_payload(payload), hs)
        assert result.tempo_score == 50
        assert result.efficiency_rating == 50
        assert result.bat_speed_percentile == 0
        assert result.attack_angle.measured is False

    def test_percent_confidence_and_unknown_profile(self, analyzer, hs):
        scaled = analyzer.analyze_vision(
            parse_vision_payload({"motor_profile": "spinner", "confidence": 64}), hs
        )
        assert scaled.motor_profile_confidence == 64

        unknown = analyzer.analyze_vision(parse_vision_payload({"confidence": 0.9}), hs)
        assert unknown.motor_profile is MotorProfile.UNKNOWN
        assert unknown.motor_profile_confidence == 0

    def test_confidence_is_kept_in_range(self, analyzer, hs):
        negative = analyzer.analyze_vision(
            parse_vision_payload({"motor_profile": "WHIPPER", "confidence": -0.3}), hs
        )
        assert negative.motor_profile_confidence == 0

        oversized = analyzer.analyze_vision(
            parse_vision_payload({"motor_profile": "WHIPPER", "confidence": 250}), hs
        )
        assert oversized.motor_profile_confidence == 100

    def test_leak_detected_locally_when_service_silent(self, analyzer, hs):
        result = analyzer.analyze_vision(parse_vision_payload({"cog_velo_y": 1.2}), hs)
        assert result.leak is LeakType.LUNGE


class TestSessions:

    def test_analyze_session(self, analyzer, example_features, hs):
        swings = [example_features, SwingFeatureVector(bat_speed_mph=15), example_features]
        analyses, summary = analyzer.analyze_session(swings, hs)
        assert len(analyses) == 3
        assert summary.total_swings == 3
        assert summary.valid_swings == 2
        assert summary.dominant_motor_profile is MotorProfile.WHIPPER
        assert summary.consistency_score == 100
        assert summary.strengths[0] == "Optimal attack angle for line drives"

    def test_analyze_vision_session(self, analyzer, hs):
        results = [parse_vision_payload({"body": 60, "leak_detected": "LUNGE"}) for _ in range(2)]
        analyses, summary = analyzer.analyze_vision_session(results, hs)
        assert len(analyses) == 2
        assert summary.leak_frequency == "LUNGE: 2/2 swings"
