from core.domain import AgeGroup, LeakType, MotorProfile
from core.services import AttackAngleAnalyzer, InsightGenerator


def generate(**overrides):
    kwargs = dict(
        age_group=AgeGroup.HIGH_SCHOOL,
        bat_speed_mph=72,
        bat_speed_percentile=68.75,
        attack_angle=AttackAngleAnalyzer.analyze(11),
        efficiency_rating=87,
        tempo_score=87,
        motor_profile=MotorProfile.WHIPPER,
    )
    kwargs.update(overrides)
    return InsightGenerator.generate(**kwargs)


def test_example_swing():
    insights = generate()
    assert insights.strengths == (
        "Optimal attack angle for line drives",
        "Excellent energy transfer",
        "Consistent swing tempo",
        "Quick hands and efficient transfer",
    )
    assert insights.improvements == ()
    assert insights.drill_recommendations == ()


def test_slow_spinner_with_separation_leak_gets_hip_lead_once():
    insights = generate(
        bat_speed_mph=60,
        bat_speed_percentile=31.25,
        motor_profile=MotorProfile.SPINNER,
        leak=LeakType.POOR_SEPARATION,
    )
    assert "Focus on bat speed development" in insights.improvements
    assert "Leverage rotation for more power" in insights.improvements
    assert insights.drill_recommendations.count("Hip Lead Drill") == 1
    assert insights.drill_recommendations[0] == "Overload/Underload Training"


def test_flat_and_steep_angles():
    flat = generate(attack_angle=AttackAngleAnalyzer.analyze(3))
    assert "Increase attack angle - swing is too flat" in flat.improvements
    assert flat.drill_recommendations == ("High Tee Drill", "Uphill Swing Drill")

    steep = generate(attack_angle=AttackAngleAnalyzer.analyze(22))
    assert "Low Tee Drill" in steep.drill_recommendations


def test_unmeasured_metrics_do_not_fire_rules():
    insights = generate(
        bat_speed_mph=None,
        bat_speed_percentile=0.0,
        attack_angle=AttackAngleAnalyzer.analyze(None),
        efficiency_rating=50,
        tempo_score=50,
        motor_profile=MotorProfile.UNKNOWN,
        efficiency_measured=False,
        tempo_measured=False,
    )
    assert insights.strengths == ()
    assert insights.improvements == ()
    assert insights.drill_recommendations == ()


def test_slingshotter_timing_rule_needs_timing():
    late = generate(motor_profile=MotorProfile.SLINGSHOTTER, tempo_score=55)
    assert "Shorten load for better timing" in late.improvements

    untimed = generate(motor_profile=MotorProfile.SLINGSHOTTER, tempo_score=50, tempo_measured=False)
    assert "Shorten load for better timing" not in untimed.improvements


def test_clean_transfer_adds_nothing():
    assert generate(leak=LeakType.CLEAN_TRANSFER) == generate()


def test_cast_leak_adds_catalog_drill():
    insights = generate(leak=LeakType.CAST)
    assert "Knob-to-Ball Drill" in insights.drill_recommendations
