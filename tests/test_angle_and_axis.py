import pytest

from core.domain import AttackAngleZone, AxisStabilityType
from core.services import AttackAngleAnalyzer, AxisStabilityClassifier


# =============================================================================
# Attack angle
# =============================================================================

@pytest.mark.parametrize(
    "angle, zone, optimal",
    [
        (8, AttackAngleZone.OPTIMAL, True),
        (11, AttackAngleZone.OPTIMAL, True),
        (15, AttackAngleZone.OPTIMAL, True),
        (7.9, AttackAngleZone.FLAT, False),
        (-5, AttackAngleZone.FLAT, False),
        (15.1, AttackAngleZone.STEEP, False),
    ],
)
def test_attack_angle_zones(angle, zone, optimal):
    result = AttackAngleAnalyzer.analyze(angle)
    assert result.zone is zone
    assert result.optimal is optimal
    assert result.measured


def test_attack_angle_feedback_text():
    assert "increase launch angle" in AttackAngleAnalyzer.analyze(2).feedback
    assert "flatten swing path" in AttackAngleAnalyzer.analyze(20).feedback


def test_missing_angle_keeps_optimal_label_but_is_flagged():
    result = AttackAngleAnalyzer.analyze(None)
    assert result.zone is AttackAngleZone.OPTIMAL
    assert result.optimal is False
    assert result.measured is False
    assert result.feedback == "Attack angle data not available"


# =============================================================================
# Axis stability
# =============================================================================

@pytest.mark.parametrize(
    "cog, stability_type, score",
    [
        (-0.6, AxisStabilityType.BACKWARD_DRIFT, 52),
        (0.9, AxisStabilityType.FORWARD_SPIN, 28),
        (0.0, AxisStabilityType.STABLE, 100),
        (-0.1, AxisStabilityType.STABLE, 92),
        (0.3, AxisStabilityType.STABLE, 76),
        (-0.3, AxisStabilityType.DEVELOPING, 76),
        (2.0, AxisStabilityType.FORWARD_SPIN, 0),
    ],
)
def test_axis_categories_and_scores(cog, stability_type, score):
    result = AxisStabilityClassifier.classify(cog)
    assert result.type is stability_type
    assert result.score == score
    assert result.note and result.cue


def test_score_ignores_category_boundaries():
    # 0.5 is DEVELOPING and -0.5 sits on the backward-drift boundary; both score 60
    positive = AxisStabilityClassifier.classify(0.5)
    negative = AxisStabilityClassifier.classify(-0.5)
    assert positive.type is AxisStabilityType.DEVELOPING
    assert negative.type is AxisStabilityType.DEVELOPING
    assert positive.score == negative.score == 60
    assert AxisStabilityClassifier.classify(-0.51).type is AxisStabilityType.BACKWARD_DRIFT


def test_missing_cog_is_developing_and_neutral():
    result = AxisStabilityClassifier.classify(None)
    assert result.type is AxisStabilityType.DEVELOPING
    assert result.score == 50
    assert result.measured is False
    assert result.note == ""
