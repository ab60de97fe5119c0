import itertools

import pytest

from core.services import EfficiencyScorer


def test_no_inputs_is_exactly_50():
    assert EfficiencyScorer.rating() == 50
    assert not EfficiencyScorer.has_inputs()


def test_example_swing():
    # 88, angle 11 -> 90, zone 14 -> 77.8, cast 5 -> 92
    assert EfficiencyScorer.rating(88, 11, 14, 5) == 87


@pytest.mark.parametrize(
    "angle, expected",
    [(8, 90), (15, 90), (5, 70), (16, 70), (0, 50), (20, 50), (25, 50), (-3, 30), (30, 30)],
)
def test_approach_angle_buckets(angle, expected):
    assert EfficiencyScorer.approach_angle_score(angle) == expected


def test_zone_and_cast_are_bounded():
    assert EfficiencyScorer.rating(distance_in_zone=36) == 100
    assert EfficiencyScorer.rating(hand_cast_distance=20) == 0
    assert EfficiencyScorer.rating(hand_cast_distance=4) == 100


def test_rounds_half_up():
    # (83 + 70) / 2 = 76.5
    assert EfficiencyScorer.rating(speed_efficiency=83, approach_angle=5) == 77


def test_rating_stays_in_bounds():
    options = {
        "speed_efficiency": [None, 0, 55, 100],
        "approach_angle": [None, -20, 11, 40],
        "distance_in_zone": [None, 0, 9, 40],
        "hand_cast_distance": [None, 0, 6, 30],
    }
    for combo in itertools.product(*options.values()):
        kwargs = dict(zip(options.keys(), combo))
        assert 0 <= EfficiencyScorer.rating(**kwargs) <= 100


def test_short_hand_cast_does_not_push_past_100():
    assert EfficiencyScorer.cast_score(0) == 100
    assert EfficiencyScorer.rating(hand_cast_distance=0) == 100
    # 95, angle 11 -> 90, zone 18 -> 100, cast 1 -> 100
    assert EfficiencyScorer.rating(95, 11, 18, 1) == 96


def test_out_of_range_speed_efficiency_is_clamped():
    assert EfficiencyScorer.rating(speed_efficiency=140) == 100
    assert EfficiencyScorer.rating(speed_efficiency=-20) == 0
