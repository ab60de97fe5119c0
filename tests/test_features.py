import pytest

from core.domain import AgeGroup, LeakType, MotorProfile, SwingFeatureVector


@pytest.mark.parametrize(
    "label, expected",
    [
        ("HS", AgeGroup.HIGH_SCHOOL),
        ("hs", AgeGroup.HIGH_SCHOOL),
        ("high_school", AgeGroup.HIGH_SCHOOL),
        ("12u", AgeGroup.U12),
        (" College ", AgeGroup.COLLEGE),
        (AgeGroup.PRO, AgeGroup.PRO),
    ],
)
def test_age_group_parse(label, expected):
    assert AgeGroup.parse(label) is expected


def test_age_group_parse_rejects_unknown():
    with pytest.raises(ValueError):
        AgeGroup.parse("9U")


def test_motor_profile_parse_falls_back_to_unknown():
    assert MotorProfile.parse("whipper") is MotorProfile.WHIPPER
    assert MotorProfile.parse("SWINGER") is MotorProfile.UNKNOWN
    assert MotorProfile.parse(None) is MotorProfile.UNKNOWN


def test_leak_parse():
    assert LeakType.parse("early_arms") is LeakType.EARLY_ARMS
    assert LeakType.parse("LATE_LEGS") is None
    assert LeakType.parse("") is None
    assert not LeakType.CLEAN_TRANSFER.is_leak
    assert LeakType.CAST.is_leak
