"""
Tests for display helpers.
"""
import pytest

from curve_modeler.formatting import (
    format_duration,
    format_pace,
    format_race_time,
    format_distance,
    format_power,
    card_rarity_level,
    profile_display_name,
)
from curve_modeler.types import RarityTier, CyclingProfileType, RunningProfileType


class TestTimeFormats:

    @pytest.mark.parametrize("seconds,expected", [
        (45, "45s"),
        (60, "1min"),
        (90, "1min30s"),
        (1200, "20min"),
        (3600, "1h"),
        (5400, "1h30min"),
    ])
    def test_format_duration(self, seconds, expected):
        assert format_duration(seconds) == expected

    @pytest.mark.parametrize("pace,expected", [
        (240, "4:00"),
        (306.25, "5:06"),
        (200.4, "3:20"),
        (299.6, "5:00"),
    ])
    def test_format_pace(self, pace, expected):
        assert format_pace(pace) == expected

    @pytest.mark.parametrize("seconds,expected", [
        (300, "5:00"),
        (1163.5, "19:24"),
        (3451, "57:31"),
        (7235, "2:00:35"),
    ])
    def test_format_race_time(self, seconds, expected):
        assert format_race_time(seconds) == expected

    @pytest.mark.parametrize("value", [0, -5, float("nan"), float("inf"), None])
    def test_placeholder(self, value):
        assert format_pace(value) == "--:--"
        assert format_race_time(value) == "--:--"
        assert format_duration(value) == "--:--"


class TestValueFormats:

    def test_format_distance(self):
        assert format_distance(21097.5) == "21.10 km"
        assert format_distance(1500, unit="m") == "1500 m"

    def test_format_power(self):
        assert format_power(383.647) == "384 W"
        assert format_power(383.647, decimals=1) == "383.6 W"


class TestCardLabels:

    @pytest.mark.parametrize("tier,level", [
        (RarityTier.ALIEN, "GOAT"),
        (RarityTier.HERO, "GOAT"),
        (RarityTier.PRO, "LEGGENDA"),
        (RarityTier.ELITE, "ELITE"),
        (RarityTier.STANDARD, "BASE"),
        ("PRO", "LEGGENDA"),
    ])
    def test_card_rarity_level(self, tier, level):
        assert card_rarity_level(tier) == level

    def test_profile_display_name(self):
        assert profile_display_name(CyclingProfileType.TIME_TRIALIST) == "Time Trialist"
        assert profile_display_name(RunningProfileType.COMPLETE_ATHLETE) == "Complete Athlete"
