"""
Tests for the condition classifier.
"""

import pytest

from weather_widget.classifier import CONDITION_GROUPS, classify
from weather_widget.models import PresentationCategory


class TestDocumentedExamples:
    """Known provider conditions map to the expected category."""

    def test_clear_sky(self):
        assert classify("Clear", "clear sky") == PresentationCategory.CLEAR

    def test_light_rain(self):
        assert classify("Rain", "light rain") == PresentationCategory.RAINY

    def test_thunderstorm_with_heavy_rain(self):
        """Thunderstorm wins even though the description mentions rain."""
        result = classify("Thunderstorm", "thunderstorm with heavy rain")
        assert result == PresentationCategory.THUNDERSTORM

    def test_mist_with_haze_description(self):
        assert classify("Mist", "haze") == PresentationCategory.MISTY

    def test_tornado_is_misty(self):
        assert classify("Tornado", "") == PresentationCategory.MISTY

    def test_unknown_condition_is_default(self):
        assert classify("Xyz", "nonsense") == PresentationCategory.DEFAULT


class TestGroupings:
    """Every keyword of every group is recognized."""

    @pytest.mark.parametrize(
        "primary,expected",
        [
            ("Clouds", PresentationCategory.CLOUDY),
            ("Drizzle", PresentationCategory.RAINY),
            ("Snow", PresentationCategory.SNOWY),
            ("Sleet", PresentationCategory.SNOWY),
            ("Smoke", PresentationCategory.MISTY),
            ("Haze", PresentationCategory.MISTY),
            ("Dust", PresentationCategory.MISTY),
            ("Fog", PresentationCategory.MISTY),
            ("Sand", PresentationCategory.MISTY),
            ("Ash", PresentationCategory.MISTY),
            ("Squall", PresentationCategory.MISTY),
        ],
    )
    def test_provider_main_values(self, primary, expected):
        assert classify(primary, "") == expected

    def test_matching_is_case_insensitive(self):
        assert classify("CLOUDS", "OVERCAST CLOUDS") == PresentationCategory.CLOUDY
        assert classify("clouds", "overcast clouds") == PresentationCategory.CLOUDY

    def test_substring_containment(self):
        assert classify("Freezing Rain", "") == PresentationCategory.RAINY

    def test_singular_cloud_does_not_match(self):
        assert classify("Cloud", "") == PresentationCategory.DEFAULT

    def test_first_group_wins(self):
        """'Clear' is checked before 'Rain'."""
        assert classify("Clear then rain", "") == PresentationCategory.CLEAR

    def test_description_alone_does_not_classify(self):
        assert classify("", "light rain") == PresentationCategory.DEFAULT


class TestTotality:
    """classify never fails and is deterministic."""

    @pytest.mark.parametrize(
        "primary,description",
        [
            ("", ""),
            (None, None),
            ("Clear", None),
            ("   ", "\t"),
            ("☀️", "日本語"),
            ("x" * 1000, "y" * 1000),
        ],
    )
    def test_odd_input_returns_a_category(self, primary, description):
        result = classify(primary, description)
        assert isinstance(result, PresentationCategory)

    def test_same_input_same_output(self):
        results = {classify("Snow", "light snow") for _ in range(10)}
        assert results == {PresentationCategory.SNOWY}

    def test_groups_cover_every_category_but_default(self):
        categories = {category for _, category in CONDITION_GROUPS}
        assert categories == set(PresentationCategory) - {PresentationCategory.DEFAULT}
