"""Tests for rating/threshold evaluation."""

import pytest

from analysis.threshold import exceeds_threshold
from common.errors import ConfigError
from constants import Rating, ThresholdMode


EXPECTED = {
    (Rating.SAFE, ThresholdMode.UNSAFE): False,
    (Rating.CAUTION, ThresholdMode.UNSAFE): False,
    (Rating.UNSAFE, ThresholdMode.UNSAFE): True,
    (Rating.UNKNOWN, ThresholdMode.UNSAFE): False,
    (Rating.SAFE, ThresholdMode.CAUTION): False,
    (Rating.CAUTION, ThresholdMode.CAUTION): True,
    (Rating.UNSAFE, ThresholdMode.CAUTION): True,
    (Rating.UNKNOWN, ThresholdMode.CAUTION): False,
    (Rating.SAFE, ThresholdMode.ANY): False,
    (Rating.CAUTION, ThresholdMode.ANY): True,
    (Rating.UNSAFE, ThresholdMode.ANY): True,
    (Rating.UNKNOWN, ThresholdMode.ANY): True,
}


@pytest.mark.parametrize("rating,mode", list(EXPECTED))
def test_exceeds_threshold_table(rating, mode):
    assert exceeds_threshold(rating, mode) is EXPECTED[(rating, mode)]


def test_safe_never_exceeds():
    assert not any(exceeds_threshold(Rating.SAFE, mode) for mode in ThresholdMode)


class TestRatingParse:
    """Test normalization of raw registry rating values."""

    def test_case_insensitive(self):
        assert Rating.parse("UNSAFE") is Rating.UNSAFE
        assert Rating.parse("Caution") is Rating.CAUTION

    def test_surrounding_whitespace_is_not_trimmed(self):
        assert Rating.parse("safe ") is Rating.UNKNOWN

    def test_unrecognized_values_are_unknown(self):
        assert Rating.parse("critical") is Rating.UNKNOWN
        assert Rating.parse(None) is Rating.UNKNOWN
        assert Rating.parse(3) is Rating.UNKNOWN

    def test_unknown_has_no_level(self):
        assert Rating.UNKNOWN.level is None
        assert Rating.SAFE.level < Rating.CAUTION.level < Rating.UNSAFE.level


class TestThresholdModeParse:
    """Test fail-on validation."""

    def test_accepts_known_modes(self):
        assert ThresholdMode.parse("Caution") is ThresholdMode.CAUTION
        assert ThresholdMode.parse("any") is ThresholdMode.ANY

    def test_rejects_unknown_mode(self):
        with pytest.raises(ConfigError, match="Invalid fail-on value 'high'"):
            ThresholdMode.parse("high")
