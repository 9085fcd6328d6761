import random

import pytest

from wastesort.scoring.confidence import (
    _isnum,
    _nz,
    boosted_confidence,
    clamp01,
    confidence_bin,
    item_count,
    jittered_confidence,
)


def test_isnum_handles_common_edge_cases():
    assert not _isnum(None)
    assert not _isnum(float("nan"))
    assert _isnum(0.0)
    assert _isnum(5)


def test_nz_returns_default_for_missing_values():
    assert _nz(None, 2.5) == 2.5
    assert _nz(float("nan"), 42) == 42
    assert _nz(7, 1) == 7


def test_clamp01_limits_values_between_zero_and_one():
    assert clamp01(None) == 0.0
    assert clamp01(float("nan")) == 0.0
    assert clamp01(-1.0) == 0.0
    assert clamp01(0.4) == 0.4
    assert clamp01(1.5) == 1.0


def test_boosted_confidence_scales_and_caps():
    assert boosted_confidence(0.5) == pytest.approx(0.6)
    assert boosted_confidence(0.9) == pytest.approx(0.95)
    assert boosted_confidence(1.0, boost=1.2, cap=0.8) == pytest.approx(0.8)
    assert boosted_confidence(None) == 0.0


def test_jittered_confidence_stays_in_band():
    rng = random.Random(0)
    values = [jittered_confidence(rng, 0.7, 0.2) for _ in range(200)]
    assert all(0.7 <= v < 0.9 for v in values)
    assert len(set(values)) > 1


def test_jittered_confidence_is_reproducible():
    assert jittered_confidence(random.Random(5)) == jittered_confidence(random.Random(5))


def test_item_count_bounds():
    rng = random.Random(1)
    counts = {item_count(rng, 2, 3) for _ in range(100)}
    assert counts == {2, 3}
    assert item_count(rng, 1, 1) == 1


@pytest.mark.parametrize(
    "value, expected",
    [(0.95, "high"), (0.85, "high"), (0.7, "medium"), (0.5, "low"), (0.3, "very_low"), (None, "very_low")],
)
def test_confidence_bin_thresholds(value, expected):
    assert confidence_bin(value) == expected
