from __future__ import annotations

import pytest

from src.render.color_scale import COLOR_BUCKETS, FALLBACK_COLOR, MISSING_COLOR, ColorScale


def test_range_over_present_finite_values_only():
    scale = ColorScale.from_values([None, 5, float("nan"), "12", 2, float("inf")])
    assert (scale.min_value, scale.max_value) == (2.0, 5.0)


def test_empty_range_is_zero_zero():
    scale = ColorScale.from_values([None, float("nan")])
    assert (scale.min_value, scale.max_value) == (0.0, 0.0)
    assert scale.color_for(3) == FALLBACK_COLOR


def test_log_ratio_example():
    scale = ColorScale.from_values([1, 10, 100])
    assert scale.ratio(10) == pytest.approx(0.5)
    assert scale.bucket_index(10) == 5
    assert scale.color_for(10) == "#82B4A8"


def test_extremes_hit_first_and_last_bucket():
    scale = ColorScale.from_values([1, 10, 100])
    assert scale.color_for(1) == COLOR_BUCKETS[0]
    assert scale.color_for(100) == COLOR_BUCKETS[-1]


@pytest.mark.parametrize("value", [None, float("nan"), float("inf"), "10"])
def test_missing_values_get_missing_color(value):
    assert ColorScale.from_values([1, 100]).color_for(value) == MISSING_COLOR
    assert ColorScale.from_values([7, 7]).color_for(value) == MISSING_COLOR


def test_degenerate_range_uses_fallback():
    scale = ColorScale.from_values([7, 7, None])
    assert scale.degenerate
    assert scale.color_for(7) == FALLBACK_COLOR
    assert scale.color_for(1000) == FALLBACK_COLOR
    assert scale.bucket_index(7) is None


def test_bucket_order_is_monotonic():
    values = [0.5, 1, 2, 3.3, 7, 15, 40, 99, 250, 800, 2500, 12000, 50000]
    scale = ColorScale.from_values(values)
    indexes = [scale.bucket_index(v) for v in values]
    assert indexes == sorted(indexes)
    assert indexes[0] == 0
    assert indexes[-1] == len(COLOR_BUCKETS) - 1


def test_values_below_one_are_floored():
    scale = ColorScale.from_values([0.01, 100])
    assert scale.color_for(0.01) == scale.color_for(1) == COLOR_BUCKETS[0]


def test_range_entirely_below_one_maps_to_last_bucket():
    scale = ColorScale.from_values([0.2, 0.8])
    assert not scale.degenerate
    assert scale.color_for(0.5) == COLOR_BUCKETS[-1]


def test_ratio_on_range_below_one_is_top_of_scale():
    scale = ColorScale.from_values([0.2, 0.8])
    assert scale.ratio(0.5) == 1.0
    assert scale.bucket_index(0.5) == len(COLOR_BUCKETS) - 1
