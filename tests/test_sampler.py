import numpy
import pytest

from curvelab import points
from curvelab import sampler

RADIUS = 10


def make_sampler(xys, spline_type='natural'):
    collection = points.PointCollection(100, 100)
    for xy in xys:
        collection.add(xy, RADIUS)
    return sampler.CurveSampler(collection, spline_type)


THREE_POINTS = [(20, 20), (50, 80), (80, 30)]


def test_empty_collection_samples_undefined():
    curve = make_sampler([])
    series = curve.sample(100, 100)
    numpy.testing.assert_allclose(series.x_series, numpy.arange(100) / 100)
    assert numpy.isnan(series.y_series).all()
    assert numpy.isnan(curve.value_at(0.5, 100, 100))
    assert curve.interpolant() is None


def test_single_point_is_constant():
    curve = make_sampler([(50, 50)])
    series = curve.sample(100, 100)
    numpy.testing.assert_array_equal(series.y_series, numpy.full(100, 0.5))
    assert curve.value_at(0.0, 100, 100) == 0.5
    assert curve.value_at(1.0, 100, 100) == 0.5
    assert curve.interpolant() is None


def test_flat_extrapolation_past_end_points():
    curve = make_sampler(THREE_POINTS)
    ys = curve.sample(100, 100).y_series
    numpy.testing.assert_allclose(ys[:20], 0.2)
    numpy.testing.assert_allclose(ys[81:], 0.3)
    assert curve.value_at(0.05, 100, 100) == pytest.approx(0.2)
    assert curve.value_at(0.95, 100, 100) == pytest.approx(0.3)


def test_curve_passes_through_points():
    curve = make_sampler(THREE_POINTS)
    ys = curve.sample(100, 100).y_series
    assert ys[50] == 0.8
    assert curve.value_at(0.5, 100, 100) == 0.8
    assert ys[20] == pytest.approx(0.2)
    assert ys[80] == pytest.approx(0.3)
    assert 0.2 < curve.value_at(0.35, 100, 100) < 0.8


def test_value_at_matches_sample():
    curve = make_sampler(THREE_POINTS, 'monotonic')
    ys = curve.sample(100, 100).y_series
    for i in (0, 15, 33, 50, 64, 99):
        assert curve.value_at(i / 100, 100, 100) == pytest.approx(ys[i])


def test_sample_is_repeatable():
    curve = make_sampler(THREE_POINTS)
    first = curve.sample(100, 100)
    second = curve.sample(100, 100)
    assert first.y_series is not second.y_series
    numpy.testing.assert_array_equal(first.x_series, second.x_series)
    numpy.testing.assert_array_equal(first.y_series, second.y_series)


def test_sample_follows_point_changes():
    curve = make_sampler(THREE_POINTS)
    before = curve.sample(100, 100).y_series
    curve.points.move(1, 50, 60, RADIUS)
    after = curve.sample(100, 100).y_series
    assert after[50] == pytest.approx(0.6)
    assert before[50] == 0.8


def test_values_are_clamped_to_height():
    curve = make_sampler(THREE_POINTS)
    ys = curve.sample(100, 50).y_series
    assert ys.max() == 1.0
    assert ys[50] == 1.0
    assert ys.min() >= 0


def test_natural_spline_overshoots():
    curve = make_sampler(THREE_POINTS, 'natural')
    ys = curve.sample(100, 100).y_series
    assert ys[51:80].max() > 0.8


def test_monotonic_spline_does_not_overshoot():
    curve = make_sampler(THREE_POINTS, 'monotonic')
    ys = curve.sample(100, 100).y_series
    xs = [20, 50, 80]
    targets = [0.2, 0.8, 0.3]
    for x0, x1, y0, y1 in zip(xs[:-1], xs[1:], targets[:-1], targets[1:]):
        segment = ys[x0:x1+1]
        assert segment.max() <= max(y0, y1) + 1e-12
        assert segment.min() >= min(y0, y1) - 1e-12


def test_domain_size():
    curve = make_sampler(THREE_POINTS)
    series = curve.sample(100, 100, domain_size=10)
    assert series.x_series.shape == series.y_series.shape == (10,)
    numpy.testing.assert_allclose(series.x_series, numpy.arange(10) / 100)
    assert curve.sample(64.5, 100).y_series.shape == (64,)


def test_spline_type():
    curve = make_sampler(THREE_POINTS)
    assert curve.interpolant().spline_type == 'natural'
    curve.set_spline_type('monotonic')
    assert curve.spline_type == 'monotonic'
    assert curve.interpolant().spline_type == 'monotonic'
    with pytest.raises(ValueError):
        curve.set_spline_type('cubic')
    assert curve.spline_type == 'monotonic'
    with pytest.raises(ValueError):
        sampler.CurveSampler(curve.points, 'linear')


def test_values_at_matches_value_at():
    curve = make_sampler(THREE_POINTS)
    xs = numpy.array([[0.1, 0.35], [0.5, 0.9]])
    values = curve.values_at(xs, 100, 100)
    assert values.shape == (2, 2)
    for x, value in zip(xs.ravel(), values.ravel()):
        assert value == curve.value_at(x, 100, 100)
    assert numpy.isnan(make_sampler([]).values_at([0.2, 0.4], 100, 100)).all()
