"""Tests for the drawable chart primitives."""

import pytest

from trademax.domain.entities.candle import Candle
from trademax.domain.services.chart_layout import ChartLayout
from trademax.domain.services.indicator_calculator import IndicatorCalculator
from trademax.domain.services.viewport_mapper import ViewportMapper


@pytest.fixture
def geometry(make_candles):
    candles = make_candles([100.0 + (i % 5) for i in range(53)], volume=2000)
    return ViewportMapper().recompute(600, 280, candles)


class TestCandleShapes:
    """Tests for wick and body rectangles."""

    def test_one_shape_per_candle(self, geometry):
        shapes = ChartLayout.candle_shapes(geometry)

        assert len(shapes) == geometry.candle_count
        assert [s.sequence_id for s in shapes] == [c.sequence_id for c in geometry.candles]

    def test_wick_centred_and_body_inset(self, geometry):
        shape = ChartLayout.candle_shapes(geometry)[4]

        assert shape.wick_x == pytest.approx(geometry.slot_center(4))
        assert shape.body_x == pytest.approx(geometry.slot_left(4) + 1.0)
        assert shape.body_width == pytest.approx(geometry.slot_width - 2.0)
        assert shape.wick_top <= shape.body_y
        assert shape.body_y + shape.body_height <= shape.wick_bottom + 1.0

    def test_flat_candle_body_has_minimum_height(self):
        candle = Candle(0, open=10.0, high=11.0, low=9.0, close=10.0, volume=1)
        geometry = ViewportMapper().recompute(600, 280, [candle])

        shape = ChartLayout.candle_shapes(geometry)[0]

        assert shape.body_height == 1.0

    def test_narrow_slots_keep_minimum_body_width(self, make_candles):
        geometry = ViewportMapper().recompute(80, 280, make_candles([1.0, 2.0, 3.0, 4.0]))

        shapes = ChartLayout.candle_shapes(geometry)

        assert all(s.body_width == 1.0 for s in shapes)


class TestVolumeBars:
    """Tests for bars anchored at the plot bottom."""

    def test_bars_anchored_at_baseline(self, geometry):
        baseline = geometry.padding.top + geometry.plot_height

        for bar in ChartLayout.volume_bars(geometry):
            assert bar.y + bar.height == pytest.approx(baseline)
            assert bar.height == pytest.approx(geometry.volume_band_height)

    def test_zero_volume_gives_flat_bars(self, make_candles):
        geometry = ViewportMapper().recompute(600, 280, make_candles([1.0, 2.0], volume=0))

        assert all(bar.height == 0.0 for bar in ChartLayout.volume_bars(geometry))


class TestGridAndSma:
    """Tests for grid lines and the SMA polyline."""

    def test_grid_spans_domain_top_to_bottom(self, geometry):
        lines = ChartLayout.grid_lines(geometry, steps=5)

        assert len(lines) == 6
        assert lines[0].y == pytest.approx(geometry.padding.top)
        assert lines[-1].y == pytest.approx(geometry.padding.top + geometry.plot_height)
        assert lines[0].price == pytest.approx(geometry.max_price)
        assert lines[-1].price == pytest.approx(geometry.min_price)
        assert lines[0].x_end == geometry.width - geometry.padding.right
        assert lines[0].label.startswith("$")

    def test_sma_path_follows_slot_centres(self, geometry):
        points = list(IndicatorCalculator.sma(geometry.candles, 20))

        path = ChartLayout.sma_path(geometry, points)

        assert len(path) == len(points) == geometry.candle_count - 20
        x, y = path[0]
        assert x == pytest.approx(geometry.slot_center(20))
        assert y == pytest.approx(geometry.price_to_y(points[0].value))
