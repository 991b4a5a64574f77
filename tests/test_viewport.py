"""Tests for the viewport mapper and the hit-tester."""

import math

import pytest

from trademax.domain.entities.candle import Candle
from trademax.domain.exceptions import ValidationError
from trademax.domain.services.hit_tester import HitTester
from trademax.domain.services.indicator_calculator import IndicatorCalculator
from trademax.domain.services.viewport_mapper import ViewportMapper
from trademax.domain.value_objects.viewport import Padding


@pytest.fixture
def mapper():
    return ViewportMapper(Padding(top=20, bottom=30, left=10, right=60), volume_band_height=50)


class TestViewportMapper:
    """Tests for ViewportMapper.recompute."""

    def test_plot_area_and_slot_width(self, mapper, make_candles):
        candles = make_candles([100.0 + i for i in range(53)])

        geometry = mapper.recompute(600, 280, candles)

        assert geometry.plot_width == 530
        assert geometry.plot_height == 230
        assert geometry.slot_width == pytest.approx(10.0)
        assert geometry.candle_count == 53

    def test_price_domain_has_ten_percent_margin(self, mapper):
        candles = [
            Candle(0, open=100.0, high=110.0, low=100.0, close=105.0, volume=10),
            Candle(1, open=105.0, high=120.0, low=90.0, close=95.0, volume=20),
        ]

        geometry = mapper.recompute(600, 280, candles)

        assert geometry.min_price == pytest.approx(87.0)
        assert geometry.max_price == pytest.approx(123.0)
        assert geometry.max_volume == 20

    def test_price_to_y_preserves_order(self, mapper, make_candles):
        """Test that higher prices map to strictly smaller y."""
        geometry = mapper.recompute(600, 280, make_candles([100.0, 104.0, 97.0, 101.0]))
        prices = [96.0, 97.5, 100.0, 101.25, 104.0, 105.0]

        ys = [geometry.price_to_y(p) for p in prices]

        assert all(a > b for a, b in zip(ys, ys[1:]))

    def test_domain_edges_map_to_plot_edges(self, mapper, make_candles):
        geometry = mapper.recompute(600, 280, make_candles([100.0, 110.0]))

        assert geometry.price_to_y(geometry.max_price) == pytest.approx(20.0)
        assert geometry.price_to_y(geometry.min_price) == pytest.approx(250.0)
        assert geometry.y_to_price(20.0) == pytest.approx(geometry.max_price)

    def test_flat_data_maps_to_mid_line(self, mapper, make_candles):
        """Test that a zero price range never divides by zero."""
        geometry = mapper.recompute(600, 280, make_candles([100.0] * 40, wick=0.0))

        assert geometry.is_flat
        assert geometry.price_to_y(100.0) == geometry.mid_y == pytest.approx(135.0)
        assert geometry.price_to_y(250.0) == geometry.mid_y
        assert geometry.y_to_price(135.0) is None

    def test_empty_history(self, mapper):
        geometry = mapper.recompute(600, 280, [])

        assert geometry.candle_count == 0
        assert geometry.slot_width == 0
        assert geometry.min_price == 0.0
        assert geometry.max_price == 100.0

    def test_zero_max_volume_gives_zero_heights(self, mapper, make_candles):
        geometry = mapper.recompute(600, 280, make_candles([1.0, 2.0, 3.0], volume=0))

        assert geometry.max_volume == 0
        assert geometry.volume_to_height(0) == 0.0

    def test_volume_scaled_to_band(self, mapper, make_candles):
        geometry = mapper.recompute(600, 280, make_candles([1.0, 2.0], volume=4000))

        assert geometry.volume_to_height(4000) == pytest.approx(50.0)
        assert geometry.volume_to_height(1000) == pytest.approx(12.5)

    def test_surface_smaller_than_padding_clamps(self, mapper, make_candles):
        geometry = mapper.recompute(50, 40, make_candles([1.0, 2.0]))

        assert geometry.plot_width == 0
        assert geometry.plot_height == 0
        assert geometry.slot_width == 0

    def test_negative_surface_rejected(self, mapper):
        with pytest.raises(ValidationError):
            mapper.recompute(-1, 280, [])

    @pytest.mark.parametrize("width, height", [(math.inf, 280), (600, math.inf), (math.nan, 280), (600, -math.inf)])
    def test_non_finite_surface_rejected(self, mapper, make_candles, width, height):
        with pytest.raises(ValidationError):
            mapper.recompute(width, height, make_candles([1.0, 2.0]))

    def test_recompute_is_idempotent(self, mapper, make_candles):
        """Test that resizing back to the same size gives identical geometry."""
        candles = make_candles([100.0, 101.0, 99.0])

        first = mapper.recompute(600, 280, candles)
        mapper.recompute(900, 400, candles)
        again = mapper.recompute(600, 280, candles)

        assert first == again


class TestHitTester:
    """Tests for the pointer-to-candle inversion."""

    def test_left_inverse_on_slot_centres(self, mapper, make_candles):
        """Test that every slot centre maps back to its own index."""
        candles = make_candles([100.0 + (i % 7) for i in range(60)])
        geometry = mapper.recompute(600, 280, candles)

        for i in range(len(candles)):
            assert HitTester.index_at(geometry.slot_center(i), geometry) == i
            assert HitTester.hit_test(geometry.slot_center(i), geometry) is candles[i]

    @pytest.mark.parametrize("x", [0.0, 9.9, 540.0, 599.0])
    def test_outside_slots_clears_selection(self, mapper, make_candles, x):
        geometry = mapper.recompute(600, 280, make_candles([100.0 + i for i in range(53)]))

        assert HitTester.hit_test(x, geometry) is None
        assert HitTester.hover(x, geometry) is None

    def test_empty_history_has_no_hit(self, mapper):
        geometry = mapper.recompute(600, 280, [])

        assert HitTester.hit_test(100.0, geometry) is None

    def test_hover_includes_sma_and_crosshair(self, mapper, make_candles):
        candles = make_candles([float(i) for i in range(1, 26)])
        geometry = mapper.recompute(600, 280, candles)
        sma = IndicatorCalculator.sma(candles, 20)

        selection = HitTester.hover(geometry.slot_center(20), geometry, sma)

        assert selection.index == 20
        assert selection.candle is candles[20]
        assert selection.sma == pytest.approx(10.5)
        assert selection.crosshair_x == pytest.approx(geometry.slot_center(20))
        assert selection.crosshair_y == pytest.approx(geometry.price_to_y(candles[20].close))

    def test_hover_without_sma_value(self, mapper, make_candles):
        candles = make_candles([float(i) for i in range(1, 26)])
        geometry = mapper.recompute(600, 280, candles)

        selection = HitTester.hover(
            geometry.slot_center(3), geometry, IndicatorCalculator.sma(candles, 20)
        )

        assert selection.index == 3
        assert selection.sma is None
        assert selection.to_dict()["sma"] is None

    @pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
    def test_non_finite_pointer_clears_selection(self, mapper, make_candles, x):
        geometry = mapper.recompute(600, 280, make_candles([100.0 + i for i in range(53)]))

        assert HitTester.index_at(x, geometry) is None
        assert HitTester.hit_test(x, geometry) is None
        assert HitTester.hover(x, geometry) is None
