"""Tests for the HTTP and WebSocket surface."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from trademax.container import Container
from trademax.presentation.api.routes import init_routes, register_exception_handlers, router
from trademax.shared.config.settings import Settings


@pytest.fixture
def container():
    return Container(settings=Settings(random_seed=2024, symbols=["GOOG", "TSLA", "BTC"]))


@pytest.fixture
def client(container):
    """App wired like main.py, without starting the clock."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router)
    init_routes(
        container.ws_manager,
        container.market_state,
        container.market_clock,
        container.chart_usecase,
        container.subscriptions,
    )
    with TestClient(app) as test_client:
        yield test_client


class TestStatusEndpoints:
    """Tests for health, status and instruments."""

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "trademax"}

    def test_status(self, client):
        data = client.get("/api/status").json()

        assert set(data["market_state"]) == {"GOOG", "TSLA", "BTC"}
        assert data["market_clock"]["running"] is False
        assert data["ws_clients"] == 0

    def test_instruments(self, client):
        instruments = client.get("/api/instruments").json()["instruments"]

        assert [i["symbol"] for i in instruments] == ["GOOG", "TSLA", "BTC"]
        assert instruments[2]["price"] == 64200.0
        assert instruments[0]["change_pct"] == 0.0


class TestChartEndpoints:
    """Tests for candles, SMA, chart frame and hover."""

    def test_candles_after_ticks(self, client, container):
        for _ in range(3):
            container.simulate_tick.execute()

        data = client.get("/api/candles/GOOG").json()

        assert data["count"] == 43
        assert data["candles"][-1]["sequence_id"] == 42

    def test_unknown_symbol_is_404(self, client):
        response = client.get("/api/candles/XYZ")

        assert response.status_code == 404
        assert response.json()["error"] == "UNKNOWN_INSTRUMENT"

    def test_sma_default_and_custom_period(self, client):
        assert client.get("/api/sma/GOOG").json()["count"] == 20
        data = client.get("/api/sma/GOOG", params={"period": 35}).json()

        assert data["period"] == 35
        assert data["count"] == 5
        assert data["points"][0]["index"] == 35

    def test_sma_invalid_period_is_400(self, client):
        response = client.get("/api/sma/GOOG", params={"period": 0})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_chart_frame(self, client):
        data = client.get("/api/chart/TSLA", params={"width": 600, "height": 280}).json()

        assert data["symbol"] == "TSLA"
        assert data["geometry"]["candle_count"] == 40
        assert data["geometry"]["plot_width"] == 530
        assert len(data["candles"]) == 40
        assert len(data["grid"]) == 6

    def test_chart_negative_size_is_400(self, client):
        response = client.get("/api/chart/TSLA", params={"width": -10, "height": 280})

        assert response.status_code == 400

    def test_hover_hit_and_miss(self, client):
        # slot_width = 530 / 40, primer centro en 10 + 6.625
        hit = client.get("/api/chart/GOOG/hover", params={"x": 16.625}).json()
        miss = client.get("/api/chart/GOOG/hover", params={"x": 5}).json()

        assert hit["hit"] is True
        assert hit["selection"]["index"] == 0
        assert hit["selection"]["sma"] is None
        assert miss == {"symbol": "GOOG", "hit": False, "selection": None}

    @pytest.mark.parametrize("x", ["inf", "-inf", "nan"])
    def test_hover_non_finite_pointer_is_a_miss(self, client, x):
        response = client.get("/api/chart/GOOG/hover", params={"x": x})

        assert response.status_code == 200
        assert response.json() == {"symbol": "GOOG", "hit": False, "selection": None}

    @pytest.mark.parametrize("params", [{"width": "inf"}, {"height": "nan"}])
    def test_chart_non_finite_size_is_400(self, client, params):
        response = client.get("/api/chart/GOOG", params=params)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestSubscriptionEndpoints:
    """Tests for the displayed-instrument list."""

    def test_subscribe_toggle_unsubscribe(self, client):
        assert client.get("/api/subscriptions").json() == {"symbols": []}

        client.post("/api/subscriptions", json={"symbol": "BTC"})
        data = client.post("/api/subscriptions", json={"symbol": "GOOG"}).json()
        assert data == {"symbols": ["BTC", "GOOG"]}

        data = client.post("/api/subscriptions", json={"symbol": "BTC", "toggle": True}).json()
        assert data == {"symbols": ["GOOG"]}

        data = client.delete("/api/subscriptions/GOOG").json()
        assert data == {"symbols": []}

    def test_subscribe_unknown_is_404(self, client):
        response = client.post("/api/subscriptions", json={"symbol": "XYZ"})

        assert response.status_code == 404

    def test_subscribe_empty_symbol_is_422(self, client):
        response = client.post("/api/subscriptions", json={"symbol": ""})

        assert response.status_code == 422


class TestMarketWebSocket:
    """Tests for the streaming endpoint lifecycle."""

    def test_connect_and_disconnect(self, client, container):
        with client.websocket_connect("/ws/market") as websocket:
            websocket.send_text("hello")
            assert container.ws_manager.client_count == 1

        assert container.ws_manager.client_count == 0
