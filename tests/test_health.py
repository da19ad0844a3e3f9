from datetime import datetime

import requests

from coaching_app import health
from coaching_app.health import HealthMetricsProvider


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status}")

    def json(self):
        return self.payload


def test_disabled_without_base_url(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("no request expected")

    monkeypatch.setattr(health.requests, "get", fail)
    provider = HealthMetricsProvider("")
    assert provider.get_workout_metrics(datetime.now(), datetime.now()) is None
    assert provider.current_heart_rate() is None


def test_workout_metrics_keeps_known_fields(monkeypatch):
    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen.update(url=url, params=params, timeout=timeout)
        return FakeResponse({"averageHeartRate": 131, "steps": 900, "battery": 40, "distance": None})

    monkeypatch.setattr(health.requests, "get", fake_get)
    provider = HealthMetricsProvider("http://watch.local/", timeout=2)
    start, end = datetime(2024, 1, 1, 9), datetime(2024, 1, 1, 10)

    assert provider.get_workout_metrics(start, end) == {"averageHeartRate": 131, "steps": 900}
    assert seen["url"] == "http://watch.local/workout-metrics"
    assert seen["params"] == {"start": start.isoformat(), "end": end.isoformat()}
    assert seen["timeout"] == 2


def test_network_errors_become_none(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(health.requests, "get", boom)
    provider = HealthMetricsProvider("http://watch.local")
    assert provider.get_workout_metrics(datetime.now(), datetime.now()) is None
    assert provider.current_heart_rate() is None


def test_current_heart_rate(monkeypatch):
    monkeypatch.setattr(health.requests, "get", lambda *a, **k: FakeResponse({"value": 97}))
    assert HealthMetricsProvider("http://watch.local").current_heart_rate() == 97

    monkeypatch.setattr(health.requests, "get", lambda *a, **k: FakeResponse({}, status=503))
    assert HealthMetricsProvider("http://watch.local").current_heart_rate() is None
