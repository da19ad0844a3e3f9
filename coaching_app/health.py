import requests

DEFAULT_TIMEOUT = 1.5

METRIC_FIELDS = (
    "averageHeartRate",
    "maxHeartRate",
    "minHeartRate",
    "caloriesBurned",
    "steps",
    "distance",
    "heartRateZones",
)


class HealthMetricsProvider:
    """
    Bridge to a wearable sync service.

    Every call is best effort: an unset base URL, a network error or a bad
    payload all come back as None.
    """

    def __init__(self, base_url="", timeout=DEFAULT_TIMEOUT):
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = timeout

    @property
    def enabled(self):
        return bool(self.base_url)

    def _get(self, path, params=None):
        r = requests.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_workout_metrics(self, start, end):
        if not self.enabled:
            return None
        try:
            payload = self._get("/workout-metrics", {"start": start.isoformat(), "end": end.isoformat()})
        except (requests.RequestException, ValueError):
            return None
        if not isinstance(payload, dict):
            return None
        metrics = {k: payload[k] for k in METRIC_FIELDS if payload.get(k) is not None}
        return metrics or None

    def current_heart_rate(self):
        if not self.enabled:
            return None
        try:
            payload = self._get("/heart-rate")
        except (requests.RequestException, ValueError):
            return None
        if isinstance(payload, dict):
            return payload.get("value")
        return None
