import copy

import pytest

import coach_core
from app import create_app


class MemoryStore:
    """In-memory stand-in for KeyValueStore."""

    def __init__(self, data=None):
        self.data = copy.deepcopy(data or {})
        self.saves = 0

    def load(self, key):
        return copy.deepcopy(self.data.get(key))

    def save(self, key, value):
        self.saves += 1
        self.data[key] = copy.deepcopy(value)


class FailingStore(MemoryStore):
    def save(self, key, value):
        raise OSError("disk full")


class FakeHealth:
    def __init__(self, metrics=None, heart_rate=98):
        self.metrics = metrics if metrics is not None else {"averageHeartRate": 121, "caloriesBurned": 310}
        self.heart_rate = heart_rate
        self.calls = []

    def get_workout_metrics(self, start, end):
        self.calls.append((start, end))
        return self.metrics

    def current_heart_rate(self):
        return self.heart_rate


class BrokenHealth:
    def get_workout_metrics(self, start, end):
        raise RuntimeError("watch disconnected")


@pytest.fixture(autouse=True)
def log_file(tmp_path, monkeypatch):
    path = tmp_path / "logs.jsonl"
    monkeypatch.setattr(coach_core, "LOG_FILE", str(path))
    return path


@pytest.fixture
def push_program():
    return {
        "id": "push-day",
        "name": "Push Day",
        "exercises": [
            {"id": "bench", "name": "Barbell Bench Press", "sets": 2, "reps": 8, "weight": 100,
             "restTime": 90, "category": "strength"},
            {"id": "fly", "name": "Cable Fly", "sets": 2, "reps": 12, "weight": 30,
             "restTime": 60, "category": "strength"},
            {"id": "ohp", "name": "Overhead Press", "sets": "3-5", "reps": "6-8",
             "restTime": 120, "category": "strength"},
        ],
    }


@pytest.fixture
def app(tmp_path):
    app = create_app({"TESTING": True, "DATA_DIR": str(tmp_path / "data")})
    app.extensions["health_provider"] = FakeHealth()
    return app


@pytest.fixture
def client(app):
    return app.test_client()
