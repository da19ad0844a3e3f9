import os
import json

from coach_core import log_action

from .defaults import DEFAULT_CATALOG, DEFAULT_PLANS, DEFAULT_SETTINGS

HISTORY_KEY = "workoutHistory"
PLANS_KEY = "savedWorkoutPlans"
CATALOG_KEY = "exerciseCatalog"
SETTINGS_KEY = "settings"


def ensure_data_files(data_dir: str) -> str:
    os.makedirs(data_dir, exist_ok=True)

    seeds = {
        CATALOG_KEY: DEFAULT_CATALOG,
        PLANS_KEY: DEFAULT_PLANS,
        HISTORY_KEY: [],
        SETTINGS_KEY: DEFAULT_SETTINGS,
    }
    for key, seed in seeds.items():
        path = key_path(data_dir, key)
        if not os.path.exists(path):
            with open(path, "w") as f:
                json.dump(seed, f, indent=2)

    return data_dir


def key_path(data_dir: str, key: str) -> str:
    return os.path.join(data_dir, f"{key}.json")


def save_json(path: str, data):
    tmp_path = path + ".tmp"
    with open(tmp_path, "w") as f:
        json.dump(data, f, indent=2)
    os.replace(tmp_path, path)


class KeyValueStore:
    """
    String-keyed store with one JSON file per key.

    Callers always read the whole value, change it, and write it back.
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir

    def load(self, key: str):
        """The stored value, or None if the key was never saved.

        Unreadable or corrupt files raise OSError or ValueError.
        """
        path = key_path(self.data_dir, key)
        if not os.path.exists(path):
            return None
        with open(path, "r") as f:
            return json.load(f)

    def save(self, key: str, value):
        save_json(key_path(self.data_dir, key), value)


def load_settings(store: KeyValueStore):
    try:
        data = store.load(SETTINGS_KEY) or {}
    except (OSError, ValueError) as e:
        log_action("settings_load_failed", {"error": str(e)})
        data = {}
    for key, val in DEFAULT_SETTINGS.items():
        data.setdefault(key, val)
    return data


def save_settings(store: KeyValueStore, settings: dict):
    store.save(SETTINGS_KEY, settings)
