import uuid

from .convert import normalize_name, to_float, to_int
from .programs import program_shape

MAX_REST_TIME = 180


def _latest_entry(history, name):
    """Most recent (session, exercise entry) pair that logged `name`."""
    wanted = normalize_name(name)
    for past in history or []:
        for entry in past.get("exercises") or []:
            if normalize_name(entry.get("name")) == wanted:
                return past, entry
    return None, None


def _hit_every_set(entry, exercise):
    planned_sets = to_int(exercise.get("sets"), 0)
    target_reps = to_int(exercise.get("reps"), 0)
    done = [s for s in entry.get("sets") or [] if s.get("completed")]
    if not done or len(done) < planned_sets:
        return False
    return all(to_int(s.get("reps"), 0) >= target_reps for s in done)


class ProgressionAnalyzer:
    """
    Proposes simple progressive-overload changes from workout history.

    Every call to `analyze` issues fresh ids and replaces the cached
    results for that program. `clear` drops a single cached suggestion.
    """

    def __init__(self, weight_increment=5, rest_increment=30):
        self.weight_increment = weight_increment
        self.rest_increment = rest_increment
        # program id -> {suggestion id: suggestion}
        self._cache = {}

    def analyze(self, history, program):
        suggestions = []
        seen = set()
        for exercises in program_shape(program).exercise_lists():
            for exercise in exercises:
                name = exercise.get("name")
                if not name or normalize_name(name) in seen:
                    continue
                seen.add(normalize_name(name))
                past, entry = _latest_entry(history, name)
                if entry is None:
                    continue
                suggestions.extend(self._for_exercise(exercise, past, entry))

        self._cache[program.get("id")] = {s["id"]: s for s in suggestions}
        return suggestions

    def _for_exercise(self, exercise, past, entry):
        found = []
        weight = to_float(exercise.get("weight"))
        if weight and _hit_every_set(entry, exercise):
            new_weight = weight + self.weight_increment
            found.append(self._suggestion(
                "Increase Weight",
                f"Add {self.weight_increment} lbs to {exercise['name']}",
                "All planned sets were completed at the target reps last time.",
                "medium", 80,
                {"field": "weight", "exerciseId": exercise.get("id"), "exerciseName": exercise["name"],
                 "oldValue": weight, "newValue": new_weight},
            ))

        rest = to_int(exercise.get("restTime"), 60)
        if to_int(past.get("sorenessLevel"), 0) >= 4 and rest < MAX_REST_TIME:
            found.append(self._suggestion(
                "Extend Rest",
                f"Rest {self.rest_increment}s longer between sets of {exercise['name']}",
                "Soreness was high after the last session.",
                "low", 60,
                {"field": "restTime", "exerciseId": exercise.get("id"), "exerciseName": exercise["name"],
                 "oldValue": rest, "newValue": min(rest + self.rest_increment, MAX_REST_TIME)},
            ))
        return found

    @staticmethod
    def _suggestion(title, description, reason, priority, confidence, change):
        return {
            "id": uuid.uuid4().hex,
            "title": title,
            "description": description,
            "reason": reason,
            "priority": priority,
            "confidence": confidence,
            "changes": [change],
        }

    def get(self, adaptation_id):
        for cached in self._cache.values():
            if adaptation_id in cached:
                return cached[adaptation_id]
        return None

    def clear(self, adaptation_id):
        for cached in self._cache.values():
            cached.pop(adaptation_id, None)

    def cached_count(self):
        return sum(len(cached) for cached in self._cache.values())
