import copy
from datetime import datetime

from .convert import round_half_up, to_float, to_int
from .errors import InvalidProgramError, ValidationError

DEFAULT_REST_TIME = 60


def _template_sets(exercise, default_rest=DEFAULT_REST_TIME):
    count = max(to_int(exercise.get("sets"), 0), 0)
    reps = to_int(exercise.get("reps"), 0)
    rest = to_int(exercise.get("restTime"), default_rest)
    weight = to_float(exercise.get("weight"), 0) or 0
    return [
        {
            "setNumber": i + 1,
            "reps": reps,
            "weight": weight,
            "restTime": rest,
            "completed": False,
        }
        for i in range(count)
    ]


def _renumber(sets):
    for i, s in enumerate(sets, start=1):
        s["setNumber"] = i


class SessionController:
    """
    Progression state for one active workout.

    `program` is the one owned copy of the program being executed; a
    substitution rewrites its entry in place. `exercises` holds one state
    entry per program exercise, in program order.
    """

    def __init__(self, program, exercises, current_exercise=0, current_set=0,
                 start_time=None, notes="", last_time=None, default_rest=DEFAULT_REST_TIME):
        self.program = program
        self.exercises = exercises
        self.current_exercise = current_exercise
        self.current_set = current_set
        self.start_time = start_time or datetime.now().isoformat()
        self.notes = notes or ""
        self.last_time = last_time or [{} for _ in exercises]
        self.default_rest = default_rest

    # ───────── construction ─────────

    @classmethod
    def start(cls, program, now=None, default_rest=DEFAULT_REST_TIME):
        if not isinstance(program, dict) or not isinstance(program.get("exercises"), list) \
                or not program["exercises"]:
            raise InvalidProgramError("Unable to load workout program")

        program = copy.deepcopy(program)
        exercises = []
        for exercise in program["exercises"]:
            if not isinstance(exercise, dict):
                raise InvalidProgramError("Unable to load workout program")
            exercises.append({
                "exerciseId": exercise.get("id"),
                "name": exercise.get("name"),
                "skipped": False,
                "sets": _template_sets(exercise, default_rest),
            })

        started = (now or datetime.now()).isoformat()
        return cls(program, exercises, start_time=started, default_rest=default_rest)

    @classmethod
    def from_dict(cls, data):
        return cls(
            program=data["program"],
            exercises=data["exercises"],
            current_exercise=data.get("currentExercise", 0),
            current_set=data.get("currentSet", 0),
            start_time=data.get("startTime"),
            notes=data.get("notes", ""),
            last_time=data.get("lastTime"),
            default_rest=data.get("defaultRestTime", DEFAULT_REST_TIME),
        )

    def to_dict(self):
        return {
            "program": self.program,
            "exercises": self.exercises,
            "currentExercise": self.current_exercise,
            "currentSet": self.current_set,
            "startTime": self.start_time,
            "notes": self.notes,
            "lastTime": self.last_time,
            "defaultRestTime": self.default_rest,
        }

    # ───────── helpers ─────────

    def _exercise(self, index):
        if not isinstance(index, int) or index < 0 or index >= len(self.exercises):
            raise ValidationError("Unknown exercise")
        return self.exercises[index]

    def _set(self, exercise_index, set_index):
        sets = self._exercise(exercise_index)["sets"]
        if not isinstance(set_index, int) or set_index < 0 or set_index >= len(sets):
            raise ValidationError("Unknown set")
        return sets[set_index]

    def _reset_sets(self, index):
        template = self.program["exercises"][index]
        fresh = _template_sets(template, self.default_rest)
        for s in fresh:
            s["weight"] = 0
        self.exercises[index]["sets"] = fresh

    def _enter_exercise(self, index):
        self.current_exercise = index
        self.current_set = 0
        # Skipped exercises keep their data so unskip can restore it.
        if not self.exercises[index].get("skipped"):
            self._reset_sets(index)

    @staticmethod
    def _first_incomplete(sets, start=0):
        for i in range(start, len(sets)):
            if not sets[i].get("completed"):
                return i
        return None

    def is_last_exercise(self):
        return self.current_exercise >= len(self.exercises) - 1

    # ───────── actions ─────────

    def complete_set(self, exercise_index, set_index, weight, reps):
        if weight is None or reps is None or str(weight).strip() == "" or str(reps).strip() == "":
            raise ValidationError("Please enter weight and reps")
        weight_value = to_float(weight)
        reps_value = to_int(reps)
        if weight_value is None or reps_value is None:
            raise ValidationError("Please enter weight and reps")

        exercise = self._exercise(exercise_index)
        if exercise.get("skipped"):
            raise ValidationError("Unskip this exercise before logging sets")

        record = self._set(exercise_index, set_index)
        record["weight"] = weight_value
        record["reps"] = reps_value
        record["completed"] = True

        sets = exercise["sets"]
        self.current_exercise = exercise_index
        nxt = self._first_incomplete(sets, set_index + 1)
        if nxt is None:
            nxt = self._first_incomplete(sets)
        if nxt is not None:
            self.current_set = nxt
        elif exercise_index < len(self.exercises) - 1:
            self._enter_exercise(exercise_index + 1)
        else:
            self.current_set = set_index
        return record

    def edit_set(self, exercise_index, set_index):
        record = self._set(exercise_index, set_index)
        record["completed"] = False
        self.current_exercise = exercise_index
        self.current_set = set_index
        return record

    def advance_exercise(self):
        """Move to the next exercise. Returns False on the last exercise."""
        current = self.exercises[self.current_exercise]
        if not current.get("skipped") and not all(s.get("completed") for s in current["sets"]):
            raise ValidationError("Complete All Sets")
        if self.is_last_exercise():
            return False
        self._enter_exercise(self.current_exercise + 1)
        return True

    def navigate_to_exercise(self, index):
        sets = self._exercise(index)["sets"]
        self.current_exercise = index
        first = self._first_incomplete(sets)
        self.current_set = first if first is not None else 0

    def skip_exercise(self, index):
        self._exercise(index)["skipped"] = True

    def unskip_exercise(self, index):
        self._exercise(index)["skipped"] = False

    def add_set(self, exercise_index):
        exercise = self._exercise(exercise_index)
        template = self.program["exercises"][exercise_index]
        sets = exercise["sets"]
        # New sets copy the last one's targets, or the template's when empty
        base = sets[-1] if sets else _template_sets(dict(template, sets=1), self.default_rest)[0]
        sets.append({
            "setNumber": len(sets) + 1,
            "reps": base["reps"],
            "weight": base["weight"],
            "restTime": base["restTime"],
            "completed": False,
        })
        return sets[-1]

    def remove_set(self, exercise_index, set_index):
        self._set(exercise_index, set_index)
        sets = self.exercises[exercise_index]["sets"]
        removed = sets.pop(set_index)
        _renumber(sets)
        if self.current_exercise == exercise_index:
            if set_index < self.current_set:
                self.current_set -= 1
            self.current_set = min(self.current_set, max(len(sets) - 1, 0))
        return removed

    def substitute(self, exercise_index, entry):
        """Swap the exercise at `exercise_index` for a catalog entry, in place."""
        state = self._exercise(exercise_index)
        template = self.program["exercises"][exercise_index]
        template["id"] = entry.get("id") or template.get("id")
        template["name"] = entry.get("name") or template.get("name")
        state["exerciseId"] = template["id"]
        state["name"] = template["name"]
        self.last_time[exercise_index] = {}
        return template

    def set_notes(self, notes):
        self.notes = notes or ""

    def attach_previous_sets(self, index, sets_by_number):
        self.last_time[index] = {str(k): v for k, v in (sets_by_number or {}).items()}

    # ───────── queries ─────────

    def completion_rate(self):
        total = sum(len(ex["sets"]) for ex in self.exercises)
        if total == 0:
            return 0
        done = sum(1 for ex in self.exercises for s in ex["sets"] if s.get("completed"))
        return round_half_up(100 * done / total)

    def can_finish(self):
        return all(
            ex.get("skipped") or all(s.get("completed") for s in ex["sets"])
            for ex in self.exercises
        )

    def exercise_status(self, index):
        ex = self.exercises[index]
        if ex.get("skipped"):
            return "skipped"
        if ex["sets"] and all(s.get("completed") for s in ex["sets"]):
            return "completed"
        if index == self.current_exercise or any(s.get("completed") for s in ex["sets"]):
            return "in_progress"
        return "pending"

    def summary(self):
        data = self.to_dict()
        data["completionRate"] = self.completion_rate()
        data["canFinish"] = self.can_finish()
        data["statuses"] = [self.exercise_status(i) for i in range(len(self.exercises))]
        return data
