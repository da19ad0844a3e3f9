from .errors import ValidationError


class FlatProgram:
    """A saved plan holding a single `exercises` list."""

    def __init__(self, plan):
        self.plan = plan

    def exercise_lists(self):
        exercises = self.plan.get("exercises")
        if isinstance(exercises, list):
            yield exercises

    def set_duration(self, minutes):
        self.plan["duration"] = minutes

    def session_program(self, day=None):
        plan = self.plan
        exercises = plan.get("exercises")
        return {
            "id": plan.get("id"),
            "name": plan.get("name"),
            "description": plan.get("description") or "Custom workout",
            "duration": plan.get("duration") or len(exercises or []) * 5,
            "frequency": plan.get("daysPerWeek") or 1,
            "level": plan.get("level") or "intermediate",
            "exercises": exercises,
        }


class WeeklyProgram:
    """A saved plan split into `weeklyPlan.weekDays`, each with its own exercises."""

    def __init__(self, plan):
        self.plan = plan

    @property
    def days(self):
        return self.plan["weeklyPlan"]["weekDays"]

    def exercise_lists(self):
        for day in self.days:
            exercises = day.get("exercises")
            if isinstance(exercises, list):
                yield exercises

    def set_duration(self, minutes):
        self.plan["duration"] = minutes
        for day in self.days:
            day["duration"] = minutes

    def session_program(self, day=None):
        if day is None:
            if len(self.days) != 1:
                names = [d.get("day") for d in self.days]
                raise ValidationError(f"Choose a training day: {', '.join(str(n) for n in names)}")
            day = 0
        if not isinstance(day, int) or not 0 <= day < len(self.days):
            raise ValidationError("Unknown training day")

        day_plan = self.days[day]
        return {
            "id": f"{self.plan.get('id')}-{day_plan.get('day')}",
            "name": day_plan.get("workoutName"),
            "description": day_plan.get("focus"),
            "duration": day_plan.get("duration"),
            "frequency": 1,
            "level": self.plan.get("level") or "intermediate",
            "exercises": day_plan.get("exercises"),
        }


def program_shape(plan):
    weekly = (plan.get("weeklyPlan") or {}).get("weekDays")
    if isinstance(weekly, list) and weekly:
        return WeeklyProgram(plan)
    return FlatProgram(plan)
