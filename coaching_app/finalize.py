import uuid
from datetime import datetime

from coach_core import log_action

from .convert import round_half_up, to_int
from .errors import ValidationError
from .storage import HISTORY_KEY

SURVEY_FIELDS = ("sorenessLevel", "energyLevel", "motivationLevel")


def _duration_minutes(start_iso, end):
    try:
        start = datetime.fromisoformat(start_iso)
    except (TypeError, ValueError):
        return 0
    seconds = (end - start).total_seconds()
    if seconds < 0:
        return 0
    return round_half_up(seconds / 60)


def build_session_record(controller, now=None, session_id=None):
    """
    Turn the controller's state into a workout history record.

    Skipped exercises are kept with no sets. Other exercises keep only their
    completed sets and are dropped when none were completed.
    """
    now = now or datetime.now()
    exercises = []
    for ex in controller.exercises:
        if ex.get("skipped"):
            exercises.append({"exerciseId": ex.get("exerciseId"), "name": ex.get("name"), "sets": []})
            continue
        done = [dict(s) for s in ex["sets"] if s.get("completed")]
        if done:
            exercises.append({"exerciseId": ex.get("exerciseId"), "name": ex.get("name"), "sets": done})

    return {
        "id": session_id or uuid.uuid4().hex,
        "programId": controller.program.get("id"),
        "programName": controller.program.get("name"),
        "date": controller.start_time,
        "duration": _duration_minutes(controller.start_time, now),
        "exercises": exercises,
        "notes": controller.notes,
        "completed": True,
    }


def merge_health_metrics(record, provider, now=None):
    """Attach wearable metrics to `record`. Failures leave it untouched."""
    if provider is None:
        return record
    try:
        start = datetime.fromisoformat(record["date"])
        metrics = provider.get_workout_metrics(start, now or datetime.now())
    except Exception as e:
        log_action("health_metrics_failed", {"session": record.get("id"), "error": str(e)})
        return record
    if metrics:
        record["healthMetrics"] = metrics
    return record


def persist_session(store, record):
    """Prepend `record` to the workout history. Returns False if the save failed."""
    try:
        history = store.load(HISTORY_KEY) or []
    except (OSError, ValueError) as e:
        # never overwrite history that could not be read
        log_action("history_load_failed", {"session": record["id"], "error": str(e)})
        return False
    history = [record] + [s for s in history if s.get("id") != record["id"]]
    try:
        store.save(HISTORY_KEY, history)
    except OSError as e:
        log_action("history_save_failed", {"session": record["id"], "error": str(e)})
        return False
    return True


def finish_session(store, controller, health_provider=None, now=None):
    """
    Finalize the active workout.

    The record is written before the survey is asked, so a crash during the
    survey does not lose the workout. Returns (record, saved).
    """
    if not controller.can_finish():
        raise ValidationError("Complete every set or skip the exercise before finishing")

    now = now or datetime.now()
    record = build_session_record(controller, now)
    merge_health_metrics(record, health_provider, now)
    saved = persist_session(store, record)
    log_action("workout_finished", {
        "session": record["id"],
        "program": record["programId"],
        "duration": record["duration"],
        "saved": saved,
    })
    return record, saved


def parse_survey(answers):
    scores = {}
    for field in SURVEY_FIELDS:
        value = to_int((answers or {}).get(field))
        if value is None or not 1 <= value <= 5:
            raise ValidationError("Please answer all three questions")
        scores[field] = value
    return scores


def submit_survey(store, record, answers):
    """
    Attach survey scores to a saved session, matched by id.

    A record missing from history is inserted at the front again.
    Returns (updated_record, saved).
    """
    scores = parse_survey(answers)
    try:
        history = store.load(HISTORY_KEY) or []
    except (OSError, ValueError) as e:
        log_action("history_load_failed", {"session": record.get("id"), "error": str(e)})
        return dict(record, **scores), False

    updated = None
    for past in history:
        if past.get("id") == record.get("id"):
            past.update(scores)
            updated = past
            break

    if updated is None:
        updated = dict(record, **scores)
        history.insert(0, updated)
        log_action("survey_session_reinserted", {"session": record.get("id")})

    try:
        store.save(HISTORY_KEY, history)
    except OSError as e:
        log_action("history_save_failed", {"session": record.get("id"), "error": str(e)})
        return updated, False
    return updated, True
