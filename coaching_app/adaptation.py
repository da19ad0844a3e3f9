from datetime import datetime

from coach_core import log_action

from .convert import key_text, normalize_name, to_float, to_int
from .programs import program_shape
from .errors import StorageError
from .storage import PLANS_KEY


# ───────── exercise resolution ─────────

def find_exercise(exercises, change):
    """First exercise matching the change's id, else its name; None if neither."""
    exercise_id = change.get("exerciseId")
    if exercise_id:
        for ex in exercises:
            if ex.get("id") == exercise_id:
                return ex

    wanted = normalize_name(change.get("exerciseName"))
    if wanted:
        for ex in exercises:
            if ex.get("name") and normalize_name(ex["name"]) == wanted:
                return ex
    return None


def change_targets(shape, change):
    """Every exercise the change applies to, one per exercise list at most."""
    targets = []
    for exercises in shape.exercise_lists():
        ex = find_exercise(exercises, change)
        if ex is not None:
            targets.append(ex)
    return targets


# ───────── field updates ─────────

def _set_weight(ex, new_value):
    ex["weight"] = to_float(new_value, ex.get("weight") or 0)


def _set_sets(ex, new_value):
    current = to_int(ex.get("sets"), 0)
    ex["sets"] = to_int(new_value, current)


def _set_reps(ex, new_value):
    current = ex.get("reps")
    if isinstance(current, str) and "-" in current:
        # A rep range is overwritten by the new target, not reshaped.
        ex["reps"] = key_text(new_value)
    else:
        ex["reps"] = to_int(new_value, current)


def _set_rest_time(ex, new_value):
    ex["restTime"] = to_int(new_value, to_int(ex.get("restTime")) or 60)


FIELD_SETTERS = {
    "weight": _set_weight,
    "sets": _set_sets,
    "reps": _set_reps,
    "restTime": _set_rest_time,
}


def apply_change(plan, change):
    """
    Apply one change to `plan` in place. Returns how many exercise sites
    (or program fields) were updated; 0 means the change was skipped.
    """
    field = change.get("field")
    new_value = change.get("newValue")
    if new_value is None:
        return 0
    shape = program_shape(plan)

    if field in FIELD_SETTERS:
        if not (change.get("exerciseId") or change.get("exerciseName")):
            return 0
        targets = change_targets(shape, change)
        for ex in targets:
            FIELD_SETTERS[field](ex, new_value)
        return len(targets)

    if field == "duration":
        shape.set_duration(to_int(new_value, plan.get("duration")))
        return 1

    if field == "frequency":
        plan["daysPerWeek"] = to_int(new_value, plan.get("daysPerWeek"))
        return 1

    return 0


# ───────── suggestion bookkeeping ─────────

def suggestion_key(suggestion):
    """
    Content key of a suggestion, built from its first change only.

    Suggestion ids change every time the analyzer runs, so suppression of
    already-applied suggestions compares these keys instead.
    """
    changes = suggestion.get("changes") or []
    if not changes:
        return suggestion.get("id")
    first = changes[0]
    target = first.get("exerciseName") or first.get("exerciseId")
    return "-".join([
        key_text(suggestion.get("title")),
        key_text(target),
        key_text(first.get("field")),
        key_text(first.get("oldValue")),
        key_text(first.get("newValue")),
    ])


def implemented_keys(plan):
    return {suggestion_key(s) for s in plan.get("implementedSuggestions") or []}


def filter_active_suggestions(suggestions, plan):
    """Drop suggestions whose content was already applied to `plan`."""
    done = implemented_keys(plan)
    return [s for s in suggestions if suggestion_key(s) not in done]


def apply_adaptations(plan, suggestions, now=None):
    """
    Apply `suggestions` to `plan` in one pass and record them as implemented.

    Suggestions whose content is already implemented (or repeated within the
    batch) are left out. Returns the suggestions that were applied.
    """
    now = now or datetime.now()
    done = implemented_keys(plan)
    applied = []
    for suggestion in suggestions:
        key = suggestion_key(suggestion)
        if key in done:
            continue
        done.add(key)
        for change in suggestion.get("changes") or []:
            apply_change(plan, change)
        applied.append(suggestion)

    implemented = plan.setdefault("implementedSuggestions", [])
    for suggestion in applied:
        implemented.append(dict(suggestion, implementedAt=now.isoformat()))
    return applied


# ───────── saved plans ─────────

def apply_to_saved_plan(store, plan_id, suggestions, analyzer=None, now=None):
    """
    Load the saved plan `plan_id`, apply `suggestions`, and save it back.

    Returns (plan, applied, saved); plan is None when no saved plan has
    that id. A failed save is logged and the applied changes are still
    returned with saved set to False. Raises StorageError when the saved
    plans cannot be read.
    """
    try:
        plans = store.load(PLANS_KEY) or []
    except (OSError, ValueError) as e:
        log_action("plans_load_failed", {"plan": plan_id, "error": str(e)})
        raise StorageError("Saved plans could not be read") from e
    index = next((i for i, p in enumerate(plans) if p.get("id") == plan_id), None)
    if index is None:
        log_action("plan_not_found", {"plan": plan_id})
        return None, [], False

    plan = plans[index]
    applied = apply_adaptations(plan, suggestions, now)
    saved = True
    if applied:
        try:
            store.save(PLANS_KEY, plans)
        except OSError as e:
            log_action("plan_save_failed", {"plan": plan_id, "error": str(e)})
            saved = False

    if analyzer is not None:
        for suggestion in applied:
            analyzer.clear(suggestion.get("id"))

    log_action("suggestions_applied", {
        "plan": plan_id,
        "titles": [s.get("title") for s in applied],
        "saved": saved,
    })
    return plan, applied, saved
