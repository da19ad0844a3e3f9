import os
from flask import current_app, jsonify, request, session

from . import coaching_bp
from .adaptation import apply_to_saved_plan, filter_active_suggestions
from .analyzer import ProgressionAnalyzer
from .catalog import ExerciseCatalog
from .convert import to_int
from .errors import CoachingError, NotFoundError, StorageError, ValidationError
from .finalize import finish_session, submit_survey
from .health import HealthMetricsProvider
from .history import filter_history, find_previous_session, previous_sets, previous_sets_for_program
from .programs import program_shape
from .session import SessionController
from .storage import (
    CATALOG_KEY,
    HISTORY_KEY,
    PLANS_KEY,
    KeyValueStore,
    ensure_data_files,
    load_settings,
    save_settings,
)
from .substitution import find_alternatives

from coach_core import log_action, BASE_DIR

STATE_KEY = "workout_state"
SURVEY_KEY = "pending_survey"


def _store():
    data_dir = current_app.config.get("DATA_DIR") or os.path.join(BASE_DIR, "coaching_app", "data")
    return KeyValueStore(ensure_data_files(data_dir))


def _load(store, key):
    try:
        return store.load(key) or []
    except (OSError, ValueError) as e:
        log_action("store_load_failed", {"key": key, "error": str(e)})
        raise StorageError(f"Stored {key} could not be read") from e


def _analyzer(store):
    analyzer = current_app.extensions.get("progression_analyzer")
    if analyzer is None:
        settings = load_settings(store)
        analyzer = ProgressionAnalyzer(settings["weight_increment"], settings["rest_increment"])
        current_app.extensions["progression_analyzer"] = analyzer
    return analyzer


def _health_provider():
    provider = current_app.extensions.get("health_provider")
    if provider is None:
        provider = HealthMetricsProvider(
            current_app.config.get("HEALTH_METRICS_BASE", ""),
            current_app.config.get("HEALTH_METRICS_TIMEOUT", 1.5),
        )
        current_app.extensions["health_provider"] = provider
    return provider


def _payload():
    return request.get_json(silent=True) or {}


def _index(data, key):
    value = to_int(data.get(key))
    if value is None:
        raise ValidationError(f"Missing '{key}'")
    return value


def _load_controller():
    state = session.get(STATE_KEY)
    if not state:
        raise NotFoundError("No active workout")
    return SessionController.from_dict(state)


def _save_controller(controller):
    session[STATE_KEY] = controller.to_dict()


def _session_response(controller, **extra):
    body = {"ok": True, "session": controller.summary()}
    body.update(extra)
    return jsonify(body)


def _find_plan(plans, plan_id):
    for plan in plans:
        if plan.get("id") == plan_id:
            return plan
    raise NotFoundError("Plan not found")


@coaching_bp.errorhandler(CoachingError)
def handle_coaching_error(e):
    log_action("coaching_error", {"code": e.code, "error": str(e)})
    return jsonify({"ok": False, "error": e.code, "message": str(e)}), e.status_code


# ───────── Plans ─────────

@coaching_bp.route("/plans", methods=["GET"])
def list_plans():
    store = _store()
    plans = _load(store, PLANS_KEY)
    log_action("plans_view")
    return jsonify({"ok": True, "plans": plans})


@coaching_bp.route("/plans/<plan_id>/start", methods=["POST"])
def start_plan(plan_id):
    store = _store()
    plan = _find_plan(_load(store, PLANS_KEY), plan_id)
    data = _payload()
    day = to_int(data.get("day")) if data.get("day") is not None else None

    program = program_shape(plan).session_program(day)
    settings = load_settings(store)
    controller = SessionController.start(program, default_rest=settings["default_rest_time"])

    history = _load(store, HISTORY_KEY)
    for i, sets in enumerate(previous_sets_for_program(history, controller.program)):
        controller.attach_previous_sets(i, sets)

    _save_controller(controller)
    session.pop(SURVEY_KEY, None)
    log_action("workout_started", {"plan": plan_id, "program": controller.program.get("id")})
    return _session_response(controller)


# ───────── Active session ─────────

@coaching_bp.route("/session", methods=["GET"])
def view_session():
    controller = _load_controller()
    settings = load_settings(_store())
    return _session_response(controller, heartRatePollSeconds=settings["heart_rate_poll_seconds"])


@coaching_bp.route("/session/sets/complete", methods=["POST"])
def complete_set():
    data = _payload()
    controller = _load_controller()
    controller.complete_set(_index(data, "exercise"), _index(data, "set"), data.get("weight"), data.get("reps"))
    _save_controller(controller)
    return _session_response(controller)


@coaching_bp.route("/session/sets/edit", methods=["POST"])
def edit_set():
    data = _payload()
    controller = _load_controller()
    controller.edit_set(_index(data, "exercise"), _index(data, "set"))
    _save_controller(controller)
    return _session_response(controller)


@coaching_bp.route("/session/sets/add", methods=["POST"])
def add_set():
    data = _payload()
    controller = _load_controller()
    controller.add_set(_index(data, "exercise"))
    _save_controller(controller)
    return _session_response(controller)


@coaching_bp.route("/session/sets/remove", methods=["POST"])
def remove_set():
    data = _payload()
    controller = _load_controller()
    controller.remove_set(_index(data, "exercise"), _index(data, "set"))
    _save_controller(controller)
    return _session_response(controller)


@coaching_bp.route("/session/advance", methods=["POST"])
def advance_exercise():
    controller = _load_controller()
    moved = controller.advance_exercise()
    _save_controller(controller)
    return _session_response(controller, moved=moved)


@coaching_bp.route("/session/navigate", methods=["POST"])
def navigate_exercise():
    data = _payload()
    controller = _load_controller()
    controller.navigate_to_exercise(_index(data, "exercise"))
    _save_controller(controller)
    return _session_response(controller)


@coaching_bp.route("/session/skip", methods=["POST"])
def skip_exercise():
    data = _payload()
    controller = _load_controller()
    index = _index(data, "exercise")
    controller.skip_exercise(index)
    _save_controller(controller)
    log_action("exercise_skipped", {"exercise": controller.exercises[index]["name"]})
    return _session_response(controller)


@coaching_bp.route("/session/unskip", methods=["POST"])
def unskip_exercise():
    data = _payload()
    controller = _load_controller()
    controller.unskip_exercise(_index(data, "exercise"))
    _save_controller(controller)
    return _session_response(controller)


@coaching_bp.route("/session/alternatives", methods=["GET"])
def session_alternatives():
    controller = _load_controller()
    index = to_int(request.args.get("exercise"), controller.current_exercise)
    if index < 0 or index >= len(controller.exercises):
        raise ValidationError("Unknown exercise")

    store = _store()
    catalog = ExerciseCatalog(_load(store, CATALOG_KEY))
    settings = load_settings(store)
    name = controller.exercises[index]["name"]
    alternatives = find_alternatives(catalog, name, settings["max_alternatives"])
    return jsonify({"ok": True, "exercise": name, "alternatives": alternatives})


@coaching_bp.route("/session/substitute", methods=["POST"])
def substitute_exercise():
    data = _payload()
    controller = _load_controller()
    index = _index(data, "exercise")

    store = _store()
    catalog = ExerciseCatalog(_load(store, CATALOG_KEY))
    entry = catalog.lookup(data.get("name"))
    if entry is None:
        raise NotFoundError("Exercise not in catalog")

    old_name = controller.exercises[index]["name"] if 0 <= index < len(controller.exercises) else None
    controller.substitute(index, entry)

    history = _load(store, HISTORY_KEY)
    past = find_previous_session(history, controller.program.get("id"), controller.program.get("name"))
    controller.attach_previous_sets(index, previous_sets(past, entry.get("name"), entry.get("id")))

    _save_controller(controller)
    log_action("exercise_substituted", {"from": old_name, "to": entry.get("name")})
    return _session_response(controller)


@coaching_bp.route("/session/notes", methods=["POST"])
def session_notes():
    data = _payload()
    controller = _load_controller()
    controller.set_notes((data.get("notes") or "").strip())
    _save_controller(controller)
    return _session_response(controller)


@coaching_bp.route("/session/heart-rate", methods=["GET"])
def session_heart_rate():
    _load_controller()
    return jsonify({"ok": True, "heartRate": _health_provider().current_heart_rate()})


@coaching_bp.route("/session/finish", methods=["POST"])
def finish_workout():
    controller = _load_controller()
    record, saved = finish_session(_store(), controller, _health_provider())
    session.pop(STATE_KEY, None)
    session[SURVEY_KEY] = record
    return jsonify({"ok": True, "saved": saved, "record": record})


@coaching_bp.route("/session/survey", methods=["POST"])
def workout_survey():
    record = session.get(SURVEY_KEY)
    if not record:
        raise NotFoundError("No finished workout awaiting a survey")
    updated, saved = submit_survey(_store(), record, _payload())
    session.pop(SURVEY_KEY, None)
    log_action("workout_survey_submitted", {"session": updated.get("id")})
    return jsonify({"ok": True, "saved": saved, "record": updated})


# ───────── History ─────────

@coaching_bp.route("/history", methods=["GET"])
def workout_history():
    history = _load(_store(), HISTORY_KEY)
    sessions = filter_history(history, request.args.get("programId"))
    log_action("history_view")
    return jsonify({"ok": True, "history": sessions})


# ───────── Adaptations ─────────

@coaching_bp.route("/plans/<plan_id>/suggestions", methods=["GET"])
def plan_suggestions(plan_id):
    store = _store()
    plan = _find_plan(_load(store, PLANS_KEY), plan_id)
    history = _load(store, HISTORY_KEY)
    suggestions = _analyzer(store).analyze(history, plan)
    return jsonify({
        "ok": True,
        "suggestions": filter_active_suggestions(suggestions, plan),
        "implemented": plan.get("implementedSuggestions") or [],
    })


@coaching_bp.route("/plans/<plan_id>/suggestions/<suggestion_id>/apply", methods=["POST"])
def apply_suggestion(plan_id, suggestion_id):
    store = _store()
    analyzer = _analyzer(store)
    suggestion = analyzer.get(suggestion_id)
    if suggestion is None:
        raise NotFoundError("Suggestion not found")

    plan, applied, saved = apply_to_saved_plan(store, plan_id, [suggestion], analyzer)
    if plan is None:
        raise NotFoundError("Plan not found")
    return jsonify({"ok": True, "saved": saved, "applied": applied, "plan": plan})


@coaching_bp.route("/plans/<plan_id>/suggestions/apply-all", methods=["POST"])
def apply_all_suggestions(plan_id):
    store = _store()
    analyzer = _analyzer(store)
    plan = _find_plan(_load(store, PLANS_KEY), plan_id)
    active = filter_active_suggestions(analyzer.analyze(_load(store, HISTORY_KEY), plan), plan)

    plan, applied, saved = apply_to_saved_plan(store, plan_id, active, analyzer)
    return jsonify({"ok": True, "saved": saved, "applied": applied, "plan": plan})


# ───────── Settings ─────────

@coaching_bp.route("/settings", methods=["GET", "POST"])
def coaching_settings():
    store = _store()
    settings = load_settings(store)
    if request.method == "POST":
        data = _payload()
        for key in list(settings):
            if key in data:
                value = to_int(data[key])
                if value is None or value <= 0:
                    raise ValidationError(f"Invalid value for '{key}'")
                settings[key] = value
        save_settings(store, settings)
        current_app.extensions.pop("progression_analyzer", None)
        log_action("settings_updated", settings)
    return jsonify({"ok": True, "settings": settings})
