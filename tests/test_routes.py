import json
import os


def _post(client, url, payload=None):
    return client.post(url, data=json.dumps(payload or {}), content_type="application/json")


def _finish_all_sets(client, weight=135, reps=5):
    """Complete sets at the cursor until every exercise is done."""
    state = client.get("/training/session").get_json()["session"]
    while not state["canFinish"]:
        body = _post(client, "/training/session/sets/complete", {
            "exercise": state["currentExercise"],
            "set": state["currentSet"],
            "weight": weight,
            "reps": reps,
        }).get_json()
        assert body["ok"], body
        state = body["session"]
    return state


def test_list_plans_seeds_defaults(client):
    body = client.get("/training/plans").get_json()
    assert [p["id"] for p in body["plans"]] == ["stronglifts-5x5", "upper-lower"]


def test_start_unknown_plan(client):
    resp = _post(client, "/training/plans/missing/start")
    assert resp.status_code == 404
    assert resp.get_json()["ok"] is False


def test_weekly_plan_needs_a_day(client):
    resp = _post(client, "/training/plans/upper-lower/start")
    assert resp.status_code == 400
    assert "Monday" in resp.get_json()["message"]

    body = _post(client, "/training/plans/upper-lower/start", {"day": 2}).get_json()
    assert body["session"]["program"]["id"] == "upper-lower-Thursday"
    assert body["session"]["program"]["name"] == "Lower B"


def test_no_active_session(client):
    assert client.get("/training/session").status_code == 404
    assert _post(client, "/training/session/advance").status_code == 404


def test_complete_set_validation(client):
    _post(client, "/training/plans/stronglifts-5x5/start")
    resp = _post(client, "/training/session/sets/complete", {"exercise": 0, "set": 0, "reps": 5})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Please enter weight and reps"


def test_advance_blocked_until_sets_done(client):
    _post(client, "/training/plans/stronglifts-5x5/start")
    resp = _post(client, "/training/session/advance")
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Complete All Sets"


def test_full_workout_with_survey(client, app):
    _post(client, "/training/plans/stronglifts-5x5/start")
    _post(client, "/training/session/notes", {"notes": " grind "})

    resp = _post(client, "/training/session/finish")
    assert resp.status_code == 400

    state = _finish_all_sets(client)
    assert state["completionRate"] == 100

    body = _post(client, "/training/session/finish").get_json()
    assert body["saved"] is True
    record = body["record"]
    assert record["notes"] == "grind"
    assert record["healthMetrics"]["averageHeartRate"] == 121
    assert len(record["exercises"]) == 3
    assert client.get("/training/session").status_code == 404

    resp = _post(client, "/training/session/survey", {"sorenessLevel": 3})
    assert resp.status_code == 400

    survey = {"sorenessLevel": 3, "energyLevel": 4, "motivationLevel": 5}
    body = _post(client, "/training/session/survey", survey).get_json()
    assert body["record"]["energyLevel"] == 4

    history = client.get("/training/history?programId=stronglifts-5x5").get_json()["history"]
    assert [s["id"] for s in history] == [record["id"]]
    assert history[0]["motivationLevel"] == 5


def test_last_time_hints_on_next_start(client):
    _post(client, "/training/plans/stronglifts-5x5/start")
    _finish_all_sets(client, weight=140, reps=5)
    _post(client, "/training/session/finish")

    body = _post(client, "/training/plans/stronglifts-5x5/start").get_json()
    assert body["session"]["lastTime"][0]["1"] == {"weight": 140, "reps": 5}


def test_skip_and_finish(client):
    _post(client, "/training/plans/stronglifts-5x5/start")
    for i in range(3):
        body = _post(client, "/training/session/skip", {"exercise": i}).get_json()
    assert body["session"]["canFinish"] is True
    assert body["session"]["completionRate"] == 0

    record = _post(client, "/training/session/finish").get_json()["record"]
    assert all(e["sets"] == [] for e in record["exercises"])


def test_alternatives_and_substitution(client):
    _post(client, "/training/plans/stronglifts-5x5/start")
    body = client.get("/training/session/alternatives?exercise=0").get_json()
    names = [e["name"] for e in body["alternatives"]]
    assert names[:3] == ["Goblet Squat", "Leg Press", "Front Squat"]
    assert "Barbell Squat" not in names

    body = _post(client, "/training/session/substitute", {"exercise": 0, "name": "goblet squat"}).get_json()
    session = body["session"]
    assert session["exercises"][0]["name"] == "Goblet Squat"
    assert session["program"]["exercises"][0]["name"] == "Goblet Squat"

    resp = _post(client, "/training/session/substitute", {"exercise": 0, "name": "Moon Walk"})
    assert resp.status_code == 404


def test_set_add_remove_and_edit(client):
    _post(client, "/training/plans/stronglifts-5x5/start")
    _post(client, "/training/session/sets/complete", {"exercise": 0, "set": 0, "weight": 135, "reps": 5})
    body = _post(client, "/training/session/sets/edit", {"exercise": 0, "set": 0}).get_json()
    assert body["session"]["exercises"][0]["sets"][0]["completed"] is False

    body = _post(client, "/training/session/sets/remove", {"exercise": 0, "set": 1}).get_json()
    assert [s["setNumber"] for s in body["session"]["exercises"][0]["sets"]] == [1, 2, 3, 4]
    body = _post(client, "/training/session/sets/add", {"exercise": 0}).get_json()
    assert len(body["session"]["exercises"][0]["sets"]) == 5

    body = _post(client, "/training/session/navigate", {"exercise": 2}).get_json()
    assert body["session"]["currentExercise"] == 2


def test_heart_rate_poll(client):
    _post(client, "/training/plans/stronglifts-5x5/start")
    assert client.get("/training/session/heart-rate").get_json()["heartRate"] == 98


def test_suggestions_apply_and_filter(client):
    _post(client, "/training/plans/stronglifts-5x5/start")
    _finish_all_sets(client, weight=135, reps=5)
    _post(client, "/training/session/finish")

    suggestions = client.get("/training/plans/stronglifts-5x5/suggestions").get_json()["suggestions"]
    squat = next(s for s in suggestions if s["changes"][0]["exerciseName"] == "Barbell Squat")
    assert squat["changes"][0]["newValue"] == 140

    body = _post(client, f"/training/plans/stronglifts-5x5/suggestions/{squat['id']}/apply").get_json()
    assert body["plan"]["exercises"][0]["weight"] == 140
    assert len(body["plan"]["implementedSuggestions"]) == 1

    # applied ids are cleared from the analyzer
    resp = _post(client, f"/training/plans/stronglifts-5x5/suggestions/{squat['id']}/apply")
    assert resp.status_code == 404

    body = client.get("/training/plans/stronglifts-5x5/suggestions").get_json()
    assert [s["title"] for s in body["implemented"]] == ["Increase Weight"]
    assert all(
        s["changes"][0] != squat["changes"][0]
        for s in body["suggestions"]
    )


def test_apply_all(client):
    _post(client, "/training/plans/stronglifts-5x5/start")
    _finish_all_sets(client, weight=135, reps=5)
    _post(client, "/training/session/finish")

    body = _post(client, "/training/plans/stronglifts-5x5/suggestions/apply-all").get_json()
    assert len(body["applied"]) == 3
    weights = [ex["weight"] for ex in body["plan"]["exercises"]]
    assert weights == [140, 120, 100]
    assert len(body["plan"]["implementedSuggestions"]) == 3


def test_settings_update(client):
    body = _post(client, "/training/settings", {"weight_increment": 10}).get_json()
    assert body["settings"]["weight_increment"] == 10
    assert _post(client, "/training/settings", {"weight_increment": -1}).status_code == 400


def test_log_action_endpoint(client, log_file):
    resp = _post(client, "/log-action", {"action": "screen_view", "target": "plans"})
    assert resp.get_json() == {"status": "ok"}
    entry = json.loads(log_file.read_text().splitlines()[-1])
    assert entry["action"] == "screen_view"
    assert entry["path"] == "/log-action"


def _write_data(app, key, value):
    os.makedirs(app.config["DATA_DIR"], exist_ok=True)
    path = os.path.join(app.config["DATA_DIR"], f"{key}.json")
    with open(path, "w") as f:
        f.write(value if isinstance(value, str) else json.dumps(value))
    return path


def test_alternatives_capped_at_ten(client, app):
    squat = {"name": "Barbell Squat", "primaryMuscleGroup": "quadriceps", "category": "strength"}
    variants = [dict(squat, name=f"Squat Variant {i}") for i in range(15)]
    _write_data(app, "exerciseCatalog", [squat] + variants)

    assert _post(client, "/training/settings", {"max_alternatives": 50}).status_code == 200
    _post(client, "/training/plans/stronglifts-5x5/start")
    body = client.get("/training/session/alternatives?exercise=0").get_json()
    assert len(body["alternatives"]) == 10


def test_default_rest_setting_reaches_session(client):
    _post(client, "/training/settings", {"default_rest_time": 75})
    body = _post(client, "/training/plans/stronglifts-5x5/start").get_json()
    assert body["session"]["defaultRestTime"] == 75


def test_finish_keeps_unreadable_history(client, app):
    _post(client, "/training/plans/stronglifts-5x5/start")
    path = _write_data(app, "workoutHistory", '[{"id": "older"}, {"id"')
    for i in range(3):
        _post(client, "/training/session/skip", {"exercise": i})

    body = _post(client, "/training/session/finish").get_json()

    assert body["saved"] is False
    with open(path) as f:
        assert f.read() == '[{"id": "older"}, {"id"'
    assert client.get("/training/history").status_code == 503


def test_apply_reports_save_status(client):
    _post(client, "/training/plans/stronglifts-5x5/start")
    _finish_all_sets(client, weight=135, reps=5)
    _post(client, "/training/session/finish")

    body = _post(client, "/training/plans/stronglifts-5x5/suggestions/apply-all").get_json()
    assert body["saved"] is True
