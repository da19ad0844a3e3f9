from coaching_app.catalog import ExerciseCatalog
from coaching_app.defaults import DEFAULT_CATALOG
from coaching_app.substitution import find_alternatives


def _names(entries):
    return [e["name"] for e in entries]


def _entry(name, group, region, pattern, category="strength", alternatives=()):
    return {
        "id": name.lower().replace(" ", "-"),
        "name": name,
        "primaryMuscleGroup": group,
        "muscleRegion": region,
        "movementPattern": pattern,
        "category": category,
        "alternatives": list(alternatives),
    }


def test_bench_press_alternatives_in_tier_order():
    catalog = ExerciseCatalog(DEFAULT_CATALOG)
    names = _names(find_alternatives(catalog, "Barbell Bench Press"))

    assert names == [
        # declared alternatives
        "Dumbbell Bench Press",
        "Push-ups",
        "Machine Chest Press",
        # same muscle group, region and category
        "Cable Fly",
        "Dumbbell Fly",
        # same muscle group and category only
        "Incline Dumbbell Press",
        "Incline Barbell Press",
    ]
    assert "Barbell Bench Press" not in names
    assert len(names) == len(set(names))


def test_lookup_is_case_insensitive():
    catalog = ExerciseCatalog(DEFAULT_CATALOG)
    names = _names(find_alternatives(catalog, "  barbell bench PRESS "))
    assert names[0] == "Dumbbell Bench Press"
    assert "Barbell Bench Press" not in names


def test_unknown_exercise_has_no_alternatives():
    catalog = ExerciseCatalog(DEFAULT_CATALOG)
    assert find_alternatives(catalog, "Underwater Basket Weaving") == []


def test_limit_caps_results():
    catalog = ExerciseCatalog(DEFAULT_CATALOG)
    assert len(find_alternatives(catalog, "Barbell Bench Press", limit=3)) == 3


def test_tiers_narrow_before_widening():
    catalog = ExerciseCatalog([
        _entry("Source", "Back", "upper", "pull", alternatives=["Missing Move"]),
        _entry("Same Pattern", "Back", "lower", "pull"),
        _entry("Same Region", "Back", "upper", "push"),
        _entry("Group Only", "back", "lower", "hinge"),
        _entry("Other Category", "Back", "upper", "pull", category="cardio"),
        _entry("Other Group", "Legs", "upper", "pull"),
    ])
    names = _names(find_alternatives(catalog, "Source"))
    assert names == ["Same Region", "Same Pattern", "Group Only"]


def test_limit_never_exceeds_ten():
    entries = [_entry("Back Squat", "quadriceps", "thigh", "squat")]
    entries += [_entry(f"Squat Variant {i}", "quadriceps", "thigh", "squat") for i in range(15)]
    catalog = ExerciseCatalog(entries)

    assert len(find_alternatives(catalog, "Back Squat", limit=50)) == 10
    assert len(find_alternatives(catalog, "Back Squat", limit=3)) == 3
