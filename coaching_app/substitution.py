from .convert import normalize_name

MAX_ALTERNATIVES = 10


def _field(entry, name):
    return normalize_name(entry.get(name))


def _same(entry, source, fields):
    return all(_field(entry, f) and _field(entry, f) == _field(source, f) for f in fields)


# Each tier narrows on the primary muscle group and category, then on
# progressively fewer extra attributes.
TIERS = [
    ("primaryMuscleGroup", "muscleRegion", "category"),
    ("primaryMuscleGroup", "movementPattern", "category"),
    ("primaryMuscleGroup", "category"),
]


def find_alternatives(catalog, exercise_name: str, limit: int = MAX_ALTERNATIVES):
    """
    Rank substitutes for `exercise_name`.

    The entry's own declared alternatives come first, then catalog entries
    that share more and more loosely matching attributes. Returns an empty
    list when the exercise is not in the catalog.
    """
    limit = min(limit, MAX_ALTERNATIVES)
    source = catalog.lookup(exercise_name)
    if source is None:
        return []

    seen = {normalize_name(source.get("name")), normalize_name(exercise_name)}
    results = []

    def collect(entry):
        key = normalize_name(entry.get("name"))
        if not key or key in seen or len(results) >= limit:
            return
        seen.add(key)
        results.append(entry)

    for alt_name in source.get("alternatives") or []:
        entry = catalog.lookup(alt_name)
        if entry is not None:
            collect(entry)

    for fields in TIERS:
        for entry in catalog.all():
            if _same(entry, source, fields):
                collect(entry)

    return results
