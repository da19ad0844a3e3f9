from .convert import normalize_name


class ExerciseCatalog:
    """
    Read-only exercise catalog keyed by normalized name.

    Names are matched case-insensitively with surrounding whitespace ignored,
    so "barbell squat " and "Barbell Squat" resolve to the same entry.
    """

    def __init__(self, entries):
        self._entries = []
        self._by_name = {}
        for entry in entries or []:
            key = normalize_name(entry.get("name"))
            if not key or key in self._by_name:
                continue
            self._by_name[key] = entry
            self._entries.append(entry)

    def lookup(self, name):
        return self._by_name.get(normalize_name(name))

    def all(self):
        return list(self._entries)

