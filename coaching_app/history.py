from .convert import normalize_name


def find_previous_session(history, program_id=None, program_name=None):
    """
    Return the most recent session for a program, or None.

    `history` is newest first. A match on program id wins over a match on
    program name; the name only helps when the program id changed.
    """
    history = history or []
    if program_id:
        for past in history:
            if past.get("programId") == program_id:
                return past
    if program_name:
        wanted = normalize_name(program_name)
        for past in history:
            if normalize_name(past.get("programName")) == wanted:
                return past
    return None


def find_session_exercise(past_session, name=None, exercise_id=None):
    wanted = normalize_name(name)
    for entry in (past_session or {}).get("exercises") or []:
        if wanted and normalize_name(entry.get("name")) == wanted:
            return entry
        if exercise_id and entry.get("exerciseId") == exercise_id:
            return entry
    return None


def previous_sets(past_session, name=None, exercise_id=None):
    """Completed sets from `past_session` for one exercise, keyed by setNumber."""
    entry = find_session_exercise(past_session, name, exercise_id)
    if entry is None:
        return {}
    result = {}
    for s in entry.get("sets") or []:
        if s.get("completed") is True:
            result[int(s.get("setNumber", len(result) + 1))] = {
                "weight": s.get("weight"),
                "reps": s.get("reps"),
            }
    return result


def previous_sets_for_program(history, program):
    """One {setNumber: {weight, reps}} mapping per program exercise, in order."""
    past = find_previous_session(history, program.get("id"), program.get("name"))
    return [
        previous_sets(past, ex.get("name"), ex.get("id"))
        for ex in program.get("exercises") or []
    ]


def filter_history(history, program_id=None):
    if not program_id:
        return list(history or [])
    return [s for s in history or [] if s.get("programId") == program_id]
