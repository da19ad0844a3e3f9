import os
import json
from datetime import datetime

from flask import has_request_context, request, session

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_FILE = os.environ.get("COACH_LOG_FILE") or os.path.join(BASE_DIR, "logs.jsonl")


def log_action(action, details=None, username=None):
    """Append a single log entry to logs.jsonl."""
    entry = {
        "timestamp": datetime.now().strftime("%d/%m/%Y %H:%M"),
        "username": username or "anonymous",
        "action": action,
        "ip": None,
        "path": None,
        "details": details or {},
        "user_agent": "",
    }

    if has_request_context():
        entry["username"] = username or session.get("username") or "anonymous"
        entry["ip"] = request.remote_addr
        entry["path"] = request.path
        entry["user_agent"] = request.headers.get("User-Agent", "")

    try:
        with open(LOG_FILE, "a") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError:
        # Don't break the app if logging fails
        pass
