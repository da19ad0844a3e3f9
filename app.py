#!/usr/bin/env python3
import os

from flask import Flask, jsonify, request

from coaching_app import coaching_bp
from coach_core import BASE_DIR, log_action


def create_app(config=None):
    app = Flask(__name__)

    # ───────────── Config ─────────────
    app.config["SECRET_KEY"] = os.environ.get("FLASK_SECRET_KEY", "change-me-to-something-random")
    app.config["DATA_DIR"] = os.environ.get("COACH_DATA_DIR") or os.path.join(BASE_DIR, "coaching_app", "data")

    # Wearable sync bridge; leave the base empty to disable it
    app.config["HEALTH_METRICS_BASE"] = os.environ.get("HEALTH_METRICS_BASE", "")
    app.config["HEALTH_METRICS_TIMEOUT"] = float(os.environ.get("HEALTH_METRICS_TIMEOUT", "1.5"))

    if config:
        app.config.update(config)

    app.register_blueprint(coaching_bp, url_prefix="/training")

    @app.route("/log-action", methods=["POST"])
    def log_action_endpoint():
        """Endpoint for client JS to log user actions (e.g. screen views)."""
        data = request.get_json(force=True, silent=True) or {}

        action = data.get("action", "unknown_action")
        details = {
            "target": data.get("target"),
            "extra": data.get("extra"),
        }

        log_action(action, details)
        return jsonify({"status": "ok"})

    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8000, debug=True)
