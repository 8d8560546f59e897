"""
Gateway: builds the Flask app that serves the event board.
This is the local entrypoint for development.
"""

from flask import Flask, jsonify
from flask_cors import CORS
import logging
from typing import Any, Mapping, Optional

from eventboard.config import load_config
from eventboard.api_client.client import EventsApiClient
from eventboard.events_service.routes import events_bp
from eventboard.events_service.store import EventStore


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Application factory for creating the Flask app.

    Args:
        overrides (Mapping, optional): Config values that replace the ones read
            from the environment. EVENTS_API_SESSION may hold a
            requests.Session-like object for the API client.

    Returns:
        Flask: The configured Flask application.
    """
    app = Flask(__name__)
    app.config.update(load_config())
    if overrides:
        app.config.update(overrides)

    # Basic console logging during requests
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="[%(levelname)s] %(asctime)s - %(message)s",
    )

    CORS(app, resources={
        r"/*": {
            "origins": app.config["CORS_ORIGINS"],
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type"],
        }
    })

    # --- SHARED SERVICES ---
    client = EventsApiClient(
        app.config["EVENTS_API_URL"],
        timeout=app.config["EVENTS_API_TIMEOUT"],
        session=app.config.get("EVENTS_API_SESSION"),
    )
    app.extensions["eventboard"] = {"client": client, "store": EventStore()}

    # --- REGISTER BLUEPRINTS ---
    app.register_blueprint(events_bp)
    logging.info(f"Event board ready, using events API at {client.base_url}")

    # --- BASIC HEALTH CHECKPOINT ---
    @app.route("/health")
    def health():
        """
        Health check endpoint.
        """
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["GATEWAY_PORT"], debug=True)
