"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
enable CORS, and register the sample routes. Minimal setup for local dev.
"""

from __future__ import annotations

from typing import Any, Optional

from flask import Flask
from flask_cors import CORS

from dv360_samples.config import Config, ensure_data_dirs
from dv360_samples.routes.examples import examples_bp


def create_app(service: Optional[Any] = None) -> Flask:
    """Create the app. ``service`` replaces the API client built from config."""
    app = Flask(__name__)
    # Basic config
    app.config.from_object(Config)
    ensure_data_dirs()
    if service is not None:
        app.extensions["dv360_service"] = service
    # Sample pages post multipart forms back to themselves
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        supports_credentials=False,
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "OPTIONS"],
    )

    # Blueprints
    app.register_blueprint(examples_bp)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
