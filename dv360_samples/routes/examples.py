"""Sample routes: GET / and GET|POST /?action=<name>

Without ``action`` the index page lists every registered sample and needs
no API client. With ``action`` the matching sample is built around the
shared API client, created on first use, and driven by ``ExampleRunner``: it either renders its input form or runs.
Exceptions raised while running are logged and shown as an error block.
"""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, Response, current_app, request
from markupsafe import escape

from dv360_samples.examples import EXAMPLES, ExampleRunner, RequestContext, get_example_class
from dv360_samples.services.api_service import build_service
from dv360_samples.utils.html import render_index, render_page

examples_bp = Blueprint("examples", __name__)


def _html(body: str, title: str, status: int = 200) -> Response:
    return Response(render_page(title, body), status=status, mimetype="text/html")


def get_service() -> Any:
    """Return the app's API client, building it on first use."""
    service = current_app.extensions.get("dv360_service")
    if service is None:
        service = build_service()
        current_app.extensions["dv360_service"] = service
    return service


@examples_bp.route("/", methods=["GET", "POST"])
def index():
    action = request.args.get("action")
    if not action:
        names = [(key, cls.get_name()) for key, cls in EXAMPLES.items()]
        return _html(render_index(names), "Samples")

    cls = get_example_class(action)
    if cls is None:
        return _html(f"<p>Unknown sample: {escape(action)}</p>", "Not found", 404)

    try:
        service = get_service()
    except RuntimeError as e:
        logging.error(f"API client unavailable: {e}")
        return _html(f'<p class="error">{escape(e)}</p>', cls.get_name(), 500)

    example = cls(service)
    runner = ExampleRunner(example)
    ctx = RequestContext.from_request(request)
    try:
        body = runner.execute(ctx)
    except Exception as e:
        logging.exception("Sample %s failed", action)
        body = runner.render_error(e, ctx)
    return _html(body, example.get_name())
