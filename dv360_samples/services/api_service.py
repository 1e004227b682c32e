"""API service factory: builds the Display & Video 360 client.

The samples receive an already-authenticated client object. This module
creates one from a service account key using google-api-python-client and
google-auth; tests inject a fake client through ``create_app(service=...)``.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from dv360_samples.config import Config

try:
    from google.oauth2 import service_account
    from googleapiclient import discovery
except Exception:  # pragma: no cover
    discovery = None  # type: ignore
    service_account = None  # type: ignore


def build_service(cfg: Config = Config) -> Any:
    """Return an authenticated ``displayvideo`` client for ``cfg``."""
    if discovery is None or service_account is None:
        raise RuntimeError("google-api-python-client and google-auth are required.")
    path = cfg.CREDENTIALS_PATH
    if not path or not os.path.exists(path):
        raise RuntimeError("Set DV360_CREDENTIALS_PATH to a service account key file.")

    credentials = service_account.Credentials.from_service_account_file(
        path, scopes=cfg.API_SCOPES
    )
    logging.info(f"Building {cfg.API_NAME} {cfg.API_VERSION} client for {credentials.service_account_email}")
    return discovery.build(
        cfg.API_NAME,
        cfg.API_VERSION,
        credentials=credentials,
        cache_discovery=False,
    )
