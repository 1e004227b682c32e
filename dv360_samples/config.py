"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the API client settings, the data
paths used to stage uploaded creative assets, and upload limits.
This keeps the rest of the codebase decoupled from direct env access.
Values may also come from a `.env` file, loaded before the class body runs.
"""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

# .env in the working directory; real environment variables take precedence
load_dotenv(find_dotenv(usecwd=True))


class Config:
    # Base
    SAMPLES_ENV = os.getenv("SAMPLES_ENV", "dev")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    DATA_DIR = os.getenv("SAMPLES_DATA_DIR", os.path.abspath(os.path.join(os.getcwd(), "data")))

    # Subdirs
    FILES_DIR = os.path.join(DATA_DIR, "files")

    # Display & Video 360 client
    API_NAME = "displayvideo"
    API_VERSION = os.getenv("DV360_API_VERSION", "v3")
    # Service account key (JSON) used to authenticate the client
    CREDENTIALS_PATH = os.getenv("DV360_CREDENTIALS_PATH", "")
    API_SCOPES = ["https://www.googleapis.com/auth/display-video"]

    # Default page size for list examples
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))

    # Upload limits (Flask rejects bigger request bodies with 413)
    MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "50"))
    MAX_CONTENT_LENGTH = MAX_UPLOAD_MB * 1024 * 1024


def ensure_data_dirs(cfg: Config = Config) -> None:
    """Ensure required data directories exist."""
    for p in [cfg.DATA_DIR, cfg.FILES_DIR]:
        os.makedirs(p, exist_ok=True)
