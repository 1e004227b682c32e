"""Development entrypoint for running the sample pages locally.

Usage:
- FLASK_APP=dv360_samples.main:app flask run --reload
- python -m dv360_samples.main
"""

from __future__ import annotations

import logging

from dv360_samples import create_app
from dv360_samples.config import Config

logging.basicConfig(level=Config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = create_app()

if __name__ == "__main__":
    # Simple built-in server for quick smoke testing
    app.run(host="127.0.0.1", port=5000, debug=True)
