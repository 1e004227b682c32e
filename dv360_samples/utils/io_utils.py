"""IO utilities for staging uploaded files.

Provides:
- ``ensure_dir(path)``: create directories if missing (no error if exists).
- ``safe_filename(name)``: strip directory parts from a client-supplied name.
- ``file_sha1(path)``: compute sha1 digest of a file.
"""

from __future__ import annotations

import hashlib
import os

from werkzeug.utils import secure_filename


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def safe_filename(name: str, default: str = "upload.bin") -> str:
    return secure_filename(name or "") or default


def file_sha1(path: str, chunk_size: int = 1024 * 1024) -> str:
    sha1 = hashlib.sha1()
    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            sha1.update(chunk)
    return sha1.hexdigest()
