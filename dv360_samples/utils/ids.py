"""ID helpers for staged uploads.

Provides ``new_id(prefix)``: a time-sortable ID string with the given prefix
(e.g., ``asset_0001695400000-3f2a...``). Not a true ULID but stable and sortable.
"""

from __future__ import annotations

import time
import uuid


def new_id(prefix: str) -> str:
    """Generate a time-sortable unique ID with the given prefix.

    Format: ``{prefix}_{millis}-{uuid16}``
    """
    millis = int(time.time() * 1000)
    rand = uuid.uuid4().hex[:16]
    return f"{prefix}_{millis:013d}-{rand}"
