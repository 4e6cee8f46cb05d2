from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque identifier for teachers and students."""
    return uuid.uuid4().hex
