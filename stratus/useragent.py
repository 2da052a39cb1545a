"""User agent sent with requests made on behalf of a detonation."""

from __future__ import annotations

import uuid

STRATUS_USER_AGENT_PREFIX = "stratus-red-team"


def user_agent_for_uuid(correlation_id: uuid.UUID) -> str:
    """Return the user agent that carries a correlation ID."""
    return f"{STRATUS_USER_AGENT_PREFIX}_{correlation_id}"