"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the authenticated caller.

    Built from a verified session token, so it only carries the user id.
    Whether that user still exists is up to the use case to find out.
    """

    user_id: UUID

    def __str__(self) -> str:
        return f"UserContext({self.user_id})"
