"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    issued_at
        When the token was signed
    exp
        Token expiration timestamp
    """

    user_id: UUID
    issued_at: datetime
    exp: datetime
