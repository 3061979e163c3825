from typing import Optional
from uuid import UUID

from swish.domain.shared.exceptions import ValidationError


def ensure_acting_user(acting_user_id: UUID, claimed_user_id: Optional[UUID]) -> None:
    """Reject a request body that names a different user than the token."""
    if claimed_user_id is not None and claimed_user_id != acting_user_id:
        msg = "user_id does not match the authenticated user"
        raise ValidationError(msg, details={"field": "user_id"})
