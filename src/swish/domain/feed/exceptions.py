"""Feed domain exceptions."""

from uuid import UUID

from swish.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class EmptyContentError(ValidationError):
    """Raised when post or comment content is empty after trimming."""

    def __init__(self, subject: str = "Post") -> None:
        super().__init__(
            message=f"{subject} content is required",
            code=ErrorCode.EMPTY_CONTENT,
            details={"subject": subject.lower()},
        )


class ContentTooLongError(ValidationError):
    """Raised when content exceeds the allowed length."""

    def __init__(self, subject: str, max_length: int, actual_length: int) -> None:
        super().__init__(
            message=f"{subject} content cannot exceed {max_length} characters",
            details={
                "subject": subject.lower(),
                "max_length": max_length,
                "actual_length": actual_length,
            },
        )


class PostNotFoundError(EntityNotFoundError):
    """Raised when a post cannot be found."""

    def __init__(self, post_id: str | UUID) -> None:
        super().__init__(
            message="Post not found",
            code=ErrorCode.POST_NOT_FOUND,
            details={"post_id": str(post_id)},
        )
