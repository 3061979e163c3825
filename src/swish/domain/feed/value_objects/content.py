"""Text content rules shared by posts and comments."""

from swish.domain.feed.exceptions import ContentTooLongError, EmptyContentError

POST_CONTENT_MAX_LENGTH = 2000
COMMENT_CONTENT_MAX_LENGTH = 1000


def normalize_content(raw: str | None, subject: str, max_length: int) -> str:
    """Trim content and enforce the non-empty and length rules.

    Raises
    ------
    EmptyContentError
        If nothing is left after trimming
    ContentTooLongError
        If the trimmed text is longer than ``max_length``
    """
    content = (raw or "").strip()
    if not content:
        raise EmptyContentError(subject)
    if len(content) > max_length:
        raise ContentTooLongError(subject, max_length, len(content))
    return content
