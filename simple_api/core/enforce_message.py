"""Message Content Enforcement — validates content before it reaches the store.

Invariants:
    - check_content_valid is PURE: returns the content unchanged or raises
    - None (absent on the wire) is rejected; the empty string is accepted
    - Length is measured in characters (code points), not bytes
    - Content is never stripped or normalized
"""

from simple_api.core.domain_types import MAX_CONTENT_LENGTH
from simple_api.core.errors import ContentValidationError


def check_content_valid(content: str | None) -> str:
    """Return content if it may be stored, else raise ContentValidationError."""
    if content is None:
        raise ContentValidationError("Content cannot be null")

    if len(content) > MAX_CONTENT_LENGTH:
        raise ContentValidationError(
            f"Content must not exceed {MAX_CONTENT_LENGTH} characters "
            f"(got {len(content)})",
        )

    return content
