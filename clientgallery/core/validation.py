"""Construction-time validation helpers for commands and queries.

Commands and queries validate themselves in ``__post_init__`` so that an
invalid message can never reach a handler. These helpers raise
``ValueError`` with a message naming the offending field.

Usage:
    from clientgallery.core.validation import require_positive_id, require_text

    @dataclass(frozen=True, kw_only=True)
    class DeleteGallery:
        gallery_id: int

        def __post_init__(self) -> None:
            require_positive_id(self.gallery_id, "gallery_id")
"""

MAX_PAGE_SIZE = 500


def require_positive_id(value: int, field_name: str) -> None:
    """Require a positive integer identifier.

    Raises:
        ValueError: If value is not an int greater than zero.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{field_name} must be a positive integer")


def require_text(value: str, field_name: str, max_length: int = 255) -> str:
    """Require non-blank text within ``max_length`` and return it trimmed.

    Raises:
        ValueError: If value is blank or too long.
    """
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(f"{field_name} cannot be empty")
    if len(cleaned) > max_length:
        raise ValueError(f"{field_name} cannot exceed {max_length} characters")
    return cleaned


def require_page(limit: int, offset: int) -> None:
    """Validate pagination parameters.

    Raises:
        ValueError: If limit is outside 1..MAX_PAGE_SIZE or offset is negative.
    """
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise ValueError(f"limit must be between 1 and {MAX_PAGE_SIZE}")
    if offset < 0:
        raise ValueError("offset cannot be negative")
