"""Image processing states."""

from enum import Enum


class ImageStatus(str, Enum):
    """Lifecycle of an uploaded image file.

    UPLOADED → PROCESSING → READY, or ERROR when processing fails.
    """

    UPLOADED = "uploaded"
    PROCESSING = "processing"
    READY = "ready"
    ERROR = "error"

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings."""
        return [status.value for status in cls]
