"""Gallery domain errors.

Error value constants returned by Gallery state transitions.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from clientgallery.domain.errors import GalleryError

    match gallery.publish():
        case Failure(error=GalleryError.CANNOT_PUBLISH_ARCHIVED):
            ...
"""


class GalleryError:
    """Gallery error constants.

    Error Categories:
        - Transition errors: ALREADY_*, CANNOT_PUBLISH_*
        - Editing errors: NOT_EDITABLE
        - Validation messages raised from __post_init__: *_REQUIRED, *_TOO_LONG
    """

    # State transition errors
    ALREADY_PUBLISHED = "Gallery is already published"
    ALREADY_DRAFT = "Gallery is already a draft"
    ALREADY_ARCHIVED = "Gallery is already archived"
    CANNOT_PUBLISH_ARCHIVED = "Archived gallery must be restored to draft before publishing"
    PUBLISH_REQUIREMENTS_NOT_MET = "Gallery does not meet publish requirements"

    # Editing errors
    NOT_EDITABLE = "Gallery cannot be edited in its current status"

    # Validation errors
    NAME_REQUIRED = "Gallery name is required"
    NAME_TOO_LONG = "Gallery name cannot exceed 255 characters"
    CLIENT_REQUIRED = "Gallery must belong to a client"
    NEGATIVE_IMAGE_COUNT = "Image count cannot be negative"
