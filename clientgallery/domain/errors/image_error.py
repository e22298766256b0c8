"""Image and rating domain error constants."""


class ImageError:
    """Image validation messages (raised as ValueError on construction)."""

    GALLERY_REQUIRED = "Image must belong to a gallery"
    FILENAME_REQUIRED = "Image filename is required"
    INVALID_FILE_SIZE = "Image file size must be positive"
    INVALID_MIME_TYPE = "Image MIME type must start with 'image/'"
    INVALID_DIMENSIONS = "Image width and height must be positive"


class RatingError:
    """Rating validation messages (raised as ValueError on construction)."""

    IMAGE_REQUIRED = "Rating must reference an image"
    CLIENT_REQUIRED = "Rating must reference a client"
    INVALID_SCORE = "Rating score must be between 1 and 10"
