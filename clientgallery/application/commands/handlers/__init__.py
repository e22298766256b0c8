"""Command handlers.

Usage:
    from clientgallery.application.commands.handlers import CreateGalleryHandler
"""

from clientgallery.application.commands.handlers.add_image_handler import AddImageHandler
from clientgallery.application.commands.handlers.arrange_images_handler import (
    ReorderImagesHandler,
    SetFeaturedImageHandler,
)
from clientgallery.application.commands.handlers.create_client_handler import (
    CreateClientHandler,
)
from clientgallery.application.commands.handlers.create_gallery_handler import (
    CreateGalleryHandler,
)
from clientgallery.application.commands.handlers.delete_client_handler import (
    DeleteClientHandler,
)
from clientgallery.application.commands.handlers.delete_gallery_handler import (
    DeleteGalleryHandler,
)
from clientgallery.application.commands.handlers.gallery_status_handlers import (
    ArchiveGalleryHandler,
    PublishGalleryHandler,
    UnpublishGalleryHandler,
)
from clientgallery.application.commands.handlers.rate_image_handler import (
    RateImageHandler,
)
from clientgallery.application.commands.handlers.remove_image_handler import (
    RemoveImageHandler,
)
from clientgallery.application.commands.handlers.update_client_handler import (
    ChangeClientStatusHandler,
    RegenerateAccessKeyHandler,
    UpdateClientHandler,
)
from clientgallery.application.commands.handlers.update_gallery_handler import (
    UpdateGalleryHandler,
)

__all__ = [
    "AddImageHandler",
    "ArchiveGalleryHandler",
    "ChangeClientStatusHandler",
    "CreateClientHandler",
    "CreateGalleryHandler",
    "DeleteClientHandler",
    "DeleteGalleryHandler",
    "PublishGalleryHandler",
    "RateImageHandler",
    "RegenerateAccessKeyHandler",
    "RemoveImageHandler",
    "ReorderImagesHandler",
    "SetFeaturedImageHandler",
    "UnpublishGalleryHandler",
    "UpdateClientHandler",
    "UpdateGalleryHandler",
]
