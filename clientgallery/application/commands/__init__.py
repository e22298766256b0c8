"""Application commands (CQRS write side).

Usage:
    from clientgallery.application.commands import CreateGallery, PublishGallery
"""

from clientgallery.application.commands.client_commands import (
    ChangeClientStatus,
    CreateClient,
    DeleteClient,
    RegenerateAccessKey,
    UpdateClient,
)
from clientgallery.application.commands.gallery_commands import (
    ArchiveGallery,
    CreateGallery,
    DeleteGallery,
    PublishGallery,
    UnpublishGallery,
    UpdateGallery,
)
from clientgallery.application.commands.image_commands import (
    AddImage,
    RateImage,
    RemoveImage,
    ReorderImages,
    SetFeaturedImage,
)

__all__ = [
    "AddImage",
    "ArchiveGallery",
    "ChangeClientStatus",
    "CreateClient",
    "CreateGallery",
    "DeleteClient",
    "DeleteGallery",
    "PublishGallery",
    "RateImage",
    "RegenerateAccessKey",
    "RemoveImage",
    "ReorderImages",
    "SetFeaturedImage",
    "UnpublishGallery",
    "UpdateClient",
    "UpdateGallery",
]
