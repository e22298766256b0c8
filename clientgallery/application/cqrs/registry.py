"""CQRS Registry - Single Source of Truth for Commands and Queries.

Catalogs every command and query with its handler. Used for:
- Container wiring (buses are built from these lists)
- Validation tests (verify no drift between messages and handlers)

Adding new commands/queries:
1. Define the dataclass in the appropriate *_commands.py/*_queries.py file
2. Create the handler class
3. Add an entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Run tests - they'll tell you what's missing
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
from clientgallery.application.commands.handlers import (
    AddImageHandler,
    ArchiveGalleryHandler,
    ChangeClientStatusHandler,
    CreateClientHandler,
    CreateGalleryHandler,
    DeleteClientHandler,
    DeleteGalleryHandler,
    PublishGalleryHandler,
    RateImageHandler,
    RegenerateAccessKeyHandler,
    RemoveImageHandler,
    ReorderImagesHandler,
    SetFeaturedImageHandler,
    UnpublishGalleryHandler,
    UpdateClientHandler,
    UpdateGalleryHandler,
)
from clientgallery.application.commands.image_commands import (
    AddImage,
    RateImage,
    RemoveImage,
    ReorderImages,
    SetFeaturedImage,
)
from clientgallery.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from clientgallery.application.dtos import (
    ClientResult,
    CreatedClient,
    GalleryResult,
    ImageResult,
    RatingResult,
)
from clientgallery.application.queries.client_queries import (
    GetClient,
    GetClientByAccessKey,
    ListClients,
)
from clientgallery.application.queries.gallery_queries import (
    GetGallery,
    GetGalleryBySlug,
    GetGalleryStatistics,
    ListGalleries,
)
from clientgallery.application.queries.handlers import (
    GetClientByAccessKeyHandler,
    GetClientHandler,
    GetGalleryBySlugHandler,
    GetGalleryHandler,
    GetGalleryRatingSummaryHandler,
    GetGalleryStatisticsHandler,
    ListClientsHandler,
    ListGalleriesHandler,
    ListGalleryImagesHandler,
    ListImageRatingsHandler,
)
from clientgallery.application.queries.image_queries import (
    GetGalleryRatingSummary,
    ListGalleryImages,
    ListImageRatings,
)

# ═══════════════════════════════════════════════════════════════════════════
# Command Registry
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    # Gallery
    CommandMetadata(
        command_class=CreateGallery,
        handler_class=CreateGalleryHandler,
        category=CQRSCategory.GALLERY,
        result_dto_class=GalleryResult,
        description="Create a draft gallery with a unique slug",
    ),
    CommandMetadata(
        command_class=UpdateGallery,
        handler_class=UpdateGalleryHandler,
        category=CQRSCategory.GALLERY,
        result_dto_class=GalleryResult,
        description="Edit name, slug, description or settings",
    ),
    CommandMetadata(
        command_class=DeleteGallery,
        handler_class=DeleteGalleryHandler,
        category=CQRSCategory.GALLERY,
        description="Delete a gallery with its images and ratings",
    ),
    CommandMetadata(
        command_class=PublishGallery,
        handler_class=PublishGalleryHandler,
        category=CQRSCategory.GALLERY,
        result_dto_class=GalleryResult,
        description="Make a draft gallery visible to its client",
    ),
    CommandMetadata(
        command_class=UnpublishGallery,
        handler_class=UnpublishGalleryHandler,
        category=CQRSCategory.GALLERY,
        result_dto_class=GalleryResult,
        description="Return a gallery to draft",
    ),
    CommandMetadata(
        command_class=ArchiveGallery,
        handler_class=ArchiveGalleryHandler,
        category=CQRSCategory.GALLERY,
        result_dto_class=GalleryResult,
        description="Freeze a gallery",
    ),
    # Client
    CommandMetadata(
        command_class=CreateClient,
        handler_class=CreateClientHandler,
        category=CQRSCategory.CLIENT,
        result_dto_class=CreatedClient,
        description="Register a client and issue its access key",
    ),
    CommandMetadata(
        command_class=UpdateClient,
        handler_class=UpdateClientHandler,
        category=CQRSCategory.CLIENT,
        result_dto_class=ClientResult,
        description="Edit client contact details",
    ),
    CommandMetadata(
        command_class=ChangeClientStatus,
        handler_class=ChangeClientStatusHandler,
        category=CQRSCategory.CLIENT,
        result_dto_class=ClientResult,
        description="Activate, deactivate or block a client",
    ),
    CommandMetadata(
        command_class=DeleteClient,
        handler_class=DeleteClientHandler,
        category=CQRSCategory.CLIENT,
        description="Delete a client without galleries",
    ),
    CommandMetadata(
        command_class=RegenerateAccessKey,
        handler_class=RegenerateAccessKeyHandler,
        category=CQRSCategory.CLIENT,
        result_dto_class=CreatedClient,
        description="Replace a client's access key",
    ),
    # Image
    CommandMetadata(
        command_class=AddImage,
        handler_class=AddImageHandler,
        category=CQRSCategory.IMAGE,
        result_dto_class=ImageResult,
        description="Append an uploaded image to a gallery",
    ),
    CommandMetadata(
        command_class=RemoveImage,
        handler_class=RemoveImageHandler,
        category=CQRSCategory.IMAGE,
        description="Delete an image and its ratings",
    ),
    CommandMetadata(
        command_class=SetFeaturedImage,
        handler_class=SetFeaturedImageHandler,
        category=CQRSCategory.IMAGE,
        result_dto_class=ImageResult,
        description="Choose a gallery's cover image",
    ),
    CommandMetadata(
        command_class=ReorderImages,
        handler_class=ReorderImagesHandler,
        category=CQRSCategory.IMAGE,
        result_dto_class=ImageResult,
        description="Set the display order of a gallery's images",
    ),
    # Rating
    CommandMetadata(
        command_class=RateImage,
        handler_class=RateImageHandler,
        category=CQRSCategory.RATING,
        result_dto_class=RatingResult,
        description="Record or revise a client's verdict on an image",
    ),
]

# ═══════════════════════════════════════════════════════════════════════════
# Query Registry
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    # Gallery
    QueryMetadata(
        query_class=GetGallery,
        handler_class=GetGalleryHandler,
        category=CQRSCategory.GALLERY,
        description="Fetch a gallery by ID",
    ),
    QueryMetadata(
        query_class=GetGalleryBySlug,
        handler_class=GetGalleryBySlugHandler,
        category=CQRSCategory.GALLERY,
        description="Fetch a gallery by slug",
    ),
    QueryMetadata(
        query_class=ListGalleries,
        handler_class=ListGalleriesHandler,
        category=CQRSCategory.GALLERY,
        is_paginated=True,
        description="List galleries filtered by client and status",
    ),
    QueryMetadata(
        query_class=GetGalleryStatistics,
        handler_class=GetGalleryStatisticsHandler,
        category=CQRSCategory.GALLERY,
        description="Count galleries per status",
    ),
    # Client
    QueryMetadata(
        query_class=GetClient,
        handler_class=GetClientHandler,
        category=CQRSCategory.CLIENT,
        description="Fetch a client by ID",
    ),
    QueryMetadata(
        query_class=GetClientByAccessKey,
        handler_class=GetClientByAccessKeyHandler,
        category=CQRSCategory.CLIENT,
        description="Resolve the client that owns an access key",
    ),
    QueryMetadata(
        query_class=ListClients,
        handler_class=ListClientsHandler,
        category=CQRSCategory.CLIENT,
        is_paginated=True,
        description="List and search clients",
    ),
    # Image
    QueryMetadata(
        query_class=ListGalleryImages,
        handler_class=ListGalleryImagesHandler,
        category=CQRSCategory.IMAGE,
        is_paginated=True,
        description="List a gallery's images in display order",
    ),
    # Rating
    QueryMetadata(
        query_class=ListImageRatings,
        handler_class=ListImageRatingsHandler,
        category=CQRSCategory.RATING,
        description="List all ratings of an image",
    ),
    QueryMetadata(
        query_class=GetGalleryRatingSummary,
        handler_class=GetGalleryRatingSummaryHandler,
        category=CQRSCategory.RATING,
        description="Rating distribution and average score of a gallery",
    ),
]
