"""Unit tests for handler auto-wiring."""

from typing import Optional
from unittest.mock import MagicMock

import pytest

from clientgallery.application.commands.handlers.create_gallery_handler import (
    CreateGalleryHandler,
)
from clientgallery.application.queries.handlers import (
    GetGalleryHandler,
)
from clientgallery.core.container.handler_factory import (
    REPOSITORY_TYPES,
    UnresolvedDependencyError,
    analyze_handler_dependencies,
    create_handler,
    create_repositories,
    get_type_name,
)
from clientgallery.domain.protocols import GalleryRepository, LoggerProtocol
from clientgallery.infrastructure.persistence.repositories import (
    ClientRepository as SqlClientRepository,
    GalleryRepository as SqlGalleryRepository,
)


class NeedsMailer:
    def __init__(self, gallery_repo: GalleryRepository, mailer: "Mailer") -> None:
        self.gallery_repo = gallery_repo
        self.mailer = mailer


class NoDependencies:
    pass


@pytest.mark.unit
class TestGetTypeName:
    def test_class(self):
        assert get_type_name(GalleryRepository) == "GalleryRepository"

    def test_string_forward_reference(self):
        assert get_type_name("repositories.ImageRepository") == "ImageRepository"

    def test_optional_union(self):
        assert get_type_name(LoggerProtocol | None) == "LoggerProtocol"
        assert get_type_name(Optional[GalleryRepository]) == "GalleryRepository"


@pytest.mark.unit
class TestAnalyzeHandlerDependencies:
    def test_handler_signature_order(self):
        deps = analyze_handler_dependencies(CreateGalleryHandler)

        assert deps == {
            "gallery_repo": "GalleryRepository",
            "client_repo": "ClientRepository",
            "logger": "LoggerProtocol",
        }

    def test_unresolvable_forward_reference_falls_back(self):
        deps = analyze_handler_dependencies(NeedsMailer)

        assert deps == {"gallery_repo": "GalleryRepository", "mailer": "Mailer"}

    def test_class_without_init(self):
        assert analyze_handler_dependencies(NoDependencies) == {}


@pytest.mark.unit
class TestCreateHandler:
    def test_wires_repositories_and_logger(self, mock_logger):
        session = MagicMock()

        handler = create_handler(CreateGalleryHandler, session, mock_logger)

        assert isinstance(handler._gallery_repo, SqlGalleryRepository)
        assert isinstance(handler._client_repo, SqlClientRepository)
        assert handler._gallery_repo._session is session
        assert handler._logger is mock_logger

    def test_shared_repositories(self, mock_logger):
        session = MagicMock()
        repositories = create_repositories(session)

        first = create_handler(
            CreateGalleryHandler, session, mock_logger, repositories=repositories
        )
        second = create_handler(
            GetGalleryHandler, session, mock_logger, repositories=repositories
        )

        assert first._gallery_repo is second._gallery_repo
        assert set(repositories) == set(REPOSITORY_TYPES)

    def test_override_by_parameter_name(self, mock_logger):
        fake_repo = MagicMock()

        handler = create_handler(
            CreateGalleryHandler, MagicMock(), mock_logger, gallery_repo=fake_repo
        )

        assert handler._gallery_repo is fake_repo

    def test_override_resolves_unknown_type(self, mock_logger):
        mailer = object()

        handler = create_handler(NeedsMailer, MagicMock(), mock_logger, mailer=mailer)

        assert handler.mailer is mailer

    def test_unknown_dependency_raises(self, mock_logger):
        with pytest.raises(UnresolvedDependencyError, match="mailer: Mailer"):
            create_handler(NeedsMailer, MagicMock(), mock_logger)
