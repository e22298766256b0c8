"""CQRS Registry Compliance Tests.

Self-enforcing tests that fail if the registry is incomplete or
inconsistent with the command/query modules.

Test categories:
1. Completeness - every message class is registered
2. Handler compliance - handlers are classes with handle()
3. Wiring - every handler dependency can be resolved by the container
4. Statistics - registry counts
"""

import inspect
from dataclasses import is_dataclass

import pytest

from clientgallery.application import commands, queries
from clientgallery.application.cqrs import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    CQRSCategory,
    get_all_commands,
    get_all_queries,
    get_command_metadata,
    get_commands_by_category,
    get_handler_dependencies,
    get_queries_by_category,
    get_query_metadata,
    get_statistics,
    validate_registry_consistency,
)
from clientgallery.application.commands import CreateGallery, PublishGallery
from clientgallery.application.commands.handlers import CreateGalleryHandler
from clientgallery.application.queries import ListGalleries
from clientgallery.core.container.handler_factory import (
    REPOSITORY_TYPES,
    analyze_handler_dependencies,
)


def _exported_dataclasses(module) -> set[type]:
    return {
        getattr(module, name)
        for name in module.__all__
        if inspect.isclass(getattr(module, name)) and is_dataclass(getattr(module, name))
    }


@pytest.mark.unit
class TestRegistryCompleteness:
    def test_every_command_is_registered(self):
        missing = _exported_dataclasses(commands) - set(get_all_commands())
        assert not missing, f"Unregistered commands: {missing}"

    def test_every_query_is_registered(self):
        missing = _exported_dataclasses(queries) - set(get_all_queries())
        assert not missing, f"Unregistered queries: {missing}"

    def test_registry_is_consistent(self):
        assert validate_registry_consistency() == []

    def test_statistics(self):
        stats = get_statistics()

        assert stats["total_commands"] == len(COMMAND_REGISTRY) == 16
        assert stats["total_queries"] == len(QUERY_REGISTRY) == 10
        assert stats["total_operations"] == 26
        assert stats["operations_by_category"] == {
            "gallery": 10,
            "client": 8,
            "image": 5,
            "rating": 3,
        }
        assert stats["paginated_queries"] == 3


@pytest.mark.unit
class TestHandlerCompliance:
    def test_handlers_are_classes_with_async_handle(self):
        for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]:
            assert isinstance(meta.handler_class, type)
            assert inspect.iscoroutinefunction(meta.handler_class.handle), (
                f"{meta.handler_class.__name__}.handle is not async"
            )

    def test_messages_are_frozen_keyword_only_dataclasses(self):
        for message_class in [*get_all_commands(), *get_all_queries()]:
            params = message_class.__dataclass_params__
            assert params.frozen, f"{message_class.__name__} is not frozen"
            assert all(
                field.kw_only for field in message_class.__dataclass_fields__.values()
            ), f"{message_class.__name__} is not keyword-only"

    def test_every_dependency_is_resolvable(self):
        for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]:
            for name, type_name in analyze_handler_dependencies(meta.handler_class).items():
                assert type_name in REPOSITORY_TYPES or type_name == "LoggerProtocol", (
                    f"{meta.handler_class.__name__}.{name}: {type_name}"
                )

    def test_handler_dependencies(self):
        assert get_handler_dependencies(CreateGalleryHandler) == [
            "gallery_repo",
            "client_repo",
            "logger",
        ]


@pytest.mark.unit
class TestComputedViews:
    def test_metadata_lookup(self):
        meta = get_command_metadata(CreateGallery)

        assert meta is not None
        assert meta.handler_class is CreateGalleryHandler
        assert meta.has_result_dto
        assert get_command_metadata(ListGalleries) is None

    def test_paginated_queries(self):
        meta = get_query_metadata(ListGalleries)

        assert meta is not None
        assert meta.is_paginated

    def test_by_category(self):
        gallery_commands = {m.command_class for m in get_commands_by_category(CQRSCategory.GALLERY)}

        assert PublishGallery in gallery_commands
        assert all(
            m.category == CQRSCategory.RATING
            for m in get_queries_by_category(CQRSCategory.RATING)
        )
