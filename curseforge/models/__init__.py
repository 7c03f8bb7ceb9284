"""Data models for CurseForge records, envelopes and request parameters.

Architecture:
    This module exports all Pydantic v2 models used throughout the library.
    Records are immutable (frozen=True) and derive from ``CurseForgeModel``,
    which applies the active compatibility mode during validation.

Design Decisions:
    - Pydantic v2: Type validation, camelCase aliasing and serialization
    - Frozen models: Decoded records are handed to callers as-is
    - Compatibility mode via validation context: one class per shape,
      decodable under any mode

Model Categories:
    - Envelopes: DataResponse, PaginatedDataResponse, Pagination
    - Games: Game, GameAssets, GameVersions, GameVersionType
    - Catalog: Category, Project, ProjectLinks, ProjectAuthor, ProjectAsset,
      FeaturedProjects
    - Files: ProjectFile, FileIndex, FileHash, SortableGameVersion,
      FileDependency, FileModule
    - Requests: GamesParams, CategoriesParams, SearchParams,
      ProjectFilesParams, FeaturedProjectsBody
"""

from .base import (
    CurseForgeModel,
    NullableDateTime,
    NullableString,
    compatibility_of,
    decode_context,
    tolerant_enum,
)
from .categories import Category
from .core import Pagination
from .files import (
    FileDependency,
    FileHash,
    FileIndex,
    FileModule,
    ProjectFile,
    SortableGameVersion,
)
from .games import Game, GameAssets, GameVersions, GameVersionType
from .params import (
    CategoriesParams,
    FeaturedProjectsBody,
    GamesParams,
    PaginatedParams,
    ProjectFilesParams,
    RequestParams,
    SearchParams,
)
from .projects import FeaturedProjects, Project, ProjectAsset, ProjectAuthor, ProjectLinks
from .response import DataResponse, PaginatedDataResponse

__all__ = [
    "CurseForgeModel",
    "NullableDateTime",
    "NullableString",
    "compatibility_of",
    "decode_context",
    "tolerant_enum",
    "Category",
    "Pagination",
    "DataResponse",
    "PaginatedDataResponse",
    "Game",
    "GameAssets",
    "GameVersions",
    "GameVersionType",
    "Project",
    "ProjectLinks",
    "ProjectAuthor",
    "ProjectAsset",
    "FeaturedProjects",
    "ProjectFile",
    "FileIndex",
    "FileHash",
    "SortableGameVersion",
    "FileDependency",
    "FileModule",
    "RequestParams",
    "PaginatedParams",
    "GamesParams",
    "CategoriesParams",
    "SearchParams",
    "ProjectFilesParams",
    "FeaturedProjectsBody",
]
