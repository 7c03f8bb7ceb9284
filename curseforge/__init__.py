"""CurseForge - Typed async client for the CurseForge Core API."""

from .client import CurseForgeClient
from .config import (
    API_PAGINATION_RESULTS_LIMIT,
    DEFAULT_API_BASE,
    DEFAULT_COMPATIBILITY_MODE,
    DEFAULT_PAGE_SIZE,
)
from .core import (
    CompatibilityMode,
    ConfigurationError,
    CoreApiStatus,
    CoreStatus,
    CurseForgeError,
    DecodeError,
    FetchError,
    FileRelationType,
    FileReleaseType,
    FileStatus,
    HashAlgorithm,
    ModLoaderType,
    ProjectStatus,
    ProtocolViolationError,
    ProtocolViolationWarning,
    ResponseDecodeError,
    SearchSort,
    SortOrder,
    StatusError,
    TransportError,
    ViolationPolicy,
)
from .models import (
    CategoriesParams,
    Category,
    DataResponse,
    FeaturedProjects,
    FeaturedProjectsBody,
    FileDependency,
    FileHash,
    FileIndex,
    FileModule,
    Game,
    GameAssets,
    GamesParams,
    GameVersions,
    GameVersionType,
    PaginatedDataResponse,
    Pagination,
    Project,
    ProjectAsset,
    ProjectAuthor,
    ProjectFile,
    ProjectFilesParams,
    ProjectLinks,
    SearchParams,
    SortableGameVersion,
)
from .runtime import (
    PaginatedStream,
    PaginationDelegate,
    ResponseDecoder,
    RestEndpointSpec,
    RestRunner,
    StreamState,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "CurseForgeClient",
    # Configuration
    "API_PAGINATION_RESULTS_LIMIT",
    "DEFAULT_API_BASE",
    "DEFAULT_COMPATIBILITY_MODE",
    "DEFAULT_PAGE_SIZE",
    "CompatibilityMode",
    "ViolationPolicy",
    # Exceptions
    "CurseForgeError",
    "ConfigurationError",
    "DecodeError",
    "FetchError",
    "TransportError",
    "StatusError",
    "ResponseDecodeError",
    "ProtocolViolationError",
    "ProtocolViolationWarning",
    # Enums
    "CoreStatus",
    "CoreApiStatus",
    "ProjectStatus",
    "FileReleaseType",
    "FileStatus",
    "FileRelationType",
    "HashAlgorithm",
    "ModLoaderType",
    "SearchSort",
    "SortOrder",
    # Models
    "DataResponse",
    "PaginatedDataResponse",
    "Pagination",
    "Game",
    "GameAssets",
    "GameVersions",
    "GameVersionType",
    "Category",
    "Project",
    "ProjectLinks",
    "ProjectAuthor",
    "ProjectAsset",
    "FeaturedProjects",
    "ProjectFile",
    "FileIndex",
    "FileHash",
    "FileDependency",
    "FileModule",
    "SortableGameVersion",
    # Request parameters
    "GamesParams",
    "CategoriesParams",
    "SearchParams",
    "ProjectFilesParams",
    "FeaturedProjectsBody",
    # Runtime
    "ResponseDecoder",
    "RestEndpointSpec",
    "RestRunner",
    "PaginationDelegate",
    "PaginatedStream",
    "StreamState",
]
