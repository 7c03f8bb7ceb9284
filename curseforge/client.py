"""CurseForge Core API client.

Architecture:
    ``CurseForgeClient`` owns the HTTP session (through ``RESTTransport``), a
    ``ResponseDecoder`` configured with one compatibility mode, and a
    ``RestRunner``. Single-value endpoints go through ``RestRunner.run``;
    paginated endpoints are available both page-at-a-time and as
    ``PaginatedStream`` iterators built on one generic delegate.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from yarl import URL

from .config import (
    API_KEY_HEADER,
    API_PAGINATION_RESULTS_LIMIT,
    DEFAULT_API_BASE,
    DEFAULT_COMPATIBILITY_MODE,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
)
from .core.enums import CompatibilityMode, ViolationPolicy
from .core.exceptions import ConfigurationError
from .endpoints import (
    CATEGORIES,
    FEATURED_PROJECTS,
    GAME,
    GAME_VERSION_TYPES,
    GAME_VERSIONS,
    GAMES,
    PROJECT,
    PROJECT_DESCRIPTION,
    PROJECT_FILE,
    PROJECT_FILE_CHANGELOG,
    PROJECT_FILE_DOWNLOAD_URL,
    PROJECT_FILES,
    PROJECT_FILES_BY_IDS,
    PROJECTS,
    SEARCH_PROJECTS,
)
from .models import (
    CategoriesParams,
    Category,
    FeaturedProjects,
    FeaturedProjectsBody,
    Game,
    GamesParams,
    GameVersions,
    GameVersionType,
    PaginatedDataResponse,
    PaginatedParams,
    Project,
    ProjectFile,
    ProjectFilesParams,
    SearchParams,
)
from .runtime.pagination import PaginatedStream, PaginationDelegate
from .runtime.rest import ResponseDecoder, RestEndpointSpec, RestRunner, RESTTransport


def _validate_base_url(base_url: str) -> str:
    try:
        url = URL(base_url)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid base URL: {base_url!r}") from e
    if not url.is_absolute() or url.scheme not in ("http", "https"):
        raise ConfigurationError(f"Base URL must be an absolute http(s) URL: {base_url!r}")
    return str(url).rstrip("/")


class CurseForgeClient:
    """Async client for the CurseForge Core API.

    Example:
        async with CurseForgeClient(token=api_key) as client:
            game = await client.game(432)
            async for project in client.search_projects_iter(SearchParams(game_id=432)):
                ...
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        token: str | None = None,
        *,
        compatibility: CompatibilityMode | str = DEFAULT_COMPATIBILITY_MODE,
        timeout: float = DEFAULT_TIMEOUT,
        violation_policy: ViolationPolicy | None = None,
        results_limit: int = API_PAGINATION_RESULTS_LIMIT,
    ) -> None:
        """Initialize client.

        Args:
            base_url: API host, or a proxy exposing the same paths
            token: API key; required by the official host, not by most proxies
            compatibility: How unknown fields and enum variants are decoded
            timeout: Total timeout per request in seconds
            violation_policy: Reaction to inconsistent pagination descriptors
                (default depends on ``compatibility``)
            results_limit: Cap on records retrievable by one paginated query
        """
        headers = dict(DEFAULT_HEADERS)
        if token:
            headers[API_KEY_HEADER] = token

        self.base_url = _validate_base_url(base_url)
        self.results_limit = results_limit
        self._violation_policy = violation_policy
        self._transport = RESTTransport(self.base_url, timeout=timeout, headers=headers)
        self._decoder = ResponseDecoder(compatibility)
        self._runner = RestRunner(self._transport, self._decoder)

    @property
    def compatibility(self) -> CompatibilityMode:
        return self._decoder.mode

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> CurseForgeClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # --- pagination helpers -------------------------------------------------

    def paginate(
        self,
        spec: RestEndpointSpec,
        params: dict[str, Any] | None = None,
        *,
        offset: int | None = None,
        page_size: int | None = None,
    ) -> PaginatedStream[Any]:
        """Build a stream over any paginated endpoint spec."""
        delegate: PaginationDelegate[Any] = PaginationDelegate(
            self._runner,
            spec,
            params,
            offset=offset,
            page_size=page_size,
            limit=self.results_limit,
            violation_policy=self._violation_policy,
        )
        return PaginatedStream(delegate)

    async def _page(
        self, spec: RestEndpointSpec, fixed: dict[str, Any], params: PaginatedParams
    ) -> PaginatedDataResponse[Any]:
        return await self._runner.fetch_page(
            spec=spec,
            params=fixed,
            offset=params.index or 0,
            page_size=params.page_size,
        )

    def _stream(
        self, spec: RestEndpointSpec, fixed: dict[str, Any], params: PaginatedParams
    ) -> PaginatedStream[Any]:
        return self.paginate(spec, fixed, offset=params.index, page_size=params.page_size)

    # --- games --------------------------------------------------------------

    async def game(self, game_id: int) -> Game:
        """<https://docs.curseforge.com/#get-game>"""
        return await self._runner.run(spec=GAME, params={"gameId": game_id})

    async def games(self, params: GamesParams | None = None) -> PaginatedDataResponse[Game]:
        """<https://docs.curseforge.com/#get-games>"""
        params = params or GamesParams()
        return await self._page(GAMES, params.fixed_params(), params)

    def games_iter(self, params: GamesParams | None = None) -> PaginatedStream[Game]:
        """Iterate over every game, page by page."""
        params = params or GamesParams()
        return self._stream(GAMES, params.fixed_params(), params)

    async def game_versions(self, game_id: int) -> list[GameVersions]:
        """<https://docs.curseforge.com/#get-versions>"""
        return await self._runner.run(spec=GAME_VERSIONS, params={"gameId": game_id})

    async def game_version_types(self, game_id: int) -> list[GameVersionType]:
        """<https://docs.curseforge.com/#get-version-types>"""
        return await self._runner.run(spec=GAME_VERSION_TYPES, params={"gameId": game_id})

    # --- categories ---------------------------------------------------------

    async def categories(self, params: CategoriesParams) -> list[Category]:
        """<https://docs.curseforge.com/#get-categories>"""
        return await self._runner.run(spec=CATEGORIES, params=params.to_query())

    # --- projects -----------------------------------------------------------

    async def search_projects(self, params: SearchParams) -> PaginatedDataResponse[Project]:
        """<https://docs.curseforge.com/#search-mods>"""
        return await self._page(SEARCH_PROJECTS, params.fixed_params(), params)

    def search_projects_iter(self, params: SearchParams) -> PaginatedStream[Project]:
        """Iterate over search results, up to the service-wide result cap."""
        return self._stream(SEARCH_PROJECTS, params.fixed_params(), params)

    async def project(self, project_id: int) -> Project:
        """<https://docs.curseforge.com/#get-mod>"""
        return await self._runner.run(spec=PROJECT, params={"modId": project_id})

    async def projects(self, project_ids: Iterable[int]) -> list[Project]:
        """<https://docs.curseforge.com/#get-mods>"""
        return await self._runner.run(spec=PROJECTS, params={"modIds": list(project_ids)})

    async def featured_projects(self, body: FeaturedProjectsBody) -> FeaturedProjects:
        """<https://docs.curseforge.com/#get-featured-mods>"""
        return await self._runner.run(spec=FEATURED_PROJECTS, params=body.to_query())

    async def project_description(self, project_id: int) -> str:
        """<https://docs.curseforge.com/#get-mod-description>"""
        return await self._runner.run(spec=PROJECT_DESCRIPTION, params={"modId": project_id})

    # --- files --------------------------------------------------------------

    async def project_file(self, project_id: int, file_id: int) -> ProjectFile:
        """<https://docs.curseforge.com/#get-mod-file>"""
        return await self._runner.run(
            spec=PROJECT_FILE, params={"modId": project_id, "fileId": file_id}
        )

    async def project_file_by_id(self, file_id: int) -> ProjectFile | None:
        """Fetch a file without knowing its project.

        Uses ``project_files_by_ids`` and returns its only item, or None when
        the remote does not know the file.
        """
        files = await self.project_files_by_ids([file_id])
        return files[0] if files else None

    async def project_files(
        self, project_id: int, params: ProjectFilesParams | None = None
    ) -> PaginatedDataResponse[ProjectFile]:
        """<https://docs.curseforge.com/#get-mod-files>"""
        params = params or ProjectFilesParams()
        return await self._page(PROJECT_FILES, {"modId": project_id, **params.fixed_params()}, params)

    def project_files_iter(
        self, project_id: int, params: ProjectFilesParams | None = None
    ) -> PaginatedStream[ProjectFile]:
        """Iterate over every file of a project."""
        params = params or ProjectFilesParams()
        return self._stream(PROJECT_FILES, {"modId": project_id, **params.fixed_params()}, params)

    async def project_files_by_ids(self, file_ids: Iterable[int]) -> list[ProjectFile]:
        """<https://docs.curseforge.com/#get-files>"""
        return await self._runner.run(spec=PROJECT_FILES_BY_IDS, params={"fileIds": list(file_ids)})

    async def project_file_changelog(self, project_id: int, file_id: int) -> str:
        """<https://docs.curseforge.com/#get-mod-file-changelog>"""
        return await self._runner.run(
            spec=PROJECT_FILE_CHANGELOG, params={"modId": project_id, "fileId": file_id}
        )

    async def project_file_download_url(self, project_id: int, file_id: int) -> str:
        """<https://docs.curseforge.com/#get-mod-file-download-url>"""
        return await self._runner.run(
            spec=PROJECT_FILE_DOWNLOAD_URL, params={"modId": project_id, "fileId": file_id}
        )
