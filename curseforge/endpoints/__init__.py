"""CurseForge Core API endpoint registry."""

from __future__ import annotations

from curseforge.runtime.rest import RestEndpointSpec

from .categories import CATEGORIES
from .files import (
    PROJECT_FILE,
    PROJECT_FILE_CHANGELOG,
    PROJECT_FILE_DOWNLOAD_URL,
    PROJECT_FILES,
    PROJECT_FILES_BY_IDS,
)
from .games import GAME, GAME_VERSION_TYPES, GAME_VERSIONS, GAMES
from .projects import (
    FEATURED_PROJECTS,
    PROJECT,
    PROJECT_DESCRIPTION,
    PROJECTS,
    SEARCH_PROJECTS,
)

ENDPOINTS: dict[str, RestEndpointSpec] = {
    spec.id: spec
    for spec in (
        GAME,
        GAMES,
        GAME_VERSIONS,
        GAME_VERSION_TYPES,
        CATEGORIES,
        SEARCH_PROJECTS,
        PROJECT,
        PROJECTS,
        FEATURED_PROJECTS,
        PROJECT_DESCRIPTION,
        PROJECT_FILE,
        PROJECT_FILES,
        PROJECT_FILES_BY_IDS,
        PROJECT_FILE_CHANGELOG,
        PROJECT_FILE_DOWNLOAD_URL,
    )
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Look up an endpoint spec by identifier."""
    return ENDPOINTS.get(endpoint_id)


__all__ = [
    "ENDPOINTS",
    "get_endpoint_spec",
    "GAME",
    "GAMES",
    "GAME_VERSIONS",
    "GAME_VERSION_TYPES",
    "CATEGORIES",
    "SEARCH_PROJECTS",
    "PROJECT",
    "PROJECTS",
    "FEATURED_PROJECTS",
    "PROJECT_DESCRIPTION",
    "PROJECT_FILE",
    "PROJECT_FILES",
    "PROJECT_FILES_BY_IDS",
    "PROJECT_FILE_CHANGELOG",
    "PROJECT_FILE_DOWNLOAD_URL",
]
