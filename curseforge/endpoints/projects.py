"""Project ("mod") endpoint definitions.

The remote names these endpoints after mods; the library calls them
projects because every catalog entry is a "mod" to the API, whatever its
class.

<https://docs.curseforge.com/#mods>
"""

from __future__ import annotations

from typing import Any

from curseforge.config import api_path
from curseforge.models import FeaturedProjects, Project
from curseforge.runtime.rest import RestEndpointSpec


def build_search_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the search endpoint."""
    if "gameId" not in params:
        raise ValueError("search_projects requires gameId")
    return dict(params)


def build_projects_body(params: dict[str, Any]) -> dict[str, Any]:
    return {"modIds": list(params["modIds"])}


SEARCH_PROJECTS = RestEndpointSpec(
    id="search_projects",
    method="GET",
    build_path=lambda p: api_path("/mods/search"),
    build_query=build_search_query,
    item_type=Project,
    paginated=True,
)

PROJECT = RestEndpointSpec(
    id="project",
    method="GET",
    build_path=lambda p: api_path(f"/mods/{p['modId']}"),
    item_type=Project,
)

PROJECTS = RestEndpointSpec(
    id="projects",
    method="POST",
    build_path=lambda p: api_path("/mods"),
    build_body=build_projects_body,
    item_type=list[Project],
)

FEATURED_PROJECTS = RestEndpointSpec(
    id="featured_projects",
    method="POST",
    build_path=lambda p: api_path("/mods/featured"),
    build_body=dict,
    item_type=FeaturedProjects,
)

PROJECT_DESCRIPTION = RestEndpointSpec(
    id="project_description",
    method="GET",
    build_path=lambda p: api_path(f"/mods/{p['modId']}/description"),
    item_type=str,
)
