"""Project file endpoint definitions.

<https://docs.curseforge.com/#files>
"""

from __future__ import annotations

from typing import Any

from curseforge.config import api_path
from curseforge.models import ProjectFile
from curseforge.runtime.rest import RestEndpointSpec

PATH_PARAMS = frozenset({"modId", "fileId"})


def build_file_path(params: dict[str, Any], suffix: str = "") -> str:
    """Build the path of one file, optionally followed by a sub-resource."""
    return api_path(f"/mods/{params['modId']}/files/{params['fileId']}{suffix}")


def build_project_files_query(params: dict[str, Any]) -> dict[str, Any]:
    """Query parameters are everything except the path variables."""
    return {k: v for k, v in params.items() if k not in PATH_PARAMS}


def build_files_body(params: dict[str, Any]) -> dict[str, Any]:
    return {"fileIds": list(params["fileIds"])}


PROJECT_FILE = RestEndpointSpec(
    id="project_file",
    method="GET",
    build_path=build_file_path,
    item_type=ProjectFile,
)

PROJECT_FILES = RestEndpointSpec(
    id="project_files",
    method="GET",
    build_path=lambda p: api_path(f"/mods/{p['modId']}/files"),
    build_query=build_project_files_query,
    item_type=ProjectFile,
    paginated=True,
)

PROJECT_FILES_BY_IDS = RestEndpointSpec(
    id="project_files_by_ids",
    method="POST",
    build_path=lambda p: api_path("/mods/files"),
    build_body=build_files_body,
    item_type=list[ProjectFile],
)

PROJECT_FILE_CHANGELOG = RestEndpointSpec(
    id="project_file_changelog",
    method="GET",
    build_path=lambda p: build_file_path(p, "/changelog"),
    item_type=str,
)

PROJECT_FILE_DOWNLOAD_URL = RestEndpointSpec(
    id="project_file_download_url",
    method="GET",
    build_path=lambda p: build_file_path(p, "/download-url"),
    item_type=str,
)
