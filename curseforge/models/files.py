"""Project file data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ..core.enums import (
    FileRelationType,
    FileReleaseType,
    FileStatus,
    HashAlgorithm,
    ModLoaderType,
)
from .base import CurseForgeModel, NullableDateTime, NullableString, tolerant_enum

FileReleaseTypeField = tolerant_enum(FileReleaseType)
FileStatusField = tolerant_enum(FileStatus)
HashAlgorithmField = tolerant_enum(HashAlgorithm)
FileRelationTypeField = tolerant_enum(FileRelationType)
ModLoaderTypeField = tolerant_enum(ModLoaderType)


class FileHash(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_FileHash>"""

    value: str
    algo: HashAlgorithmField


class SortableGameVersion(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_SortableGameVersion>"""

    game_version_name: str
    game_version_padded: NullableString = None
    game_version: NullableString = None
    game_version_release_date: NullableDateTime = None
    game_version_type_id: int | None = None


class FileDependency(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_FileDependency>"""

    project_id: int = Field(..., alias="modId")
    relation_type: FileRelationTypeField


class FileModule(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_FileModule>"""

    name: str
    fingerprint: int


class FileIndex(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_FileIndex>"""

    game_version: str
    file_id: int
    filename: str
    release_type: FileReleaseTypeField
    game_version_type_id: int | None = None
    mod_loader: ModLoaderTypeField | None = None


class ProjectFile(CurseForgeModel):
    """A single uploaded file of a project.

    <https://docs.curseforge.com/#tocS_File>
    """

    id: int
    game_id: int
    project_id: int = Field(..., alias="modId")
    is_available: bool
    display_name: str
    file_name: str
    release_type: FileReleaseTypeField
    file_status: FileStatusField
    hashes: list[FileHash]
    file_date: datetime
    file_length: int
    download_count: int
    download_url: str | None = None
    game_versions: list[str]
    sortable_game_versions: list[SortableGameVersion]
    dependencies: list[FileDependency]
    expose_as_alternative: bool = False
    parent_project_file_id: int | None = None
    alternate_file_id: int | None = None
    is_server_pack: bool
    server_pack_file_id: int | None = None
    file_fingerprint: int
    modules: list[FileModule]
