"""Project ("mod") data models."""

from __future__ import annotations

from datetime import datetime

from ..core.enums import ProjectStatus
from .base import CurseForgeModel, NullableDateTime, NullableString, tolerant_enum
from .categories import Category
from .files import FileIndex, ProjectFile

ProjectStatusField = tolerant_enum(ProjectStatus)


class ProjectLinks(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_ModLinks>"""

    website_url: str
    wiki_url: NullableString = None
    issues_url: NullableString = None
    source_url: NullableString = None


class ProjectAuthor(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_ModAuthor>"""

    id: int
    name: str
    url: str


class ProjectAsset(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_ModAsset>"""

    id: int
    mod_id: int
    title: str
    description: NullableString = None
    thumbnail_url: str
    url: str


class Project(CurseForgeModel):
    """A catalog entry.

    The remote calls every project a "mod" regardless of its class
    (modpacks, resource packs, worlds, ...).

    <https://docs.curseforge.com/#tocS_Mod>
    """

    id: int
    game_id: int
    name: str
    slug: str
    links: ProjectLinks
    summary: str
    status: ProjectStatusField
    download_count: float
    is_featured: bool
    primary_category_id: int
    categories: list[Category]
    class_id: int | None = None
    authors: list[ProjectAuthor]
    logo: ProjectAsset | None = None
    screenshots: list[ProjectAsset]
    main_file_id: int
    latest_files: list[ProjectFile]
    latest_files_indexes: list[FileIndex]
    date_created: datetime
    date_modified: datetime
    date_released: NullableDateTime = None
    allow_mod_distribution: bool | None = None
    game_popularity_rank: int
    is_available: bool


class FeaturedProjects(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_FeaturedModsResponse>"""

    featured: list[Project]
    popular: list[Project]
    recently_updated: list[Project]
