"""Request parameter models.

These are only ever serialized, never decoded, so they do not take part in
compatibility handling. Unset values are dropped from the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.enums import ModLoaderType, SearchSort, SortOrder

PAGINATION_FIELDS = frozenset({"index", "pageSize"})


class RequestParams(BaseModel):
    """Base for query-string and body parameter sets."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def to_query(self) -> dict[str, Any]:
        """Serialize to camelCase wire names, omitting unset values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def fixed_params(self) -> dict[str, Any]:
        """Wire parameters without the pagination cursor (``index``/``pageSize``)."""
        return {k: v for k, v in self.to_query().items() if k not in PAGINATION_FIELDS}


class PaginatedParams(RequestParams):
    """Parameter set of a paginated endpoint."""

    index: int | None = Field(default=None, ge=0)
    page_size: int | None = Field(default=None, gt=0)


class GamesParams(PaginatedParams):
    """<https://docs.curseforge.com/#get-games>"""


class CategoriesParams(RequestParams):
    """<https://docs.curseforge.com/#get-categories>"""

    game_id: int
    class_id: int | None = None


class SearchParams(PaginatedParams):
    """<https://docs.curseforge.com/#search-mods>"""

    game_id: int
    class_id: int | None = None
    category_id: int | None = None
    game_version: str | None = None
    search_filter: str | None = None
    sort_field: SearchSort | None = None
    sort_order: SortOrder | None = None
    mod_loader: ModLoaderType | None = Field(default=None, alias="modLoaderType")
    game_version_type_id: int | None = None
    slug: str | None = None


class ProjectFilesParams(PaginatedParams):
    """<https://docs.curseforge.com/#get-mod-files>"""

    game_version: str | None = None
    mod_loader: ModLoaderType | None = Field(default=None, alias="modLoaderType")
    game_version_type_id: int | None = None


class FeaturedProjectsBody(RequestParams):
    """<https://docs.curseforge.com/#tocS_GetFeaturedModsRequestBody>"""

    game_id: int
    excluded_mod_ids: list[int] = Field(default_factory=list)
    game_version_type_id: int | None = None
