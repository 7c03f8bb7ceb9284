"""Game data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ..core.enums import CoreApiStatus, CoreStatus
from .base import CurseForgeModel, NullableString, tolerant_enum

CoreStatusField = tolerant_enum(CoreStatus)
CoreApiStatusField = tolerant_enum(CoreApiStatus)


class GameAssets(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_GameAssets>"""

    icon_url: NullableString = None
    tile_url: NullableString = None
    cover_url: NullableString = None


class Game(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_Game>"""

    id: int
    name: str
    slug: str
    date_modified: datetime
    assets: GameAssets
    status: CoreStatusField
    api_status: CoreApiStatusField


class GameVersions(CurseForgeModel):
    """Game versions grouped by version type.

    <https://docs.curseforge.com/#tocS_GameVersionsByType>
    """

    kind: int = Field(..., alias="type")
    versions: list[str]


class GameVersionType(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_GameVersionType>"""

    id: int
    game_id: int
    name: str
    slug: str
