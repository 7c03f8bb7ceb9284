"""Category data model."""

from __future__ import annotations

from datetime import datetime

from .base import CurseForgeModel


class Category(CurseForgeModel):
    """<https://docs.curseforge.com/#tocS_Category>"""

    id: int
    game_id: int
    name: str
    slug: str | None = None
    url: str | None = None
    icon_url: str
    date_modified: datetime
    is_class: bool | None = None
    class_id: int | None = None
    parent_category_id: int | None = None
