"""Category endpoint definition.

<https://docs.curseforge.com/#get-categories>
"""

from __future__ import annotations

from curseforge.config import api_path
from curseforge.models import Category
from curseforge.runtime.rest import RestEndpointSpec

CATEGORIES = RestEndpointSpec(
    id="categories",
    method="GET",
    build_path=lambda p: api_path("/categories"),
    build_query=dict,
    item_type=list[Category],
)
