"""Pagination descriptor model."""

from pydantic import Field

from .base import CurseForgeModel


class Pagination(CurseForgeModel):
    """Server-reported metadata describing one page of results.

    <https://docs.curseforge.com/#tocS_Pagination>
    """

    index: int = Field(..., ge=0)
    page_size: int = Field(..., gt=0)
    result_count: int = Field(..., ge=0)
    total_count: int = Field(..., ge=0)
