"""Game endpoint definitions.

<https://docs.curseforge.com/#games>
"""

from __future__ import annotations

from typing import Any

from curseforge.config import api_path
from curseforge.models import Game, GameVersions, GameVersionType
from curseforge.runtime.rest import RestEndpointSpec


def build_games_query(params: dict[str, Any]) -> dict[str, Any]:
    """Games take no fixed parameters besides the cursor."""
    return {}


GAME = RestEndpointSpec(
    id="game",
    method="GET",
    build_path=lambda p: api_path(f"/games/{p['gameId']}"),
    item_type=Game,
)

GAMES = RestEndpointSpec(
    id="games",
    method="GET",
    build_path=lambda p: api_path("/games"),
    build_query=build_games_query,
    item_type=Game,
    paginated=True,
)

GAME_VERSIONS = RestEndpointSpec(
    id="game_versions",
    method="GET",
    build_path=lambda p: api_path(f"/games/{p['gameId']}/versions"),
    item_type=list[GameVersions],
)

GAME_VERSION_TYPES = RestEndpointSpec(
    id="game_version_types",
    method="GET",
    build_path=lambda p: api_path(f"/games/{p['gameId']}/version-types"),
    item_type=list[GameVersionType],
)
