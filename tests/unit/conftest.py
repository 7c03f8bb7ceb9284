"""Shared payload builders for unit tests.

Payloads mirror the camelCase JSON the remote sends; tests encode them to
bytes and feed them through stub transports.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from curseforge.runtime.rest import RawResponse


def _game(id: int = 432, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": id,
        "name": f"Game {id}",
        "slug": f"game-{id}",
        "dateModified": "2024-03-01T12:00:00Z",
        "assets": {
            "iconUrl": "https://media.forgecdn.net/icon.png",
            "tileUrl": "",
            "coverUrl": None,
        },
        "status": 6,
        "apiStatus": 2,
    }
    payload.update(overrides)
    return payload


def _file(id: int = 4000, mod_id: int = 238222, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": id,
        "gameId": 432,
        "modId": mod_id,
        "isAvailable": True,
        "displayName": f"jei-{id}.jar",
        "fileName": f"jei-{id}.jar",
        "releaseType": 1,
        "fileStatus": 4,
        "hashes": [{"value": "da39a3ee5e6b4b0d3255bfef95601890afd80709", "algo": 1}],
        "fileDate": "2024-02-10T08:30:00Z",
        "fileLength": 1048576,
        "downloadCount": 1200,
        "downloadUrl": None,
        "gameVersions": ["1.20.1", "Forge"],
        "sortableGameVersions": [
            {
                "gameVersionName": "1.20.1",
                "gameVersionPadded": "",
                "gameVersion": "1.20.1",
                "gameVersionReleaseDate": "0001-01-01T00:00:00",
                "gameVersionTypeId": 75125,
            }
        ],
        "dependencies": [{"modId": 306612, "relationType": 3}],
        "alternateFileId": 0,
        "isServerPack": False,
        "fileFingerprint": 123456789,
        "modules": [{"name": "META-INF", "fingerprint": 987654321}],
    }
    payload.update(overrides)
    return payload


def _project(id: int = 238222, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": id,
        "gameId": 432,
        "name": f"Project {id}",
        "slug": f"project-{id}",
        "links": {
            "websiteUrl": f"https://www.curseforge.com/minecraft/mc-mods/project-{id}",
            "wikiUrl": "",
            "issuesUrl": "https://github.com/example/issues",
            "sourceUrl": None,
        },
        "summary": "View items and recipes",
        "status": 4,
        "downloadCount": 250000000.0,
        "isFeatured": False,
        "primaryCategoryId": 421,
        "categories": [
            {
                "id": 421,
                "gameId": 432,
                "name": "API and Library",
                "slug": "library-api",
                "url": "https://www.curseforge.com/minecraft/mc-mods/library-api",
                "iconUrl": "https://media.forgecdn.net/avatars/6/36/635351496947765531.png",
                "dateModified": "2014-05-23T03:21:44.06Z",
                "isClass": False,
                "classId": 6,
                "parentCategoryId": 6,
            }
        ],
        "classId": 6,
        "authors": [{"id": 1, "name": "author", "url": "https://www.curseforge.com/members/author"}],
        "logo": None,
        "screenshots": [],
        "mainFileId": 4000,
        "latestFiles": [_file(mod_id=id)],
        "latestFilesIndexes": [
            {
                "gameVersion": "1.20.1",
                "fileId": 4000,
                "filename": "jei-4000.jar",
                "releaseType": 1,
                "gameVersionTypeId": 75125,
                "modLoader": 1,
            }
        ],
        "dateCreated": "2015-11-23T21:50:14.3Z",
        "dateModified": "2024-02-10T08:35:00Z",
        "dateReleased": "0001-01-01T00:00:00",
        "allowModDistribution": True,
        "gamePopularityRank": 1,
        "isAvailable": True,
    }
    payload.update(overrides)
    return payload


def _data(value: Any) -> bytes:
    return json.dumps({"data": value}).encode()


def _page(
    items: list[Any],
    *,
    index: int = 0,
    page_size: int = 50,
    total: int | None = None,
    result_count: int | None = None,
) -> bytes:
    return json.dumps(
        {
            "data": items,
            "pagination": {
                "index": index,
                "pageSize": page_size,
                "resultCount": len(items) if result_count is None else result_count,
                "totalCount": len(items) if total is None else total,
            },
        }
    ).encode()


class PagedServer:
    """Serves a fixed list of records through offset pagination.

    Stands in for ``RESTTransport.send``: honours ``index``/``pageSize`` from
    the query (GET) or body (POST) and records every cursor it was asked for.
    Hooks allow a test to misreport the descriptor.
    """

    def __init__(
        self,
        records: list[dict[str, Any]],
        *,
        default_page_size: int = 50,
        reported_total: int | None = None,
        report_index: Any = None,
        report_count: Any = None,
        ignore_page_size: bool = False,
    ) -> None:
        self.records = records
        self.default_page_size = default_page_size
        self.reported_total = reported_total
        self.report_index = report_index
        self.report_count = report_count
        self.ignore_page_size = ignore_page_size
        self.requests: list[tuple[str, str, dict[str, Any]]] = []

    async def send(self, method, path, *, params=None, json_body=None):
        cursor = dict(params or {}) if method == "GET" else dict(json_body or {})
        self.requests.append((method, path, cursor))
        index = cursor.get("index", 0)
        size = self.default_page_size if self.ignore_page_size else cursor.get(
            "pageSize", self.default_page_size
        )
        items = self.records[index : index + size]
        total = len(self.records) if self.reported_total is None else self.reported_total
        reported_index = self.report_index(index) if self.report_index else index
        reported_count = self.report_count(len(items)) if self.report_count else len(items)
        return RawResponse(
            status=200,
            body=_page(
                items,
                index=reported_index,
                page_size=size,
                total=total,
                result_count=reported_count,
            ),
        )

    @property
    def offsets(self) -> list[int]:
        return [cursor.get("index", 0) for _, _, cursor in self.requests]


@pytest.fixture
def game_payload():
    return _game


@pytest.fixture
def file_payload():
    return _file


@pytest.fixture
def project_payload():
    return _project


@pytest.fixture
def data_body():
    return _data


@pytest.fixture
def page_body():
    return _page


@pytest.fixture
def paged_server():
    return PagedServer
