from __future__ import annotations

import requests
from fastapi.testclient import TestClient

from group_registry_client import GroupRegistryAPI


def _api(client: TestClient) -> GroupRegistryAPI:
    # TestClient exposes a requests-compatible ``request`` method.
    return GroupRegistryAPI(base_url="http://testserver", session=client)


def test_list_students_and_groups(client: TestClient) -> None:
    api = _api(client)

    students, error = api.list_students()
    assert error is None
    assert [s["name"] for s in students] == ["Alice", "Bob", "Charlie", "David", "Eve"]

    groups, error = api.list_groups()
    assert error is None
    assert [g["id"] for g in groups] == [1, 2]


def test_create_and_fetch_group(client: TestClient) -> None:
    api = _api(client)

    group, error = api.create_group("Group 3", ["Alice", "Eve"])
    assert error is None
    assert group == {"id": 3, "groupName": "Group 3", "members": [1, 5]}

    detail, error = api.get_group(3)
    assert error is None
    assert [m["name"] for m in detail["members"]] == ["Alice", "Eve"]


def test_create_group_error_carries_plain_text_message(client: TestClient) -> None:
    group, error = _api(client).create_group("BadGroup", ["Zed"])

    assert group is None
    assert error == {"status_code": 400, "message": "Invalid member input"}


def test_delete_and_missing_group(client: TestClient) -> None:
    api = _api(client)

    assert api.delete_group(1) == (True, None)
    assert api.delete_group(1) == (True, None)

    group, error = api.get_group(1)
    assert group is None
    assert error == {"status_code": 404, "message": "Group not found"}


class _FailingSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_transport_errors_are_reported() -> None:
    api = GroupRegistryAPI(session=_FailingSession())

    groups, error = api.list_groups()

    assert groups == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_base_url_joins_prefix() -> None:
    api = GroupRegistryAPI(base_url="http://localhost:3902/", api_prefix="/api/", session=_FailingSession())

    assert api.base_url == "http://localhost:3902/api"
