from __future__ import annotations

from fastapi.testclient import TestClient


SEED_GROUPS = [
    {"id": 1, "groupName": "Group 1", "members": [1, 2, 4]},
    {"id": 2, "groupName": "Group 2", "members": [3, 5]},
]


def test_list_groups_returns_seed_groups(client: TestClient) -> None:
    res = client.get("/api/groups")

    assert res.status_code == 200
    assert res.json() == SEED_GROUPS


def test_list_groups_is_repeatable(client: TestClient) -> None:
    assert client.get("/api/groups").json() == client.get("/api/groups").json()


def test_create_group_returns_summary_with_ids(client: TestClient) -> None:
    res = client.post("/api/groups", json={"groupName": "Group 3", "members": ["Alice", "Eve"]})

    assert res.status_code == 200
    assert res.json() == {"id": 3, "groupName": "Group 3", "members": [1, 5]}
    assert client.get("/api/groups").json()[-1] == {"id": 3, "groupName": "Group 3", "members": [1, 5]}


def test_create_group_with_no_members(client: TestClient) -> None:
    res = client.post("/api/groups", json={"groupName": "Empty", "members": []})

    assert res.status_code == 200
    assert res.json()["members"] == []


def test_create_group_with_unknown_member_is_rejected(client: TestClient) -> None:
    res = client.post("/api/groups", json={"groupName": "BadGroup", "members": ["Alice", "Zed"]})

    assert res.status_code == 400
    assert res.text == "Invalid member input"
    assert res.headers["content-type"].startswith("text/plain")
    assert client.get("/api/groups").json() == SEED_GROUPS


def test_create_group_with_missing_fields_fails_validation(client: TestClient) -> None:
    res = client.post("/api/groups", json={"groupName": "NoMembers"})

    assert res.status_code == 422
    assert client.get("/api/groups").json() == SEED_GROUPS


def test_delete_group_returns_no_content(client: TestClient) -> None:
    res = client.delete("/api/groups/1")

    assert res.status_code == 204
    assert res.content == b""
    assert [g["id"] for g in client.get("/api/groups").json()] == [2]


def test_delete_unknown_group_still_succeeds(client: TestClient) -> None:
    res = client.delete("/api/groups/999")

    assert res.status_code == 204
    assert client.get("/api/groups").json() == SEED_GROUPS


def test_get_group_detail_resolves_students(client: TestClient) -> None:
    res = client.get("/api/groups/1")

    assert res.status_code == 200
    assert res.json() == {
        "id": 1,
        "groupName": "Group 1",
        "members": [
            {"id": 1, "name": "Alice"},
            {"id": 2, "name": "Bob"},
            {"id": 4, "name": "David"},
        ],
    }


def test_get_unknown_group_is_404_plain_text(client: TestClient) -> None:
    res = client.get("/api/groups/999")

    assert res.status_code == 404
    assert res.text == "Group not found"


def test_get_deleted_group_is_404(client: TestClient) -> None:
    client.delete("/api/groups/2")

    assert client.get("/api/groups/2").status_code == 404


def test_non_integer_group_id_fails_validation(client: TestClient) -> None:
    assert client.get("/api/groups/abc").status_code == 422


def test_cors_headers_are_sent(client: TestClient) -> None:
    res = client.get("/api/groups", headers={"Origin": "http://example.com"})

    assert res.headers.get("access-control-allow-origin") == "*"
