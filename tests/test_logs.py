"""Tests for the exercise log endpoint."""

import pytest

DATES = ["2023-01-10", "2023-01-15", "2023-01-20", "2023-01-25"]


@pytest.fixture
def logged_user(client, user):
    for index, date in enumerate(DATES):
        response = client.post(
            f"/api/users/{user['_id']}/exercises",
            json={"description": f"session {index}", "duration": 10 + index, "date": date},
        )
        assert response.status_code == 200
    return user


def get_logs(client, user, **params):
    return client.get(f"/api/users/{user['_id']}/logs", params=params)


def test_full_log(client, logged_user):
    response = get_logs(client, logged_user)
    assert response.status_code == 200
    body = response.json()
    assert list(body) == ["_id", "username", "count", "log"]
    assert body["_id"] == logged_user["_id"]
    assert body["username"] == logged_user["username"]
    assert body["count"] == len(DATES)
    assert [entry["description"] for entry in body["log"]] == [
        "session 0", "session 1", "session 2", "session 3",
    ]
    assert body["log"][1] == {"description": "session 1", "duration": 11, "date": "Sun Jan 15 2023"}


def test_empty_log(client, user):
    body = get_logs(client, user).json()
    assert body["count"] == 0
    assert body["log"] == []


def test_range_is_inclusive(client, logged_user):
    body = get_logs(client, logged_user, **{"from": "2023-01-15", "to": "2023-01-20"}).json()
    assert [entry["date"] for entry in body["log"]] == ["Sun Jan 15 2023", "Fri Jan 20 2023"]
    assert body["count"] == 2


def test_from_only(client, logged_user):
    body = get_logs(client, logged_user, **{"from": "2023-01-16"}).json()
    assert body["count"] == 2
    assert len(body["log"]) == 2


def test_to_only(client, logged_user):
    body = get_logs(client, logged_user, to="2023-01-10").json()
    assert body["count"] == 1
    assert body["log"][0]["description"] == "session 0"


def test_to_includes_entries_later_that_day(client, user):
    client.post(
        f"/api/users/{user['_id']}/exercises",
        json={"description": "evening run", "duration": 20, "date": "2023-03-01T19:30:00"},
    )
    body = get_logs(client, user, **{"from": "2023-03-01", "to": "2023-03-01"}).json()
    assert body["count"] == 1


def test_limit_caps_entries_in_insertion_order(client, logged_user):
    body = get_logs(client, logged_user, limit="2").json()
    assert body["count"] == 2
    assert [entry["description"] for entry in body["log"]] == ["session 0", "session 1"]


def test_limit_combined_with_range(client, logged_user):
    body = get_logs(client, logged_user, **{"from": "2023-01-15", "limit": "1"}).json()
    assert body["count"] == 1
    assert body["log"][0]["description"] == "session 1"


def test_zero_limit_means_no_limit(client, logged_user):
    body = get_logs(client, logged_user, limit="0").json()
    assert body["count"] == len(DATES)


def test_count_is_not_total(client, logged_user):
    body = get_logs(client, logged_user, **{"from": "2030-01-01"}).json()
    assert body["count"] == 0
    assert body["log"] == []


def test_logs_only_contain_own_exercises(client, logged_user):
    other = client.post("/api/users", json={"username": "other"}).json()
    client.post(
        f"/api/users/{other['_id']}/exercises",
        json={"description": "not mine", "duration": 5, "date": "2023-01-15"},
    )
    body = get_logs(client, logged_user).json()
    assert "not mine" not in [entry["description"] for entry in body["log"]]


def test_round_trip_of_exercise_fields(client, user):
    created = client.post(
        f"/api/users/{user['_id']}/exercises",
        data={"description": "rowing intervals", "duration": "37.5", "date": "2024-02-29"},
    ).json()
    entry = get_logs(client, user).json()["log"][0]
    assert entry == {
        "description": created["description"],
        "duration": created["duration"],
        "date": created["date"],
    }
    assert entry["description"] == "rowing intervals"
    assert entry["duration"] == 37.5
    assert entry["date"] == "Thu Feb 29 2024"


def test_unknown_user_is_404(client):
    response = client.get("/api/users/ffffffffffffffffffffffff/logs")
    assert response.status_code == 404
    assert response.text == "User not found"


@pytest.mark.parametrize(
    "params",
    [{"from": "yesterday"}, {"to": "2023-13-45"}, {"limit": "two"}],
)
def test_malformed_query_is_plain_text_error(client, logged_user, params):
    response = get_logs(client, logged_user, **params)
    assert response.status_code == 500
    assert response.text == "Error fetching logs"


def test_negative_limit_counts_as_absolute_value(client, logged_user):
    body = get_logs(client, logged_user, limit="-3").json()
    assert body["count"] == 3
    assert [entry["description"] for entry in body["log"]] == ["session 0", "session 1", "session 2"]


def test_limit_beyond_integer_range_rejected(client, logged_user):
    response = get_logs(client, logged_user, limit="99999999999999999999")
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Error fetching logs"
