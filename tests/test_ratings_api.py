import uuid

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def party(make_profile, make_event, make_attendance):
    """An event where the rater and the ratee both checked in."""
    host = make_profile()
    event = make_event(host)
    rater, ratee = make_profile(), make_profile()
    return {
        "event": event,
        "rater": rater,
        "ratee": ratee,
        "attendance": make_attendance(event, rater, check_in=True),
        "ratee_attendance": make_attendance(event, ratee, check_in=True),
    }


def rating_body(party, score=80) -> dict:
    return {
        "ratingScore": score,
        "ratingRateeProfileId": str(party["ratee"].id),
        "ratingEventAttendanceId": str(party["attendance"].id),
    }


def test_submit_rating(client: TestClient, party, auth) -> None:
    response = client.post("/ratings", json=rating_body(party), headers=auth(party["rater"]))
    assert response.status_code == 200
    content = response.json()
    assert content["message"] == "Rating was submitted successfully."
    assert content["data"]["ratingScore"] == 80
    assert content["data"]["ratingRaterProfileId"] == str(party["rater"].id)


def test_rating_requires_login(client: TestClient, party) -> None:
    response = client.post("/ratings", json=rating_body(party))
    assert response.status_code == 403
    assert response.json()["message"] == "you must be logged in to make a rating"


def test_rating_unknown_attendance_is_404(client: TestClient, party, auth) -> None:
    body = rating_body(party)
    body["ratingEventAttendanceId"] = str(uuid.uuid4())
    assert client.post("/ratings", json=body, headers=auth(party["rater"])).status_code == 404


def test_rating_without_check_in_is_403(client: TestClient, make_profile, make_event, make_attendance, auth) -> None:
    event = make_event(make_profile())
    rater, ratee = make_profile(), make_profile()
    attendance = make_attendance(event, rater, check_in=False)
    body = {
        "ratingScore": 50,
        "ratingRateeProfileId": str(ratee.id),
        "ratingEventAttendanceId": str(attendance.id),
    }
    response = client.post("/ratings", json=body, headers=auth(rater))
    assert response.status_code == 403
    assert response.json()["message"] == "you must check in at this event before rating"


def test_second_rating_is_409(client: TestClient, party, auth) -> None:
    assert client.post("/ratings", json=rating_body(party), headers=auth(party["rater"])).status_code == 200
    again = client.post("/ratings", json=rating_body(party, score=10), headers=auth(party["rater"]))
    assert again.status_code == 409
    assert again.json()["message"] == "you have already rated this event"


def test_score_out_of_range_is_400(client: TestClient, party, auth) -> None:
    response = client.post("/ratings", json=rating_body(party, score=101), headers=auth(party["rater"]))
    assert response.status_code == 400


def test_list_and_delete_ratings(client: TestClient, party, auth) -> None:
    rating_id = client.post("/ratings", json=rating_body(party), headers=auth(party["rater"])).json()["data"][
        "ratingId"
    ]

    by_ratee = client.get("/ratings", params={"rateeProfileId": str(party["ratee"].id)}).json()["data"]
    assert [r["ratingId"] for r in by_ratee] == [rating_id]
    assert client.get("/ratings").status_code == 400

    assert client.delete(f"/ratings/{rating_id}", headers=auth(party["ratee"])).status_code == 403
    assert client.delete(f"/ratings/{rating_id}", headers=auth(party["rater"])).status_code == 200
    assert client.get(f"/ratings/{rating_id}").json()["data"] is None
    assert client.delete(f"/ratings/{rating_id}", headers=auth(party["rater"])).status_code == 404


def test_rating_through_someone_elses_attendance_is_403(client: TestClient, party, auth) -> None:
    assert client.post("/ratings", json=rating_body(party), headers=auth(party["rater"])).status_code == 200

    body = rating_body(party, score=5)
    body["ratingEventAttendanceId"] = str(party["ratee_attendance"].id)
    response = client.post("/ratings", json=body, headers=auth(party["rater"]))
    assert response.status_code == 403
    assert response.json()["message"] == "you can only rate through your own attendance record"

    by_rater = client.get("/ratings", params={"raterProfileId": str(party["rater"].id)}).json()["data"]
    assert [r["ratingScore"] for r in by_rater] == [80]


def test_rating_yourself_is_400(client: TestClient, party, auth) -> None:
    body = rating_body(party)
    body["ratingRateeProfileId"] = str(party["rater"].id)
    response = client.post("/ratings", json=body, headers=auth(party["rater"]))
    assert response.status_code == 400
    assert response.json()["message"] == "you cannot rate yourself"


def test_rating_someone_who_did_not_attend_is_400(client: TestClient, party, make_profile, auth) -> None:
    body = rating_body(party)
    body["ratingRateeProfileId"] = str(make_profile().id)
    response = client.post("/ratings", json=body, headers=auth(party["rater"]))
    assert response.status_code == 400
    assert response.json()["message"] == "the rated profile did not attend this event"
