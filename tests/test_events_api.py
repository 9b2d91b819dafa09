import uuid

from fastapi.testclient import TestClient


def event_body(**overrides) -> dict:
    body = {
        "eventName": "Taco Tuesday",
        "eventDetail": "Tacos, music and a lot of people",
        "eventLat": 35.0844,
        "eventLong": -106.6504,
        "eventPrice": 5,
        "eventStartDateTime": "2017-11-10T18:00:00Z",
        "eventEndDateTime": "2017-11-10T22:00:00Z",
        "eventAttendeeLimit": 20,
    }
    body.update(overrides)
    return body


def test_create_event(client: TestClient, make_profile, auth) -> None:
    host = make_profile()
    response = client.post("/events", json=event_body(), headers=auth(host))

    assert response.status_code == 200
    content = response.json()
    assert content["status"] == 200
    assert content["message"] == "Event created OK"
    data = content["data"]
    assert data["eventName"] == "Taco Tuesday"
    assert data["eventProfileId"] == str(host.id)
    assert data["eventStartDateTime"] == 1510336800000
    assert data["eventAttendeeLimit"] == 20
    assert data["eventImage"] is None


def test_create_event_requires_a_profile(client: TestClient) -> None:
    response = client.post("/events", json=event_body())
    assert response.status_code == 403
    assert response.json()["status"] == 403


def test_create_event_with_bad_header(client: TestClient) -> None:
    response = client.post("/events", json=event_body(), headers={"X-Profile-Id": "garbage"})
    assert response.status_code == 403


def test_create_event_out_of_range_is_400(client: TestClient, make_profile, auth) -> None:
    host = make_profile()
    response = client.post("/events", json=event_body(eventLat=95), headers=auth(host))
    assert response.status_code == 400
    assert "latitude" in response.json()["message"]

    response = client.post("/events", json=event_body(eventDetail="d" * 501), headers=auth(host))
    assert response.status_code == 400


def test_create_event_missing_field_is_422(client: TestClient, make_profile, auth) -> None:
    body = event_body()
    del body["eventName"]
    response = client.post("/events", json=body, headers=auth(make_profile()))
    assert response.status_code == 422
    assert response.json()["status"] == 422


def test_get_event(client: TestClient, make_profile, make_event) -> None:
    event = make_event(make_profile())
    response = client.get(f"/events/{event.id}")
    assert response.status_code == 200
    assert response.json()["data"]["eventId"] == str(event.id)

    missing = client.get(f"/events/{uuid.uuid4()}")
    assert missing.status_code == 200
    assert missing.json()["data"] is None

    assert client.get("/events/not-a-uuid").status_code == 400


def test_list_events_filters(client: TestClient, make_profile, make_event) -> None:
    host, other = make_profile(), make_profile()
    make_event(host, name="Taco Tuesday", lat=35.0, lng=-106.0)
    make_event(other, name="Burrito Night", lat=40.0, lng=-100.0)

    assert len(client.get("/events").json()["data"]) == 2
    by_name = client.get("/events", params={"name": "taco"}).json()["data"]
    assert [e["eventName"] for e in by_name] == ["Taco Tuesday"]
    by_owner = client.get("/events", params={"profileId": str(other.id)}).json()["data"]
    assert [e["eventName"] for e in by_owner] == ["Burrito Night"]
    in_box = client.get(
        "/events", params={"minLat": 34, "minLong": -107, "maxLat": 36, "maxLong": -105}
    ).json()["data"]
    assert [e["eventName"] for e in in_box] == ["Taco Tuesday"]
    by_date = client.get(
        "/events", params={"startFrom": "2017-11-10 18:00:00", "startTo": "2017-11-10 18:00:00"}
    ).json()["data"]
    assert len(by_date) == 2


def test_list_events_partial_bbox_is_rejected(client: TestClient) -> None:
    response = client.get("/events", params={"minLat": 34})
    assert response.status_code == 400


def test_list_events_half_date_range_is_rejected(client: TestClient) -> None:
    response = client.get("/events", params={"startFrom": "2017-11-10"})
    assert response.status_code == 400


def test_update_event_owner_only(client: TestClient, make_profile, make_event, auth) -> None:
    host, stranger = make_profile(), make_profile()
    event = make_event(host)

    denied = client.put(f"/events/{event.id}", json=event_body(eventName="Hijacked"), headers=auth(stranger))
    assert denied.status_code == 403

    response = client.put(
        f"/events/{event.id}", json=event_body(eventName="Taco Wednesday", eventImage=""), headers=auth(host)
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["eventName"] == "Taco Wednesday"
    assert data["eventProfileId"] == str(host.id)
    assert data["eventImage"] is None


def test_update_unknown_event_is_404(client: TestClient, make_profile, auth) -> None:
    response = client.put(f"/events/{uuid.uuid4()}", json=event_body(), headers=auth(make_profile()))
    assert response.status_code == 404


def test_delete_event(client: TestClient, make_profile, make_event, auth) -> None:
    host, stranger = make_profile(), make_profile()
    event = make_event(host)

    assert client.delete(f"/events/{event.id}", headers=auth(stranger)).status_code == 403
    response = client.delete(f"/events/{event.id}", headers=auth(host))
    assert response.status_code == 200
    assert response.json()["message"] == "Event deleted OK"
    assert client.get(f"/events/{event.id}").json()["data"] is None


def test_impossible_start_date_is_a_range_error(client: TestClient, make_profile, auth) -> None:
    response = client.post(
        "/events", json=event_body(eventStartDateTime="2017-02-30 10:00:00"), headers=auth(make_profile())
    )
    assert response.status_code == 400
    assert response.json()["message"] == "event start date is not a valid date"


def test_unparseable_end_date_is_400(client: TestClient, make_profile, auth) -> None:
    response = client.post("/events", json=event_body(eventEndDateTime="next friday"), headers=auth(make_profile()))
    assert response.status_code == 400
    assert response.json()["message"] == "event end date is not a valid date"
