"""Unit tests for the POST /trips, GET /trips/{tripId}/confirm and PUT /trips/{tripId} handlers."""

import json
from unittest.mock import patch
from uuid import UUID, uuid4

import pytest

from handlers import confirm_trip, create_trip, update_trip


@pytest.fixture
def patched(fake_store, dev_mailer, app_config):
    with (
        patch.object(create_trip, "get_trip_store", return_value=fake_store),
        patch.object(create_trip, "get_mail_dispatcher", return_value=dev_mailer),
        patch.object(create_trip, "get_config", return_value=app_config),
        patch.object(confirm_trip, "get_trip_store", return_value=fake_store),
        patch.object(confirm_trip, "get_mail_dispatcher", return_value=dev_mailer),
        patch.object(confirm_trip, "get_config", return_value=app_config),
        patch.object(update_trip, "get_trip_store", return_value=fake_store),
    ):
        yield


def _body(result):
    return json.loads(result["body"])


def _create_event(**overrides):
    body = {
        "destination": "Florianópolis",
        "starts_at": "2024-08-04T00:00:00Z",
        "ends_at": "2024-08-10T00:00:00Z",
        "owner_name": "Diego",
        "owner_email": "diego@example.com",
        "emails_to_invite": ["a@b.com"],
    }
    body.update(overrides)
    return {"body": json.dumps(body)}


def test_create_confirm_flow(patched, fake_store, dev_mailer):
    created = create_trip.handler(_create_event(), None)

    assert created["statusCode"] == 200
    trip_id = UUID(_body(created)["tripId"])
    assert [m.recipient for m in dev_mailer.sent] == ["diego@example.com"]

    confirmed = confirm_trip.handler({"pathParameters": {"tripId": str(trip_id)}}, None)

    assert confirmed["statusCode"] == 302
    assert confirmed["headers"]["Location"] == f"https://app.example.com/trips/{trip_id}"
    assert fake_store.get_trip(trip_id).is_confirmed is True
    assert [m.recipient for m in dev_mailer.sent] == ["diego@example.com", "a@b.com"]


def test_create_trip_inverted_dates(patched, fake_store):
    result = create_trip.handler(_create_event(starts_at="2024-08-10T00:00:00Z", ends_at="2024-08-04T00:00:00Z"), None)

    assert result["statusCode"] == 400
    assert _body(result)["error"]["code"] == "INVALID_TRIP_DATES"
    assert fake_store.trips == {}


def test_create_trip_bad_invitee_email(patched, fake_store):
    result = create_trip.handler(_create_event(emails_to_invite=["nope"]), None)

    assert result["statusCode"] == 400
    assert _body(result)["error"]["code"] == "VALIDATION_ERROR"
    assert fake_store.trips == {}


def test_confirm_unknown_trip(patched):
    result = confirm_trip.handler({"pathParameters": {"tripId": str(uuid4())}}, None)

    assert result["statusCode"] == 404
    assert _body(result)["error"]["code"] == "TRIP_NOT_FOUND"


def test_update_trip(patched, fake_store, trip):
    event = {
        "pathParameters": {"tripId": str(trip.id)},
        "body": json.dumps({"destination": "Recife", "starts_at": "2024-09-01T00:00:00Z", "ends_at": "2024-09-05T00:00:00Z"}),
    }

    result = update_trip.handler(event, None)

    assert result["statusCode"] == 200
    assert _body(result) == {"tripId": str(trip.id)}
    assert fake_store.get_trip(trip.id).destination == "Recife"


def test_update_unknown_trip(patched):
    event = {
        "pathParameters": {"tripId": str(uuid4())},
        "body": json.dumps({"destination": "Recife", "starts_at": "2024-09-01T00:00:00Z", "ends_at": "2024-09-05T00:00:00Z"}),
    }

    assert update_trip.handler(event, None)["statusCode"] == 404
