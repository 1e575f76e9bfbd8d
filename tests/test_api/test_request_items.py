import uuid
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from itemrequest.api.v1.endpoints.request_items import get_request_item_repository
from itemrequest.main import app
from itemrequest.models.content import Bitstream, Item
from itemrequest.models.request_item import RequestDecision, RequestItem
from itemrequest.repositories.request_item_repository import RequestItemRepository
from itemrequest.services.content_service import BitstreamService, ItemService
from itemrequest.services.request_item_converter import RequestItemConverter
from itemrequest.services.request_item_service import RequestItemService

URL = "/api/v1/itemrequests"


def _body(item: Item, bitstream: Bitstream, **overrides) -> dict:
    body = {
        "bitstreamId": str(bitstream.id),
        "itemId": str(item.id),
        "allfiles": False,
        "requestEmail": "jdoe@example.com",
        "requestName": "Jane Doe",
        "requestMessage": "I would like a copy for my research.",
    }
    body.update(overrides)
    return body


def _count_requests(session: Session) -> int:
    return len(session.exec(select(RequestItem)).all())


def test_create_request_item(client: TestClient, item: Item, bitstream: Bitstream):
    """A complete request is stored as pending and its token is returned."""
    response = client.post(URL, json=_body(item, bitstream))

    assert response.status_code == 201
    data = response.json()
    assert len(data["token"]) == 32
    assert data["id"] == data["token"]
    assert data["type"] == "itemrequest"
    assert data["itemId"] == str(item.id)
    assert data["bitstreamId"] == str(bitstream.id)
    assert data["requestEmail"] == "jdoe@example.com"
    assert data["requestName"] == "Jane Doe"
    assert data["allfiles"] is False
    assert data["decision"] == "pending"
    assert data["decisionDate"] is None
    assert data["requestDate"] is not None


def test_created_request_resolves_by_token(client: TestClient, item: Item, bitstream: Bitstream):
    token = client.post(URL, json=_body(item, bitstream, allfiles=True)).json()["token"]

    response = client.get(f"{URL}/{token}")

    assert response.status_code == 200
    data = response.json()
    assert data["token"] == token
    assert data["decision"] == "pending"
    assert data["allfiles"] is True


def test_create_request_item_only_required_fields(client: TestClient, item: Item, bitstream: Bitstream):
    response = client.post(URL, json={
        "bitstreamId": str(bitstream.id),
        "itemId": str(item.id),
        "requestEmail": "jdoe@example.com",
    })

    assert response.status_code == 201
    data = response.json()
    assert data["requestName"] is None
    assert data["requestMessage"] is None
    assert data["allfiles"] is False


@pytest.mark.parametrize("field, message", [
    ("requestEmail", "A submitter's email address is required"),
    ("itemId", "An item ID is required"),
    ("bitstreamId", "A bitstream ID is required"),
])
def test_create_request_item_missing_field(
    client: TestClient, session: Session, item: Item, bitstream: Bitstream, field: str, message: str
):
    """Omitting a required field is rejected and nothing is stored."""
    body = _body(item, bitstream)
    del body[field]

    response = client.post(URL, json=body)

    assert response.status_code == 422
    assert response.json()["detail"] == message
    assert _count_requests(session) == 0


def test_create_request_item_blank_email(client: TestClient, session: Session, item: Item, bitstream: Bitstream):
    response = client.post(URL, json=_body(item, bitstream, requestEmail="   "))

    assert response.status_code == 422
    assert _count_requests(session) == 0


def test_create_request_item_unknown_bitstream(client: TestClient, session: Session, item: Item, bitstream: Bitstream):
    response = client.post(URL, json=_body(item, bitstream, bitstreamId=str(uuid.uuid4())))

    assert response.status_code == 422
    assert response.json()["detail"] == "That bitstream does not exist"
    assert _count_requests(session) == 0


def test_create_request_item_unknown_item(client: TestClient, session: Session, item: Item, bitstream: Bitstream):
    response = client.post(URL, json=_body(item, bitstream, itemId=str(uuid.uuid4())))

    assert response.status_code == 422
    assert response.json()["detail"] == "That item does not exist"
    assert _count_requests(session) == 0


def test_create_request_item_malformed_id(client: TestClient, session: Session, item: Item, bitstream: Bitstream):
    response = client.post(URL, json=_body(item, bitstream, itemId="not-a-uuid"))

    assert response.status_code == 422
    assert response.json()["detail"] == "That item does not exist"
    assert _count_requests(session) == 0


@pytest.mark.parametrize("content", [b"{not json", b"[]", b'{"allfiles": "sometimes"}'])
def test_create_request_item_malformed_body(client: TestClient, session: Session, content: bytes):
    response = client.post(URL, content=content, headers={"Content-Type": "application/json"})

    assert response.status_code == 422
    assert response.json()["detail"] == "error parsing the body"
    assert _count_requests(session) == 0


def test_create_request_item_persistence_failure(client: TestClient, item: Item, bitstream: Bitstream):
    """Storage errors surface as a generic server error."""
    request_item_service = MagicMock(spec=RequestItemService)
    request_item_service.create_request.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))
    item_service = MagicMock(spec=ItemService)
    item_service.find.return_value = item
    bitstream_service = MagicMock(spec=BitstreamService)
    bitstream_service.find.return_value = bitstream

    app.dependency_overrides[get_request_item_repository] = lambda: RequestItemRepository(
        request_item_service, item_service, bitstream_service, RequestItemConverter()
    )

    response = client.post(URL, json=_body(item, bitstream))

    assert response.status_code == 500
    assert response.json()["detail"] == "Item request not created."


def test_read_request_item(client: TestClient, request_item: RequestItem):
    response = client.get(f"{URL}/{request_item.token}")

    assert response.status_code == 200
    data = response.json()
    assert data["requestEmail"] == "jsmith@example.com"
    assert data["requestName"] == "John Smith"
    assert data["allfiles"] is True


def test_read_request_item_unknown_token(client: TestClient):
    response = client.get(f"{URL}/0123456789abcdef0123456789abcdef")

    assert response.status_code == 404
    assert response.json()["detail"] == "Item request not found"


def test_list_request_items_not_implemented(client: TestClient, request_item: RequestItem):
    response = client.get(URL)

    assert response.status_code == 405
    assert response.json()["detail"] == "itemrequest findAll is not implemented"


def test_delete_request_item_not_implemented(client: TestClient, request_item: RequestItem):
    response = client.delete(f"{URL}/{request_item.token}")

    assert response.status_code == 405
    assert response.json()["detail"] == "itemrequest delete is not implemented"
    assert client.get(f"{URL}/{request_item.token}").status_code == 200


def test_delete_unknown_request_item_not_implemented(client: TestClient):
    response = client.delete(f"{URL}/unknown")

    assert response.status_code == 405


def test_accept_request_item(client: TestClient, staff_headers: dict, request_item: RequestItem):
    response = client.put(
        f"{URL}/{request_item.token}",
        headers=staff_headers,
        json={"acceptRequest": True, "responseMessage": "Attached."}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["decision"] == "accepted"
    assert data["decisionDate"] is not None
    assert data["responseMessage"] == "Attached."


def test_deny_request_item(client: TestClient, staff_headers: dict, request_item: RequestItem):
    response = client.put(f"{URL}/{request_item.token}", headers=staff_headers, json={"acceptRequest": False})

    assert response.status_code == 200
    assert response.json()["decision"] == "denied"


def test_decision_is_made_once(client: TestClient, staff_headers: dict, request_item: RequestItem):
    client.put(f"{URL}/{request_item.token}", headers=staff_headers, json={"acceptRequest": False})

    response = client.put(f"{URL}/{request_item.token}", headers=staff_headers, json={"acceptRequest": True})

    assert response.status_code == 409
    assert response.json()["detail"] == "Request was already denied"


def test_decide_unknown_request_item(client: TestClient, staff_headers: dict):
    response = client.put(f"{URL}/unknown", headers=staff_headers, json={"acceptRequest": True})

    assert response.status_code == 404


def test_decide_requires_authentication(client: TestClient, request_item: RequestItem):
    response = client.put(f"{URL}/{request_item.token}", json={"acceptRequest": True})

    assert response.status_code == 401


def test_decide_requires_staff(client: TestClient, plain_headers: dict, request_item: RequestItem):
    response = client.put(f"{URL}/{request_item.token}", headers=plain_headers, json={"acceptRequest": True})

    assert response.status_code == 403
    assert request_item.decision == RequestDecision.PENDING


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_request_dates_are_utc(client: TestClient, staff_headers: dict, item: Item, bitstream: Bitstream):
    """Timestamps are stored and returned with a UTC offset."""
    created = client.post(URL, json=_body(item, bitstream))
    assert created.status_code == 201
    assert _parse_timestamp(created.json()["requestDate"]).utcoffset() == timedelta(0)

    token = created.json()["token"]
    decided = client.put(f"{URL}/{token}", headers=staff_headers, json={"acceptRequest": True})

    assert decided.status_code == 200
    assert _parse_timestamp(decided.json()["decisionDate"]).utcoffset() == timedelta(0)


@pytest.mark.parametrize("field", ["requestEmail", "requestName"])
def test_create_request_item_overlong_field(
    client: TestClient, session: Session, item: Item, bitstream: Bitstream, field: str
):
    """Values longer than the stored column are a client error, not a storage failure."""
    value = "a" * 250 + "@example.com"

    response = client.post(URL, json=_body(item, bitstream, **{field: value}))

    assert response.status_code == 422
    assert response.json()["detail"] == "error parsing the body"
    assert _count_requests(session) == 0
