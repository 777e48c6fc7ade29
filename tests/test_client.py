import json

import requests

from contact_directory_client import ContactDirectoryAPI


def _response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.url = "http://testserver"
    return response


class FakeSession:
    """Records requests and replays queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def test_list_contacts_sends_page_and_name():
    session = FakeSession(_response(200, [{"id": 1, "name": "Jessica Abigail"}]))
    api = ContactDirectoryAPI(base_url="http://localhost:8000/", session=session)
    contacts, error = api.list_contacts(page=2, name="jess")
    assert error is None
    assert contacts == [{"id": 1, "name": "Jessica Abigail"}]
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://localhost:8000/api/contacts"
    assert call["params"] == {"page": 2, "name": "jess"}


def test_create_contact_returns_created_record():
    session = FakeSession(_response(201, {"id": 7, "name": "A"}))
    api = ContactDirectoryAPI(base_url="http://localhost:8000", session=session)
    created, error = api.create_contact({"name": "A"})
    assert error is None
    assert created["id"] == 7
    assert session.calls[0]["json"] == {"name": "A"}


def test_http_errors_carry_status_and_detail():
    session = FakeSession(_response(404, {"detail": "Cannot find Contact with id: 3"}))
    api = ContactDirectoryAPI(base_url="http://localhost:8000", session=session)
    contact, error = api.get_contact(3)
    assert contact is None
    assert error == {"status_code": 404, "message": "Cannot find Contact with id: 3"}


def test_write_operations_report_success():
    session = FakeSession(_response(200), _response(200), _response(200))
    api = ContactDirectoryAPI(base_url="http://localhost:8000", session=session)
    assert api.update_contact(1, {"name": "B"}) == (True, None)
    assert api.update_address(1, {"address1": "Street"}) == (True, None)
    assert api.delete_contact(1) == (True, None)
    assert [c["method"] for c in session.calls] == ["PUT", "PATCH", "DELETE"]


def test_connection_errors_have_no_status():
    session = FakeSession(requests.ConnectionError("refused"))
    api = ContactDirectoryAPI(base_url="http://localhost:8000", session=session)
    ok, error = api.delete_contact(1)
    assert ok is False
    assert error["status_code"] is None
    assert "refused" in error["message"]
