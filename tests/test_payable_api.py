# =============================================================================
# tests/test_payable_api.py - Payable Client Tests
# =============================================================================
# The HTTP session is replaced with a mock; no server is started.
# =============================================================================

import json
from unittest import mock

import pytest
import requests

from payable_api import PayableApi, read_stored_token


BASE_URL = "http://api.test"


def make_response(status_code, body):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = body
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return PayableApi(base_url=BASE_URL + "/", session=session)


class TestRequests:
    def test_create_sends_json_and_bearer_token(self, api, session, payable_payload):
        session.request.return_value = make_response(201, payable_payload)

        result = api.create_payable(payable_payload, token="abc")

        assert result == payable_payload
        session.request.assert_called_once_with(
            method="POST",
            url=f"{BASE_URL}/integrations/payable",
            json=payable_payload,
            headers={"Authorization": "Bearer abc"},
            timeout=15,
        )

    def test_error_bodies_are_returned_as_is(self, api, session, payable_payload):
        error = {"detail": "Payable already exists", "code": "ALREADY_EXISTS"}
        session.request.return_value = make_response(400, error)

        assert api.create_payable(payable_payload, token="abc") == error

    def test_list_and_get(self, api, session, payable_payload):
        session.request.return_value = make_response(200, [payable_payload])
        assert api.list_payables(token="abc") == [payable_payload]
        assert session.request.call_args.kwargs["url"] == f"{BASE_URL}/integrations/payable"

        session.request.return_value = make_response(200, payable_payload)
        assert api.get_payable("p1", token="abc") == payable_payload
        assert session.request.call_args.kwargs["url"] == f"{BASE_URL}/integrations/payable/p1"
        assert session.request.call_args.kwargs["method"] == "GET"

    def test_update(self, api, session):
        replacement = {"value": 1.0, "emission_date": "2024-02-01", "assignor": "a1"}
        session.request.return_value = make_response(200, {"id": "p1", **replacement})

        assert api.update_payable("p1", replacement, token="abc") == {"id": "p1", **replacement}
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["json"] == replacement

    def test_token_is_read_per_call(self, api, session):
        session.request.return_value = make_response(200, [])

        api.list_payables(token="old")
        api.list_payables(token="refreshed")

        headers = [c.kwargs["headers"]["Authorization"] for c in session.request.call_args_list]
        assert headers == ["Bearer old", "Bearer refreshed"]


class TestDelete:
    def test_delete_sends_request(self, api, session):
        session.request.return_value = make_response(204, None)

        assert api.delete_payable("p1", token="abc") is None
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "DELETE"
        assert kwargs["url"] == f"{BASE_URL}/integrations/payable/p1"

    def test_delete_swallows_connection_errors(self, api, session, caplog):
        session.request.side_effect = requests.ConnectionError("connection refused")

        with caplog.at_level("ERROR", logger="payable_api"):
            assert api.delete_payable("p1", token="abc") is None

        assert "Deleting payable p1 failed" in caplog.text

    def test_delete_against_unreachable_server(self):
        api = PayableApi(base_url="http://127.0.0.1:9", timeout=2)

        assert api.delete_payable("p1", token="abc") is None

    def test_other_operations_propagate_network_errors(self, api, session):
        session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(requests.ConnectionError):
            api.get_payable("p1", token="abc")


class TestTokenStorage:
    def test_reads_token_key(self, tmp_path):
        storage = tmp_path / "storage.json"
        storage.write_text(json.dumps({"token": "stored-token", "theme": "dark"}))

        assert read_stored_token(str(storage)) == "stored-token"

    def test_missing_file_or_key(self, tmp_path):
        assert read_stored_token(str(tmp_path / "absent.json")) is None

        storage = tmp_path / "storage.json"
        storage.write_text(json.dumps({"theme": "dark"}))
        assert read_stored_token(str(storage)) is None

    def test_corrupt_file(self, tmp_path):
        storage = tmp_path / "storage.json"
        storage.write_text("{not json")

        assert read_stored_token(str(storage)) is None
