"""Unit tests for the XRPC client - mocked HTTP session, no internet."""

from unittest.mock import patch

import pytest
import requests

from didprofile.core.client import ATProtoClient
from didprofile.exceptions import ClientError
from didprofile.models.profile import ProfileRecord

from conftest import BASE_URL, load_fixture, make_response


@pytest.fixture
def client(http) -> ATProtoClient:
    return ATProtoClient(BASE_URL, session=http)


class TestClientInit:
    """Test client construction and lifecycle."""

    def test_trailing_slash_stripped(self, http):
        client = ATProtoClient(BASE_URL + "/", session=http)
        assert client.base_url == BASE_URL

    def test_injected_session_not_closed(self, http):
        with ATProtoClient(BASE_URL, session=http):
            pass
        http.close.assert_not_called()

    def test_owned_session_closed(self):
        with patch("didprofile.core.client.requests.Session") as session_cls:
            with ATProtoClient(BASE_URL):
                pass
        session_cls.return_value.close.assert_called_once()


class TestCreateSession:
    """Test com.atproto.server.createSession."""

    def test_success(self, client, http):
        http.request.return_value = make_response(200, load_fixture("session"))

        session = client.create_session("alice.test", "app-password")

        assert session.access_token == "tok"
        assert session.did == "did:example:1234"
        http.request.assert_called_once_with(
            "POST",
            f"{BASE_URL}/xrpc/com.atproto.server.createSession",
            json={"identifier": "alice.test", "password": "app-password"},
        )

    @pytest.mark.parametrize("status", [400, 401, 403])
    def test_rejected_credentials(self, client, http, status):
        http.request.return_value = make_response(status, text='{"error":"AuthenticationRequired"}')

        with pytest.raises(ClientError) as exc_info:
            client.create_session("alice.test", "wrong")

        assert exc_info.value.status_code == status
        assert exc_info.value.is_auth_rejected
        assert not exc_info.value.is_transport_error

    def test_server_error_not_auth_rejection(self, client, http):
        http.request.return_value = make_response(502, text="<html>Bad Gateway</html>")

        with pytest.raises(ClientError) as exc_info:
            client.create_session("alice.test", "app-password")

        assert exc_info.value.status_code == 502
        assert not exc_info.value.is_auth_rejected
        assert exc_info.value.body == "<html>Bad Gateway</html>"

    def test_non_200_success_status_rejected(self, client, http):
        http.request.return_value = make_response(201, load_fixture("session"))

        with pytest.raises(ClientError) as exc_info:
            client.create_session("alice.test", "app-password")

        assert exc_info.value.status_code == 201

    def test_transport_failure(self, client, http):
        http.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(ClientError) as exc_info:
            client.create_session("alice.test", "app-password")

        assert exc_info.value.is_transport_error
        assert isinstance(exc_info.value.cause, requests.ConnectionError)

    def test_malformed_body(self, client, http):
        http.request.return_value = make_response(200, text="not json")

        with pytest.raises(ClientError) as exc_info:
            client.create_session("alice.test", "app-password")

        assert exc_info.value.status_code == 200
        assert exc_info.value.cause is not None

    def test_body_without_token(self, client, http):
        http.request.return_value = make_response(200, {"did": "did:example:1234", "handle": "alice.test"})

        with pytest.raises(ClientError):
            client.create_session("alice.test", "app-password")

    def test_long_error_body_truncated(self, client, http):
        http.request.return_value = make_response(500, text="x" * 5000)

        with pytest.raises(ClientError) as exc_info:
            client.create_session("alice.test", "app-password")

        assert len(exc_info.value.body) == 512


class TestGetProfile:
    """Test app.bsky.actor.getProfile."""

    def test_success(self, client, http):
        body = load_fixture("profile_full")
        http.request.return_value = make_response(200, body)

        profile = client.get_profile(body["did"], "tok")

        assert isinstance(profile, ProfileRecord)
        assert profile.handle == "bsky.app"
        http.request.assert_called_once_with(
            "GET",
            f"{BASE_URL}/xrpc/app.bsky.actor.getProfile",
            params={"actor": body["did"]},
            headers={"Authorization": "Bearer tok"},
        )

    def test_not_found(self, client, http):
        http.request.return_value = make_response(400, text='{"error":"InvalidRequest","message":"Profile not found"}')

        with pytest.raises(ClientError) as exc_info:
            client.get_profile("did:example:missing", "tok")

        assert exc_info.value.status_code == 400

    def test_transport_failure(self, client, http):
        http.request.side_effect = requests.Timeout("read timed out")

        with pytest.raises(ClientError) as exc_info:
            client.get_profile("did:example:1234", "tok")

        assert exc_info.value.is_transport_error

    def test_malformed_body(self, client, http):
        http.request.return_value = make_response(200, text="")

        with pytest.raises(ClientError):
            client.get_profile("did:example:1234", "tok")

    def test_empty_object_parses(self, client, http):
        http.request.return_value = make_response(200, {})

        profile = client.get_profile("did:example:1234", "tok")

        assert profile.is_empty()

    def test_single_round_trip(self, client, http):
        http.request.return_value = make_response(503, text="unavailable")

        with pytest.raises(ClientError):
            client.get_profile("did:example:1234", "tok")

        assert http.request.call_count == 1
