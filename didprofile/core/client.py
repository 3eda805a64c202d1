"""Blocking XRPC client for the identity/profile service."""

import requests
from pydantic import ValidationError

from didprofile.exceptions import ClientError
from didprofile.logging import get_logger
from didprofile.models.profile import ProfileRecord
from didprofile.models.session import Session, SessionRequest

CREATE_SESSION_PATH = "/xrpc/com.atproto.server.createSession"
GET_PROFILE_PATH = "/xrpc/app.bsky.actor.getProfile"

# Upper bound on the error body kept for logs
_MAX_ERROR_BODY = 512


class ATProtoClient:
    """
    Issues createSession and getProfile calls against one PDS.

    Each call is a single round trip: no retries, no caching and no timeout
    beyond the transport default.

    Example:
        with ATProtoClient("https://pds.example.com") as client:
            session = client.create_session("util.example.com", "app-password")
            profile = client.get_profile("did:plc:abc", session.access_token)
    """

    def __init__(self, base_url: str, session: requests.Session | None = None):
        """
        Initialize the client.

        Args:
            base_url: Scheme and host of the identity service
            session: Shared requests.Session; one is created and owned if None
        """
        self.base_url = base_url.rstrip("/")
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._log = get_logger("atproto_client")
        self._log.info("client_init", base_url=self.base_url)

    def __enter__(self) -> "ATProtoClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def create_session(self, identifier: str, password: str) -> Session:
        """
        Authenticate and obtain an access token.

        Args:
            identifier: Handle, DID or email of the account
            password: Account or app password

        Returns:
            Session with the access JWT

        Raises:
            ClientError: On transport failure, non-200 status or malformed body
        """
        url = self.base_url + CREATE_SESSION_PATH
        payload = SessionRequest(identifier=identifier, password=password)
        self._log.info("session_create_start", identifier=identifier)

        response = self._send("POST", url, json=payload.model_dump())
        session = self._parse(response, Session, url)

        self._log.info("session_create_complete", identifier=identifier, did=session.did)
        return session

    def get_profile(self, did: str, access_token: str) -> ProfileRecord:
        """
        Fetch the public profile for a DID.

        Args:
            did: Actor to look up
            access_token: Bearer token from create_session

        Returns:
            ProfileRecord built from the response body

        Raises:
            ClientError: On transport failure, non-200 status or malformed body
        """
        url = self.base_url + GET_PROFILE_PATH
        self._log.info("profile_fetch_start", did=did)

        response = self._send(
            "GET",
            url,
            params={"actor": did},
            headers={"Authorization": f"Bearer {access_token}"},
        )
        profile = self._parse(response, ProfileRecord, url)

        self._log.info("profile_fetch_complete", did=did, handle=profile.handle)
        return profile

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            response = self._session.request(method, url, **kwargs)
        except requests.RequestException as e:
            self._log.error("request_failed", method=method, url=url, error=str(e))
            raise ClientError(f"{method} {url} failed: {e}", cause=e) from e

        if response.status_code != 200:
            body = response.text[:_MAX_ERROR_BODY]
            self._log.error(
                "request_rejected",
                method=method,
                url=url,
                status_code=response.status_code,
                body=body,
            )
            raise ClientError(
                f"{method} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=body,
            )
        return response

    def _parse(self, response: requests.Response, model, url: str):
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            self._log.error(
                "response_invalid",
                url=url,
                status_code=response.status_code,
                errors=e.error_count(),
            )
            raise ClientError(
                f"Malformed response from {url}",
                status_code=response.status_code,
                cause=e,
            ) from e
