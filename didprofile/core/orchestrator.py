"""Profile orchestrator - credentials, session, then profile lookup."""

from typing import Callable

from pydantic import ValidationError

from didprofile.config import ServiceConfig, load_config
from didprofile.core.client import ATProtoClient
from didprofile.core.credentials import decode_credentials
from didprofile.exceptions import (
    AuthenticationError,
    ClientError,
    ConfigError,
    ConfigurationError,
    CredentialFormatError,
    CredentialRetrievalError,
    DecodeError,
    InvalidRequestError,
    ProfileLookupError,
    ProfileNotFoundError,
    SecretStoreError,
)
from didprofile.logging import get_logger
from didprofile.models.profile import ProfileRecord
from didprofile.models.request import ProfileRequest
from didprofile.secrets import SecretResolver


class ProfileService:
    """
    Answers one profile lookup per call using the utility account.

    Configuration and credentials are resolved afresh on every call and the
    first failing step ends the call with a caller-safe OrchestrationError.

    Example:
        service = ProfileService(AWSSecretsManagerResolver())
        profile = service.get_profile_for_did("did:plc:abc")
        print(profile.handle)
    """

    def __init__(
        self,
        secret_resolver: SecretResolver,
        client_factory: Callable[[str], ATProtoClient] = ATProtoClient,
        config_loader: Callable[[], ServiceConfig] = load_config,
    ):
        """
        Args:
            secret_resolver: Source of the utility-account secret payload
            client_factory: Builds a protocol client for a base URL
            config_loader: Returns ServiceConfig or raises ConfigError
        """
        self.secret_resolver = secret_resolver
        self.client_factory = client_factory
        self.config_loader = config_loader
        self._log = get_logger("profile_service")

    def handle_event(self, event: dict | None) -> ProfileRecord:
        """Validate a raw invocation event and look up its DID."""
        try:
            request = ProfileRequest.model_validate(event or {})
        except ValidationError:
            self._log.error("invalid_request", reason="missing or empty did")
            raise InvalidRequestError() from None
        return self.get_profile_for_did(request.did)

    def get_profile_for_did(self, did: str | None) -> ProfileRecord:
        """
        Fetch the public profile for a DID.

        Args:
            did: Decentralized identifier to look up

        Returns:
            Non-empty ProfileRecord

        Raises:
            InvalidRequestError: did missing or empty
            ConfigurationError: base URL not configured
            CredentialRetrievalError: secret store lookup failed
            CredentialFormatError: secret payload malformed
            AuthenticationError: session creation failed
            ProfileLookupError: profile request failed
            ProfileNotFoundError: profile response was empty
        """
        if not isinstance(did, str) or not did.strip():
            self._log.error("invalid_request", reason="missing or empty did")
            raise InvalidRequestError()
        did = did.strip()

        log = self._log.bind(did=did)
        log.info("profile_request_start")

        try:
            config = self.config_loader()
        except ConfigError as e:
            log.error("config_load_failed", error=str(e))
            raise ConfigurationError() from e

        try:
            payload = self.secret_resolver.get_secret(config.util_account_secret_name)
        except SecretStoreError as e:
            log.error(
                "credential_retrieval_failed",
                secret_name=config.util_account_secret_name,
                error=str(e),
            )
            raise CredentialRetrievalError() from e

        try:
            credentials = decode_credentials(payload)
        except DecodeError as e:
            log.error(
                "credential_decode_failed",
                secret_name=config.util_account_secret_name,
                error=str(e),
            )
            raise CredentialFormatError() from e

        client = self.client_factory(config.atproto_base_url)
        try:
            try:
                session = client.create_session(
                    credentials.username,
                    credentials.password.get_secret_value(),
                )
            except ClientError as e:
                log.error(
                    "session_create_failed",
                    identifier=credentials.username,
                    status_code=e.status_code,
                    transport_error=e.is_transport_error,
                    body=e.body,
                    error=str(e),
                )
                raise AuthenticationError() from e

            try:
                profile = client.get_profile(did, session.access_token)
            except ClientError as e:
                log.error(
                    "profile_lookup_failed",
                    status_code=e.status_code,
                    transport_error=e.is_transport_error,
                    body=e.body,
                    error=str(e),
                )
                # A 200 whose body is not a record means nothing was found
                if e.status_code == 200:
                    raise ProfileNotFoundError(did) from e
                raise ProfileLookupError(did) from e
        finally:
            client.close()

        if profile.is_empty():
            log.error("profile_empty")
            raise ProfileNotFoundError(did)

        log.info("profile_request_complete", handle=profile.handle)
        return profile
