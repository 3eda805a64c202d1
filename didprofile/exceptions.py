"""Custom exception hierarchy for didprofile."""


class DidProfileError(Exception):
    """Base exception for all didprofile errors."""


class ConfigError(DidProfileError):
    """Invalid or incomplete configuration."""


class SecretStoreError(DidProfileError):
    """Secret could not be resolved from the store."""


class DecodeError(DidProfileError):
    """Secret payload is not valid utility-account credentials."""


class ClientError(DidProfileError):
    """Request to the identity service failed.

    ``status_code`` is None when the request never got a response.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause
        self.body = body

    @property
    def is_transport_error(self) -> bool:
        return self.status_code is None

    @property
    def is_auth_rejected(self) -> bool:
        """Upstream answered and refused the credentials or token."""
        return self.status_code in (400, 401, 403)


class OrchestrationError(DidProfileError):
    """Caller-safe failure of a profile request.

    ``str(exc)`` is always the public message; internal detail stays in the logs.
    """

    code = "internal_error"
    public_message = "internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)

    def to_dict(self) -> dict:
        return {"error": self.code, "message": str(self)}


class InvalidRequestError(OrchestrationError):
    """Inbound request has no usable DID."""

    code = "invalid_request"
    public_message = "invalid request: missing 'did'"


class ConfigurationError(OrchestrationError):
    """Required service configuration is missing."""

    code = "configuration_error"


class CredentialRetrievalError(OrchestrationError):
    """Utility-account secret could not be fetched."""

    code = "credential_retrieval_error"


class CredentialFormatError(OrchestrationError):
    """Utility-account secret is malformed."""

    code = "credential_format_error"


class AuthenticationError(OrchestrationError):
    """Session creation with the identity service failed."""

    code = "authentication_error"
    public_message = "authentication with the identity service failed"


class ProfileLookupError(OrchestrationError):
    """Profile fetch failed for the requested DID."""

    code = "profile_lookup_error"

    def __init__(self, did: str):
        self.did = did
        super().__init__(f"profile not found for did {did}")


class ProfileNotFoundError(ProfileLookupError):
    """Profile fetch succeeded but returned no usable record."""

    code = "profile_not_found"
