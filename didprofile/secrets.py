"""Secret store adapters for the utility-account credentials."""

import os
from typing import Protocol, runtime_checkable

import boto3
from botocore.exceptions import BotoCoreError, ClientError as BotoClientError

from didprofile.exceptions import SecretStoreError
from didprofile.logging import get_logger


@runtime_checkable
class SecretResolver(Protocol):
    """Anything that turns a secret name into the raw secret string."""

    def get_secret(self, name: str | None) -> str:
        """Return the secret value or raise SecretStoreError."""
        ...


class AWSSecretsManagerResolver:
    """Reads the current version of a secret from AWS Secrets Manager."""

    VERSION_STAGE = "AWSCURRENT"

    def __init__(self, region: str = "us-east-1", client=None):
        """
        Args:
            region: AWS region of the secret
            client: Pre-built secretsmanager client; created lazily if None
        """
        self.region = region or "us-east-1"
        self._client = client
        self._log = get_logger("secrets")

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client("secretsmanager", region_name=self.region)
        return self._client

    def get_secret(self, name: str | None) -> str:
        if not name:
            raise SecretStoreError("secret name is required")

        try:
            result = self.client.get_secret_value(
                SecretId=name,
                VersionStage=self.VERSION_STAGE,
            )
        except (BotoClientError, BotoCoreError) as e:
            self._log.error("secret_fetch_failed", secret_name=name, error=str(e))
            raise SecretStoreError(f"failed to retrieve secret {name}: {e}") from e

        secret = result.get("SecretString")
        if secret is None:
            self._log.error("secret_string_missing", secret_name=name)
            raise SecretStoreError(f"secret string is nil for {name}")

        self._log.debug("secret_fetched", secret_name=name)
        return secret


class EnvSecretResolver:
    """Reads the secret payload from an environment variable of the same name."""

    def __init__(self, environ=None):
        self._environ = os.environ if environ is None else environ

    def get_secret(self, name: str | None) -> str:
        if not name:
            raise SecretStoreError("secret name is required")
        value = self._environ.get(name)
        if value is None:
            raise SecretStoreError(f"environment variable {name} is not set")
        return value
