"""AWS Lambda entry point."""

from didprofile.config import load_settings
from didprofile.core.exporter import to_dict
from didprofile.core.orchestrator import ProfileService
from didprofile.exceptions import ConfigError, ConfigurationError, OrchestrationError
from didprofile.logging import bind_invocation_context, configure_logging, get_logger
from didprofile.secrets import AWSSecretsManagerResolver

# Reused across warm invocations so the boto3 client is built once
_service: ProfileService | None = None


def get_service() -> ProfileService:
    """
    Build the ProfileService on first use.

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    global _service
    if _service is None:
        try:
            config = load_settings()
        except ConfigError as e:
            get_logger("handler").error("settings_invalid", error=str(e))
            raise ConfigurationError() from e
        configure_logging(config)
        _service = ProfileService(AWSSecretsManagerResolver(region=config.aws_region))
    return _service


def handler(event: dict | None, context=None) -> dict:
    """
    Look up the profile for ``event["did"]``.

    Log lines emitted during the call carry the invocation's ``aws_request_id``.

    Returns:
        The profile in upstream JSON shape, or {"error", "message"} on failure
    """
    bind_invocation_context(context)
    try:
        profile = get_service().handle_event(event)
    except OrchestrationError as e:
        return e.to_dict()
    return to_dict(profile)
