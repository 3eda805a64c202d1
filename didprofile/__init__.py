"""didprofile - authenticated AT Protocol profile lookup by DID."""

from didprofile.models.profile import ProfileRecord
from didprofile.models.credentials import UtilAccountCredentials
from didprofile.models.session import Session
from didprofile.config import ServiceConfig, load_config
from didprofile.core.client import ATProtoClient
from didprofile.core.credentials import decode_credentials
from didprofile.core.orchestrator import ProfileService
from didprofile.core.exporter import to_json, to_dict, save_json, load_json
from didprofile.secrets import AWSSecretsManagerResolver, EnvSecretResolver, SecretResolver

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "ProfileService",
    "ATProtoClient",
    "ServiceConfig",
    "load_config",
    "decode_credentials",
    # Secret stores
    "SecretResolver",
    "AWSSecretsManagerResolver",
    "EnvSecretResolver",
    # Models
    "ProfileRecord",
    "UtilAccountCredentials",
    "Session",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "load_json",
    "__version__",
]
