"""FastAPI web server for didprofile."""

from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from didprofile import ProfileService, __version__
from didprofile.config import load_settings
from didprofile.core.exporter import to_dict
from didprofile.exceptions import (
    AuthenticationError,
    ConfigError,
    ConfigurationError,
    InvalidRequestError,
    OrchestrationError,
    ProfileLookupError,
)
from didprofile.logging import configure_logging, get_logger
from didprofile.secrets import AWSSecretsManagerResolver


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


# Error kind -> HTTP status; anything else is a 500
_STATUS_CODES = {
    InvalidRequestError: 400,
    AuthenticationError: 502,
    ProfileLookupError: 404,
}

_service: ProfileService | None = None
_startup_error: ConfigurationError | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared ProfileService."""
    global _service, _startup_error
    try:
        config = load_settings()
    except ConfigError as e:
        get_logger("api").error("settings_invalid", error=str(e))
        _startup_error = ConfigurationError()
    else:
        configure_logging(config)
        _service = ProfileService(AWSSecretsManagerResolver(region=config.aws_region))
    yield
    _service = None
    _startup_error = None


def get_service() -> ProfileService:
    if _startup_error is not None:
        raise HTTPException(status_code=500, detail=_startup_error.to_dict())
    if _service is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return _service


app = FastAPI(
    title="didprofile API",
    description="AT Protocol profile lookup by DID",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health", response_model=HealthResponse, tags=["System"])
def health_check():
    """Check API health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now().isoformat(),
    )


@app.get("/api/profile/{did}", tags=["Profiles"])
def get_profile(did: str, service: ProfileService = Depends(get_service)):
    """
    Fetch the public profile for a DID.

    Returns the upstream profile shape with only the fields the identity
    service provided.
    """
    try:
        profile = service.get_profile_for_did(did)
    except OrchestrationError as e:
        status = next(
            (code for kind, code in _STATUS_CODES.items() if isinstance(e, kind)),
            500,
        )
        raise HTTPException(status_code=status, detail=e.to_dict())

    return to_dict(profile)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
