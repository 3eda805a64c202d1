"""Decode utility-account credentials from a raw secret payload."""

from pydantic import ValidationError

from didprofile.exceptions import DecodeError
from didprofile.models.credentials import UtilAccountCredentials


def decode_credentials(payload: str | bytes | None) -> UtilAccountCredentials:
    """
    Parse a secret payload into utility-account credentials.

    Args:
        payload: JSON object text with username, password and did

    Returns:
        UtilAccountCredentials

    Raises:
        DecodeError: If the payload is not a JSON object or a field is missing or empty
    """
    if not payload:
        raise DecodeError("Credential payload is empty")

    try:
        return UtilAccountCredentials.model_validate_json(payload)
    except ValidationError as e:
        # Only report field locations, never input values
        problems = ", ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['type']}"
            for err in e.errors(include_input=False)
        )
        raise DecodeError(f"Invalid credential payload ({problems})") from None
