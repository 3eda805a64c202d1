"""Export utilities for profile records."""

from pathlib import Path

from didprofile.models.profile import ProfileRecord


def to_json(profile: ProfileRecord, indent: int | None = 2) -> str:
    """
    Convert ProfileRecord to its upstream JSON shape.

    Args:
        profile: ProfileRecord to serialize
        indent: JSON indentation level

    Returns:
        JSON string with camelCase keys and only the fields that were present
    """
    return profile.model_dump_json(indent=indent, by_alias=True, exclude_unset=True)


def to_dict(profile: ProfileRecord) -> dict:
    """
    Convert ProfileRecord to a dictionary.

    Args:
        profile: ProfileRecord to convert

    Returns:
        Dictionary with camelCase keys and only the fields that were present
    """
    return profile.model_dump(mode="json", by_alias=True, exclude_unset=True)


def save_json(
    profile: ProfileRecord,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save ProfileRecord to JSON file.

    Args:
        profile: ProfileRecord to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(profile, indent=indent), encoding="utf-8")
    return path


def load_json(filepath: str | Path) -> ProfileRecord:
    """
    Load ProfileRecord from JSON file.

    Args:
        filepath: Path to JSON file

    Returns:
        ProfileRecord instance
    """
    path = Path(filepath)
    return ProfileRecord.model_validate_json(path.read_text(encoding="utf-8"))
