"""
JSON file loading for profiles and project requirements.

Files use the same camelCase or snake_case field names accepted by the
data models. A profiles file holds a JSON list of profiles; a
requirements file holds a single JSON object.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from collab_match.data.models import CandidateProfile, ProjectRequirements
from collab_match.utils.constants import SUPPORTED_INPUT_FORMATS
from collab_match.utils.logger import get_logger

logger = get_logger(__name__)

_profile_list_adapter = TypeAdapter(list[CandidateProfile])


class InputFileError(Exception):
    """Raised when an input file is missing, unreadable or invalid."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise InputFileError(path, "file does not exist")
    if path.suffix.lower() not in SUPPORTED_INPUT_FORMATS:
        raise InputFileError(
            path, f"unsupported format (supported: {', '.join(SUPPORTED_INPUT_FORMATS)})"
        )

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InputFileError(path, f"invalid JSON: {e}") from e


def load_profiles_file(path: Path) -> list[CandidateProfile]:
    """Load a list of candidate profiles from a JSON file."""
    data = _read_json(path)
    try:
        profiles = _profile_list_adapter.validate_python(data)
    except ValidationError as e:
        raise InputFileError(path, f"invalid profiles: {e}") from e

    logger.debug(f"Loaded {len(profiles)} profile(s) from {path}")
    return profiles


def load_requirements_file(path: Path) -> ProjectRequirements:
    """Load project requirements from a JSON file."""
    data = _read_json(path)
    try:
        return ProjectRequirements.model_validate(data)
    except ValidationError as e:
        raise InputFileError(path, f"invalid requirements: {e}") from e
