"""Data layer: models, sample profiles and JSON input loading."""

from .io import InputFileError, load_profiles_file, load_requirements_file
from .sample_profiles import SAMPLE_PROFILES, get_sample_profiles

__all__ = [
    "InputFileError",
    "load_profiles_file",
    "load_requirements_file",
    "SAMPLE_PROFILES",
    "get_sample_profiles",
]
