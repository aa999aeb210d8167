# sleaze_bot/data/constants.py
from enum import Enum

CANONICAL_MIME_TYPE = "image/png"
CANONICAL_FORMAT = "PNG"
RESULT_EXTENSION = ".png"

# Token inside style templates that stands for the person in the uploaded photo.
SUBJECT_PLACEHOLDER = "[CHARACHTER]"


class ErrorCategory(str, Enum):
    """Machine-readable categories surfaced to API callers."""
    NO_FILE_PROVIDED = "no_file_provided"
    INVALID_UPLOAD = "invalid_upload"
    UPLOAD_TOO_LARGE = "upload_too_large"
    CONFIGURATION_ERROR = "configuration_error"
    NORMALIZATION_DEGRADED = "normalization_degraded"
    GENERATION_FAILURE = "generation_failure"
    TRANSFORM_FAILURE = "transform_failure"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


class ConversionStatus(str, Enum):
    CONVERTED = "converted"
    PASSTHROUGH = "passthrough"
