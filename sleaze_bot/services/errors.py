# sleaze_bot/services/errors.py
"""
Typed failures of the transformation pipeline.

Every error carries a machine-readable category and the HTTP status the web
layer answers with. `NormalizationDegraded` is the one exception that never
reaches a caller: the normalizer records it and falls back to passthrough.
"""
from sleaze_bot.data.constants import ErrorCategory


class PipelineError(Exception):
    category: ErrorCategory = ErrorCategory.INTERNAL_ERROR
    status: int = 500
    message: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.message
        super().__init__(self.detail)

    def to_dict(self) -> dict[str, str]:
        return {
            "error": self.message,
            "category": self.category.value,
            "details": self.detail,
        }


class NoFileProvided(PipelineError):
    category = ErrorCategory.NO_FILE_PROVIDED
    status = 400
    message = "No image file provided"


class InvalidUpload(PipelineError):
    category = ErrorCategory.INVALID_UPLOAD
    status = 400
    message = "Only image files are allowed!"


class UploadTooLarge(PipelineError):
    category = ErrorCategory.UPLOAD_TOO_LARGE
    status = 413
    message = "Uploaded file is too large"


class ConfigurationError(PipelineError):
    category = ErrorCategory.CONFIGURATION_ERROR
    status = 500
    message = "OpenAI API key not configured"


class NormalizationDegraded(PipelineError):
    category = ErrorCategory.NORMALIZATION_DEGRADED
    message = "Image normalization fell back to the original file"


class GenerationFailure(PipelineError):
    category = ErrorCategory.GENERATION_FAILURE
    status = 502
    message = "No image generated in response"


class TransformFailure(PipelineError):
    """Wraps whatever broke between normalization and persistence."""
    category = ErrorCategory.TRANSFORM_FAILURE
    status = 500
    message = "Failed to process image"

    def __init__(self, detail: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(detail)
        self.cause = cause

    @property
    def cause_category(self) -> ErrorCategory:
        if isinstance(self.cause, PipelineError):
            return self.cause.category
        return ErrorCategory.INTERNAL_ERROR

    def to_dict(self) -> dict[str, str]:
        payload = super().to_dict()
        payload["cause"] = self.cause_category.value
        return payload


class ImageNotFound(PipelineError):
    category = ErrorCategory.NOT_FOUND
    status = 404
    message = "Image not found"
