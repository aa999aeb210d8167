from .assets import (
    GenerationResult,
    NormalizedAsset,
    StoredImage,
    TransformRequest,
    UploadedAsset,
)

__all__ = [
    "GenerationResult",
    "NormalizedAsset",
    "StoredImage",
    "TransformRequest",
    "UploadedAsset",
]
