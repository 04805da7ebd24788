from ._models import (
    LATEST_TAG,
    ImageRecord,
    Manifest,
    RegistryConfig,
    Repository,
    RetagResult,
)
from .component import ContainerRegistry

__all__ = [
    "LATEST_TAG",
    "ContainerRegistry",
    "ImageRecord",
    "Manifest",
    "RegistryConfig",
    "Repository",
    "RetagResult",
]
