from .registry import (
    LATEST_TAG,
    ContainerRegistry,
    ImageRecord,
    Manifest,
    RegistryConfig,
    Repository,
    RetagResult,
)
from .retag import Retagger
from .selector import Selector, TerminalSelector

__all__ = [
    "LATEST_TAG",
    "ContainerRegistry",
    "ImageRecord",
    "Manifest",
    "RegistryConfig",
    "Repository",
    "RetagResult",
    "Retagger",
    "Selector",
    "TerminalSelector",
]
