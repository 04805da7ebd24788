"""
Display labels and ordering for registry records.
"""

from typing import Iterable

from .registry import ImageRecord, Repository


def format_repository(repository: Repository) -> str:
    return repository.name


def format_image(image: ImageRecord) -> str:
    """Render an image as ``<created> - <digest>[ - <tags>]``.

    The tag segment is left out entirely for untagged images.
    """
    label = f"{image.created.isoformat()} - {image.digest}"
    if image.tags:
        label += f" - {', '.join(image.tags)}"
    return label


def sort_newest_first(images: Iterable[ImageRecord]) -> list[ImageRecord]:
    # Ascending sort then reverse: equal timestamps come out in reverse
    # input order, unlike a stable descending sort.
    result = sorted(images, key=lambda image: image.created)
    result.reverse()
    return result
