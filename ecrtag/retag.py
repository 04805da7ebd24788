"""
Pick a repository and an image, then point a tag at that image.
"""

import logging

from .core import warn
from .core.exceptions import EmptyResultError
from .presentation import format_image, format_repository, sort_newest_first
from .registry import LATEST_TAG, ContainerRegistry, RetagResult
from .selector import Selector, TerminalSelector

logger = logging.getLogger(__name__)


class Retagger:
    registry: ContainerRegistry
    selector: Selector
    tag: str

    def __init__(
        self,
        registry: ContainerRegistry,
        selector: Selector | None = None,
        tag: str = LATEST_TAG,
    ):
        """Initialize.

        Args:
            registry:
                Registry to read from and publish to.
            selector:
                Prompt used for both choices.
                Defaults to a terminal prompt.
            tag:
                Tag assigned to the chosen image.
        """
        self.registry = registry
        self.selector = selector or TerminalSelector()
        self.tag = tag

    def run(self) -> RetagResult:
        try:
            return self._run()
        finally:
            self.registry.close()

    def _run(self) -> RetagResult:
        repositories = self.registry.list_repositories().result
        if not repositories:
            raise EmptyResultError("No repositories found in the registry")
        logger.info("Found %d repositories", len(repositories))
        repository = self.selector.select(
            "repository:", repositories, label=format_repository
        )

        images = self.registry.list_images(
            repository_name=repository.name
        ).result
        images = sort_newest_first(images)
        if not images:
            raise EmptyResultError(
                f"No images found in repository {repository.name}"
            )
        logger.info("Found %d images in %s", len(images), repository.name)
        image = self.selector.select("image:", images, label=format_image)
        if self.tag in image.tags:
            warn(f"{image.digest} is already tagged {self.tag}")

        manifest = self.registry.fetch_manifest(
            repository_name=image.repository_name,
            digest=image.digest,
        ).result
        logger.info("Fetched manifest for %s", image.digest)

        self.registry.publish_manifest(
            repository_name=manifest.repository_name,
            manifest=manifest,
            tag=self.tag,
        )
        logger.info(
            "Published %s@%s as %s",
            manifest.repository_name,
            manifest.digest,
            self.tag,
        )
        return RetagResult(
            repository_name=manifest.repository_name,
            digest=manifest.digest,
            tag=self.tag,
        )
