from ecrtag.core import Component, Response, operation

from ._models import (
    LATEST_TAG,
    ImageRecord,
    Manifest,
    RegistryConfig,
    Repository,
)


class ContainerRegistry(Component):
    def __init__(self, **kwargs):
        """Initialize.

        Args:
            __provider__:
                Provider instance, provider name, or a dict with
                ``type`` and ``parameters``.
        """
        super().__init__(**kwargs)

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "ContainerRegistry":
        return cls(
            __provider__=dict(
                type=config.provider,
                parameters=config.get_provider_parameters(),
            )
        )

    @operation()
    def list_repositories(self) -> Response[list[Repository]]:
        """List repositories in the registry.

        Returns:
            Repositories, as returned in a single page.
        """
        ...

    @operation()
    def list_images(
        self,
        repository_name: str,
    ) -> Response[list[ImageRecord]]:
        """List images in a repository.

        Args:
            repository_name: Repository to list.

        Returns:
            Images, as returned in a single page.
        """
        ...

    @operation()
    def fetch_manifest(
        self,
        repository_name: str,
        digest: str,
    ) -> Response[Manifest]:
        """Fetch the manifest of one image.

        Args:
            repository_name: Repository holding the image.
            digest: Image digest.

        Returns:
            Image manifest.
        """
        ...

    @operation()
    def publish_manifest(
        self,
        repository_name: str,
        manifest: Manifest,
        tag: str = LATEST_TAG,
    ) -> Response[None]:
        """Push a manifest back to the registry under a tag.

        Args:
            repository_name: Repository to push to.
            manifest: Manifest to push, unchanged.
            tag: Tag to assign.
        """
        ...

    @operation()
    def close(self) -> Response[None]:
        """Close the registry client."""
        pass

    @operation()
    async def alist_repositories(self) -> Response[list[Repository]]:
        """List repositories in the registry.

        Returns:
            Repositories, as returned in a single page.
        """
        ...

    @operation()
    async def alist_images(
        self,
        repository_name: str,
    ) -> Response[list[ImageRecord]]:
        """List images in a repository.

        Args:
            repository_name: Repository to list.

        Returns:
            Images, as returned in a single page.
        """
        ...

    @operation()
    async def afetch_manifest(
        self,
        repository_name: str,
        digest: str,
    ) -> Response[Manifest]:
        """Fetch the manifest of one image.

        Args:
            repository_name: Repository holding the image.
            digest: Image digest.

        Returns:
            Image manifest.
        """
        ...

    @operation()
    async def apublish_manifest(
        self,
        repository_name: str,
        manifest: Manifest,
        tag: str = LATEST_TAG,
    ) -> Response[None]:
        """Push a manifest back to the registry under a tag.

        Args:
            repository_name: Repository to push to.
            manifest: Manifest to push, unchanged.
            tag: Tag to assign.
        """
        ...

    @operation()
    async def aclose(self) -> Response[None]:
        """Close the registry client."""
        pass
