from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ecrtag.core import DataModel
from ecrtag.core.exceptions import DataError

LATEST_TAG = "latest"


class Repository(DataModel):
    """Container registry repository.

    Attributes:
        name: Repository name.
        uri: Repository URI, if the registry reported one.
    """

    name: str
    uri: str | None = None

    @classmethod
    def from_native(cls, native: dict[str, Any]) -> Repository:
        name = native.get("repositoryName")
        if not name:
            raise DataError("Repository description has no repositoryName")
        return cls(name=name, uri=native.get("repositoryUri"))


class ImageRecord(DataModel):
    """Image stored in a repository.

    Attributes:
        tags: Tags currently pointing at the image.
        digest: Image manifest digest.
        created: Push time in UTC, whole seconds.
        repository_name: Repository holding the image.
    """

    tags: list[str] = []
    digest: str
    created: datetime
    repository_name: str

    @classmethod
    def from_native(cls, native: dict[str, Any]) -> ImageRecord:
        digest = native.get("imageDigest")
        if not digest:
            raise DataError("Image description has no imageDigest")
        pushed_at = native.get("imagePushedAt")
        if pushed_at is None:
            raise DataError(f"Image {digest} has no imagePushedAt")
        repository_name = native.get("repositoryName")
        if not repository_name:
            raise DataError(f"Image {digest} has no repositoryName")
        return cls(
            tags=list(native.get("imageTags") or []),
            digest=digest,
            created=to_utc_seconds(pushed_at),
            repository_name=repository_name,
        )


class Manifest(DataModel):
    """Image manifest as stored in the registry.

    Attributes:
        repository_name: Repository holding the image.
        digest: Digest the manifest was fetched by.
        content: Manifest document, passed through untouched.
        media_type: Manifest media type, if the registry reported one.
    """

    repository_name: str
    digest: str
    content: str
    media_type: str | None = None


class RegistryConfig(DataModel):
    """Registry client configuration.

    Unset values fall back to the AWS SDK's environment discovery.

    Attributes:
        provider: Registry provider name.
        region: Registry region.
        profile_name: AWS shared config profile.
        aws_access_key_id: AWS access key id.
        aws_secret_access_key: AWS secret access key.
        aws_session_token: AWS session token.
        registry_id: Account id owning the registry.
    """

    provider: str = "amazon_elastic_container_registry"
    region: str | None = None
    profile_name: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_session_token: str | None = None
    registry_id: str | None = None

    def get_provider_parameters(self) -> dict[str, Any]:
        parameters = self.model_dump(exclude={"provider"})
        return {k: v for k, v in parameters.items() if v is not None}


class RetagResult(DataModel):
    repository_name: str
    digest: str
    tag: str


def to_utc_seconds(value: datetime | int | float) -> datetime:
    if isinstance(value, (int, float)):
        value = datetime.fromtimestamp(int(value), tz=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).replace(microsecond=0)
