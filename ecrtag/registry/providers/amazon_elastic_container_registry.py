"""
Container registry on Amazon Elastic Container Registry.
"""

__all__ = ["AmazonElasticContainerRegistry"]

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ecrtag.core import Provider, Response
from ecrtag.core.exceptions import DataError, RegistryError

from .._models import LATEST_TAG, ImageRecord, Manifest, Repository

logger = logging.getLogger(__name__)


class AmazonElasticContainerRegistry(Provider):
    region: str | None
    registry_id: str | None
    aws_access_key_id: str | None
    aws_secret_access_key: str | None
    aws_session_token: str | None
    profile_name: str | None
    nparams: dict[str, Any]

    _client: Any

    def __init__(
        self,
        region: str | None = None,
        registry_id: str | None = None,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        aws_session_token: str | None = None,
        profile_name: str | None = None,
        nparams: dict[str, Any] = dict(),
        **kwargs,
    ):
        """Initialize.

        Args:
            region:
                AWS region where the ECR registry is located.
                If None, the SDK resolves it from the environment.
            registry_id:
                AWS account ID that owns the ECR registry.
                If None, uses the caller's default registry.
            aws_access_key_id:
                AWS access key ID for authentication.
            aws_secret_access_key:
                AWS secret access key for authentication.
            aws_session_token:
                AWS session token for temporary credentials.
            profile_name:
                AWS profile name to use for authentication.
            nparams:
                Additional parameters for the ECR client.
        """
        self.region = region
        self.registry_id = registry_id
        self.aws_access_key_id = aws_access_key_id
        self.aws_secret_access_key = aws_secret_access_key
        self.aws_session_token = aws_session_token
        self.profile_name = profile_name
        self.nparams = nparams
        self._client = None
        super().__init__(**kwargs)

    def __setup__(self) -> None:
        if self._client is not None:
            return

        session_kwargs = {}
        if self.aws_access_key_id:
            session_kwargs["aws_access_key_id"] = self.aws_access_key_id
        if self.aws_secret_access_key:
            session_kwargs["aws_secret_access_key"] = (
                self.aws_secret_access_key
            )
        if self.aws_session_token:
            session_kwargs["aws_session_token"] = self.aws_session_token
        if self.profile_name:
            session_kwargs["profile_name"] = self.profile_name

        try:
            session = boto3.Session(**session_kwargs)
            self._client = session.client(
                "ecr", region_name=self.region, **self.nparams
            )
        except BotoCoreError as e:
            raise RegistryError(f"Could not create ECR client: {e}") from e
        logger.debug(
            "ECR client ready in region %s", self._client.meta.region_name
        )

    def _call(self, method: str, **nargs: Any) -> dict[str, Any]:
        if self.registry_id:
            nargs["registryId"] = self.registry_id
        logger.debug("ECR %s %s", method, nargs.get("repositoryName", ""))
        try:
            return getattr(self._client, method)(**nargs)
        except ClientError as e:
            error = e.response.get("Error", {})
            code = error.get("Code", "Unknown")
            message = error.get("Message", str(e))
            raise RegistryError(
                f"ECR {method} failed: {code}: {message}"
            ) from e
        except BotoCoreError as e:
            raise RegistryError(f"ECR {method} failed: {e}") from e

    def list_repositories(self) -> Response[list[Repository]]:
        self.__setup__()

        nresult = self._call("describe_repositories")
        if "repositories" not in nresult:
            raise DataError("describe_repositories returned no repositories")
        result = [
            Repository.from_native(repo) for repo in nresult["repositories"]
        ]
        logger.debug("Found %d repositories", len(result))
        return Response(result=result, native=dict(result=nresult))

    def list_images(
        self, repository_name: str
    ) -> Response[list[ImageRecord]]:
        self.__setup__()

        nresult = self._call("describe_images", repositoryName=repository_name)
        if "imageDetails" not in nresult:
            raise DataError(
                f"describe_images returned no imageDetails for "
                f"{repository_name}"
            )
        result = [
            ImageRecord.from_native(image_detail)
            for image_detail in nresult["imageDetails"]
        ]
        logger.debug("Found %d images in %s", len(result), repository_name)
        return Response(result=result, native=dict(result=nresult))

    def fetch_manifest(
        self, repository_name: str, digest: str
    ) -> Response[Manifest]:
        self.__setup__()

        nresult = self._call(
            "batch_get_image",
            repositoryName=repository_name,
            imageIds=[{"imageDigest": digest}],
        )
        images = nresult.get("images") or []
        if not images:
            reasons = ", ".join(
                f"{failure.get('failureCode')}: "
                f"{failure.get('failureReason')}"
                for failure in nresult.get("failures") or []
            )
            message = f"No image {digest} in {repository_name}"
            if reasons:
                message = f"{message} ({reasons})"
            raise RegistryError(message)

        image = images[0]
        if "imageManifest" not in image:
            raise DataError(f"Image {digest} has no imageManifest")
        result = Manifest(
            repository_name=image.get("repositoryName", repository_name),
            digest=digest,
            content=image["imageManifest"],
            media_type=image.get("imageManifestMediaType"),
        )
        return Response(result=result, native=dict(result=nresult))

    def publish_manifest(
        self,
        repository_name: str,
        manifest: Manifest,
        tag: str = LATEST_TAG,
    ) -> Response[None]:
        self.__setup__()

        nargs: dict[str, Any] = dict(
            repositoryName=repository_name,
            imageManifest=manifest.content,
            imageTag=tag,
        )
        if manifest.media_type:
            nargs["imageManifestMediaType"] = manifest.media_type
        nresult = self._call("put_image", **nargs)
        logger.debug(
            "Tagged %s@%s as %s", repository_name, manifest.digest, tag
        )
        return Response(result=None, native=dict(result=nresult))

    def close(self) -> Response[None]:
        self._client = None
        return Response(result=None)
