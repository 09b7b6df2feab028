"""MinIO implementation of the StorageClient interface."""

from typing import BinaryIO

from minio import Minio
from tubely_common.logging import setup_logging

from exceptions import StorageDeleteError, StorageUploadError
from interfaces import StorageClient

logger = setup_logging()


class MinioStorage(StorageClient):
    """Stores assets in an S3-compatible bucket through the MinIO client."""

    def __init__(self, client: Minio, bucket_name: str, public_url: str):
        self._client = client
        self._bucket_name = bucket_name
        self._public_url = public_url.rstrip("/")

    def upload(
        self,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> str:
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=data,
                length=size,
                content_type=content_type,
            )
            logger.info(
                "File uploaded to object store",
                extra={
                    "object_name": object_name,
                    "size": size,
                    "bucket": self._bucket_name,
                },
            )
        except Exception as e:
            logger.exception(
                "Object store upload failed",
                extra={"object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e

        return f"{self._public_url}/{object_name}"

    def delete(self, object_name: str) -> None:
        try:
            self._client.remove_object(self._bucket_name, object_name)
            logger.info(
                "File removed from object store",
                extra={"object_name": object_name, "bucket": self._bucket_name},
            )
        except Exception as e:
            logger.exception(
                "Object store delete failed",
                extra={"object_name": object_name},
            )
            raise StorageDeleteError(object_name, e) from e

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(self._bucket_name):
            self._client.make_bucket(self._bucket_name)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info(
                "Bucket already exists", extra={"bucket_name": self._bucket_name}
            )
