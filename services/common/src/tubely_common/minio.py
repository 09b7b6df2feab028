import logging

from minio import Minio

from tubely_common.config import ObjectStoreConfig

logger = logging.getLogger(__name__)


def get_minio_client(config: ObjectStoreConfig) -> Minio:
    """
    Initialize and return a MinIO client for an S3-compatible object store.

    The same client talks to AWS S3 (the default endpoint) or to a MinIO
    deployment when ``S3_ENDPOINT`` points at one.

    Returns:
        Minio: Configured MinIO client
    """
    try:
        return Minio(
            endpoint=config.endpoint,
            access_key=config.user,
            secret_key=config.password,
            region=config.region,
            secure=config.secure,
        )
    except Exception:
        logger.exception(
            "MinIO Client Initialization Failed",
            extra={
                "endpoint": config.endpoint,
                "user": config.user,
            },
        )
        raise
