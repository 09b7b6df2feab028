"""StorageClient that embeds assets directly in their URL."""

import base64
from typing import BinaryIO

from interfaces import StorageClient


class InlineDataStorage(StorageClient):
    """Encodes the payload as a base64 ``data:`` URL; nothing is written anywhere."""

    def upload(
        self,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> str:
        encoded = base64.b64encode(data.read()).decode("ascii")
        return f"data:{content_type};base64,{encoded}"

    def delete(self, object_name: str) -> None:
        pass
