"""
Async wrappers over S3 client calls.

Every method takes the same keyword arguments as the matching boto3 call,
logs one trace line, then runs the call once in a worker thread. Responses
are returned as boto3 gives them and errors propagate unchanged: there is
no retry and no translation here.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)


def prettify_path(path: Union[str, Path]) -> str:
    """Show paths under the working directory as relative and home as ~."""
    resolved = os.path.abspath(path)
    cwd = os.getcwd()
    if resolved == cwd or resolved.startswith(cwd + os.sep):
        return os.path.relpath(resolved, cwd)
    home = os.path.expanduser("~")
    if resolved.startswith(home + os.sep):
        return "~" + resolved[len(home):]
    return str(path)


class S3Operations:
    """Storage operations bound to an AwsClients context."""

    def __init__(self, clients) -> None:
        self._clients = clients

    async def copy_object(self, **params: Any) -> dict[str, Any]:
        logger.info(
            "s3:copyObject from s3://%s to s3://%s/%s",
            params.get("CopySource"), params.get("Bucket"), params.get("Key"),
        )
        client = self._clients.storage_client()
        return await asyncio.to_thread(client.copy_object, **params)

    async def delete_objects(self, **params: Any) -> dict[str, Any]:
        objects = params.get("Delete", {}).get("Objects", [])
        logger.info(
            "s3:deleteObjects s3://%s (%d keys)", params.get("Bucket"), len(objects)
        )
        client = self._clients.storage_client()
        return await asyncio.to_thread(client.delete_objects, **params)

    async def get_object(self, **params: Any) -> dict[str, Any]:
        logger.debug("s3:getObject s3://%s/%s", params.get("Bucket"), params.get("Key"))
        client = self._clients.storage_client()
        return await asyncio.to_thread(client.get_object, **params)

    async def head_object(self, **params: Any) -> dict[str, Any]:
        logger.debug("s3:headObject s3://%s/%s", params.get("Bucket"), params.get("Key"))
        client = self._clients.storage_client()
        return await asyncio.to_thread(client.head_object, **params)

    async def list_objects(self, **params: Any) -> dict[str, Any]:
        """List one page of objects (ListObjectsV2). Continuation is up to the caller."""
        logger.debug(
            "s3:listObjects s3://%s/%s", params.get("Bucket"), params.get("Prefix", "")
        )
        client = self._clients.storage_client()
        return await asyncio.to_thread(client.list_objects_v2, **params)

    async def upload_file(self, local: Union[str, Path], **params: Any) -> None:
        """
        Upload a local file as the body of a managed S3 upload.

        Bucket and Key are required; any other parameters (ContentType,
        CacheControl, ...) are forwarded as ExtraArgs. The file is not
        checked beforehand: a missing path raises FileNotFoundError when
        the stream is opened.
        """
        extra_args = dict(params)
        bucket = extra_args.pop("Bucket")
        key = extra_args.pop("Key")

        logger.info("s3:uploadFile %s s3://%s/%s", prettify_path(local), bucket, key)
        client = self._clients.storage_client()

        def _upload() -> None:
            with open(local, "rb") as body:
                client.upload_fileobj(body, bucket, key, ExtraArgs=extra_args or None)

        await asyncio.to_thread(_upload)
