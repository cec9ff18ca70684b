"""
Helpers for release tests that touch real buckets and build output.

delete_folder cleans up everything a test wrote under a prefix.
find_dist_file_sha locates a packed tarball/installer in dist/ and pairs
it with the short commit hash the build was stamped with.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Callable, Optional, Union

from ..infrastructure.aws.clients import get_aws_clients
from ..infrastructure.aws.s3 import S3Operations
from ..infrastructure.git.sha import git_sha

logger = logging.getLogger(__name__)


class DistFileNotFoundError(AssertionError):
    """Raised when no file in the dist directory matches the filter."""
    pass


async def delete_folder(
    bucket: str,
    folder: str,
    s3: Optional[S3Operations] = None,
) -> list[str]:
    """
    Delete every object in bucket whose key starts with folder.

    Issues one list call and, if anything matched, one batch delete.
    Only the first page of the listing is used; continuation tokens are
    not followed, so very large prefixes need repeated calls.

    An empty folder matches the whole bucket.

    Returns:
        Keys S3 reports as deleted, or an empty list if nothing matched
    """
    s3 = s3 or get_aws_clients().s3

    listing = await s3.list_objects(Bucket=bucket, Prefix=folder)
    found_keys = [obj["Key"] for obj in listing.get("Contents") or []]

    if listing.get("IsTruncated"):
        logger.warning(
            "Listing of s3://%s/%s was truncated; only the first %d keys will be deleted",
            bucket, folder, len(found_keys),
        )

    if not found_keys:
        return []

    response = await s3.delete_objects(
        Bucket=bucket,
        Delete={"Objects": [{"Key": key} for key in found_keys]},
    )
    deleted = [obj["Key"] for obj in (response or {}).get("Deleted") or []]

    logger.info(
        "Deleted folder",
        extra={"bucket": bucket, "prefix": folder, "count": len(deleted)}
    )

    return deleted


async def find_dist_file_sha(
    cwd: Union[str, Path],
    platform: str,
    predicate: Callable[[str], bool],
) -> tuple[str, str]:
    """
    Find the first file in {cwd}/dist/{platform}/ accepted by predicate.

    Returns:
        Tuple of (file name, short git sha of the current directory)

    Raises:
        DistFileNotFoundError: If no file matches
        FileNotFoundError: If the dist directory does not exist
    """
    dist_dir = Path(cwd) / "dist" / platform
    dist_files = sorted(await asyncio.to_thread(os.listdir, dist_dir))

    pkg = next((name for name in dist_files if predicate(name)), None)
    if pkg is None:
        raise DistFileNotFoundError(f"No matching file in {dist_dir}")

    return pkg, await git_sha(Path.cwd(), short=True)
