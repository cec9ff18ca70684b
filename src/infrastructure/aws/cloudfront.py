"""Async wrapper over CloudFront invalidations."""

import asyncio
import logging
from typing import Any

logger = logging.getLogger(__name__)


class CloudFrontOperations:
    """CDN operations bound to an AwsClients context."""

    def __init__(self, clients) -> None:
        self._clients = clients

    async def create_cloudfront_invalidation(self, **params: Any) -> None:
        """
        Request an invalidation for a distribution.

        Takes the arguments of boto3's create_invalidation (DistributionId,
        InvalidationBatch). Returns once CloudFront accepts the request; it
        does not wait for the invalidation to complete.
        """
        paths = params.get("InvalidationBatch", {}).get("Paths", {}).get("Items", [])
        logger.info(
            "createCloudfrontInvalidation %s %s", params.get("DistributionId"), paths
        )
        client = self._clients.cdn_client()
        await asyncio.to_thread(client.create_invalidation, **params)
