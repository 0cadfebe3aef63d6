"""
ElevenLabs Python Client - Usage Resource
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class UsageResource(BaseResource):
    """Resource for character usage statistics."""

    def get_character_stats(
        self,
        start_unix: int,
        end_unix: int,
        include_workspace_metrics: Optional[bool] = None,
        breakdown_type: Optional[str] = None,
        aggregation_interval: Optional[str] = None,
        aggregation_bucket_size: Optional[int] = None,
        metric: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Get character usage over a time range.

        Args:
            start_unix: Range start, in milliseconds since the epoch
            end_unix: Range end, in milliseconds since the epoch
            include_workspace_metrics: Include usage of the whole workspace
            breakdown_type: How to split the usage (voice, user, model, ...)
            aggregation_interval: "hour", "day", "week", "month" or "cumulative"
            aggregation_bucket_size: Bucket size in seconds
            metric: Metric to aggregate, e.g. "credits"

        Returns:
            Dict with ``time`` and ``usage`` series

        Example:
            >>> stats = client.usage.get_character_stats(
            ...     start_unix=1704067200000,
            ...     end_unix=1706745600000,
            ...     breakdown_type="voice",
            ... )
        """
        params = {
            "start_unix": start_unix,
            "end_unix": end_unix,
            "include_workspace_metrics": include_workspace_metrics,
            "breakdown_type": breakdown_type,
            "aggregation_interval": aggregation_interval,
            "aggregation_bucket_size": aggregation_bucket_size,
            "metric": metric,
        }
        return self._get(Endpoints.USAGE_CHARACTER_STATS, params=params)
