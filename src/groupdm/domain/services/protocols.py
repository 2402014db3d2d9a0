"""Domain service protocols."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from groupdm.domain.entities.channel import ChannelRecord


class ChannelDeleter(Protocol):
    """Channel deletion capability of the messaging service client.

    Implementations perform the remote call, including transport,
    authentication and retries.
    """

    async def delete_channel(self, channel_id: int) -> ChannelRecord:
        """Delete (close) a channel by ID.

        Args:
            channel_id: Channel snowflake ID.

        Returns:
            The channel record reported by the service.
        """
        ...
