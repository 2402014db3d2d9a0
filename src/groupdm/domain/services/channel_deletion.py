"""Group channel deletion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from groupdm.domain.entities.channel import ChannelRecord
    from groupdm.domain.entities.group_channel import GroupChannel
    from groupdm.domain.services.protocols import ChannelDeleter

logger = logging.getLogger(__name__)


async def delete_group_channel(
    channel: GroupChannel, client: ChannelDeleter
) -> ChannelRecord:
    """Delete a group channel through the service client.

    Only the current account's view of the channel is closed; messages are
    kept and the channel can be re-opened by ID. Errors raised by the client
    propagate as-is.

    Args:
        channel: Group channel to delete.
        client: Capability performing the remote deletion.

    Returns:
        The channel record returned by the client, unchanged.
    """
    logger.debug("Deleting group channel %s", channel.id)
    return await client.delete_channel(channel.id)
