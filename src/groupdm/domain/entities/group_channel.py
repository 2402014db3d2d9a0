"""Group channel entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from groupdm.domain.entities.user import User
from groupdm.domain.services import channel_deletion, group_naming

if TYPE_CHECKING:
    from groupdm.domain.entities.channel import ChannelRecord
    from groupdm.domain.services.protocols import ChannelDeleter


@dataclass(frozen=True)
class GroupChannel:
    """A group channel with several recipients and no guild.

    Fields other than ``id`` are snapshots of what the service last reported;
    newer state arrives as a new instance, never by mutation.

    Attributes:
        id: Channel snowflake ID.
        owner_id: ID of the recipient who owns the group.
        recipients: Recipients in the order the service returned them.
        icon: Icon hash.
        last_message_id: ID of the last message sent.
        last_pin_timestamp: When the most recent message was pinned.
        name: Explicit group name.
    """

    id: int
    owner_id: int
    recipients: tuple[User, ...] = field(default_factory=tuple)
    icon: str | None = None
    last_message_id: int | None = None
    last_pin_timestamp: datetime | None = None
    name: str | None = None

    @property
    def display_name(self) -> str:
        """Name to show for the group. See ``group_naming.display_name``."""
        return group_naming.display_name(self)

    async def delete(self, client: ChannelDeleter) -> ChannelRecord:
        """Close the group for the current account.

        Message history is kept and the group can be re-opened.

        Args:
            client: Capability performing the remote deletion.

        Returns:
            The channel record reported by the service.
        """
        return await channel_deletion.delete_group_channel(self, client)
