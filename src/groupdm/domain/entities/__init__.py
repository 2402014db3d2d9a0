"""Domain entities."""

from groupdm.domain.entities.channel import ChannelRecord, ChannelType
from groupdm.domain.entities.group_channel import GroupChannel
from groupdm.domain.entities.user import User

__all__ = ["ChannelRecord", "ChannelType", "GroupChannel", "User"]
