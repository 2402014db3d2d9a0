"""Domain services."""

from groupdm.domain.services.channel_deletion import delete_group_channel
from groupdm.domain.services.group_naming import EMPTY_GROUP_NAME, display_name
from groupdm.domain.services.protocols import ChannelDeleter

__all__ = [
    "EMPTY_GROUP_NAME",
    "ChannelDeleter",
    "delete_group_channel",
    "display_name",
]
