"""Display name resolution for group channels."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from groupdm.domain.entities.group_channel import GroupChannel

EMPTY_GROUP_NAME = "Empty Group"


def display_name(channel: GroupChannel) -> str:
    """Resolve the name to show for a group channel.

    An explicit name always wins, even an empty one. Otherwise the
    recipients' names are listed in stored order, e.g.
    "person 1, person 2, person 3". Empty recipient names still take
    their slot.

    Args:
        channel: The group channel.

    Returns:
        The explicit name, the comma-separated recipient names,
        or "Empty Group" if there are no recipients.
    """
    if channel.name is not None:
        return channel.name
    if not channel.recipients:
        return EMPTY_GROUP_NAME
    return ", ".join(recipient.name for recipient in channel.recipients)
