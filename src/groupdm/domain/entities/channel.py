"""Channel record entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from groupdm.domain.entities.group_channel import GroupChannel


class ChannelType(IntEnum):
    """Channel kinds known to the messaging service."""

    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4


@dataclass(frozen=True)
class ChannelRecord:
    """Generic channel record returned by channel endpoints.

    Attributes:
        id: Channel snowflake ID.
        type: Channel kind. Kinds this package does not know stay raw ints.
        name: Channel name, if any.
        group: Parsed group channel when ``type`` is ``GROUP_DM``.
        raw: Original payload.
    """

    id: int
    type: ChannelType | int
    name: str | None = None
    group: GroupChannel | None = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_group(self) -> bool:
        """Whether this record carries a group channel."""
        return self.group is not None
