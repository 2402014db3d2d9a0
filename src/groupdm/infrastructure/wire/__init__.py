"""Service payload conversion."""

from groupdm.infrastructure.wire.codec import (
    dump_group_channel,
    dump_user,
    parse_channel_record,
    parse_group_channel,
    parse_snowflake,
    parse_user,
)
from groupdm.infrastructure.wire.timestamps import format_timestamp, parse_timestamp

__all__ = [
    "dump_group_channel",
    "dump_user",
    "format_timestamp",
    "parse_channel_record",
    "parse_group_channel",
    "parse_snowflake",
    "parse_timestamp",
    "parse_user",
]
