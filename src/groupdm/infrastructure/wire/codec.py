"""Conversion between service payloads and domain entities.

Payloads are the decoded JSON objects the messaging service sends for
channels and users. Snowflake IDs arrive as decimal strings (older
payloads sometimes use integers) and are written back as strings.
"""

import logging
from collections.abc import Mapping
from typing import Any

from groupdm.domain.entities import ChannelRecord, ChannelType, GroupChannel, User
from groupdm.domain.exceptions import PayloadError
from groupdm.infrastructure.wire.timestamps import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)


def parse_snowflake(value: Any, key: str = "id") -> int:
    """Convert a snowflake ID from a payload to int.

    Args:
        value: ID as int or decimal string.
        key: Payload key, used in the error.

    Returns:
        The ID as int.

    Raises:
        PayloadError: The value is not a non-negative integer ID.
    """
    # bool is an int subclass but never a valid ID
    if isinstance(value, bool):
        raise PayloadError(key, f"Field '{key}' is not a snowflake: {value!r}")
    if isinstance(value, int) and value >= 0:
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise PayloadError(key, f"Field '{key}' is not a snowflake: {value!r}")


def _require(data: Mapping[str, Any], key: str) -> Any:
    if key not in data or data[key] is None:
        raise PayloadError(key, f"Required field '{key}' is missing")
    return data[key]


def _optional_snowflake(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    return parse_snowflake(value, key)


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise PayloadError(key, f"Field '{key}' is not a string: {value!r}")
    return value


def _optional_bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise PayloadError(key, f"Field '{key}' is not a boolean: {value!r}")
    return value


def parse_user(data: Mapping[str, Any]) -> User:
    """Build a User from a user payload.

    Args:
        data: User object payload.

    Returns:
        User entity.

    Raises:
        PayloadError: A required field is missing or malformed.
    """
    name = _require(data, "username")
    if not isinstance(name, str):
        raise PayloadError("username", f"Field 'username' is not a string: {name!r}")
    return User(
        id=parse_snowflake(_require(data, "id")),
        name=name,
        discriminator=_optional_str(data, "discriminator"),
        avatar=_optional_str(data, "avatar"),
        is_bot=_optional_bool(data, "bot"),
    )


def dump_user(user: User) -> dict[str, Any]:
    """Convert a User to a user payload."""
    return {
        "id": str(user.id),
        "username": user.name,
        "discriminator": user.discriminator,
        "avatar": user.avatar,
        "bot": user.is_bot,
    }


def parse_group_channel(data: Mapping[str, Any]) -> GroupChannel:
    """Build a GroupChannel from a channel payload.

    Recipient order is kept exactly as sent.

    Args:
        data: Channel object payload of a group channel.

    Returns:
        GroupChannel entity.

    Raises:
        PayloadError: A required field is missing or malformed.
    """
    recipients_data = _require(data, "recipients")
    if not isinstance(recipients_data, list):
        raise PayloadError("recipients", "Field 'recipients' is not a list")

    last_pin = data.get("last_pin_timestamp")
    if last_pin is not None and not isinstance(last_pin, str):
        raise PayloadError(
            "last_pin_timestamp",
            f"Field 'last_pin_timestamp' is not a string: {last_pin!r}",
        )
    try:
        last_pin_timestamp = parse_timestamp(last_pin) if last_pin else None
    except ValueError as e:
        raise PayloadError(
            "last_pin_timestamp", f"Field 'last_pin_timestamp' is invalid: {e}"
        ) from e

    return GroupChannel(
        id=parse_snowflake(_require(data, "id")),
        owner_id=parse_snowflake(_require(data, "owner_id"), "owner_id"),
        recipients=tuple(parse_user(item) for item in recipients_data),
        icon=_optional_str(data, "icon"),
        last_message_id=_optional_snowflake(data, "last_message_id"),
        last_pin_timestamp=last_pin_timestamp,
        name=_optional_str(data, "name"),
    )


def dump_group_channel(channel: GroupChannel) -> dict[str, Any]:
    """Convert a GroupChannel to a channel payload.

    Every optional field is written, as null when absent.
    """
    return {
        "id": str(channel.id),
        "type": int(ChannelType.GROUP_DM),
        "icon": channel.icon,
        "last_message_id": (
            str(channel.last_message_id)
            if channel.last_message_id is not None
            else None
        ),
        "last_pin_timestamp": (
            format_timestamp(channel.last_pin_timestamp)
            if channel.last_pin_timestamp is not None
            else None
        ),
        "name": channel.name,
        "owner_id": str(channel.owner_id),
        "recipients": [dump_user(user) for user in channel.recipients],
    }


def parse_channel_record(data: Mapping[str, Any]) -> ChannelRecord:
    """Build a ChannelRecord from any channel payload.

    Group channels are parsed in full; other kinds keep only the
    common fields plus the raw payload.

    Args:
        data: Channel object payload.

    Returns:
        ChannelRecord entity.

    Raises:
        PayloadError: A required field is missing or malformed.
    """
    raw_type = _require(data, "type")
    if isinstance(raw_type, bool) or not isinstance(raw_type, int):
        raise PayloadError("type", f"Field 'type' is not an integer: {raw_type!r}")
    try:
        channel_type: ChannelType | int = ChannelType(raw_type)
    except ValueError:
        logger.debug("Unknown channel type %d", raw_type)
        channel_type = raw_type

    group = parse_group_channel(data) if channel_type == ChannelType.GROUP_DM else None

    return ChannelRecord(
        id=parse_snowflake(_require(data, "id")),
        type=channel_type,
        name=_optional_str(data, "name"),
        group=group,
        raw=dict(data),
    )
