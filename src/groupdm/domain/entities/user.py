"""User entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """User entity as reported by the messaging service.

    Attributes:
        id: User snowflake ID.
        name: Display name (``username`` on the wire).
        discriminator: Legacy four-digit tag, if the service still sends one.
        avatar: Avatar hash.
        is_bot: Whether the user is a bot.
    """

    id: int
    name: str
    discriminator: str | None = None
    avatar: str | None = None
    is_bot: bool = False
