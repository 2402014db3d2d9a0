"""Common fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from groupdm.domain.entities import GroupChannel, User


@pytest.fixture
def alice() -> User:
    """Create test user Alice."""
    return User(id=111, name="Alice")


@pytest.fixture
def bob() -> User:
    """Create test user Bob."""
    return User(id=222, name="Bob")


@pytest.fixture
def carol() -> User:
    """Create test user Carol."""
    return User(id=333, name="Carol")


@pytest.fixture
def pin_timestamp() -> datetime:
    """Create a pin timestamp with a non-UTC offset."""
    return datetime(2024, 1, 1, 21, 0, 0, tzinfo=timezone(timedelta(hours=9)))


@pytest.fixture
def group(alice: User, bob: User, pin_timestamp: datetime) -> GroupChannel:
    """Create an unnamed group with two recipients."""
    return GroupChannel(
        id=81384788765712384,
        owner_id=alice.id,
        recipients=(alice, bob),
        icon="a1b2c3",
        last_message_id=81385012345678901,
        last_pin_timestamp=pin_timestamp,
    )
