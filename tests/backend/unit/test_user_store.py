"""
Unit tests for services.user_store against an in-memory SQLite database.
"""
import pytest

from app.models.user import User
from app.services import user_store
from app.services.user_store import InvalidUserError, UserExistsError


pytestmark = pytest.mark.asyncio


async def test_create_and_lookup_by_each_key(db):
    user = await user_store.create_user("a@x.com", "Ann", "hash", user_id="ann")

    assert (await user_store.get_by_email("a@x.com")).id == user.id
    assert (await user_store.get_by_user_id("ann")).id == user.id
    assert (await user_store.get_by_id(user.id)).email == "a@x.com"


async def test_lookups_do_not_mix_identifier_spaces(db):
    await user_store.create_user("a@x.com", "Ann", "hash", user_id="ann")

    assert await user_store.get_by_email("ann") is None
    assert await user_store.get_by_user_id("a@x.com") is None


async def test_create_generates_user_id_when_missing(db):
    user = await user_store.create_user("b@x.com", "Bob", "hash")
    assert user.user_id.startswith("user_")
    assert user.created_at is not None
    assert user.updated_at is not None


async def test_duplicate_email_rejected(db):
    await user_store.create_user("a@x.com", "Ann", "hash", user_id="ann")
    with pytest.raises(UserExistsError):
        await user_store.create_user("a@x.com", "Other", "hash", user_id="other")
    assert await User.filter(email="a@x.com").count() == 1


async def test_duplicate_user_id_rejected(db):
    await user_store.create_user("a@x.com", "Ann", "hash", user_id="ann")
    with pytest.raises(UserExistsError):
        await user_store.create_user("c@x.com", "Cat", "hash", user_id="ann")


async def test_update_profile_is_partial(db):
    await user_store.create_user("a@x.com", "Ann", "hash", user_id="ann")

    updated = await user_store.update_profile("ann", profile_picture="pic.png")
    assert updated.name == "Ann"
    assert updated.profile_picture == "pic.png"

    updated = await user_store.update_profile("ann", name="Annie")
    assert updated.name == "Annie"
    assert updated.profile_picture == "pic.png"
    assert updated.password_hash == "hash"


async def test_update_profile_refreshes_updated_at(db):
    await user_store.create_user("a@x.com", "Ann", "hash", user_id="ann")

    first = await user_store.update_profile("ann")
    second = await user_store.update_profile("ann")
    assert second.updated_at > first.updated_at
    assert second.name == "Ann"


async def test_update_profile_unknown_user(db):
    assert await user_store.update_profile("ghost", name="Nobody") is None


async def test_ping(db):
    await user_store.ping()


async def test_create_rejects_over_long_name(db):
    with pytest.raises(InvalidUserError):
        await user_store.create_user("a@x.com", "n" * 300, "hash", user_id="ann")
    assert await User.filter(email="a@x.com").count() == 0
