# app/schemas/user.py
"""
Response projections of the User row.
None of them carries password_hash; each endpoint exposes its own subset.
"""
import datetime as dt

from pydantic import BaseModel, ConfigDict

class UserBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    email: str
    name: str

class RegisteredUser(UserBase):
    """Returned by registration."""
    created_at: dt.datetime

class UpdatedUser(UserBase):
    """Returned by profile update."""
    profile_picture: str | None = None
    updated_at: dt.datetime

class PublicUser(UserBase):
    """Returned by lookup by id."""
    profile_picture: str | None = None
    wallet_address: str | None = None
    nft_tier: str | None = None
    created_at: dt.datetime

class SessionUser(PublicUser):
    """Returned by login."""
    updated_at: dt.datetime

def dump_user(schema: type[UserBase], user) -> dict:
    """Project an ORM row through ``schema`` into JSON-ready data."""
    return schema.model_validate(user).model_dump(mode="json")
