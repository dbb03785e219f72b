# app/models/user.py
"""
Database model for users.
Represents an account in the system: login credentials, profile fields and
the opaque wallet/NFT attributes that are passed through unchanged.
"""
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as a bcrypt hash (never store plain text passwords)
    - password_hash may be null for legacy rows; such accounts cannot log in
    - email and user_id are unique at the storage level, so concurrent
      registrations for the same account fail on insert instead of racing
    """
    id = fields.IntField(pk=True)  # Surrogate key, store-assigned
    user_id = fields.CharField(max_length=128, unique=True, index=True)  # External identifier
    email = fields.CharField(max_length=256, unique=True, index=True)
    name = fields.CharField(max_length=255)
    password_hash = fields.CharField(max_length=255, null=True)
    profile_picture = fields.TextField(null=True)
    wallet_address = fields.CharField(max_length=128, null=True)
    nft_tier = fields.CharField(max_length=64, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
