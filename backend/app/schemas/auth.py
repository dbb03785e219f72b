# app/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Fields are optional at the schema level so the handlers can answer missing
input with their own 400 messages instead of a generic validation error.
"""
from pydantic import BaseModel

class LoginRequest(BaseModel):
    """Credentials for POST /api/auth/login."""
    email: str | None = None
    password: str | None = None  # Plain text, compared against the bcrypt hash

class RegisterRequest(BaseModel):
    """Payload for POST /api/auth/register."""
    email: str | None = None
    password: str | None = None
    name: str | None = None
    user_id: str | None = None  # Generated when omitted

class UpdateProfileRequest(BaseModel):
    """Payload for POST/PUT /api/auth/update-profile."""
    userId: str | None = None
    name: str | None = None
    profile_picture: str | None = None
