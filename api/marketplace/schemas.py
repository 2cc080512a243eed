"""
Marketplace API schemas (request models).
"""

from __future__ import annotations

from pydantic import BaseModel


class CreateAccountRequest(BaseModel):
    # Missing values are stored as NULL; the password is hashed before storage.
    name: str | None = None
    email: str | None = None
    password: str | None = None
