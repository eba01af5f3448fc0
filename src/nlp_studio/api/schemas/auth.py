"""Session profile schemas."""
from typing import Optional

from pydantic import BaseModel


class ProfileResponse(BaseModel):
    """Identity-provider profile kept in the session."""
    id: str
    displayName: Optional[str] = None
    email: Optional[str] = None
    photo: Optional[str] = None


class LogoutResponse(BaseModel):
    message: str = "Logged out"
