from typing import List

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """DTO for user response (no password hash)"""
    id: str
    username: str
    favorites: List[str] = Field(default_factory=list)
