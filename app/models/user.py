from typing import Optional
from pydantic import BaseModel, Field


class UserIdentity(BaseModel):
    """Identidad pública del usuario, se pasa tal cual al leaderboard"""

    id: str = Field(..., alias="_id")
    username: str = "Unknown"
    avatar_url: Optional[str] = None

    class Config:
        populate_by_name = True
