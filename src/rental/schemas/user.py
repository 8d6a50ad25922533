from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Profile submitted on sign-up. The role is never client-controlled."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    email: EmailStr
    name: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")

    def profile(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class AdminStatus(BaseModel):
    admin: bool
