from typing import Optional

from pydantic import ConfigDict, EmailStr, Field

from .base import CamelModel


class CartItemCreate(CamelModel):
    """A menu item placed in ``email``'s cart."""
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    menu_id: str
    name: str
    price: float = Field(ge=0)
    image: Optional[str] = None
    category: Optional[str] = None
    recipe: Optional[str] = None

    def document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
