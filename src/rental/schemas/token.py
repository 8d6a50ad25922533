from pydantic import BaseModel, ConfigDict, EmailStr


class TokenRequest(BaseModel):
    # Sign-in clients post their whole profile here; only the email is signed.
    model_config = ConfigDict(extra="ignore")

    email: EmailStr


class TokenResponse(BaseModel):
    token: str
