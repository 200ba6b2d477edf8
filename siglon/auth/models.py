from pydantic import BaseModel


class AdminLogin(BaseModel):
    password: str


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_at: str
