from typing import Optional

from pydantic import BaseModel


class AuthUrlResponse(BaseModel):
    auth_url: str
    code_verifier: str
    state: Optional[str] = None


class TokenRequest(BaseModel):
    code: str
    code_verifier: str


class RefreshRequest(BaseModel):
    refresh_token: str


class TokenPayload(BaseModel):
    access_token: Optional[str]
    refresh_token: Optional[str]
    expires_in: int
    expires_at: int
