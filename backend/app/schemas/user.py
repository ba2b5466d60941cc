# backend/app/schemas/user.py

from typing import Optional

from pydantic import BaseModel, field_validator


def _strip_to_none(v):
    """
    Optional[str] 입력에서:
    - None은 그대로
    - "   " -> None
    - 그 외는 strip된 문자열
    """
    if v is None:
        return None
    if not isinstance(v, str):
        return v
    s = v.strip()
    return s or None


# ---------- 요청 스키마 (/api/auth/*) ----------
# 필수 여부는 핸들러에서 직접 검사합니다 ("All fields are required" 400 응답 유지)

class RegisterRequest(BaseModel):
    """
    [요청] POST /api/auth/register
    """
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("username", "email", mode="before")
    @classmethod
    def strip_identity(cls, v):
        return _strip_to_none(v)


class LoginRequest(BaseModel):
    """
    [요청] POST /api/auth/login
    """
    username: Optional[str] = None
    password: Optional[str] = None

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v):
        return _strip_to_none(v)


# ---------- 응답 스키마 ----------

class UserSummary(BaseModel):
    id: str
    username: str
    email: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserSummary


class MessageResponse(BaseModel):
    message: str
