# backend/app/core/security.py

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Optional, Union

from fastapi.concurrency import run_in_threadpool
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import get_settings
from app.core.exceptions import InvalidToken


# ---------- 비밀번호 ----------

@lru_cache
def get_password_context() -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().BCRYPT_ROUNDS,
    )


async def hash_password(plain: str) -> str:
    """
    salt 생성 + bcrypt 해시. 연산 비용이 커서 스레드풀에서 실행합니다.
    """
    return await run_in_threadpool(get_password_context().hash, plain)


async def verify_password(plain: str, hashed: str) -> bool:
    return await run_in_threadpool(get_password_context().verify, plain, hashed)


# ---------- 세션 토큰 (JWT) ----------

class TokenIssuer:
    """
    user id를 sub로 담은 Access Token 발급/검증기.
    서명 키는 생성자로 주입받습니다 (전역 환경 변수 직접 참조 X).
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: Optional[str] = None,
        expire_minutes: Optional[int] = None,
    ):
        # 알고리즘/만료 기본값은 Settings 한 곳에서만 관리
        settings = get_settings()
        self.secret_key = secret_key
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.expire_minutes = expire_minutes if expire_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def issue(self, subject: Union[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expire_minutes)
        expire = datetime.now(timezone.utc) + expires_delta
        to_encode = {"exp": expire, "sub": str(subject), "type": "access"}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        서명/형식/만료 중 무엇이 실패해도 InvalidToken 하나로 통일합니다.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidToken() from e

        user_id = payload.get("sub")
        if not user_id or payload.get("type") != "access":
            raise InvalidToken()
        return user_id


@lru_cache
def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return TokenIssuer(
        secret_key=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )
