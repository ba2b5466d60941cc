import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.exceptions import AuthRequired, InvalidToken
from app.core.security import TokenIssuer, get_token_issuer

logger = logging.getLogger(__name__)

# auto_error=False: 헤더가 없을 때도 우리 쪽 AuthRequired 메시지로 응답
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> str:
    """
    Authorization: Bearer <token> 을 검증하고 user_id (sub)를 반환합니다.
    만료/위조/형식 오류는 클라이언트에게 구분하지 않고 모두 401.
    """
    if credentials is None or not credentials.credentials:
        logger.info("Rejected request without bearer token")
        raise AuthRequired()

    try:
        return issuer.verify(credentials.credentials)
    except InvalidToken:
        logger.warning("Rejected invalid or expired token")
        raise
