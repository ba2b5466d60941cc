# backend/app/api/endpoints/auth.py
import logging

from fastapi import APIRouter, Depends, status

from app.core.exceptions import AppError, Conflict, InternalError, ValidationError
from app.core.security import TokenIssuer, get_token_issuer, hash_password, verify_password
from app.crud import schedules as schedule_crud
from app.crud import users as users_crud
from app.models.user import UserInDB
from app.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserSummary

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])

# 아이디가 없든 비밀번호가 틀리든 같은 메시지 (계정 존재 여부 노출 방지)
INVALID_CREDENTIALS = "Invalid credentials"


def _to_summary(user: UserInDB) -> UserSummary:
    return UserSummary(id=str(user.id), username=user.username, email=user.email)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    try:
        if not payload.username or not payload.email or not payload.password:
            raise ValidationError("All fields are required")

        if await users_crud.user_exists(username=payload.username, email=payload.email):
            raise Conflict("User already exists")

        password_hash = await hash_password(payload.password)
        user = await users_crud.create_user(
            username=payload.username,
            email=payload.email,
            password_hash=password_hash,
        )

        # 기본 스케줄 생성 (실패해도 유저는 롤백하지 않음, 조회 시 다시 생성됨)
        await schedule_crud.get_or_create_schedule(str(user.id))

        logger.info("Registered user %s (%s)", user.id, user.username)
        return AuthResponse(
            message="User registered successfully",
            token=issuer.issue(user.id),
            user=_to_summary(user),
        )
    except AppError:
        raise
    except Exception as e:
        logger.exception("Registration error")
        raise InternalError() from e


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    try:
        if not payload.username or not payload.password:
            raise ValidationError("All fields are required")

        user = await users_crud.get_user_by_username(payload.username)
        if user is None:
            logger.warning("Login failed: unknown username")
            raise ValidationError(INVALID_CREDENTIALS)

        if not await verify_password(payload.password, user.password_hash):
            logger.warning("Login failed: wrong password for user %s", user.id)
            raise ValidationError(INVALID_CREDENTIALS)

        logger.info("User %s logged in", user.id)
        return AuthResponse(
            message="Login successful",
            token=issuer.issue(user.id),
            user=_to_summary(user),
        )
    except AppError:
        raise
    except Exception as e:
        logger.exception("Login error")
        raise InternalError() from e
