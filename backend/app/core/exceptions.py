# backend/app/core/exceptions.py

from fastapi import status


class AppError(Exception):
    """
    클라이언트에게 {"message": ...} 형태로 그대로 내려가는 오류의 기본 클래스.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """필드 누락/형식 오류, 비즈니스 규칙 위반 (400)"""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class Conflict(AppError):
    """username/email 중복 (400)"""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class AuthRequired(AppError):
    """Authorization 헤더 없음 (401)"""
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class InvalidToken(AppError):
    """서명 불일치, 형식 오류, 만료 모두 동일하게 취급 (401)"""
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid or expired token"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"
