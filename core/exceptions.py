"""
core/exceptions.py

- 서비스 계층에서 발생시키는 도메인 예외 모음
- middlewares/error_handler.py 가 이 예외들을 표준 에러 JSON으로 변환한다
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """표준 에러 코드"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    TOKEN_INVALID = "TOKEN_INVALID"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    NOTICE_NOT_FOUND = "NOTICE_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    PROVIDER_NOT_FOUND = "PROVIDER_NOT_FOUND"


class AppException(Exception):
    """애플리케이션 예외의 공통 부모 (code / message / status_code 보유)"""

    status_code: int = 500
    default_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


class NotFoundError(AppException):
    status_code = 404
    default_code = ErrorCode.RESOURCE_NOT_FOUND


class ValidationError(AppException):
    status_code = 422
    default_code = ErrorCode.VALIDATION_ERROR


class UnauthorizedError(AppException):
    status_code = 401
    default_code = ErrorCode.AUTHENTICATION_FAILED
