from datetime import datetime, timedelta, timezone
from typing import Optional, Annotated

from fastapi import Header
from jose import JWTError, jwt
from pydantic import BaseModel

from config.settings import settings
from core.exceptions import ErrorCode, UnauthorizedError

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


class AccessUser(BaseModel):
    """access token에서 꺼낸 요청 사용자 정보"""
    id: int
    name: Optional[str] = None


def create_access_token(user_id: int, name: Optional[str] = None, expires_minutes: Optional[int] = None) -> str:
    # 발급은 인증 서버 담당, 여기서는 로컬 개발/테스트용
    minutes = expires_minutes if expires_minutes is not None else settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "name": name,
        "signedAt": now.isoformat(),
        "exp": now + timedelta(minutes=minutes),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def get_current_user(authorization: AuthHeader = None) -> AccessUser:
    if not authorization:
        raise UnauthorizedError("Missing Authorization header")

    # "Bearer <token>" 파싱
    try:
        scheme, token = authorization.split(" ", 1)
    except ValueError:
        raise UnauthorizedError("Invalid Authorization header format")

    if scheme.lower() != "bearer":
        raise UnauthorizedError("Invalid auth scheme")

    try:
        payload = jwt.decode(token.strip(), settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise UnauthorizedError("Invalid token", code=ErrorCode.TOKEN_INVALID)

    user_id = payload.get("id")
    if not isinstance(user_id, int):
        raise UnauthorizedError("Token has no user id", code=ErrorCode.TOKEN_INVALID)

    return AccessUser(id=user_id, name=payload.get("name"))
