import pytest

from core.exceptions import ErrorCode, UnauthorizedError
from dependencies.security import create_access_token, get_current_user


def test_token_round_trip_gives_user():
    user = get_current_user(f"Bearer {create_access_token(7, 'kim')}")

    assert user.id == 7
    assert user.name == "kim"


@pytest.mark.parametrize("header", [None, "", "Token abc", "Bearerabc"])
def test_malformed_header_is_unauthorized(header):
    with pytest.raises(UnauthorizedError) as exc:
        get_current_user(header)
    assert exc.value.code == ErrorCode.AUTHENTICATION_FAILED


def test_expired_token_is_invalid():
    token = create_access_token(7, expires_minutes=-1)

    with pytest.raises(UnauthorizedError) as exc:
        get_current_user(f"Bearer {token}")
    assert exc.value.code == ErrorCode.TOKEN_INVALID
