# brewmind/services/auth.py
import base64
import binascii
import secrets
from typing import Optional

AUTH_REQUIRED = "Authentication required."
INVALID_CREDENTIALS = "Invalid username or password."


class AuthError(Exception):
    pass


def decode_basic_credentials(authorization: Optional[str]):
    """Returns (username, password) from a Basic Authorization header."""
    if not authorization or not authorization.startswith("Basic "):
        raise AuthError(AUTH_REQUIRED)
    try:
        decoded = base64.b64decode(authorization[6:].strip()).decode("utf-8", errors="replace")
    except (binascii.Error, ValueError) as e:
        raise AuthError(INVALID_CREDENTIALS) from e
    username, _, password = decoded.partition(":")
    return username, password


def verify_basic_auth(authorization: Optional[str], expected_username: str, expected_password: str) -> None:
    username, password = decode_basic_credentials(authorization)
    user_ok = secrets.compare_digest(username.encode(), expected_username.encode())
    pass_ok = secrets.compare_digest(password.encode(), expected_password.encode())
    if not (user_ok and pass_ok):
        raise AuthError(INVALID_CREDENTIALS)
