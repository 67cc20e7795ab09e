"""Password hashing and signed access tokens."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from jose.utils import base64url_decode, base64url_encode
from passlib.context import CryptContext

import config
from errors import ExpiredToken, InvalidToken

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=config.BCRYPT_ROUNDS)


@dataclass(frozen=True)
class Identity:
    """Claims carried by a verified access token"""
    user_id: int
    username: str


def hash_password(password: str) -> str:
    """Hash a plain text password using the configured password hashing context"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify if a plain text password matches its hashed version"""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def dummy_verify() -> None:
    """Spend the same time as a real verification when there is no user to check"""
    pwd_context.dummy_verify()


def create_access_token(identity: Identity,
                        secret: str = config.SECRET_KEY,
                        expires_delta: timedelta | None = None) -> str:
    """Create a new JWT access token for the given identity"""
    expire = datetime.now(timezone.utc) + (
        expires_delta if expires_delta is not None
        else timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"sub": identity.username, "id": identity.user_id, "exp": expire}
    return jwt.encode(to_encode, secret, algorithm=config.ALGORITHM)


def _has_canonical_signature(token: str) -> bool:
    """True when the signature segment re-encodes to exactly the same text.

    The last base64url character carries spare bits that decoders ignore, so
    several spellings map to one signature unless the segment is canonical.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return False
    segment = parts[2].encode("ascii", errors="replace")
    try:
        return base64url_encode(base64url_decode(segment)) == segment
    except (ValueError, TypeError):
        return False


def decode_access_token(token: str, secret: str = config.SECRET_KEY) -> Identity:
    """Verify a JWT access token and return the identity it asserts.

    Raises InvalidToken when the signature does not match or the payload is
    unusable, and ExpiredToken once the current time reaches ``exp``.
    """
    if not _has_canonical_signature(token):
        raise InvalidToken()
    try:
        payload = jwt.decode(token,
                             secret,
                             algorithms=[config.ALGORITHM],
                             options={"verify_exp": False})
    except JWTError:
        raise InvalidToken()

    username, user_id, expire = payload.get("sub"), payload.get("id"), payload.get("exp")
    if not isinstance(username, str) or not isinstance(user_id, int) or isinstance(user_id, bool):
        raise InvalidToken()
    if not isinstance(expire, (int, float)):
        raise InvalidToken()

    if datetime.now(timezone.utc).timestamp() >= expire:
        raise ExpiredToken()
    return Identity(user_id=user_id, username=username)
