"""
Credential utilities
Password hashing (passlib/bcrypt) and session tokens (python-jose JWT)
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError
from jose import jwt as jose_jwt
from passlib.context import CryptContext

from .config import BCRYPT_ROUNDS, JWT_ALGORITHM, JWT_EXPIRE_DAYS, JWT_SECRET
from .errors import InvalidToken

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


@dataclass(frozen=True)
class TokenPayload:
    subject_id: str
    email: str


# ============================================================================
# PASSWORD SECURITY
# ============================================================================


def hash_password(password: str) -> str:
    """Hash password using bcrypt"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against bcrypt hash"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification error: {e}")
        return False


# ============================================================================
# SESSION TOKENS
# ============================================================================


def create_access_token(
    subject_id: str, email: str, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a signed JWT binding a user id (``sub``) and email

    Args:
        subject_id: User primary key
        email: User email at issuance time
        expires_delta: Token lifetime (default JWT_EXPIRE_DAYS days)
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None else timedelta(days=JWT_EXPIRE_DAYS))

    to_encode: dict[str, Any] = {
        "sub": subject_id,
        "email": email,
        "iat": now,
        "exp": expire,
    }
    return jose_jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)


def verify_access_token(token: str) -> TokenPayload:
    """
    Verify and decode a session token

    Raises:
        InvalidToken: bad signature, expired token or missing claims
    """
    try:
        payload = jose_jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        raise InvalidToken(str(e)) from e

    subject_id = payload.get("sub")
    email = payload.get("email")
    if not isinstance(subject_id, str) or not isinstance(email, str):
        raise InvalidToken("Token payload is missing sub or email")

    return TokenPayload(subject_id=subject_id, email=email)
