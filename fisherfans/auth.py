import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import InvalidToken, Unauthenticated
from .security_utils import verify_access_token

logger = logging.getLogger(__name__)

# Anonymous requests are allowed; scoped operations call require_auth themselves
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """Verified caller attached to a request"""

    subject_id: str
    email: str


def identity_from_token(token: str) -> Optional[Identity]:
    """Resolve a bearer token to an Identity, or None when it does not verify"""
    try:
        payload = verify_access_token(token)
    except InvalidToken as e:
        logger.info(f"🔒 Ignoring invalid bearer token: {e}")
        return None

    return Identity(subject_id=payload.subject_id, email=payload.email)


async def get_optional_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[Identity]:
    """Get the caller identity from an optional Bearer token"""
    if not credentials:
        return None

    return identity_from_token(credentials.credentials)


def require_auth(identity: Optional[Identity], expected_subject_id: Optional[str] = None) -> Identity:
    """
    Ensure the request is authenticated, optionally as a specific user.

    A missing identity and an identity for another user raise the same error,
    so callers cannot probe which user ids exist.
    """
    if identity is None:
        raise Unauthenticated()

    if expected_subject_id is not None and identity.subject_id != expected_subject_id:
        logger.warning(
            f"⚠️ User {identity.subject_id} attempted to act as user {expected_subject_id}"
        )
        raise Unauthenticated()

    return identity
