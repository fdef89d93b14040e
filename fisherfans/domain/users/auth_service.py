"""Auth service - signup and password login"""

import logging
from dataclasses import dataclass

from ...errors import InvalidCredentials
from ...models import User
from ...security_utils import create_access_token, verify_password
from .schemas import UserCreate
from .service import UserService

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    token: str
    user: User


class AuthService:
    """Issues session tokens for new and returning users"""

    def __init__(self, users: UserService):
        self.users = users

    def signup(self, data: UserCreate) -> AuthResult:
        user = self.users.create(data)
        return self._build_auth_result(user)

    def login(self, email: str, password: str) -> AuthResult:
        """Unknown email and wrong password are reported identically"""
        user = self.users.find_by_email(email)

        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"⚠️ Failed login attempt for {email}")
            raise InvalidCredentials()

        logger.info(f"🔑 User {user.id} logged in")
        return self._build_auth_result(user)

    def _build_auth_result(self, user: User) -> AuthResult:
        return AuthResult(token=create_access_token(user.id, user.email), user=user)
