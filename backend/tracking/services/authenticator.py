import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError

from ..errors import DuplicateEmail, DuplicateUsername, InvalidCredentials, NotFound, Unauthenticated
from ..models.user import User, UserRole
from ..repositories.users import UserRepository
from ..utils.auth import Claims, PasswordHasher, TokenError, TokenService

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    user: User
    token: str


class Authenticator:
    """Registration, login and request authentication."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher, tokens: TokenService):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def register(
        self,
        username: str,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> AuthResult:
        #username first, so the first error a user sees is deterministic
        if self.users.find_by_username(username):
            raise DuplicateUsername()
        if self.users.find_by_email(email):
            raise DuplicateEmail()

        password_hash = self.hasher.hash(password)
        try:
            user = self.users.create(
                username=username,
                email=email,
                password_hash=password_hash,
                full_name=full_name,
                role=UserRole.SALES_EXECUTIVE,
            )
        except IntegrityError:
            #lost a race, or a deactivated account still holds the name/email
            self.users.rollback()
            if self.users.find_by_username(username, active_only=False):
                raise DuplicateUsername()
            if self.users.find_by_email(email, active_only=False):
                raise DuplicateEmail()
            raise

        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return AuthResult(user=user, token=self.tokens.issue(user))

    def login(self, username: str, password: str) -> AuthResult:
        user = self.users.find_by_username(username)
        if user is None:
            #unknown names take as long as wrong passwords
            self.hasher.burn(password)
            logger.warning("Login failed for %s: unknown or inactive user", username)
            raise InvalidCredentials()
        if not self.hasher.verify(password, user.password_hash):
            logger.warning("Login failed for %s: wrong password", username)
            raise InvalidCredentials()

        self.users.touch_last_login(user.id)
        logger.info("User %s logged in", user.username)
        return AuthResult(user=user, token=self.tokens.issue(user))

    def authenticate_request(self, token: Optional[str]) -> Claims:
        try:
            return self.tokens.verify(token)
        except TokenError as e:
            logger.info("Rejected token: %s", e)
            raise Unauthenticated()

    def profile(self, claims: Claims) -> User:
        user = self.users.get_active(claims.subject_id)
        if user is None:
            raise NotFound("User not found")
        return user
