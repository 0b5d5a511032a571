"""
Credential hashing and identity tokens.

PasswordHasher wraps bcrypt; TokenService issues and verifies the HS256 JWTs
carried as ``Authorization: Bearer <token>``. Both are built once at app start
from Settings and shared read-only between requests.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import bcrypt
import jwt

from ..models.user import UserRole

#bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """Salted one-way hashing of passwords."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._dummy_hash = None

    def hash(self, password: str) -> str:
        #a fresh random salt is embedded in every hash
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    def burn(self, password: str) -> None:
        """Spend the same work as a real verify, for logins with no stored hash."""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("not-a-real-password")
        self.verify(password, self._dummy_hash)

    def verify(self, password: str, password_hash: Optional[str]) -> bool:
        """Check a password against a stored hash; malformed hashes never match."""
        if not password_hash or password is None:
            return False
        try:
            return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False


# =============================================================================
# Token Validation
# =============================================================================

class TokenError(Exception):
    """Base exception for token errors."""


class TokenExpired(TokenError):
    """Token has expired."""


class TokenBadSignature(TokenError):
    """Token signature does not match the signing secret."""


class TokenMalformed(TokenError):
    """Token cannot be parsed or carries invalid claims."""


@dataclass(frozen=True)
class Claims:
    """Verified payload of an identity token."""
    subject_id: int
    username: str
    role: UserRole
    issued_at: datetime
    expires_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMINISTRATOR


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issues and verifies signed, time-limited identity tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=7),
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_in = expires_in
        self.clock = clock

    def issue(self, user) -> str:
        return self.issue_claims(user.id, user.username, user.role)

    def issue_claims(self, subject_id: int, username: str, role) -> str:
        role = UserRole.parse(role)
        issued_at = int(self.clock().timestamp())
        payload = {
            #PyJWT requires "sub" to be a string
            "sub": str(subject_id),
            "username": username,
            "role": role.value,
            "iat": issued_at,
            "exp": issued_at + int(self.expires_in.total_seconds()),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Claims:
        """
        Decode and validate a token.

        Raises:
            TokenMalformed: token cannot be parsed or lacks valid claims
            TokenBadSignature: MAC does not match
            TokenExpired: now >= exp
        """
        if not token or not isinstance(token, str):
            raise TokenMalformed("Token is empty")
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                #time claims are checked below against our own clock
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": ["sub", "username", "role", "iat", "exp"],
                },
            )
        except jwt.InvalidSignatureError as e:
            raise TokenBadSignature(str(e))
        except jwt.InvalidTokenError as e:
            raise TokenMalformed(f"Invalid token: {e}")

        issued_at, expires_at = payload["iat"], payload["exp"]
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise TokenMalformed("Token time claims must be integers")
        if self.clock().timestamp() >= expires_at:
            raise TokenExpired("Token has expired")

        try:
            subject_id = int(payload["sub"])
            role = UserRole.parse(payload["role"])
        except (TypeError, ValueError) as e:
            raise TokenMalformed(f"Invalid token claims: {e}")
        if not isinstance(payload["username"], str):
            raise TokenMalformed("Invalid token claims: username")

        return Claims(
            subject_id=subject_id,
            username=payload["username"],
            role=role,
            issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
        )
