"""
security helpers:
- Argon2 password hashing via argon2-cffi
- JWT access/refresh token creation and verification via PyJWT
- JTI generation for token identifiers
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, NamedTuple, Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from utils.exceptions import ExpiredToken, InvalidToken, MalformedToken

ph = PasswordHasher()

ACCESS = "access"
REFRESH = "refresh"

Clock = Callable[[], datetime]


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2
    """
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """ Verify a plaintext password using argon2
    """
    try:
        return ph.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def generate_jti() -> str:
    """Generate a unique JTI (JWT ID).
    """
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TokenSettings:
    access_secret: str
    refresh_secret: str
    algorithm: str = "HS256"
    access_expires: timedelta = timedelta(minutes=15)
    refresh_expires: timedelta = timedelta(days=7)
    issuer: str = "bucketlist-api"

    @classmethod
    def from_config(cls, config) -> "TokenSettings":
        return cls(
            access_secret=config["ACCESS_TOKEN_SECRET"],
            refresh_secret=config["REFRESH_TOKEN_SECRET"],
            algorithm=config.get("JWT_ALGORITHM", "HS256"),
            access_expires=config.get("ACCESS_TOKEN_EXPIRES", timedelta(minutes=15)),
            refresh_expires=config.get("REFRESH_TOKEN_EXPIRES", timedelta(days=7)),
            issuer=config.get("JWT_ISSUER", "bucketlist-api"),
        )

    def secret_for(self, token_type: str) -> str:
        return self.access_secret if token_type == ACCESS else self.refresh_secret

    def expires_for(self, token_type: str) -> timedelta:
        return self.access_expires if token_type == ACCESS else self.refresh_expires


class TokenPair(NamedTuple):
    access_token: str
    refresh_token: str


class TokenIssuer:
    """Signs access and refresh tokens for a user id. Nothing is persisted."""

    def __init__(self, settings: TokenSettings, clock: Clock = _now):
        self.settings = settings
        self.clock = clock

    def _issue(self, user_id: str, token_type: str) -> str:
        now = self.clock()
        exp = now + self.settings.expires_for(token_type)
        payload = {
            "iss": self.settings.issuer,
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
            "type": token_type,
            "jti": generate_jti(),
        }
        return jwt.encode(payload, self.settings.secret_for(token_type), algorithm=self.settings.algorithm)

    def issue_access_token(self, user_id: str) -> str:
        return self._issue(user_id, ACCESS)

    def issue_refresh_token(self, user_id: str) -> str:
        return self._issue(user_id, REFRESH)

    def issue_pair(self, user_id: str) -> TokenPair:
        return TokenPair(self.issue_access_token(user_id), self.issue_refresh_token(user_id))


class TokenVerifier:
    """
    Validates tokens minted by TokenIssuer and returns their subject.

    Expiry is checked against the injected clock rather than PyJWT's, so a
    token is expired from the exact second in its ``exp`` claim onwards.
    ``is_revoked`` receives the token's jti; when it returns True the token
    is rejected as invalid.
    """

    def __init__(
        self,
        settings: TokenSettings,
        clock: Clock = _now,
        is_revoked: Optional[Callable[[str], bool]] = None,
    ):
        self.settings = settings
        self.clock = clock
        self.is_revoked = is_revoked

    def _verify(self, token: str, token_type: str) -> str:
        if not isinstance(token, str) or not token:
            raise MalformedToken("Token is empty")
        try:
            decoded = jwt.decode(
                token,
                self.settings.secret_for(token_type),
                algorithms=[self.settings.algorithm],
                issuer=self.settings.issuer,
                options={"verify_exp": False, "verify_iat": False, "require": ["exp", "sub", "iat"]},
            )
        except jwt.InvalidSignatureError:
            raise InvalidToken("Invalid token: signature verification failed")
        except jwt.DecodeError as exc:
            raise MalformedToken(f"Malformed token: {exc}")
        except jwt.InvalidTokenError as exc:
            raise InvalidToken(f"Invalid token: {exc}")

        if decoded.get("type") != token_type:
            raise InvalidToken("Wrong token type")
        if int(self.clock().timestamp()) >= decoded["exp"]:
            raise ExpiredToken("Token expired")
        subject = decoded.get("sub")
        if not subject:
            raise InvalidToken("Invalid token: empty subject")
        if self.is_revoked is not None and self.is_revoked(decoded.get("jti", "")):
            raise InvalidToken("Token revoked")
        return subject

    def verify_access(self, token: str) -> str:
        return self._verify(token, ACCESS)

    def verify_refresh(self, token: str) -> str:
        return self._verify(token, REFRESH)
