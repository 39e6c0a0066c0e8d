"""
Authentication flow: register, login, refresh (with rotation) and access
token authentication.

The service only talks to the credential store through
find_user_by_email / find_user_by_id / update_last_login / create_user, so
tests can hand it an in-memory store.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from utils.exceptions import (
    EmailTaken,
    MissingToken,
    PasswordMismatch,
    StoreUnavailable,
    UnknownSubject,
    UnknownUser,
)
from utils.security import (
    Clock,
    TokenIssuer,
    TokenPair,
    TokenSettings,
    TokenVerifier,
    _now,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

# Verified against when the email is unknown so both login failures cost one argon2 verify
_DUMMY_HASH = hash_password("bucketlist-dummy-password")


class AuthService:
    def __init__(self, store, settings: TokenSettings, clock: Optional[Clock] = None, is_revoked=None):
        self.store = store
        self.clock = clock or _now
        self.issuer = TokenIssuer(settings, clock=self.clock)
        self.verifier = TokenVerifier(settings, clock=self.clock, is_revoked=is_revoked)

    def register(self, email: str, name: Optional[str], password: str):
        if self.store.find_user_by_email(email) is not None:
            raise EmailTaken(email)
        user = self.store.create_user(email, name, hash_password(password))
        logger.info("registered user %s", user.id)
        return user

    def login(self, email: str, password: str) -> Tuple[object, TokenPair]:
        user = self.store.find_user_by_email(email)
        if user is None:
            verify_password(password, _DUMMY_HASH)
            logger.info("login failed: no user for email")
            raise UnknownUser("No such user")
        if not verify_password(password, user.password_hash):
            logger.info("login failed: password mismatch for user %s", user.id)
            raise PasswordMismatch("Password mismatch")

        pair = self.issuer.issue_pair(user.id)
        try:
            self.store.update_last_login(user.id, self.clock())
        except StoreUnavailable:
            logger.warning("could not record last login for user %s", user.id, exc_info=True)
        logger.info("user %s logged in", user.id)
        return user, pair

    def _resolve(self, user_id: str):
        user = self.store.find_user_by_id(user_id)
        if user is None:
            raise UnknownSubject(f"No such user: {user_id}")
        return user

    def authenticate(self, access_token: str):
        """Verify an access token and return the user it was issued to."""
        return self._resolve(self.verifier.verify_access(access_token))

    def refresh(self, refresh_token: Optional[str]) -> TokenPair:
        """
        Exchange a refresh token for a new access/refresh pair.
        The old refresh token stays valid until its own expiry.
        """
        if not refresh_token:
            raise MissingToken("No refresh token")
        user = self._resolve(self.verifier.verify_refresh(refresh_token))
        logger.debug("rotating refresh token for user %s", user.id)
        return self.issuer.issue_pair(user.id)
