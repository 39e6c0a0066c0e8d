"""
Credential store: the user lookups and writes the authentication flow needs.

Connection-level failures (OperationalError, InterfaceError) are re-raised
as StoreUnavailable; so is any failure of the last-login write. Nothing here
retries.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import InterfaceError, OperationalError, SQLAlchemyError

from models.user import User, normalize_email
from utils.exceptions import StoreUnavailable

# DBAPI errors meaning the database could not be reached or talked to
UNAVAILABLE_ERRORS = (OperationalError, InterfaceError)


class CredentialStore:
    def __init__(self, storage):
        self.storage = storage

    def find_user_by_email(self, email: str) -> Optional[User]:
        try:
            session = self.storage.get_session()
            return session.query(User).filter(User.email == normalize_email(email)).first()
        except UNAVAILABLE_ERRORS as exc:
            raise StoreUnavailable(str(exc)) from exc

    def find_user_by_id(self, user_id: str) -> Optional[User]:
        try:
            return self.storage.get(User, user_id)
        except UNAVAILABLE_ERRORS as exc:
            raise StoreUnavailable(str(exc)) from exc

    def create_user(self, email: str, name: Optional[str], password_hash: str) -> User:
        user = User(email=normalize_email(email), name=name, password_hash=password_hash)
        try:
            user.save()
        except UNAVAILABLE_ERRORS as exc:
            raise StoreUnavailable(str(exc)) from exc
        return user

    def update_last_login(self, user_id: str, timestamp: datetime) -> None:
        try:
            user = self.storage.get(User, user_id)
            if user is None:
                return
            user.last_login = timestamp
            user.save()
        except SQLAlchemyError as exc:
            raise StoreUnavailable(str(exc)) from exc
