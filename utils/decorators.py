from __future__ import annotations
from functools import wraps
from flask import request, g, current_app

from utils.exceptions import MissingToken


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer "):
        raise MissingToken("Missing or invalid Authorization header")
    token = auth.split(" ", 1)[1].strip()
    if not token:
        raise MissingToken("Missing or invalid Authorization header")
    return token


def jwt_required():
    """
    Reject the request with 401 unless it carries a valid bearer access token.
    AuthError propagates to the app's error handler; on success the user is
    available as g.current_user.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            token = bearer_token()
            auth_service = current_app.extensions["auth"]
            g.current_user = auth_service.authenticate(token)
            return fn(*args, **kwargs)

        return wrapper

    return decorator
