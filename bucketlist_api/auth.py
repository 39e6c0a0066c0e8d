"""
Authentication blueprint:
- POST /login          -> access token in the body, refresh token in the HTTP-only cookie
- POST /refresh_token  -> rotate: new access token + new refresh cookie

Access tokens (15 min) and refresh tokens (7 days) are JWTs signed with two
distinct secrets. Refresh tokens are not stored server side, a superseded one
stays valid until it expires.
"""
from __future__ import annotations

from flask import Blueprint, request, jsonify, current_app

from models.schemas.user import UserLoginSchema

bp = Blueprint("auth", __name__)

user_login_schema = UserLoginSchema()


def _token_response(pair):
    cfg = current_app.config
    response = jsonify({"accessToken": pair.access_token})
    response.set_cookie(
        cfg["REFRESH_COOKIE_NAME"],
        pair.refresh_token,
        max_age=int(cfg["REFRESH_TOKEN_EXPIRES"].total_seconds()),
        httponly=True,
        secure=cfg["REFRESH_COOKIE_SECURE"],
        samesite=cfg["REFRESH_COOKIE_SAMESITE"],
    )
    return response, 200


@bp.post("/login")
def login():
    """
    Login: returns an access token and sets the refresh token cookie
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           required: [email, password]
           properties:
             email: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (accessToken in body, rtok cookie set)
      401:
        description: Email or password invalid
      422:
        description: Validation error
    """
    payload = user_login_schema.load(request.get_json(silent=True) or {})
    auth_service = current_app.extensions["auth"]
    _, pair = auth_service.login(payload["email"], payload["password"])
    return _token_response(pair)


@bp.post("/refresh_token")
def refresh_token():
    """
    Exchange the refresh token cookie for a new access token and refresh token
    ---
    tags:
      - Auth
    responses:
      200:
        description: OK (accessToken in body, rotated rtok cookie set)
      401:
        description: Missing, invalid or expired refresh token
    """
    token = request.cookies.get(current_app.config["REFRESH_COOKIE_NAME"])
    pair = current_app.extensions["auth"].refresh(token)
    return _token_response(pair)
