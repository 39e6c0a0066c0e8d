from __future__ import annotations

from flask import Blueprint, request, jsonify, g, abort, current_app

from models import storage
from models.user import User
from models.schemas.user import UserCreateSchema, UserOutSchema, UserListOutSchema
from utils.decorators import jwt_required

bp = Blueprint("users", __name__)

user_create_schema = UserCreateSchema()
user_out_schema = UserOutSchema()
user_list_out_schema = UserListOutSchema(many=True)


@bp.post("/users")
def register():
    """
    Register a new user.
    ---
    tags:
      - Users
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          required: [email, password]
          properties:
            email: { type: string }
            name: { type: string }
            password: { type: string, minLength: 8 }
    responses:
      201:
        description: Created
      409:
        description: Email already registered
      422:
        description: Validation error
    """
    data = user_create_schema.load(request.get_json(silent=True) or {})
    user = current_app.extensions["auth"].register(data["email"], data.get("name"), data["password"])
    return jsonify({"ok": True, "data": user_out_schema.dump(user)}), 201


@bp.get("/users")
@jwt_required()
def list_users():
    """
    List all users
    ---
    tags:
      - Users
    security:
      - Bearer: []
    responses:
      200:
        description: OK
      401:
        description: Unauthorized
    """
    session = storage.get_session()
    rows = session.query(User).order_by(User.created_at.asc(), User.email.asc()).all()
    return jsonify(user_list_out_schema.dump(rows))


@bp.get("/users/me")
@jwt_required()
def me():
    """
    Get the authenticated user
    ---
    tags:
      - Users
    security:
      - Bearer: []
    responses:
      200:
        description: OK
      401:
        description: Unauthorized
    """
    return jsonify(user_out_schema.dump(g.current_user)), 200


@bp.get("/users/<user_id>")
def get_user(user_id: str):
    """
    Get a user by id
    ---
    tags:
      - Users
    parameters:
      - in: path
        name: user_id
        type: string
        required: true
    responses:
      200:
        description: OK
      404:
        description: Not found
    """
    user = storage.get(User, user_id)
    if not user:
        abort(404, description="User not found")
    return jsonify(user_out_schema.dump(user))
