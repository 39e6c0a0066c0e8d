from marshmallow import Schema, fields, pre_load, validates, ValidationError, validate

from models.user import normalize_email


class UserCreateSchema(Schema):
    name = fields.String(allow_none=True, validate=validate.Length(max=255))
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True)

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data["email"] = normalize_email(data["email"])
        return data

    @validates("password")
    def validate_password(self, value, **kwargs):
        if len(value) < 8:
            raise ValidationError("Password must be at least 8 characters long.")


class UserLoginSchema(Schema):
    email = fields.String(required=True)
    password = fields.String(required=True, load_only=True)

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data["email"] = normalize_email(data["email"])
        return data


class UserOutSchema(Schema):
    id = fields.String()
    email = fields.String()
    name = fields.String(allow_none=True)
    last_login = fields.DateTime(data_key="lastLogin", allow_none=True)
    created_at = fields.DateTime(data_key="createdAt")


class UserListOutSchema(Schema):
    id = fields.String()
    email = fields.String()
    name = fields.String(allow_none=True)
