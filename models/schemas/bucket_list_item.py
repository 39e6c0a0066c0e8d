from marshmallow import Schema, fields

from models.schemas.common import short_text
from models.schemas.location import LocationOutSchema
from models.schemas.user import UserListOutSchema


class BucketListItemCreateSchema(Schema):
    title = fields.String(required=True, validate=short_text(255))


class BucketListItemOutSchema(Schema):
    id = fields.String()
    title = fields.String()
    author_id = fields.String(data_key="authorId")
    created_at = fields.DateTime(data_key="createdAt")


class BucketListItemWithLocationSchema(BucketListItemOutSchema):
    location = fields.Nested(LocationOutSchema, allow_none=True)


class BucketListItemWithAuthorSchema(BucketListItemOutSchema):
    author = fields.Nested(UserListOutSchema)
