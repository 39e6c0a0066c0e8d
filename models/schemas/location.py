from marshmallow import Schema, fields, pre_load

from models.schemas.common import short_text


class LocationCreateSchema(Schema):
    country = fields.String(required=True, validate=short_text(128))
    state = fields.String(allow_none=True, validate=short_text(128))
    city = fields.String(allow_none=True, validate=short_text(128))
    bucket_list_item_id = fields.String(data_key="bucketListItemId", allow_none=True)

    @pre_load
    def blank_item_id_is_none(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("bucketListItemId"), str):
            if not data["bucketListItemId"].strip():
                data["bucketListItemId"] = None
        return data


class LocationOutSchema(Schema):
    id = fields.String()
    country = fields.String()
    state = fields.String(allow_none=True)
    city = fields.String(allow_none=True)
    bucket_list_item_id = fields.String(data_key="bucketListItemId", allow_none=True)
    created_at = fields.DateTime(data_key="createdAt")
