from __future__ import annotations

from flask import Blueprint, request, jsonify, g, abort

from models import storage
from models.bucket_list_item import BucketListItem
from models.schemas.bucket_list_item import (
    BucketListItemCreateSchema,
    BucketListItemOutSchema,
    BucketListItemWithAuthorSchema,
    BucketListItemWithLocationSchema,
)
from utils.decorators import jwt_required

bp = Blueprint("bucket_list_items", __name__)

create_schema = BucketListItemCreateSchema()
out_list_schema = BucketListItemOutSchema(many=True)
with_location_schema = BucketListItemWithLocationSchema()
with_author_schema = BucketListItemWithAuthorSchema()


@bp.get("/bucketlistitems")
def list_items():
    """
    List bucket list items
    ---
    tags: [BucketListItems]
    responses:
      200: { description: OK }
    """
    session = storage.get_session()
    rows = session.query(BucketListItem).order_by(BucketListItem.created_at.asc()).all()
    return jsonify(out_list_schema.dump(rows))


@bp.get("/bucketlistitems/<item_id>")
def get_item(item_id: str):
    """
    Get a bucket list item with its location
    ---
    tags: [BucketListItems]
    parameters:
      - in: path
        name: item_id
        type: string
        required: true
    responses:
      200: { description: OK }
      404: { description: Not found }
    """
    item = storage.get(BucketListItem, item_id)
    if not item:
        abort(404, description="Bucket list item not found")
    return jsonify(with_location_schema.dump(item))


@bp.post("/bucketlistitems")
@jwt_required()
def create_item():
    """
    Create a bucket list item owned by the authenticated user
    ---
    tags: [BucketListItems]
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title]
          properties:
            title: { type: string, maxLength: 255 }
    responses:
      201: { description: Created }
      401: { description: Unauthorized }
      422: { description: Validation error }
    """
    data = create_schema.load(request.get_json(silent=True) or {})
    item = BucketListItem(title=data["title"], author_id=g.current_user.id)
    storage.new(item)
    storage.save()
    return jsonify(with_author_schema.dump(item)), 201
