from __future__ import annotations

from flask import Blueprint, request, jsonify, abort

from models import storage
from models.location import Location
from models.bucket_list_item import BucketListItem
from models.schemas.location import LocationCreateSchema, LocationOutSchema

bp = Blueprint("locations", __name__)

create_schema = LocationCreateSchema()
out_schema = LocationOutSchema()
out_list_schema = LocationOutSchema(many=True)


@bp.get("/locations")
def list_locations():
    """
    Returns a list of locations
    ---
    tags: [Locations]
    responses:
      200: { description: OK }
    """
    session = storage.get_session()
    rows = session.query(Location).order_by(Location.created_at.asc()).all()
    return jsonify(out_list_schema.dump(rows))


@bp.get("/locations/<location_id>")
def get_location(location_id: str):
    """
    Get a location by id
    ---
    tags: [Locations]
    parameters:
      - in: path
        name: location_id
        type: string
        required: true
    responses:
      200: { description: OK }
      404: { description: Not found }
    """
    location = storage.get(Location, location_id)
    if not location:
        abort(404, description="Location not found")
    return jsonify(out_schema.dump(location))


@bp.post("/locations")
def create_location():
    """
    Create a location, optionally attached to a bucket list item
    ---
    tags: [Locations]
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [country]
          properties:
            country: { type: string, maxLength: 128 }
            state: { type: string, maxLength: 128 }
            city: { type: string, maxLength: 128 }
            bucketListItemId: { type: string }
    responses:
      201: { description: Created }
      404: { description: Bucket list item not found }
      409: { description: Bucket list item already has a location }
      422: { description: Validation error }
    """
    data = create_schema.load(request.get_json(silent=True) or {})
    item_id = data.get("bucket_list_item_id")
    if item_id is not None:
        item = storage.get(BucketListItem, item_id)
        if not item:
            abort(404, description="Bucket list item not found")
        if item.location is not None:
            abort(409, description="Bucket list item already has a location")

    location = Location(
        country=data["country"],
        state=data.get("state"),
        city=data.get("city"),
        bucket_list_item_id=item_id,
    )
    storage.new(location)
    storage.save()
    return jsonify(out_schema.dump(location)), 201
