# restaurant_api/routes/areas.py
from flask import Blueprint, current_app, jsonify

from ..errors import AreaNotFound

bp = Blueprint("areas", __name__)

@bp.get("/<id:area_id>/restaurants")
def get_restaurants_by_area(area_id: int):
    """
    GET /api/areas/<area_id>/restaurants
    """
    store = current_app.extensions["restaurant_store"]

    area = store.get_area(area_id)
    if area is None:
        raise AreaNotFound(area_id)

    restaurants = store.list_restaurants_by_area(area_id)
    area["restaurants"] = restaurants
    area["total_restaurants"] = len(restaurants)

    return jsonify({"area": area}), 200
